"""
config.py

PURPOSE: Configuration loading and settings management.
DEPENDENCIES: pydantic, pydantic-settings

ARCHITECTURE NOTES:
Configuration comes from multiple sources (in priority order):
1. CLI flags (highest priority)
2. Environment variables
3. Defaults (lowest priority)

The API key is read from the standard ANTHROPIC_API_KEY variable rather
than a prefixed one, so existing shells work unchanged.
"""

import os

from pydantic import Field
from pydantic_settings import BaseSettings

from claude_messages.models.content import BlockPolicy
from claude_messages.models.model import DEFAULT_MODEL, ClaudeModel


class MessagesSettings(BaseSettings):
    """Settings for the create-a-message call."""

    model: ClaudeModel = Field(
        default=DEFAULT_MODEL,
        description="Model name/ID",
    )
    max_tokens: int = Field(
        default=1024,
        gt=0,
        description="Maximum tokens in response (checked against the model ceiling)",
    )
    temperature: float | None = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="Sampling temperature (provider default when unset)",
    )
    base_url: str | None = Field(
        default=None,
        description="Override for the API base URL",
    )
    timeout: float | None = Field(
        default=None,
        gt=0.0,
        description="Request timeout in seconds (SDK default when unset)",
    )
    block_policy: BlockPolicy = Field(
        default=BlockPolicy.LENIENT,
        description="How to treat content blocks of unknown kind",
    )

    anthropic_api_key: str = Field(
        default="",
        description="Anthropic API key (or set ANTHROPIC_API_KEY env var)",
    )

    model_config = {"env_prefix": "CLAUDE_MESSAGES_LLM_"}


class OpenTelemetrySettings(BaseSettings):
    """Settings for optional OpenTelemetry tracing."""

    enabled: bool = Field(
        default=False,
        description="Enable tracing",
    )
    service_name: str = Field(
        default="claude-messages",
        description="Service name reported on spans",
    )
    endpoint: str | None = Field(
        default=None,
        description="OTLP gRPC endpoint (console export only when unset)",
    )

    model_config = {"env_prefix": "CLAUDE_MESSAGES_OTEL_"}


class Settings(BaseSettings):
    """Main application settings."""

    log_level: str = Field(
        default="WARNING",
        description="Logging level",
    )
    debug: bool = Field(
        default=False,
        description="Enable debug output",
    )
    llm: MessagesSettings = Field(
        default_factory=MessagesSettings,
        description="Create-a-message settings",
    )
    otel: OpenTelemetrySettings = Field(
        default_factory=OpenTelemetrySettings,
        description="OpenTelemetry settings",
    )

    model_config = {"env_prefix": "CLAUDE_MESSAGES_"}

    @property
    def effective_log_level(self) -> str:
        """Log level, forced to DEBUG when debug output is on."""
        return "DEBUG" if self.debug else self.log_level.upper()


def get_settings() -> Settings:
    """Get application settings, loading from environment."""
    # Check for Anthropic API key in standard env var
    api_key = os.environ.get("ANTHROPIC_API_KEY", "")

    llm_settings = MessagesSettings(
        anthropic_api_key=api_key,
    )

    return Settings(llm=llm_settings)
