"""
TEST DOC: Credentials and Settings

WHAT: Tests for credential providers and settings loading
WHY: A missing key must fail when the client is built, never at send time
HOW: Use monkeypatch to control environment variables

CASES:
- Environment provider reads ANTHROPIC_API_KEY (or a custom variable)
- Static provider returns its fixed key
- Settings pick up the key and prefixed overrides

EDGE CASES:
- Unset or blank keys
- Keys never appear in repr
"""

import pytest

from claude_messages.config import get_settings
from claude_messages.errors import MissingCredential
from claude_messages.llm.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    StaticCredentialProvider,
)
from claude_messages.models.content import BlockPolicy
from claude_messages.models.model import ClaudeModel


class TestEnvCredentialProvider:
    """Tests for reading the key from the environment."""

    def test_reads_default_variable(self, monkeypatch):
        """The key comes from ANTHROPIC_API_KEY."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-test")
        assert EnvCredentialProvider().api_key() == "sk-test"

    def test_reads_custom_variable(self, monkeypatch):
        """Another variable name can be given."""
        monkeypatch.setenv("MY_KEY", "sk-other")
        assert EnvCredentialProvider("MY_KEY").api_key() == "sk-other"

    def test_missing_variable(self, monkeypatch):
        """An unset variable raises MissingCredential."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        with pytest.raises(MissingCredential, match="ANTHROPIC_API_KEY"):
            EnvCredentialProvider().api_key()

    def test_blank_variable(self, monkeypatch):
        """A whitespace-only value counts as missing."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "   ")
        with pytest.raises(MissingCredential):
            EnvCredentialProvider().api_key()


class TestStaticCredentialProvider:
    """Tests for a fixed key."""

    def test_returns_key(self):
        """The fixed key is returned unchanged."""
        assert StaticCredentialProvider("sk-fixed").api_key() == "sk-fixed"

    @pytest.mark.parametrize("key", [None, "", "  "])
    def test_empty_key(self, key):
        """No key means MissingCredential."""
        with pytest.raises(MissingCredential):
            StaticCredentialProvider(key).api_key()

    def test_repr_hides_key(self):
        """The key does not leak into logs through repr."""
        assert "sk-secret" not in repr(StaticCredentialProvider("sk-secret"))

    def test_satisfies_protocol(self):
        """Both providers implement CredentialProvider."""
        assert isinstance(StaticCredentialProvider("k"), CredentialProvider)
        assert isinstance(EnvCredentialProvider(), CredentialProvider)


class TestSettings:
    """Tests for get_settings()."""

    def test_defaults(self, monkeypatch):
        """Defaults match the example program: Claude 3 Haiku, 1024 tokens."""
        monkeypatch.delenv("ANTHROPIC_API_KEY", raising=False)
        settings = get_settings()

        assert settings.llm.model is ClaudeModel.CLAUDE_3_HAIKU_20240307
        assert settings.llm.max_tokens == 1024
        assert settings.llm.temperature is None
        assert settings.llm.block_policy is BlockPolicy.LENIENT
        assert settings.llm.anthropic_api_key == ""
        assert settings.otel.enabled is False

    def test_api_key_from_standard_variable(self, monkeypatch):
        """ANTHROPIC_API_KEY populates the settings."""
        monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-env")
        assert get_settings().llm.anthropic_api_key == "sk-env"

    def test_prefixed_overrides(self, monkeypatch):
        """Prefixed variables override model, policy and log level."""
        monkeypatch.setenv("CLAUDE_MESSAGES_LLM_MODEL", "claude-3-5-sonnet-20240620")
        monkeypatch.setenv("CLAUDE_MESSAGES_LLM_BLOCK_POLICY", "strict")
        monkeypatch.setenv("CLAUDE_MESSAGES_LOG_LEVEL", "info")
        settings = get_settings()

        assert settings.llm.model is ClaudeModel.CLAUDE_3_5_SONNET_20240620
        assert settings.llm.block_policy is BlockPolicy.STRICT
        assert settings.effective_log_level == "INFO"

    def test_debug_forces_debug_logging(self, monkeypatch):
        """Debug mode logs at DEBUG whatever the log level says."""
        monkeypatch.setenv("CLAUDE_MESSAGES_DEBUG", "true")
        assert get_settings().effective_log_level == "DEBUG"
