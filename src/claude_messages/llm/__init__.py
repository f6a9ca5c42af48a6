"""Create-a-message client module."""

from claude_messages.llm.anthropic import AnthropicMessagesClient, create_anthropic_client
from claude_messages.llm.client import MessagesClient
from claude_messages.llm.credentials import (
    CredentialProvider,
    EnvCredentialProvider,
    StaticCredentialProvider,
)

__all__ = [
    "AnthropicMessagesClient",
    "CredentialProvider",
    "EnvCredentialProvider",
    "MessagesClient",
    "StaticCredentialProvider",
    "create_anthropic_client",
]
