"""Request and response models for the create-a-message endpoint."""

from claude_messages.models.content import (
    BlockPolicy,
    Content,
    ContentBlock,
    MultipleBlock,
    SingleText,
    TextContentBlock,
    TextSequence,
    UnknownContentBlock,
    extract_text,
)
from claude_messages.models.model import MAX_OUTPUT_TOKENS, ClaudeModel, MaxTokens
from claude_messages.models.request import (
    Message,
    MessagesRequestBody,
    Metadata,
    Role,
    SystemPrompt,
)
from claude_messages.models.response import (
    MessagesResponseBody,
    StopReason,
    Usage,
    parse_response,
)

__all__ = [
    "MAX_OUTPUT_TOKENS",
    "BlockPolicy",
    "ClaudeModel",
    "Content",
    "ContentBlock",
    "MaxTokens",
    "Message",
    "MessagesRequestBody",
    "MessagesResponseBody",
    "Metadata",
    "MultipleBlock",
    "Role",
    "SingleText",
    "StopReason",
    "SystemPrompt",
    "TextContentBlock",
    "TextSequence",
    "UnknownContentBlock",
    "Usage",
    "extract_text",
    "parse_response",
]
