"""
request.py

PURPOSE: Pydantic models for the create-a-message request body.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
A request is built once per call from typed fields and frozen, so the
client cannot observe mutation while sending it. Only model, messages and
max_tokens are required; every sampling parameter defaults to None and is
left out of the wire payload so the provider's defaults apply.

MaxTokens is validated against the model by MaxTokens.new() before the
request is assembled. When a request is decoded from the wire, the integer
max_tokens is re-checked against the decoded model.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, RootModel, ValidationInfo, field_validator

from claude_messages.models.model import ClaudeModel, MaxTokens


class Role(str, Enum):
    """Author of a message."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(BaseModel):
    """A single message in a conversation."""

    role: Role
    content: str

    model_config = ConfigDict(frozen=True)

    @classmethod
    def user(cls, content: str) -> "Message":
        """Create a user message."""
        return cls(role=Role.USER, content=content)

    @classmethod
    def assistant(cls, content: str) -> "Message":
        """Create an assistant message."""
        return cls(role=Role.ASSISTANT, content=content)


class SystemPrompt(RootModel[str]):
    """Instructions shaping the model's behavior, separate from the messages."""

    model_config = ConfigDict(frozen=True)

    @classmethod
    def new(cls, text: str) -> "SystemPrompt":
        return cls(text)

    @property
    def text(self) -> str:
        return self.root


class Metadata(BaseModel):
    """Request metadata forwarded to the service."""

    user_id: str | None = Field(
        default=None,
        max_length=256,
        description="Opaque identifier of the end user",
    )

    model_config = ConfigDict(frozen=True)


class MessagesRequestBody(BaseModel):
    """
    Body of a create-a-message request.

    Example:
        model = ClaudeModel.CLAUDE_3_HAIKU_20240307
        body = MessagesRequestBody(
            model=model,
            messages=[Message.user("Where is the capital of Japan?")],
            max_tokens=MaxTokens.new(1024, model),
            system=SystemPrompt("You are an excellent AI assistant."),
        )
    """

    model: ClaudeModel
    messages: tuple[Message, ...] = Field(..., min_length=1)
    max_tokens: MaxTokens
    system: SystemPrompt | None = None
    metadata: Metadata | None = None
    stop_sequences: tuple[str, ...] | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=1.0)
    top_p: float | None = Field(default=None, ge=0.0, le=1.0)
    top_k: int | None = Field(default=None, gt=0)

    model_config = ConfigDict(frozen=True)

    @field_validator("max_tokens", mode="before")
    @classmethod
    def check_max_tokens(cls, v: Any, info: ValidationInfo) -> Any:
        """Check the token budget against the ceiling of the request's model."""
        model = info.data.get("model")
        if isinstance(v, MaxTokens):
            v = v.value
        if isinstance(model, ClaudeModel):
            # floats and numeric strings are rejected, not coerced
            return MaxTokens.new(v, model)
        return v

    def to_wire(self) -> dict[str, Any]:
        """Encode as the JSON payload sent to the service."""
        return self.model_dump(mode="json", exclude_none=True)

    @classmethod
    def from_wire(cls, payload: dict[str, Any]) -> "MessagesRequestBody":
        """Decode a JSON payload produced by to_wire()."""
        return cls.model_validate(payload)
