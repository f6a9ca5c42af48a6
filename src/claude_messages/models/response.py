"""
response.py

PURPOSE: Pydantic models for the create-a-message response body, and parsing.
DEPENDENCIES: pydantic

ARCHITECTURE NOTES:
Only "content" is required, so a minimal {"content": ...} payload parses.
The remaining fields are metadata with defaults. The block policy travels
to the content validators through the pydantic validation context.
"""

import json
import logging
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from claude_messages.errors import MalformedResponse
from claude_messages.models.content import (
    POLICY_CONTEXT_KEY,
    BlockPolicy,
    Content,
    TextSequence,
    extract_text,
)
from claude_messages.models.request import Role

logger = logging.getLogger(__name__)


class StopReason(str, Enum):
    """Why the model stopped generating."""

    END_TURN = "end_turn"
    MAX_TOKENS = "max_tokens"
    STOP_SEQUENCE = "stop_sequence"
    TOOL_USE = "tool_use"


class Usage(BaseModel):
    """Token counts billed for the call."""

    input_tokens: int = Field(default=0, ge=0)
    output_tokens: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True)


class MessagesResponseBody(BaseModel):
    """Body of a create-a-message response."""

    id: str = ""
    type: Literal["message"] = "message"
    role: Role = Role.ASSISTANT
    model: str = ""
    content: Content
    stop_reason: StopReason | None = None
    stop_sequence: str | None = None
    usage: Usage = Field(default_factory=Usage)

    model_config = ConfigDict(frozen=True)

    def texts(self) -> TextSequence:
        """Every text payload of the content, in order."""
        return extract_text(self.content)

    @property
    def text(self) -> str:
        """All text payloads joined together."""
        return "".join(self.texts())

    def __str__(self) -> str:
        return self.model_dump_json(indent=2)


def parse_response(
    payload: dict[str, Any] | str | bytes,
    policy: BlockPolicy = BlockPolicy.LENIENT,
) -> MessagesResponseBody:
    """
    Parse a raw response payload.

    Args:
        payload: Decoded JSON object, or the raw JSON text.
        policy: How to treat content blocks of unknown kind.

    Returns:
        The parsed response with its content variant resolved.

    Raises:
        MalformedResponse: If the payload is not a valid response shape.
        UnknownBlockKind: If policy is STRICT and an unknown block is present.
    """
    if isinstance(payload, str | bytes):
        try:
            payload = json.loads(payload)
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise MalformedResponse(f"Response body is not valid JSON: {e}") from e

    try:
        return MessagesResponseBody.model_validate(
            payload, context={POLICY_CONTEXT_KEY: policy}
        )
    except ValidationError as e:
        logger.debug(f"Response failed validation: {e}")
        raise MalformedResponse(f"Response body has an invalid shape: {e}") from e
