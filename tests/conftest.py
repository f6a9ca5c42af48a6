"""
conftest.py

Shared pytest fixtures for claude_messages tests.
"""

import pytest

from claude_messages.models.model import ClaudeModel, MaxTokens
from claude_messages.models.request import Message, MessagesRequestBody, SystemPrompt


@pytest.fixture
def haiku() -> ClaudeModel:
    """The model used by most tests."""
    return ClaudeModel.CLAUDE_3_HAIKU_20240307


@pytest.fixture
def request_body(haiku: ClaudeModel) -> MessagesRequestBody:
    """A request as the CLI builds it: system prompt plus one user message."""
    return MessagesRequestBody(
        model=haiku,
        messages=[Message.user("Where is the capital of Japan?")],
        max_tokens=MaxTokens.new(1024, haiku),
        system=SystemPrompt("You are an excellent AI assistant."),
    )


@pytest.fixture
def minimal_request_body(haiku: ClaudeModel) -> MessagesRequestBody:
    """A request with only the required fields."""
    return MessagesRequestBody(
        model=haiku,
        messages=[Message.user("Hello")],
        max_tokens=MaxTokens.new(16, haiku),
    )


def _api_response(content: object, **overrides: object) -> dict:
    body = {
        "id": "msg_123",
        "type": "message",
        "role": "assistant",
        "model": "claude-3-haiku-20240307",
        "content": content,
        "stop_reason": "end_turn",
        "stop_sequence": None,
        "usage": {"input_tokens": 10, "output_tokens": 5},
    }
    body.update(overrides)
    return body


@pytest.fixture
def api_response():
    """Factory for a full response body as the API returns it, with the given content."""
    return _api_response


@pytest.fixture
def single_text_payload() -> dict:
    """Response whose content is a bare string."""
    return {"content": "hello"}


@pytest.fixture
def mixed_blocks_payload() -> dict:
    """Response with two text blocks around a block of unmodelled kind."""
    return {
        "content": [
            {"type": "text", "text": "a"},
            {"type": "tool_use", "id": "x"},
            {"type": "text", "text": "b"},
        ]
    }


@pytest.fixture
def empty_blocks_payload() -> dict:
    """Response with an empty block list."""
    return {"content": []}
