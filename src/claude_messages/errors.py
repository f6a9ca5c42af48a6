"""
errors.py

PURPOSE: Exception taxonomy for building, sending and parsing message calls.
DEPENDENCIES: None (pure Python)

ARCHITECTURE NOTES:
Every failure surfaces as a subclass of MessagesError so callers can catch
the whole family or a single kind. HTTP-derived failures share
ApiStatusError, which keeps the status code and the server's message.
None of these subclass ValueError: raising them inside a pydantic validator
lets them propagate as-is instead of being folded into a ValidationError.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from claude_messages.models.model import ClaudeModel


class MessagesError(Exception):
    """Base class for all errors raised by claude_messages."""

    pass


class InvalidMaxTokens(MessagesError):
    """A max_tokens value that is not an integer in 1..ceiling for its model."""

    def __init__(self, requested: object, model: ClaudeModel, ceiling: int):
        self.requested = requested
        self.model = model
        self.ceiling = ceiling
        super().__init__(
            f"max_tokens must be between 1 and {ceiling} for {model.value}, got {requested!r}"
        )


class MissingCredential(MessagesError):
    """No API key could be obtained from the credential provider."""

    pass


class TransportError(MessagesError):
    """The request never got a response (connection failure, timeout)."""

    pass


class MalformedResponse(MessagesError):
    """The response body matches neither legal content shape."""

    pass


class UnknownBlockKind(MessagesError):
    """A content block carried a tag the strict block policy does not accept."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown content block kind: {kind!r}")


class ApiStatusError(MessagesError):
    """The service answered with an error status."""

    def __init__(self, message: str, status_code: int):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


class AuthenticationFailed(ApiStatusError):
    """The API key was rejected (401/403)."""

    pass


class ValidationRejected(ApiStatusError):
    """The service rejected the request body (400/413/422)."""

    pass


class ServiceError(ApiStatusError):
    """Any other error status: rate limiting, overload, server errors."""

    pass
