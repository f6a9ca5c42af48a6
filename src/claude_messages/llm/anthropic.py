"""
anthropic.py

PURPOSE: Create-a-message client backed by the Anthropic SDK.
DEPENDENCIES: anthropic SDK, httpx

ARCHITECTURE NOTES:
The request goes out through the SDK's low-level post() with
cast_to=bytes, so the raw JSON body reaches our own response models.
That keeps both content shapes (bare string or block list) and
unknown block kinds visible, which the SDK's typed Message would not.

One call means one network attempt: the SDK is built with max_retries=0.
SDK exceptions are translated into the claude_messages.errors taxonomy:
- 401/403 -> AuthenticationFailed
- 400/413/422 -> ValidationRejected
- other statuses -> ServiceError
- connection failures and timeouts -> TransportError

Supports OpenTelemetry tracing when enabled.
"""

import logging
import time
from typing import Any

import anthropic
import httpx

from claude_messages.config import MessagesSettings
from claude_messages.errors import (
    ApiStatusError,
    AuthenticationFailed,
    MalformedResponse,
    ServiceError,
    TransportError,
    UnknownBlockKind,
    ValidationRejected,
)
from claude_messages.llm.client import MessagesClient
from claude_messages.llm.credentials import CredentialProvider, EnvCredentialProvider
from claude_messages.models.content import BlockPolicy, MultipleBlock
from claude_messages.models.request import MessagesRequestBody
from claude_messages.models.response import MessagesResponseBody, parse_response
from claude_messages.observability import get_tracer

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)

MESSAGES_PATH = "/v1/messages"

AUTH_STATUSES = frozenset({401, 403})
REJECTED_STATUSES = frozenset({400, 413, 422})


def _error_message(error: anthropic.APIStatusError) -> str:
    """Pull the service's own message out of an error body, if there is one."""
    body = error.body
    if isinstance(body, dict):
        detail = body.get("error")
        if isinstance(detail, dict) and detail.get("message"):
            return str(detail["message"])
    return error.message


def _translate_status_error(error: anthropic.APIStatusError) -> ApiStatusError:
    status = error.status_code
    message = _error_message(error)
    if status in AUTH_STATUSES:
        return AuthenticationFailed(message, status)
    if status in REJECTED_STATUSES:
        return ValidationRejected(message, status)
    return ServiceError(message, status)


class AnthropicMessagesClient(MessagesClient):
    """
    Client for Anthropic's create-a-message endpoint.

    The API key is obtained from the credential provider when the client is
    built, so a missing key fails here rather than at send time.
    """

    def __init__(
        self,
        credentials: CredentialProvider,
        base_url: str | None = None,
        timeout: float | None = None,
        block_policy: BlockPolicy = BlockPolicy.LENIENT,
        http_client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the client.

        Args:
            credentials: Source of the API key.
            base_url: Override for the API base URL.
            timeout: Request timeout in seconds; SDK default when None.
            block_policy: How to treat unknown content blocks in responses.
            http_client: httpx client the SDK sends through (custom transports).

        Raises:
            MissingCredential: If the provider has no key.
        """
        kwargs: dict[str, Any] = {
            "api_key": credentials.api_key(),
            "max_retries": 0,
        }
        if base_url:
            kwargs["base_url"] = base_url
        if timeout is not None:
            kwargs["timeout"] = timeout
        if http_client is not None:
            kwargs["http_client"] = http_client

        self._client = anthropic.AsyncAnthropic(**kwargs)
        self._block_policy = block_policy

    @classmethod
    def from_env(cls, block_policy: BlockPolicy = BlockPolicy.LENIENT) -> "AnthropicMessagesClient":
        """Build a client with the key from ANTHROPIC_API_KEY."""
        return cls(EnvCredentialProvider(), block_policy=block_policy)

    @property
    def block_policy(self) -> BlockPolicy:
        return self._block_policy

    async def create_a_message(self, request: MessagesRequestBody) -> MessagesResponseBody:
        """
        Send a create-a-message request.

        Args:
            request: The validated request body

        Returns:
            MessagesResponseBody with its content variant resolved

        Raises:
            AuthenticationFailed: The key was rejected
            ValidationRejected: The service rejected the request body
            ServiceError: Any other error status
            TransportError: No response (connection failure, timeout)
            MalformedResponse: The body matches neither content shape
            UnknownBlockKind: Unknown block under the strict policy
        """
        with tracer.start_as_current_span("messages.create") as span:
            span.set_attribute("llm.model", request.model.value)
            span.set_attribute("llm.max_tokens", request.max_tokens.value)
            span.set_attribute("llm.message_count", len(request.messages))
            span.set_attribute("llm.block_policy", self._block_policy.value)
            if request.temperature is not None:
                span.set_attribute("llm.temperature", request.temperature)

            start_time = time.perf_counter()

            logger.debug(f"Sending request to {request.model.value}")

            try:
                raw = await self._client.post(
                    MESSAGES_PATH,
                    cast_to=bytes,
                    body=request.to_wire(),
                )
            except anthropic.APIStatusError as e:
                span.record_exception(e)
                logger.debug(f"Request rejected with status {e.status_code}")
                raise _translate_status_error(e) from e
            except anthropic.APIConnectionError as e:
                span.record_exception(e)
                raise TransportError(f"Could not reach the API: {e}") from e

            elapsed_ms = (time.perf_counter() - start_time) * 1000

            try:
                response = parse_response(raw, self._block_policy)
            except (MalformedResponse, UnknownBlockKind) as e:
                span.record_exception(e)
                raise

            block_count = 0
            if isinstance(response.content, MultipleBlock):
                block_count = len(response.content)
            span.set_attribute("llm.input_tokens", response.usage.input_tokens)
            span.set_attribute("llm.output_tokens", response.usage.output_tokens)
            span.set_attribute("llm.latency_ms", elapsed_ms)
            span.set_attribute(
                "llm.stop_reason",
                response.stop_reason.value if response.stop_reason else "unknown",
            )
            span.set_attribute("llm.block_count", block_count)

            logger.debug(
                f"Response: {response.usage.input_tokens} in, "
                f"{response.usage.output_tokens} out, {elapsed_ms:.0f} ms"
            )

            return response

    async def close(self) -> None:
        await self._client.close()


def create_anthropic_client(
    settings: MessagesSettings,
    credentials: CredentialProvider,
) -> AnthropicMessagesClient:
    """
    Factory function to create an Anthropic client from settings.

    Args:
        settings: Create-a-message settings (base URL, timeout, block policy)
        credentials: Source of the API key

    Returns:
        Configured AnthropicMessagesClient
    """
    return AnthropicMessagesClient(
        credentials,
        base_url=settings.base_url,
        timeout=settings.timeout,
        block_policy=settings.block_policy,
    )
