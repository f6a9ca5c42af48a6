"""
client.py

PURPOSE: Abstract interface of a create-a-message client.
DEPENDENCIES: None (pure Python + typing)

ARCHITECTURE NOTES:
Callers (the CLI, tests) depend on MessagesClient rather than on the
Anthropic implementation, so a fake client can stand in without any
network access.
"""

from abc import ABC, abstractmethod

from claude_messages.models.content import BlockPolicy
from claude_messages.models.request import MessagesRequestBody
from claude_messages.models.response import MessagesResponseBody


class MessagesClient(ABC):
    """Abstract base class for create-a-message clients."""

    @abstractmethod
    async def create_a_message(self, request: MessagesRequestBody) -> MessagesResponseBody:
        """
        Send one request and return the parsed response.

        Args:
            request: The validated request body

        Returns:
            MessagesResponseBody with its content variant resolved

        Raises:
            MessagesError: Any failure, see claude_messages.errors
        """
        ...

    @property
    @abstractmethod
    def block_policy(self) -> BlockPolicy:
        """Policy applied to unknown content blocks in responses."""
        ...

    async def close(self) -> None:
        """Release any held resources."""
        return None

    async def __aenter__(self) -> "MessagesClient":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
