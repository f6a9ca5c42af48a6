"""
credentials.py

PURPOSE: Providers that supply the API key to a client.
DEPENDENCIES: None (pure Python + typing)

ARCHITECTURE NOTES:
Clients take a CredentialProvider instead of reading the environment
themselves, so tests can hand in a fixed key without touching process
state. A provider raises MissingCredential when it has no key; clients ask
for the key at construction time, so the failure never waits until send.
"""

import os
from typing import Protocol, runtime_checkable

from claude_messages.errors import MissingCredential

API_KEY_ENV_VAR = "ANTHROPIC_API_KEY"


@runtime_checkable
class CredentialProvider(Protocol):
    """Anything that can hand out an API key."""

    def api_key(self) -> str:
        """
        Return the API key.

        Raises:
            MissingCredential: If no key is available.
        """
        ...


class EnvCredentialProvider:
    """Reads the API key from an environment variable."""

    def __init__(self, var: str = API_KEY_ENV_VAR):
        self._var = var

    def api_key(self) -> str:
        key = os.environ.get(self._var, "").strip()
        if not key:
            raise MissingCredential(f"{self._var} environment variable not set")
        return key

    def __repr__(self) -> str:
        return f"EnvCredentialProvider(var={self._var!r})"


class StaticCredentialProvider:
    """Hands out a key fixed at construction (settings, tests)."""

    def __init__(self, key: str | None):
        self._key = (key or "").strip()

    def api_key(self) -> str:
        if not self._key:
            raise MissingCredential("No API key configured")
        return self._key

    def __repr__(self) -> str:
        # never print the key itself
        return f"StaticCredentialProvider(set={bool(self._key)})"
