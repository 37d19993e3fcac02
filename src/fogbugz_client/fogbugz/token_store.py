"""Session token storage for the FogBugz client."""

import logging
from abc import abstractmethod
from typing import Protocol, runtime_checkable

logger = logging.getLogger("fogbugz-client")


@runtime_checkable
class TokenStore(Protocol):
    """Protocol for the single slot holding the FogBugz session token."""

    @abstractmethod
    def get(self) -> str | None:
        """Return the stored token, or None when logged out."""

    @abstractmethod
    def set(self, token: str) -> None:
        """Store a token, replacing any previous one."""

    @abstractmethod
    def clear(self) -> None:
        """Forget the stored token."""


class MemoryTokenStore:
    """Token store kept in memory for the life of the process.

    There is no expiry and no locking: the last write wins.
    """

    def __init__(self, token: str | None = None) -> None:
        self._token = token

    def get(self) -> str | None:
        return self._token

    def set(self, token: str) -> None:
        self._token = token

    def clear(self) -> None:
        if self._token is not None:
            logger.debug("Forgetting FogBugz session token")
        self._token = None
