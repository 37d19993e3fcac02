"""Module for FogBugz logon, logoff and token operations."""

import logging

from ..exceptions import UnknownError
from ..models.fogbugz import LogonResult
from ..utils.xml_tree import XmlNode
from .client import FogBugzClient
from .constants import CMD_LOGOFF, CMD_LOGON

logger = logging.getLogger("fogbugz-client")


class SessionMixin(FogBugzClient):
    """Mixin for FogBugz session operations."""

    def set_token(self, token: str) -> None:
        """
        Use a token obtained by some other means instead of logging on.

        Args:
            token: FogBugz API logon token
        """
        self.token_store.set(token)

    def get_token(self) -> str | None:
        """Return the current session token, or None when logged out."""
        return self.token_store.get()

    def forget_token(self) -> None:
        """Forget the stored session token."""
        self.token_store.clear()

    @staticmethod
    def _extract_token(response: XmlNode) -> str:
        """Return the token of a logon reply, untouched (tokens are opaque)."""
        token = response.text_of("token")
        if not token:
            logger.error("FogBugz logon response did not contain a token")
            raise UnknownError()
        return token

    def logon(self) -> LogonResult:
        """
        Log on with the configured credentials.

        When a token is already stored it is returned as is and no request
        is made.

        Returns:
            LogonResult with the token and whether it came from the store

        Raises:
            RequestError: If the request fails
            XmlParseError: If the reply is not XML
            ServiceError: If FogBugz rejects the credentials
            UnknownError: If the reply holds no token
        """
        token = self.token_store.get()
        if token:
            logger.debug("Reusing stored FogBugz token")
            return LogonResult(token=token, cached=True)

        response = self._execute(
            CMD_LOGON,
            {"email": self.config.username, "password": self.config.password},
            authenticated=False,
        )
        token = self._extract_token(response)
        self.token_store.set(token)
        logger.info(f"Logged on to FogBugz at {self.base_url} as {self.config.username}")
        return LogonResult(token=token, cached=False)

    def logoff(self) -> bool:
        """
        Log off, invalidating the session token on the server.

        The stored token is left in place; call ``forget_token`` to drop it.

        Returns:
            True once FogBugz acknowledged the logoff

        Raises:
            UndefinedTokenError: If no token is stored
            RequestError: If the request fails
            ServiceError: If FogBugz reports an error
        """
        response = self._execute(CMD_LOGOFF)
        return self._extract_empty_response(response)
