"""Base client module for FogBugz API interactions."""

import logging
from typing import Any

import requests
from requests import Session

from ..exceptions import (
    UNKNOWN_ERROR_MESSAGE,
    RequestError,
    ServiceError,
    UndefinedTokenError,
    UnknownError,
)
from ..utils.logging import mask_sensitive
from ..utils.ssl import configure_ssl_verification
from ..utils.urls import build_api_url
from ..utils.xml_tree import XmlNode, parse_xml
from .config import FogBugzConfig
from .token_store import MemoryTokenStore, TokenStore

# Configure logging
logger = logging.getLogger("fogbugz-client")

RESPONSE_TAG = "response"
ERROR_TAG = "error"


def _format_value(value: Any) -> str:
    # FogBugz flags are 1/0, not Python's True/False
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class FogBugzClient:
    """Base client for the FogBugz legacy XML API.

    Every command is a GET on ``{base_url}/api.asp`` whose query string
    carries ``cmd``, the session token (for authenticated commands) and the
    command's own parameters. Every reply is an XML ``<response>`` document
    which may carry an ``<error>`` even though the HTTP status is 200.
    """

    config: FogBugzConfig
    session: Session
    token_store: TokenStore

    def __init__(
        self,
        config: FogBugzConfig | None = None,
        session: Session | None = None,
        token_store: TokenStore | None = None,
    ) -> None:
        """Initialize the FogBugz client with configuration options.

        Args:
            config: Optional configuration object (will use env vars if not provided)
            session: Optional requests session used as the transport
            token_store: Optional token store; a fresh in-memory store by default

        Raises:
            ValueError: If configuration is invalid or required credentials are missing
        """
        # Load configuration from environment variables if not provided
        self.config = config or FogBugzConfig.from_env()
        self.session = session if session is not None else Session()
        self.token_store = (
            token_store if token_store is not None else MemoryTokenStore()
        )

        if self.config.proxies:
            self.session.proxies.update(self.config.proxies)

        configure_ssl_verification(
            url=self.config.base_url,
            session=self.session,
            ssl_verify=self.config.ssl_verify,
        )

    @property
    def base_url(self) -> str:
        return self.config.base_url

    @property
    def api_url(self) -> str:
        return build_api_url(self.config.base_url)

    def _require_token(self, cmd: str) -> str:
        """Return the stored token or fail before anything is sent."""
        token = self.token_store.get()
        if not token:
            logger.error(f"Cannot run FogBugz command '{cmd}': not logged in")
            raise UndefinedTokenError()
        return token

    def _command(
        self,
        cmd: str,
        params: dict[str, Any] | None = None,
        *,
        authenticated: bool = True,
    ) -> dict[str, str]:
        """
        Build the query parameters of a FogBugz command.

        Args:
            cmd: The API command name (e.g. ``search``)
            params: Command parameters; list and tuple values are comma-joined
            authenticated: Whether the command needs the session token

        Returns:
            The query parameters to send

        Raises:
            UndefinedTokenError: If the command needs a token and none is stored
            ValueError: If a parameter would replace ``cmd`` or ``token``
        """
        command: dict[str, str] = {"cmd": cmd}
        if authenticated:
            command["token"] = self._require_token(cmd)

        for key, value in (params or {}).items():
            if key in ("cmd", "token"):
                error_msg = f"Parameter '{key}' is reserved and cannot be overridden"
                raise ValueError(error_msg)
            if value is None:
                continue
            if isinstance(value, list | tuple):
                command[key] = ",".join(_format_value(v) for v in value)
            else:
                command[key] = _format_value(value)

        return command

    def _send(self, command: dict[str, str]) -> str:
        """
        Issue one command over the transport and return the raw body.

        Raises:
            RequestError: If the request fails or the server answers with an
                HTTP error status
        """
        cmd = command.get("cmd")
        logger.debug(
            f"Sending FogBugz command '{cmd}' (token: {mask_sensitive(command.get('token'))})"
        )
        try:
            response = self.session.get(
                self.api_url, params=command, timeout=self.config.timeout
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Request for FogBugz command '{cmd}' failed: {str(e)}")
            raise RequestError(e) from e

        return response.text

    def _parse_response(self, body: str) -> XmlNode:
        """
        Parse a response body and surface server-reported errors.

        The error check runs before any command-specific extraction: when
        FogBugz reports an error the expected elements are missing, and that
        must not be reported as a malformed response.

        Args:
            body: The raw XML body

        Returns:
            The ``response`` root node

        Raises:
            XmlParseError: If the body is not XML
            ServiceError: If the response carries an ``error`` element
            UnknownError: If the document is not a FogBugz response
        """
        root = parse_xml(body)

        if root.tag != RESPONSE_TAG:
            logger.error(f"Unexpected FogBugz document root: <{root.tag}>")
            raise UnknownError()

        error_node = root.first(ERROR_TAG)
        if error_node is not None:
            message = error_node.text or ""
            code = error_node.attribute("code")
            logger.error(f"FogBugz returned an error (code {code}): {message}")
            raise ServiceError(message or UNKNOWN_ERROR_MESSAGE, code=code)

        return root

    def _execute(
        self,
        cmd: str,
        params: dict[str, Any] | None = None,
        *,
        authenticated: bool = True,
    ) -> XmlNode:
        """Build, send and parse one command; return the ``response`` node."""
        command = self._command(cmd, params, authenticated=authenticated)
        body = self._send(command)
        return self._parse_response(body)

    @staticmethod
    def _extract_empty_response(response: XmlNode) -> bool:
        """Acknowledge a command whose reply carries no payload."""
        return True
