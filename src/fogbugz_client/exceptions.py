"""Exceptions raised by the FogBugz client."""

UNDEFINED_TOKEN_MESSAGE = "token is undefined; you are not logged in"
XML_PARSE_ERROR_MESSAGE = "invalid xml received from server"
UNKNOWN_ERROR_MESSAGE = "unknown error"
BUG_NOT_FOUND_MESSAGE = "could not find bug"


class FogBugzError(Exception):
    """Base class for every error raised by the FogBugz client."""


class UndefinedTokenError(FogBugzError):
    """Raised when an authenticated command is issued without a token."""

    def __init__(self, message: str = UNDEFINED_TOKEN_MESSAGE) -> None:
        super().__init__(message)


class RequestError(FogBugzError):
    """Raised when the HTTP transport fails.

    The transport exception is kept unmodified on ``error`` (and as
    ``__cause__`` when raised with ``raise ... from``).
    """

    def __init__(self, error: BaseException) -> None:
        super().__init__(str(error))
        self.error = error


class XmlParseError(FogBugzError):
    """Raised when a response body is not parseable XML."""

    def __init__(self, message: str = XML_PARSE_ERROR_MESSAGE) -> None:
        super().__init__(message)


class ServiceError(FogBugzError):
    """Raised when FogBugz reports an error inside its XML response.

    Args:
        message: The server's error text, verbatim
        code: The server's error code attribute, when one was sent
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code


class UnknownError(FogBugzError):
    """Raised when a response does not have the shape a command expects."""

    def __init__(self, message: str = UNKNOWN_ERROR_MESSAGE) -> None:
        super().__init__(message)


class BugNotFoundError(UnknownError):
    """Raised when a case query or edit returns no cases.

    FogBugz answers "no match" and "malformed reply" the same way, so this
    is an UnknownError too.
    """

    def __init__(self, message: str = BUG_NOT_FOUND_MESSAGE) -> None:
        super().__init__(message)
