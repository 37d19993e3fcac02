"""Logging setup for fogbugz-client.

Everything logs under the ``fogbugz-client`` hierarchy. Passwords and
session tokens only ever reach the logs through ``mask_sensitive``.
"""

import logging

LOG_FORMAT = "%(levelname)s - %(name)s - %(message)s"
NOT_PROVIDED = "Not Provided"

# urllib3 is included so -vv also shows the HTTP requests to api.asp
PACKAGE_LOGGERS = ("fogbugz-client", "fogbugz-client.config", "urllib3")


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Route fogbugz-client logs to a single stderr handler.

    Calling it again (the CLI does so once -v is parsed) replaces the
    previous handler instead of adding a second one.

    Args:
        level: Threshold for the root logger and the package loggers

    Returns:
        The ``fogbugz-client`` logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for existing in list(root_logger.handlers):
        root_logger.removeHandler(existing)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stream_handler)

    for name in PACKAGE_LOGGERS:
        logging.getLogger(name).setLevel(level)

    return logging.getLogger(PACKAGE_LOGGERS[0])


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Hide a secret, leaving only ``keep_chars`` characters at each end.

    Values too short to keep both ends are masked completely.
    """
    if not value:
        return NOT_PROVIDED
    hidden = len(value) - keep_chars * 2
    if hidden <= 0:
        return "*" * len(value)
    return value[:keep_chars] + "*" * hidden + value[-keep_chars:]


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Log one effective FogBugz setting at INFO, e.g. ``FogBugz URL: https://...``."""
    if sensitive:
        shown = mask_sensitive(value)
    else:
        shown = value or NOT_PROVIDED
    logger.info(f"FogBugz {param}: {shown}")
