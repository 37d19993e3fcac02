"""Configuration module for FogBugz API interactions."""

import json
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from ..utils.logging import log_config_param
from ..utils.urls import build_base_url

logger = logging.getLogger("fogbugz-client.config")

DEFAULT_PROTOCOL = "https"


@dataclass
class FogBugzConfig:
    """FogBugz API configuration.

    The legacy API authenticates with the email address (or full name) and
    password of a FogBugz user; the token it hands back is used for every
    later command.
    """

    host: str  # Host name of the install, e.g. zzz.fogbugz.com
    username: str  # Email address or full name of the FogBugz user
    password: str
    protocol: str = DEFAULT_PROTOCOL  # "https" or "http"
    ssl_verify: bool = True  # Whether to verify SSL certificates
    timeout: float | None = None  # Seconds; None waits indefinitely
    http_proxy: str | None = None  # HTTP proxy URL
    https_proxy: str | None = None  # HTTPS proxy URL
    no_proxy: str | None = None  # Comma-separated list of hosts to bypass proxy

    @property
    def base_url(self) -> str:
        """Root URL of the install, e.g. ``https://zzz.fogbugz.com``."""
        return build_base_url(self.protocol, self.host)

    @property
    def proxies(self) -> dict[str, str]:
        """Proxy mapping in the form ``requests`` expects."""
        proxies = {}
        if self.http_proxy:
            proxies["http"] = self.http_proxy
        if self.https_proxy:
            proxies["https"] = self.https_proxy
        if self.no_proxy:
            proxies["no_proxy"] = self.no_proxy
        return proxies

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "FogBugzConfig":
        """Create configuration from a mapping with host, username and password.

        Raises:
            ValueError: If a required key is missing
        """
        missing = [key for key in ("host", "username", "password") if not data.get(key)]
        if missing:
            error_msg = f"Missing required FogBugz configuration: {', '.join(missing)}"
            raise ValueError(error_msg)

        return cls(
            host=data["host"],
            username=data["username"],
            password=data["password"],
            protocol=data.get("protocol") or DEFAULT_PROTOCOL,
        )

    @classmethod
    def from_file(cls, path: str | Path) -> "FogBugzConfig":
        """Create configuration from a JSON file.

        The file looks like::

            {
              "host": "zzz.fogbugz.com",
              "username": "zzz@yyy.com",
              "password": "Password1"
            }

        Raises:
            ValueError: If the file cannot be read or lacks required keys
        """
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            error_msg = f"Could not read FogBugz configuration file {path}: {str(e)}"
            raise ValueError(error_msg) from e

        if not isinstance(data, dict):
            error_msg = f"FogBugz configuration file {path} must hold a JSON object"
            raise ValueError(error_msg)

        logger.debug(f"Loaded FogBugz configuration from {path}")
        return cls.from_dict(data)

    @classmethod
    def from_env(cls) -> "FogBugzConfig":
        """Create configuration from environment variables.

        ``FOGBUGZ_HOST``, ``FOGBUGZ_USERNAME`` and ``FOGBUGZ_PASSWORD`` are
        required, unless ``FOGBUGZ_CONFIG`` names a JSON configuration file,
        in which case the file supplies them.

        Returns:
            FogBugzConfig with values from environment variables

        Raises:
            ValueError: If required environment variables are missing or invalid
        """
        host = os.getenv("FOGBUGZ_HOST")
        config_file = os.getenv("FOGBUGZ_CONFIG")

        if host:
            username = os.getenv("FOGBUGZ_USERNAME")
            password = os.getenv("FOGBUGZ_PASSWORD")
            if not username or not password:
                error_msg = "FogBugz authentication requires FOGBUGZ_USERNAME and FOGBUGZ_PASSWORD"
                raise ValueError(error_msg)
            config = cls(host=host, username=username, password=password)
        elif config_file:
            config = cls.from_file(config_file)
        else:
            error_msg = "Missing required FOGBUGZ_HOST environment variable"
            raise ValueError(error_msg)

        protocol = os.getenv("FOGBUGZ_PROTOCOL")
        if protocol:
            protocol = protocol.lower()
            if protocol not in ("http", "https"):
                error_msg = f"Unsupported FOGBUGZ_PROTOCOL: {protocol}"
                raise ValueError(error_msg)
            config.protocol = protocol

        ssl_verify_env = os.getenv("FOGBUGZ_SSL_VERIFY", "true").lower()
        config.ssl_verify = ssl_verify_env not in ("false", "0", "no")

        timeout_env = os.getenv("FOGBUGZ_TIMEOUT")
        if timeout_env:
            try:
                config.timeout = float(timeout_env)
            except ValueError as e:
                error_msg = f"Invalid FOGBUGZ_TIMEOUT: {timeout_env}"
                raise ValueError(error_msg) from e

        # Proxy settings
        config.http_proxy = os.getenv("FOGBUGZ_HTTP_PROXY", os.getenv("HTTP_PROXY"))
        config.https_proxy = os.getenv("FOGBUGZ_HTTPS_PROXY", os.getenv("HTTPS_PROXY"))
        config.no_proxy = os.getenv("FOGBUGZ_NO_PROXY", os.getenv("NO_PROXY"))

        config.log_params()
        return config

    def log_params(self) -> None:
        """Log the effective configuration with the password masked."""
        log_config_param(logger, "URL", self.base_url)
        log_config_param(logger, "username", self.username)
        log_config_param(logger, "password", self.password, sensitive=True)
        log_config_param(logger, "SSL verify", str(self.ssl_verify))
