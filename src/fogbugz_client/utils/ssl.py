"""SSL-related utility functions for the FogBugz client."""

import logging
import ssl
from typing import Any
from urllib.parse import urlparse

from requests.adapters import HTTPAdapter
from requests.sessions import Session
from urllib3.poolmanager import PoolManager

logger = logging.getLogger("fogbugz-client")


class SSLIgnoreAdapter(HTTPAdapter):
    """HTTP adapter that skips certificate verification.

    Hosted FogBugz is always served with a valid certificate, but on-site
    installs frequently use self-signed ones. Mounting this adapter for the
    install's host disables both hostname checking and certificate
    verification for that host only.
    """

    def init_poolmanager(
        self, connections: int, maxsize: int, block: bool = False, **pool_kwargs: Any
    ) -> None:
        """Initialize the pool manager with an unverified SSL context.

        Args:
            connections: Number of connections to save in the pool
            maxsize: Maximum number of connections in the pool
            block: Whether to block when the pool is full
            pool_kwargs: Additional arguments for the pool manager
        """
        context = ssl.create_default_context()
        context.check_hostname = False
        context.verify_mode = ssl.CERT_NONE

        self.poolmanager = PoolManager(
            num_pools=connections,
            maxsize=maxsize,
            block=block,
            ssl_context=context,
            **pool_kwargs,
        )

    def cert_verify(self, conn: Any, url: str, verify: bool, cert: Any | None) -> None:
        super().cert_verify(conn, url, verify=False, cert=cert)


def configure_ssl_verification(url: str, session: Session, ssl_verify: bool) -> None:
    """Turn off certificate checks for the FogBugz host when requested.

    Args:
        url: The base URL of the FogBugz install
        session: The requests session to configure
        ssl_verify: Whether SSL verification should be enabled
    """
    if ssl_verify:
        return

    logger.warning(
        "FogBugz SSL verification disabled. This is insecure and should only be used in testing environments."
    )

    domain = urlparse(url).netloc
    adapter = SSLIgnoreAdapter()
    session.mount(f"https://{domain}", adapter)
    session.mount(f"http://{domain}", adapter)
