"""FogBugz API module for fogbugz_client.

This module provides the FogBugz legacy XML API client.
"""

from .cases import CasesMixin
from .client import FogBugzClient
from .config import FogBugzConfig
from .filters import FiltersMixin
from .lists import ListsMixin
from .session import SessionMixin
from .token_store import MemoryTokenStore, TokenStore


class FogBugzFetcher(
    SessionMixin,
    FiltersMixin,
    CasesMixin,
    ListsMixin,
):
    """
    The main FogBugz client class providing access to all FogBugz operations.

    This class inherits from mixins that provide specific functionality:
    - SessionMixin: logon, logoff and token handling
    - FiltersMixin: saved filter operations
    - CasesMixin: case search and edit operations
    - ListsMixin: projects, areas, priorities, people and statuses
    """

    pass


__all__ = [
    "FogBugzClient",
    "FogBugzConfig",
    "FogBugzFetcher",
    "MemoryTokenStore",
    "TokenStore",
]
