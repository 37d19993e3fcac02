"""
Pydantic models for FogBugz API responses.

This package provides type-safe models for FogBugz data, built from the
parsed XML of the legacy API, and simplified dictionaries for output.
"""

from .base import ApiModel, XmlFieldMixin
from .constants import (  # noqa: F401 - Keep constants available
    EMPTY_STRING,
    FOGBUGZ_DEFAULT_ID,
)
from .fogbugz import (
    FogBugzArea,
    FogBugzCase,
    FogBugzFilter,
    FogBugzPerson,
    FogBugzPriority,
    FogBugzProject,
    FogBugzStatus,
    LogonResult,
)

__all__ = [
    # Base models
    "ApiModel",
    "XmlFieldMixin",
    # Constants
    "EMPTY_STRING",
    "FOGBUGZ_DEFAULT_ID",
    # FogBugz models
    "FogBugzArea",
    "FogBugzCase",
    "FogBugzFilter",
    "FogBugzPerson",
    "FogBugzPriority",
    "FogBugzProject",
    "FogBugzStatus",
    "LogonResult",
]
