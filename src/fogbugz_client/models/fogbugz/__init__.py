"""
FogBugz data models.

This package provides Pydantic models for FogBugz API data structures,
organized by entity type.
"""

from .case import FogBugzCase, merge_residual_fields
from .common import (
    FogBugzArea,
    FogBugzPerson,
    FogBugzPriority,
    FogBugzProject,
    FogBugzStatus,
)
from .filter import FogBugzFilter
from .session import LogonResult

__all__ = [
    "FogBugzArea",
    "FogBugzCase",
    "FogBugzFilter",
    "FogBugzPerson",
    "FogBugzPriority",
    "FogBugzProject",
    "FogBugzStatus",
    "LogonResult",
    "merge_residual_fields",
]
