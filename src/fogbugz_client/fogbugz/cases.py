"""Module for FogBugz case search and edit operations."""

import logging
from collections.abc import Iterable
from typing import Any

from ..exceptions import BugNotFoundError, UnknownError
from ..models.fogbugz import FogBugzCase
from ..utils.xml_tree import XmlNode
from .client import FogBugzClient
from .constants import (
    ALL_CASE_COLUMNS,
    CMD_EDIT,
    CMD_SEARCH,
    DEFAULT_CASE_COLUMNS,
    DEFAULT_MAX_RESULTS,
)

logger = logging.getLogger("fogbugz-client")

EDIT_RESERVED_PARAMETERS = ("ixBug", "cols")

CaseResult = FogBugzCase | list[FogBugzCase]


def _normalize_columns(cols: Iterable[str] | str | None) -> list[str]:
    if cols is None:
        return list(DEFAULT_CASE_COLUMNS)
    if isinstance(cols, str):
        cols = cols.split(",")
    columns = [col.strip() for col in cols if col and col.strip()]

    unknown = [col for col in columns if col not in ALL_CASE_COLUMNS]
    if unknown:
        # Plugins add their own columns; these are passed through as residual fields
        logger.debug(f"Requesting non-standard FogBugz columns: {', '.join(unknown)}")
    return columns


class CasesMixin(FogBugzClient):
    """Mixin for FogBugz case operations."""

    def _cases_from_nodes(self, nodes: list[XmlNode]) -> CaseResult:
        if not nodes:
            logger.error("FogBugz response did not contain any case")
            raise BugNotFoundError()

        cases = [
            FogBugzCase.from_api_response(node, base_url=self.base_url)
            for node in nodes
        ]
        if len(cases) == 1:
            return cases[0]
        return cases

    def _extract_cases(self, response: XmlNode) -> CaseResult:
        """Extract cases from a search reply (``response/cases/case``)."""
        cases_node = response.first("cases")
        if cases_node is None:
            logger.error("FogBugz search response did not contain a cases element")
            raise UnknownError()
        return self._cases_from_nodes(cases_node.children_of("case"))

    def _extract_edited_cases(self, response: XmlNode) -> CaseResult:
        """Extract cases from an edit reply (``response/case``)."""
        return self._cases_from_nodes(response.children_of("case"))

    def search(
        self,
        query: str | int,
        cols: Iterable[str] | str | None = None,
        max_results: int | None = None,
    ) -> CaseResult:
        """
        Search FogBugz cases.

        Args:
            query: FogBugz search syntax, or a case number
            cols: Columns to return (defaults to title, status, assignee,
                milestone, tags and assignee email)
            max_results: Maximum number of cases to return (default 20)

        Returns:
            The case itself when exactly one matches, otherwise the list of
            matching cases in the order FogBugz returned them

        Raises:
            UndefinedTokenError: If no token is stored
            RequestError: If the request fails
            ServiceError: If FogBugz reports an error
            BugNotFoundError: If no case matches
            UnknownError: If the reply is not a search result
        """
        columns = _normalize_columns(cols)
        response = self._execute(
            CMD_SEARCH,
            {
                "q": str(query),
                "cols": columns,
                "max": max_results or DEFAULT_MAX_RESULTS,
            },
        )
        return self._extract_cases(response)

    def get_bug(
        self, bug_id: str | int, cols: Iterable[str] | str | None = None
    ) -> CaseResult:
        """
        Get a case by number.

        Args:
            bug_id: The case number (``ixBug``)
            cols: Columns to return

        Returns:
            The case
        """
        return self.search(str(bug_id), cols, 1)

    def edit_bug(
        self,
        bug_id: str | int,
        parameters: dict[str, Any] | None = None,
        cols: Iterable[str] | str | None = None,
    ) -> CaseResult:
        """
        Edit a case.

        Args:
            bug_id: The case number (``ixBug``)
            parameters: Fields to change, using FogBugz parameter names
                (e.g. ``{"sTitle": "New title", "ixPersonAssignedTo": 3}``)
            cols: Columns to return in addition to the default ones

        Returns:
            The edited case

        Raises:
            UndefinedTokenError: If no token is stored
            RequestError: If the request fails
            ServiceError: If FogBugz reports an error
            BugNotFoundError: If the reply holds no case
            ValueError: If parameters try to set ``ixBug`` or ``cols``
        """
        reserved = [key for key in (parameters or {}) if key in EDIT_RESERVED_PARAMETERS]
        if reserved:
            error_msg = (
                f"Parameter(s) {', '.join(reserved)} are set from the edit_bug "
                "arguments and cannot be passed in parameters"
            )
            raise ValueError(error_msg)

        columns = _normalize_columns(cols) if cols is not None else []
        for col in DEFAULT_CASE_COLUMNS:
            if col not in columns:
                columns.append(col)

        params: dict[str, Any] = {"ixBug": str(bug_id), "cols": columns}
        params.update(parameters or {})

        response = self._execute(CMD_EDIT, params)
        logger.info(f"Edited FogBugz case {bug_id}")
        return self._extract_edited_cases(response)
