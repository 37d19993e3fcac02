"""Module for FogBugz saved filter operations."""

import logging

from ..exceptions import UnknownError
from ..models.fogbugz import FogBugzFilter
from .client import FogBugzClient
from .constants import CMD_LIST_FILTERS, CMD_SET_CURRENT_FILTER

logger = logging.getLogger("fogbugz-client")


class FiltersMixin(FogBugzClient):
    """Mixin for FogBugz filter operations."""

    def list_filters(self) -> list[FogBugzFilter]:
        """
        Get the saved filters available to the logged on user.

        Example result::

            [FogBugzFilter(name="My Cases", type="builtin", id="ez",
                           url="https://zzz.fogbugz.com/default.asp?pgx=LF&ixFilter=ez"),
             FogBugzFilter(name="Inbox", type="builtin", id="inbox",
                           url="https://zzz.fogbugz.com/default.asp?pgx=LF&ixFilter=inbox")]

        Returns:
            The filters, in the order FogBugz lists them

        Raises:
            UndefinedTokenError: If no token is stored
            RequestError: If the request fails
            ServiceError: If FogBugz reports an error
            UnknownError: If the reply holds no filters
        """
        response = self._execute(CMD_LIST_FILTERS)

        filters_node = response.first("filters")
        filters = []
        if filters_node is not None:
            filters = [
                FogBugzFilter.from_api_response(node, base_url=self.base_url)
                for node in filters_node.children_of("filter")
            ]

        if not filters:
            # FogBugz always has built-in filters, so none means a bad reply
            logger.error("FogBugz listFilters response did not contain any filter")
            raise UnknownError()

        return filters

    def set_current_filter(self, filter_or_id: FogBugzFilter | str) -> bool:
        """
        Make a filter the user's current filter.

        Args:
            filter_or_id: A FogBugzFilter or a filter id (``sFilter``)

        Returns:
            True once FogBugz acknowledged the change

        Raises:
            UndefinedTokenError: If no token is stored
            RequestError: If the request fails
            ServiceError: If FogBugz reports an error
        """
        filter_id = (
            filter_or_id if isinstance(filter_or_id, str) else filter_or_id.id
        )
        response = self._execute(CMD_SET_CURRENT_FILTER, {"sFilter": filter_id})
        return self._extract_empty_response(response)
