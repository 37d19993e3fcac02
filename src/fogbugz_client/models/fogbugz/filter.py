"""
FogBugz saved filter models.
"""

import logging
from typing import Any

from ...utils.urls import build_filter_url
from ...utils.xml_tree import XmlNode
from ..base import ApiModel
from ..constants import EMPTY_STRING

logger = logging.getLogger(__name__)


class FogBugzFilter(ApiModel):
    """
    Model representing a saved FogBugz filter (a named view over cases).

    ``url`` is not sent by the server; it is derived from the install's base
    URL and the filter id.
    """

    name: str = EMPTY_STRING
    type: str = EMPTY_STRING
    id: str = EMPTY_STRING
    url: str = EMPTY_STRING

    @classmethod
    def from_api_response(cls, data: XmlNode, **kwargs: Any) -> "FogBugzFilter":
        """
        Create a FogBugzFilter from a ``<filter>`` element.

        Example element::

            <filter type="builtin" sFilter="ez">My Cases</filter>

        Args:
            data: The ``filter`` element
            **kwargs: ``base_url`` of the FogBugz install

        Returns:
            A FogBugzFilter instance
        """
        filter_id = data.attribute("sFilter", EMPTY_STRING)
        base_url = kwargs.get("base_url", EMPTY_STRING)

        return cls(
            name=(data.text or EMPTY_STRING).strip(),
            type=data.attribute("type", EMPTY_STRING),
            id=filter_id,
            url=build_filter_url(base_url, filter_id),
        )
