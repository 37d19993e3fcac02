"""
Test fixtures for model testing.
"""

import pytest

from fogbugz_client.utils.xml_tree import XmlNode, parse_xml
from tests.fixtures.fogbugz_mocks import (
    MOCK_FILTERS_RESPONSE,
    MOCK_SEARCH_MULTIPLE_RESPONSE,
    MOCK_SEARCH_RESPONSE,
)

BASE_URL = "https://zzz.fogbugz.com"


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def case_node() -> XmlNode:
    """Return the single case element of a search reply."""
    return parse_xml(MOCK_SEARCH_RESPONSE).first("cases").first("case")


@pytest.fixture
def case_nodes() -> list[XmlNode]:
    """Return the case elements of a multi-case search reply."""
    return parse_xml(MOCK_SEARCH_MULTIPLE_RESPONSE).first("cases").children_of("case")


@pytest.fixture
def filter_nodes() -> list[XmlNode]:
    """Return the filter elements of a listFilters reply."""
    return parse_xml(MOCK_FILTERS_RESPONSE).first("filters").children_of("filter")
