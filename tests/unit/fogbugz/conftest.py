"""Test fixtures for FogBugz unit tests."""

import os
from unittest.mock import MagicMock, patch

import pytest

from fogbugz_client.fogbugz import FogBugzFetcher
from fogbugz_client.fogbugz.client import FogBugzClient
from fogbugz_client.fogbugz.config import FogBugzConfig
from tests.fixtures.fogbugz_mocks import MOCK_TOKEN


def make_response(body: str) -> MagicMock:
    """Build a mock requests.Response carrying an XML body."""
    response = MagicMock()
    response.text = body
    response.status_code = 200
    response.raise_for_status.return_value = None
    return response


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing."""
    with patch.dict(
        os.environ,
        {
            "FOGBUGZ_HOST": "zzz.fogbugz.com",
            "FOGBUGZ_USERNAME": "zzz@yyy.com",
            "FOGBUGZ_PASSWORD": "Password1",
        },
        clear=True,  # Clear existing environment variables
    ):
        yield


@pytest.fixture
def mock_config():
    """Create a FogBugzConfig instance."""
    return FogBugzConfig(
        host="zzz.fogbugz.com",
        username="zzz@yyy.com",
        password="Password1",
    )


@pytest.fixture
def mock_session():
    """Mock the requests session used as the transport."""
    return MagicMock()


@pytest.fixture
def respond_with(mock_session):
    """Make the mocked session answer every request with the given XML."""

    def _respond(body: str) -> MagicMock:
        mock_session.get.return_value = make_response(body)
        return mock_session

    return _respond


@pytest.fixture
def fogbugz_client(mock_config, mock_session):
    """Create a FogBugzClient instance with a mocked transport."""
    return FogBugzClient(config=mock_config, session=mock_session)


@pytest.fixture
def fogbugz_fetcher(mock_config, mock_session):
    """Create a FogBugzFetcher instance with a mocked transport."""
    return FogBugzFetcher(config=mock_config, session=mock_session)


@pytest.fixture
def logged_in_fetcher(fogbugz_fetcher):
    """A FogBugzFetcher holding a session token."""
    fogbugz_fetcher.set_token(MOCK_TOKEN)
    return fogbugz_fetcher
