"""Behaviour shared by every FogBugzFetcher operation."""

import pytest
import requests

from fogbugz_client.exceptions import (
    RequestError,
    ServiceError,
    UndefinedTokenError,
    XmlParseError,
)
from fogbugz_client.fogbugz import FogBugzFetcher
from fogbugz_client.fogbugz.token_store import MemoryTokenStore
from tests.fixtures.fogbugz_mocks import MOCK_ERROR_RESPONSE, MOCK_TOKEN

AUTHENTICATED_OPERATIONS = [
    ("logoff", ()),
    ("list_filters", ()),
    ("set_current_filter", ("ez",)),
    ("search", ("assignedto:me",)),
    ("get_bug", ("16006",)),
    ("edit_bug", ("16006", {"sTitle": "x"})),
    ("list_projects", ()),
    ("list_areas", ()),
    ("list_priorities", ()),
    ("list_people", ()),
    ("list_statuses", ()),
]

ALL_OPERATIONS = [("logon", ())] + AUTHENTICATED_OPERATIONS


@pytest.mark.parametrize("operation,args", AUTHENTICATED_OPERATIONS)
def test_requires_token(fogbugz_fetcher, mock_session, operation, args):
    """Authenticated operations fail before any request when logged out."""
    with pytest.raises(UndefinedTokenError):
        getattr(fogbugz_fetcher, operation)(*args)

    mock_session.get.assert_not_called()


@pytest.mark.parametrize("operation,args", AUTHENTICATED_OPERATIONS)
def test_sends_stored_token(logged_in_fetcher, respond_with, operation, args):
    session = respond_with(MOCK_ERROR_RESPONSE)

    with pytest.raises(ServiceError):
        getattr(logged_in_fetcher, operation)(*args)

    _, kwargs = session.get.call_args
    assert kwargs["params"]["token"] == MOCK_TOKEN


@pytest.mark.parametrize("operation,args", ALL_OPERATIONS)
def test_transport_error_passes_through(
    logged_in_fetcher, mock_session, operation, args
):
    """The transport's own exception is reachable from RequestError."""
    if operation == "logon":
        logged_in_fetcher.forget_token()
    transport_error = requests.ConnectionError("connection refused")
    mock_session.get.side_effect = transport_error

    with pytest.raises(RequestError) as exc_info:
        getattr(logged_in_fetcher, operation)(*args)

    assert exc_info.value.error is transport_error


@pytest.mark.parametrize("operation,args", ALL_OPERATIONS)
def test_service_error_takes_precedence(
    logged_in_fetcher, respond_with, operation, args
):
    """A reported error wins even when the expected payload is also present."""
    if operation == "logon":
        logged_in_fetcher.forget_token()
    respond_with(
        "<response>"
        "<token>abc</token>"
        '<filters><filter type="builtin" sFilter="ez">My Cases</filter></filters>'
        '<cases count="1"><case ixBug="1"><sTitle>t</sTitle></case></cases>'
        '<error code="42">Something went wrong</error>'
        "</response>"
    )

    with pytest.raises(ServiceError) as exc_info:
        getattr(logged_in_fetcher, operation)(*args)

    assert exc_info.value.message == "Something went wrong"
    assert exc_info.value.code == "42"


@pytest.mark.parametrize("operation,args", ALL_OPERATIONS)
def test_invalid_xml(logged_in_fetcher, respond_with, operation, args):
    if operation == "logon":
        logged_in_fetcher.forget_token()
    respond_with("<response><unterminated>")

    with pytest.raises(XmlParseError):
        getattr(logged_in_fetcher, operation)(*args)


def test_shared_token_store(mock_config, mock_session):
    """Fetchers given the same store see each other's token."""
    store = MemoryTokenStore()
    first = FogBugzFetcher(config=mock_config, session=mock_session, token_store=store)
    second = FogBugzFetcher(config=mock_config, session=mock_session, token_store=store)

    first.set_token(MOCK_TOKEN)

    assert second.get_token() == MOCK_TOKEN
