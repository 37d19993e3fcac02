"""Tests for the FogBugz filters module."""

import pytest

from fogbugz_client.exceptions import ServiceError, UndefinedTokenError, UnknownError
from fogbugz_client.models.fogbugz import FogBugzFilter
from tests.fixtures.fogbugz_mocks import (
    MOCK_EMPTY_RESPONSE,
    MOCK_ERROR_RESPONSE,
    MOCK_FILTERS_RESPONSE,
    MOCK_NO_FILTERS_RESPONSE,
    MOCK_TOKEN,
)


class TestFiltersMixin:
    """Tests for the FiltersMixin class."""

    def test_list_filters(self, logged_in_fetcher, respond_with):
        """Test that filters are returned in order with derived URLs."""
        session = respond_with(MOCK_FILTERS_RESPONSE)

        filters = logged_in_fetcher.list_filters()

        assert filters == [
            FogBugzFilter(
                name="My Cases",
                type="builtin",
                id="ez",
                url="https://zzz.fogbugz.com/default.asp?pgx=LF&ixFilter=ez",
            ),
            FogBugzFilter(
                name="Inbox",
                type="builtin",
                id="inbox",
                url="https://zzz.fogbugz.com/default.asp?pgx=LF&ixFilter=inbox",
            ),
        ]
        session.get.assert_called_once_with(
            "https://zzz.fogbugz.com/api.asp",
            params={"cmd": "listFilters", "token": MOCK_TOKEN},
            timeout=None,
        )

    def test_list_filters_single(self, logged_in_fetcher, respond_with):
        """A single filter is still returned as a list."""
        respond_with(
            '<response><filters><filter type="saved" sFilter="7">'
            " Release blockers </filter></filters></response>"
        )

        filters = logged_in_fetcher.list_filters()

        assert len(filters) == 1
        assert filters[0].name == "Release blockers"
        assert filters[0].type == "saved"

    def test_list_filters_empty(self, logged_in_fetcher, respond_with):
        respond_with(MOCK_NO_FILTERS_RESPONSE)

        with pytest.raises(UnknownError):
            logged_in_fetcher.list_filters()

    def test_list_filters_missing_container(self, logged_in_fetcher, respond_with):
        respond_with(MOCK_EMPTY_RESPONSE)

        with pytest.raises(UnknownError):
            logged_in_fetcher.list_filters()

    def test_list_filters_service_error(self, logged_in_fetcher, respond_with):
        respond_with(MOCK_ERROR_RESPONSE)

        with pytest.raises(ServiceError, match="Not logged in"):
            logged_in_fetcher.list_filters()

    def test_list_filters_without_token(self, fogbugz_fetcher, mock_session):
        with pytest.raises(UndefinedTokenError):
            fogbugz_fetcher.list_filters()

        mock_session.get.assert_not_called()

    def test_set_current_filter_with_id(self, logged_in_fetcher, respond_with):
        session = respond_with(MOCK_EMPTY_RESPONSE)

        assert logged_in_fetcher.set_current_filter("ez") is True

        session.get.assert_called_once_with(
            "https://zzz.fogbugz.com/api.asp",
            params={"cmd": "setCurrentFilter", "token": MOCK_TOKEN, "sFilter": "ez"},
            timeout=None,
        )

    def test_set_current_filter_with_filter(self, logged_in_fetcher, respond_with):
        """Test that a filter record can be passed instead of its id."""
        session = respond_with(MOCK_EMPTY_RESPONSE)
        inbox = FogBugzFilter(name="Inbox", type="builtin", id="inbox")

        logged_in_fetcher.set_current_filter(inbox)

        _, kwargs = session.get.call_args
        assert kwargs["params"]["sFilter"] == "inbox"

    def test_set_current_filter_service_error(self, logged_in_fetcher, respond_with):
        respond_with('<response><error code="10">Filter not found</error></response>')

        with pytest.raises(ServiceError) as exc_info:
            logged_in_fetcher.set_current_filter("999")

        assert exc_info.value.code == "10"

    def test_set_current_filter_without_token(self, fogbugz_fetcher, mock_session):
        with pytest.raises(UndefinedTokenError):
            fogbugz_fetcher.set_current_filter("ez")

        mock_session.get.assert_not_called()
