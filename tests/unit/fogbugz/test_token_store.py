"""Tests for the token store module."""

from fogbugz_client.fogbugz.token_store import MemoryTokenStore, TokenStore


def test_memory_store_starts_empty():
    assert MemoryTokenStore().get() is None


def test_memory_store_initial_token():
    assert MemoryTokenStore("abc").get() == "abc"


def test_memory_store_last_write_wins():
    store = MemoryTokenStore()

    store.set("first")
    store.set("second")

    assert store.get() == "second"


def test_memory_store_clear():
    store = MemoryTokenStore("abc")

    store.clear()
    store.clear()

    assert store.get() is None


def test_memory_store_is_token_store():
    assert isinstance(MemoryTokenStore(), TokenStore)


def test_custom_store_is_used(mock_config, mock_session):
    """Any object with get/set/clear can hold the token."""
    from fogbugz_client.fogbugz import FogBugzFetcher

    class DictTokenStore:
        def __init__(self):
            self.data = {}

        def get(self):
            return self.data.get("token")

        def set(self, token):
            self.data["token"] = token

        def clear(self):
            self.data.pop("token", None)

    store = DictTokenStore()
    fetcher = FogBugzFetcher(config=mock_config, session=mock_session, token_store=store)

    fetcher.set_token("abc")

    assert isinstance(store, TokenStore)
    assert store.data == {"token": "abc"}
    assert fetcher.get_token() == "abc"
