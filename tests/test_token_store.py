from mediapp_client.services import SQLiteTokenStorage, TokenStore
from mediapp_client.services.tokens import ACCESS_TOKEN_KEY, REFRESH_TOKEN_KEY


def test_empty_store_returns_no_tokens(token_store):
    tokens = token_store.get()
    assert tokens.access_token is None
    assert tokens.refresh_token is None


def test_set_persists_across_restart(token_store, db_path):
    token_store.set("access-a", "refresh-r")

    restarted = TokenStore(SQLiteTokenStorage(db_path))
    tokens = restarted.get()
    assert tokens.access_token == "access-a"
    assert tokens.refresh_token == "refresh-r"


def test_set_without_refresh_clears_persisted_refresh(token_store, db_path):
    token_store.set("access-a", "refresh-r")
    token_store.set("access-b")

    assert token_store.get().refresh_token is None
    storage = SQLiteTokenStorage(db_path)
    assert storage.get_item(ACCESS_TOKEN_KEY) == "access-b"
    assert storage.get_item(REFRESH_TOKEN_KEY) is None

    restarted = TokenStore(SQLiteTokenStorage(db_path)).get()
    assert restarted.access_token == "access-b"
    assert restarted.refresh_token is None


def test_clear_removes_memory_and_storage(token_store, db_path):
    token_store.set("access-a", "refresh-r")
    token_store.clear()

    tokens = token_store.get()
    assert tokens.access_token is None
    assert tokens.refresh_token is None
    assert TokenStore(SQLiteTokenStorage(db_path)).get().access_token is None


def test_last_write_wins_between_instances(db_path):
    first = TokenStore(SQLiteTokenStorage(db_path))
    second = TokenStore(SQLiteTokenStorage(db_path))

    first.set("one")
    second.set("two", "r2")

    assert TokenStore(SQLiteTokenStorage(db_path)).get().access_token == "two"
    # in-memory cache is not synchronized across instances
    assert first.get().access_token == "one"
