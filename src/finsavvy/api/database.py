"""Record store management for profiles and streaks."""

from langgraph.store.base import BaseStore
from langgraph.store.memory import InMemoryStore

# Global store instance, set by the app lifespan
_store: BaseStore | None = None


def get_store() -> BaseStore:
    """Returns the globally active store."""
    global _store
    if _store is None:
        # Fallback for local/testing if lifespan didn't run
        _store = InMemoryStore()
    return _store


def get_postgres_store_context(url: str):
    """Context manager yielding a Postgres-backed store for the app lifespan."""
    from langgraph.store.postgres import PostgresStore

    return PostgresStore.from_conn_string(url)


def set_global_store(store: BaseStore | None):
    global _store
    _store = store
