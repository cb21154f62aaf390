"""
Todo store implementations.

``build_store`` picks the backend named by ``Settings.store_backend``.
"""

from todo_api.app.core.config import Settings
from todo_api.app.stores.base import TodoStore
from todo_api.app.stores.memory import InMemoryTodoStore


def build_store(settings: Settings) -> TodoStore:
    """Create the store configured by ``settings``.

    Raises
    ------
    ValueError
        If the backend name is not recognised.
    """
    backend = settings.store_backend.lower()
    if backend == "memory":
        return InMemoryTodoStore()
    if backend == "mongo":
        # Imported lazily so the memory backend works without a driver installed.
        from todo_api.app.stores.mongo import MongoTodoStore

        return MongoTodoStore(settings.mongodb_uri, settings.mongodb_database)
    raise ValueError(f"Unknown todo store backend: {settings.store_backend!r}")


__all__ = ["TodoStore", "InMemoryTodoStore", "build_store"]
