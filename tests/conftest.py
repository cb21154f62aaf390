from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from todo_api.app.main import create_app
from todo_api.app.stores.memory import InMemoryTodoStore


@pytest.fixture()
def store() -> InMemoryTodoStore:
    return InMemoryTodoStore()


@pytest.fixture()
def client(store: InMemoryTodoStore) -> TestClient:
    return TestClient(create_app(store=store))
