from __future__ import annotations

import asyncio
from typing import Any, Dict

from fastapi.testclient import TestClient

from todo_api.app.core.errors import TodoStoreError
from todo_api.app.main import create_app
from todo_api.app.stores.memory import InMemoryTodoStore


class BrokenStore(InMemoryTodoStore):
    async def create(self, text: str):
        raise TodoStoreError("connection refused")

    async def list(self):
        raise TodoStoreError("connection refused")

    async def update_by_id(self, todo_id: str, changes: Dict[str, Any]):
        raise TodoStoreError("connection refused")

    async def delete_by_id(self, todo_id: str):
        raise TodoStoreError("connection refused")


def test_list_is_empty_initially(client: TestClient) -> None:
    response = client.get("/api/todos")

    assert response.status_code == 200
    assert response.json() == []


def test_create_todo_returns_201_with_defaults(client: TestClient) -> None:
    response = client.post("/api/todos", json={"text": "buy milk"})

    assert response.status_code == 201
    body = response.json()
    assert body["id"] == "1"
    assert body["text"] == "buy milk"
    assert body["completed"] is False
    assert "createdAt" in body


def test_create_todo_rejects_empty_text(client: TestClient, store: InMemoryTodoStore) -> None:
    for payload in ({"text": ""}, {"text": None}, {}):
        response = client.post("/api/todos", json=payload)
        assert response.status_code == 400
        assert response.json() == {"error": "Text is required"}

    assert asyncio.run(store.list()) == []


def test_create_todo_rejects_malformed_body(client: TestClient) -> None:
    response = client.post("/api/todos", content="not json", headers={"Content-Type": "application/json"})

    assert response.status_code == 400
    assert response.json() == {"error": "Invalid request body"}


def test_update_toggles_completed(client: TestClient) -> None:
    created = client.post("/api/todos", json={"text": "buy milk"}).json()

    response = client.put(f"/api/todos/{created['id']}", json={"completed": True})

    assert response.status_code == 200
    body = response.json()
    assert body["id"] == created["id"]
    assert body["text"] == "buy milk"
    assert body["completed"] is True
    assert body["createdAt"] == created["createdAt"]


def test_update_changes_text_only_when_provided(client: TestClient) -> None:
    created = client.post("/api/todos", json={"text": "buy milk"}).json()
    client.put(f"/api/todos/{created['id']}", json={"completed": True})

    response = client.put(f"/api/todos/{created['id']}", json={"text": "buy oat milk"})

    assert response.json()["text"] == "buy oat milk"
    assert response.json()["completed"] is True


def test_update_accepts_blank_text(client: TestClient) -> None:
    created = client.post("/api/todos", json={"text": "buy milk"}).json()

    response = client.put(f"/api/todos/{created['id']}", json={"text": ""})

    assert response.status_code == 200
    assert response.json()["text"] == ""


def test_create_todo_only_checks_presence(client: TestClient) -> None:
    response = client.post("/api/todos", json={"text": "   "})

    assert response.status_code == 201
    assert response.json()["text"] == "   "


def test_update_without_body_returns_todo_unchanged(client: TestClient) -> None:
    created = client.post("/api/todos", json={"text": "buy milk"}).json()

    response = client.put(f"/api/todos/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created


def test_update_without_body_unknown_id_returns_404(client: TestClient) -> None:
    response = client.put("/api/todos/42")

    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}


def test_update_unknown_id_returns_404(client: TestClient) -> None:
    response = client.put("/api/todos/42", json={"completed": True})

    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}


def test_delete_returns_removed_document(client: TestClient) -> None:
    created = client.post("/api/todos", json={"text": "buy milk"}).json()

    response = client.delete(f"/api/todos/{created['id']}")

    assert response.status_code == 200
    assert response.json() == created
    assert client.get("/api/todos").json() == []


def test_delete_unknown_id_returns_404(client: TestClient) -> None:
    response = client.delete("/api/todos/42")

    assert response.status_code == 404
    assert response.json() == {"error": "Todo not found"}


def test_round_trip_is_reflected_in_list(client: TestClient) -> None:
    first = client.post("/api/todos", json={"text": "buy milk"}).json()
    second = client.post("/api/todos", json={"text": "walk the dog"}).json()

    assert [t["id"] for t in client.get("/api/todos").json()] == [first["id"], second["id"]]

    client.put(f"/api/todos/{first['id']}", json={"completed": True})
    listed = {t["id"]: t for t in client.get("/api/todos").json()}
    assert listed[first["id"]]["completed"] is True
    assert listed[second["id"]]["completed"] is False

    client.delete(f"/api/todos/{first['id']}")
    assert [t["id"] for t in client.get("/api/todos").json()] == [second["id"]]


def test_store_failures_return_generic_500() -> None:
    client = TestClient(create_app(store=BrokenStore()))

    cases = [
        (client.get("/api/todos"), "Failed to get todos"),
        (client.post("/api/todos", json={"text": "x"}), "Failed to create todo"),
        (client.put("/api/todos/1", json={"completed": True}), "Failed to update todo"),
        (client.delete("/api/todos/1"), "Failed to delete todo"),
    ]
    for response, message in cases:
        assert response.status_code == 500
        assert response.json() == {"error": message}
        assert "connection refused" not in response.text


def test_unexpected_errors_return_generic_500() -> None:
    class FaultyStore(InMemoryTodoStore):
        async def list(self):
            raise RuntimeError("secret internals")

    client = TestClient(create_app(store=FaultyStore()), raise_server_exceptions=False)

    response = client.get("/api/todos")

    assert response.status_code == 500
    assert response.json() == {"error": "Internal server error"}
    assert "secret internals" not in response.text


def test_health(client: TestClient) -> None:
    response = client.get("/api/health")

    assert response.status_code == 200
    assert response.json() == {"status": "OK"}


def test_cors_headers_are_sent(client: TestClient) -> None:
    response = client.get("/api/todos", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_startup_builds_configured_store(monkeypatch) -> None:
    from todo_api.app.core.config import settings

    monkeypatch.setattr(settings, "store_backend", "memory")
    app = create_app()

    with TestClient(app) as client:
        assert isinstance(app.state.store, InMemoryTodoStore)
        assert client.post("/api/todos", json={"text": "buy milk"}).status_code == 201
