"""
Store interface for todo documents.

The API service only talks to a ``TodoStore``; the concrete backend
(MongoDB or an in‑memory dictionary) is chosen when the application is
created.  Implementations raise ``TodoStoreError`` when the backend
fails and return ``None`` for unknown identifiers.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from todo_api.app.schemas.todo import TodoRead


@runtime_checkable
class TodoStore(Protocol):
    """Persistence operations for todos."""

    async def connect(self) -> None:
        ...

    async def close(self) -> None:
        ...

    async def create(self, text: str) -> TodoRead:
        ...

    async def list(self) -> List[TodoRead]:
        ...

    async def update_by_id(self, todo_id: str, changes: Dict[str, Any]) -> Optional[TodoRead]:
        ...

    async def delete_by_id(self, todo_id: str) -> Optional[TodoRead]:
        ...
