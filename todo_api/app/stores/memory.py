from __future__ import annotations

from datetime import datetime, timezone
from itertools import count
from typing import Any, Dict, Iterable, List, Optional

from todo_api.app.schemas.todo import TodoRead


class InMemoryTodoStore:
    """Simple in-memory store backed by a dict.

    Identifiers are sequential decimal strings starting at ``"1"``.
    Callers always receive copies, so mutating a returned todo never
    changes stored state.
    """

    def __init__(self, initial_items: Optional[Iterable[TodoRead]] = None) -> None:
        self._items: Dict[str, TodoRead] = {}
        self._next_id = count(1)
        if initial_items:
            for item in initial_items:
                self._items[item.id] = item.model_copy()

    async def connect(self) -> None:
        return None

    async def close(self) -> None:
        return None

    async def create(self, text: str) -> TodoRead:
        todo_id = str(next(self._next_id))
        while todo_id in self._items:
            todo_id = str(next(self._next_id))
        todo = TodoRead(
            id=todo_id,
            text=text,
            completed=False,
            created_at=datetime.now(timezone.utc),
        )
        self._items[todo_id] = todo
        return todo.model_copy()

    async def list(self) -> List[TodoRead]:
        return [item.model_copy() for item in self._items.values()]

    async def update_by_id(self, todo_id: str, changes: Dict[str, Any]) -> Optional[TodoRead]:
        current = self._items.get(todo_id)
        if current is None:
            return None
        updated = current.model_copy(update=changes)
        self._items[todo_id] = updated
        return updated.model_copy()

    async def delete_by_id(self, todo_id: str) -> Optional[TodoRead]:
        removed = self._items.pop(todo_id, None)
        return removed.model_copy() if removed is not None else None
