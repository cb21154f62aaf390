"""
Service for managing todos.

The service holds no state of its own: each method performs exactly one
store operation and converts "nothing found" into ``TodoNotFoundError``
so that endpoints can map it to a 404.  Presence of ``text`` on
creation is the only validation performed.
"""

from __future__ import annotations

import logging
from typing import List

from todo_api.app.core.errors import TodoNotFoundError, TodoValidationError
from todo_api.app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from todo_api.app.stores.base import TodoStore


logger = logging.getLogger(__name__)


class TodoService:
    """Business logic for the todo resource."""

    def __init__(self, store: TodoStore) -> None:
        self.store = store

    async def list_todos(self) -> List[TodoRead]:
        return await self.store.list()

    async def create_todo(self, todo_in: TodoCreate) -> TodoRead:
        """Insert a new, not yet completed todo.

        Raises
        ------
        TodoValidationError
            If ``text`` is missing or empty.
        """
        if not todo_in.text:
            raise TodoValidationError("Text is required")
        todo = await self.store.create(todo_in.text)
        logger.info("Created todo %s", todo.id)
        return todo

    async def update_todo(self, todo_id: str, todo_in: TodoUpdate) -> TodoRead:
        """Apply the provided fields to an existing todo.

        ``text`` is written as given, including an empty string.

        Raises
        ------
        TodoNotFoundError
            If no todo has the given id.
        """
        todo = await self.store.update_by_id(todo_id, todo_in.changes())
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("Updated todo %s", todo_id)
        return todo

    async def delete_todo(self, todo_id: str) -> TodoRead:
        """Remove a todo and return it as it was before deletion."""
        todo = await self.store.delete_by_id(todo_id)
        if todo is None:
            raise TodoNotFoundError(todo_id)
        logger.info("Deleted todo %s", todo_id)
        return todo
