"""
Exception types shared by the store, service and API layers.

Endpoints translate these into HTTP status codes: validation errors
become 400, missing todos 404 and store failures 500.
"""


class TodoError(Exception):
    """Base class for todo errors."""


class TodoValidationError(TodoError):
    """A required field is missing or empty."""


class TodoNotFoundError(TodoError):
    """No todo exists with the requested identifier."""

    def __init__(self, todo_id: str) -> None:
        super().__init__(f"Todo {todo_id} not found")
        self.todo_id = todo_id


class TodoStoreError(TodoError):
    """The document store failed to complete an operation."""
