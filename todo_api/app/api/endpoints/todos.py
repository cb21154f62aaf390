"""
Todo endpoints.

CRUD routes over the single todo collection.  Each handler delegates to
``TodoService`` and maps its exceptions onto HTTP status codes.  Store
failures are logged with a traceback and reported to the client with a
generic message only.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from todo_api.app.core.errors import TodoNotFoundError, TodoStoreError, TodoValidationError
from todo_api.app.schemas.todo import TodoCreate, TodoRead, TodoUpdate
from todo_api.app.services.todo_service import TodoService

router = APIRouter()
logger = logging.getLogger(__name__)


def get_todo_service(request: Request) -> TodoService:
    """Dependency returning a service bound to the application's store."""
    return TodoService(request.app.state.store)


def _store_failure(message: str) -> HTTPException:
    logger.exception(message)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=message)


@router.get("", response_model=List[TodoRead])
async def list_todos(service: TodoService = Depends(get_todo_service)) -> List[TodoRead]:
    """Return every todo, or an empty list when there are none."""
    try:
        return await service.list_todos()
    except TodoStoreError:
        raise _store_failure("Failed to get todos")


@router.post("", response_model=TodoRead, status_code=status.HTTP_201_CREATED)
async def create_todo(
    todo_in: TodoCreate,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Create a new todo.  ``text`` must be present and non-empty."""
    try:
        return await service.create_todo(todo_in)
    except TodoValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc))
    except TodoStoreError:
        raise _store_failure("Failed to create todo")


@router.put("/{todo_id}", response_model=TodoRead)
async def update_todo(
    todo_id: str,
    todo_in: Optional[TodoUpdate] = None,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Update ``text`` and/or ``completed`` of an existing todo.

    A request without a body changes nothing and returns the todo as stored.
    """
    try:
        return await service.update_todo(todo_id, todo_in or TodoUpdate())
    except TodoNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    except TodoStoreError:
        raise _store_failure("Failed to update todo")


@router.delete("/{todo_id}", response_model=TodoRead)
async def delete_todo(
    todo_id: str,
    service: TodoService = Depends(get_todo_service),
) -> TodoRead:
    """Delete a todo and return the removed document."""
    try:
        return await service.delete_todo(todo_id)
    except TodoNotFoundError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Todo not found")
    except TodoStoreError:
        raise _store_failure("Failed to delete todo")
