"""
MongoDB store for todo documents.

Todos live in a single collection (``todos`` by default) of the database
named by the connection string.  Each document has the shape
``{_id, text, completed, createdAt}``; ``_id`` is exposed to clients as
the hex string ``id``.  The motor driver is used so that store calls
do not block the event loop.
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional

from bson import ObjectId
from motor.motor_asyncio import AsyncIOMotorClient
from pymongo import ReturnDocument
from pymongo.errors import PyMongoError

from todo_api.app.core.errors import TodoStoreError
from todo_api.app.schemas.todo import TodoRead


logger = logging.getLogger(__name__)


def _object_id(todo_id: str) -> Optional[ObjectId]:
    """Convert a client supplied id, returning ``None`` when it is malformed."""
    if not ObjectId.is_valid(todo_id):
        return None
    return ObjectId(todo_id)


def _to_todo(document: Dict[str, Any]) -> TodoRead:
    return TodoRead(
        id=str(document["_id"]),
        text=document["text"],
        completed=bool(document.get("completed", False)),
        created_at=document["createdAt"],
    )


@contextmanager
def _store_errors(action: str) -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        raise TodoStoreError(f"Failed to {action}: {exc}") from exc


class MongoTodoStore:
    """Todo store backed by a MongoDB collection."""

    def __init__(
        self,
        uri: str,
        database: str = "todoapp",
        collection_name: str = "todos",
        *,
        collection: Any = None,
    ) -> None:
        """Create the store.

        Parameters
        ----------
        uri : str
            MongoDB connection string.
        database : str
            Database used when ``uri`` does not name one.
        collection_name : str
            Name of the collection holding todo documents.
        collection : optional
            Pre-built collection object.  When supplied no client is
            created; this is how tests inject a fake collection.
        """
        self._client: Optional[AsyncIOMotorClient] = None
        if collection is None:
            self._client = AsyncIOMotorClient(uri, tz_aware=True)
            collection = self._client.get_default_database(database)[collection_name]
        self._collection = collection

    async def connect(self) -> None:
        """Check that the server is reachable and log the outcome.

        A failed check does not stop the application; requests made while
        the database is down fail individually with a 500.
        """
        if self._client is None:
            return
        try:
            await self._client.admin.command("ping")
            logger.info("Connected to MongoDB")
        except PyMongoError as exc:
            logger.error("MongoDB connection error: %s", exc)

    async def close(self) -> None:
        if self._client is not None:
            self._client.close()

    async def create(self, text: str) -> TodoRead:
        document = {
            "text": text,
            "completed": False,
            "createdAt": datetime.now(timezone.utc),
        }
        with _store_errors("create todo"):
            result = await self._collection.insert_one(document)
        document["_id"] = result.inserted_id
        return _to_todo(document)

    async def list(self) -> List[TodoRead]:
        with _store_errors("get todos"):
            documents = await self._collection.find().to_list(length=None)
        return [_to_todo(document) for document in documents]

    async def update_by_id(self, todo_id: str, changes: Dict[str, Any]) -> Optional[TodoRead]:
        oid = _object_id(todo_id)
        if oid is None:
            return None
        with _store_errors("update todo"):
            if changes:
                document = await self._collection.find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
            else:
                # MongoDB rejects an empty $set
                document = await self._collection.find_one({"_id": oid})
        return _to_todo(document) if document else None

    async def delete_by_id(self, todo_id: str) -> Optional[TodoRead]:
        oid = _object_id(todo_id)
        if oid is None:
            return None
        with _store_errors("delete todo"):
            document = await self._collection.find_one_and_delete({"_id": oid})
        return _to_todo(document) if document else None
