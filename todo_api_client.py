"""Todo API client.

This module defines a small client wrapper around the todo REST API.
The client uses the ``requests`` library internally to make HTTP calls
and exposes one method per operation:

* :meth:`list_todos` – return every todo.
* :meth:`create_todo` – create a todo from a piece of text.
* :meth:`update_todo` – change the text and/or completion flag.
* :meth:`delete_todo` – remove a todo.
* :meth:`health` – check that the service is up.

No method raises on network or HTTP failures.  Each returns a tuple
``(data, error)`` where ``error`` is ``None`` on success or a dictionary
with the keys ``status_code`` and ``message``.  Failures are logged.
"""

from __future__ import annotations

import logging
import os
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:5000/api"

ApiError = Dict[str, Any]


class TodoAPI:
    """Client for interacting with the todo API."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the ``/api`` prefix.
                Defaults to ``TODO_API_BASE_URL`` or a local server.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Seconds to wait for each request.
        """
        base_url = base_url or os.getenv("TODO_API_BASE_URL", DEFAULT_BASE_URL)
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[ApiError]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/todos``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``. ``data`` contains the parsed JSON
            response on success and ``error`` is ``None``. On failure,
            ``data`` is ``None`` and ``error`` describes the issue.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    # ------------------------------------------------------------------
    # Todo operations
    # ------------------------------------------------------------------
    def list_todos(self) -> Tuple[List[Dict[str, Any]], Optional[ApiError]]:
        """Retrieve all todos.

        Returns:
            A tuple ``(todos, error)``. ``todos`` is empty on failure.
        """
        data, error = self._request("GET", "/todos")
        if error:
            return [], error
        if isinstance(data, list):
            return data, None
        return [], None

    def create_todo(self, text: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Create a todo with the given text."""
        return self._request("POST", "/todos", json_body={"text": text})

    def update_todo(
        self,
        todo_id: str,
        *,
        text: Optional[str] = None,
        completed: Optional[bool] = None,
    ) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Update a todo.  Only the arguments that are not ``None`` are sent."""
        payload: Dict[str, Any] = {}
        if text is not None:
            payload["text"] = text
        if completed is not None:
            payload["completed"] = completed
        return self._request("PUT", f"/todos/{todo_id}", json_body=payload)

    def delete_todo(self, todo_id: str) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        """Delete a todo, returning the removed document."""
        return self._request("DELETE", f"/todos/{todo_id}")

    def health(self) -> Tuple[Optional[Dict[str, Any]], Optional[ApiError]]:
        return self._request("GET", "/health")
