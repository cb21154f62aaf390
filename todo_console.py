"""A console client for the todo service.

This module implements the client side of the todo list.  The
:class:`TodoListView` keeps the view state (the list of todos mirrored
from the API, the draft text of the next todo and a loading flag) and
updates it after each call made through
:class:`todo_api_client.TodoAPI`.  Failed calls are logged and leave the
state unchanged; they are never retried or shown to the user.

Running the module starts an interactive loop on stdin::

    add <text>      create a todo
    toggle <n>      flip the completed flag of the n-th todo
    delete <n>      delete the n-th todo
    list            reload the list from the server
    quit            exit

The base URL of the API is read from ``TODO_API_BASE_URL``.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List, Optional

from todo_api_client import TodoAPI


logger = logging.getLogger(__name__)

EMPTY_STATE = "No todos yet. Add one above!"


class TodoListView:
    """In-memory view of the todo list backed by the API."""

    def __init__(self, api: TodoAPI) -> None:
        self.api = api
        self.todos: List[Dict[str, Any]] = []
        self.draft_text = ""
        self.loading = True

    def _find(self, todo_id: str) -> Optional[Dict[str, Any]]:
        for todo in self.todos:
            if todo.get("id") == todo_id:
                return todo
        return None

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------
    def load(self) -> None:
        """Fetch the full list from the server."""
        todos, error = self.api.list_todos()
        if error:
            logger.error("Error fetching todos: %s", error["message"])
        else:
            self.todos = todos
        self.loading = False

    def add(self) -> bool:
        """Create a todo from the draft text.

        A blank draft is ignored without contacting the server.  On
        success the server's document is appended and the draft cleared.
        """
        text = self.draft_text.strip()
        if not text:
            return False
        todo, error = self.api.create_todo(text)
        if error or todo is None:
            logger.error("Error adding todo: %s", error["message"] if error else "empty response")
            return False
        self.todos = [*self.todos, todo]
        self.draft_text = ""
        return True

    def toggle(self, todo_id: str) -> bool:
        """Flip ``completed`` and replace the entry with the server's copy."""
        todo = self._find(todo_id)
        if todo is None:
            logger.warning("Cannot toggle unknown todo %s", todo_id)
            return False
        updated, error = self.api.update_todo(todo_id, completed=not todo.get("completed", False))
        if error or updated is None:
            logger.error("Error updating todo: %s", error["message"] if error else "empty response")
            return False
        self.todos = [updated if t.get("id") == todo_id else t for t in self.todos]
        return True

    def delete(self, todo_id: str) -> bool:
        _, error = self.api.delete_todo(todo_id)
        if error:
            logger.error("Error deleting todo: %s", error["message"])
            return False
        self.todos = [t for t in self.todos if t.get("id") != todo_id]
        return True

    # ------------------------------------------------------------------
    # Rendering
    # ------------------------------------------------------------------
    def render(self) -> List[str]:
        lines = ["Simple Todo App"]
        if self.loading:
            lines.append("Loading...")
            return lines
        for number, todo in enumerate(self.todos, start=1):
            mark = "x" if todo.get("completed") else " "
            lines.append(f"{number:>3}. [{mark}] {todo.get('text', '')}")
        if not self.todos:
            lines.append(EMPTY_STATE)
        return lines

    # ------------------------------------------------------------------
    # Command handling
    # ------------------------------------------------------------------
    def _todo_id_at(self, argument: str) -> Optional[str]:
        try:
            index = int(argument) - 1
        except ValueError:
            return None
        if 0 <= index < len(self.todos):
            return self.todos[index].get("id")
        return None

    def handle_command(self, line: str) -> bool:
        """Execute one console command.  Returns ``False`` when the user quits."""
        command, _, argument = line.strip().partition(" ")
        command = command.lower()
        if command in {"quit", "exit", "q"}:
            return False
        if command == "add":
            self.draft_text = argument
            self.add()
        elif command in {"toggle", "delete"}:
            todo_id = self._todo_id_at(argument.strip())
            if todo_id is None:
                logger.warning("No todo number %r", argument)
            elif command == "toggle":
                self.toggle(todo_id)
            else:
                self.delete(todo_id)
        elif command == "list":
            self.load()
        elif command:
            logger.warning("Unknown command %r", command)
        return True

    def run(
        self,
        read: Callable[[str], str] = input,
        write: Callable[[str], Any] = print,
    ) -> None:
        """Load the list and process commands until the user quits."""
        self.load()
        try:
            while True:
                for line in self.render():
                    write(line)
                if not self.handle_command(read("> ")):
                    break
        except (EOFError, KeyboardInterrupt):
            logger.info("Console client stopped by user.")


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    TodoListView(TodoAPI()).run()


if __name__ == "__main__":
    main()
