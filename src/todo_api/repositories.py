from __future__ import annotations

import logging
from datetime import datetime
from typing import Any, List, Mapping

from fastapi import Request

from .db import COLS, Database
from .errors import StorageError
from .models import TodoEntity

logger = logging.getLogger(__name__)


def _parse_dt(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))


# PUBLIC_INTERFACE
class TodoRepository:
    """
    Translates between TodoEntity records and rows of the todos table.
    """

    def __init__(self, db: Database) -> None:
        self._db = db

    def _row_to_entity(self, row: Mapping[str, Any]) -> TodoEntity:
        return {
            "id": int(row[COLS.id]),
            "task": str(row[COLS.task]),
            "completed": bool(row[COLS.completed]),
            "created_at": _parse_dt(row[COLS.created_at]),
            "updated_at": _parse_dt(row[COLS.updated_at]),
        }

    def insert(self, task: str, completed: bool) -> None:
        """
        Insert a new todo. The id and timestamps are assigned by storage and
        are not returned.

        Raises:
            StorageError: if the insert fails.
        """
        try:
            with self._db.connect() as conn:
                conn.execute(
                    f"INSERT INTO {COLS.table} ({COLS.task}, {COLS.completed}) VALUES (?, ?)",
                    (task, completed),
                )
        except self._db.error as e:
            raise StorageError(f"could not insert todo: {e}") from e
        logger.debug("inserted todo task=%r completed=%s", task, completed)

    def list_all(self) -> List[TodoEntity]:
        """
        Return every todo, newest first.

        Raises:
            StorageError: if the query fails or a row cannot be converted.
        """
        try:
            with self._db.connect() as conn:
                rows = conn.execute(
                    f"""
                    SELECT {COLS.id}, {COLS.task}, {COLS.completed}, {COLS.created_at}, {COLS.updated_at}
                    FROM {COLS.table}
                    ORDER BY {COLS.created_at} DESC, {COLS.id} DESC
                    """
                ).fetchall()
        except self._db.error as e:
            raise StorageError(f"could not list todos: {e}") from e

        todos: List[TodoEntity] = []
        for row in rows:
            try:
                todos.append(self._row_to_entity(row))
            except (KeyError, IndexError, TypeError, ValueError) as e:
                raise StorageError(f"could not parse todo row: {e}") from e
        return todos


# PUBLIC_INTERFACE
def get_repository(request: Request) -> TodoRepository:
    """
    FastAPI dependency returning a repository bound to the app's shared
    storage handle.
    """
    return TodoRepository(request.app.state.database)
