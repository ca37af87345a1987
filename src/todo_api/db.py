from __future__ import annotations

import logging
import sqlite3
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Callable, Dict, Generator, Type

from .errors import StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class _Cols:
    table: str = "todos"
    id: str = "id"
    task: str = "task"
    completed: str = "completed"
    created_at: str = "created_at"
    updated_at: str = "updated_at"


COLS = _Cols()

# Millisecond precision so rows inserted in quick succession keep their order.
_NOW_SQL = "(strftime('%Y-%m-%d %H:%M:%f', 'now'))"


@dataclass(frozen=True)
class Driver:
    """A DB-API driver: how to open a connection and which exception it raises."""

    name: str
    connect: Callable[[str], Any]
    error: Type[Exception]


def _connect_sqlite(url: str) -> sqlite3.Connection:
    # Accept SQLAlchemy-style URLs as well as bare file paths
    if url.startswith("sqlite:///"):
        url = url[len("sqlite:///"):]
    conn = sqlite3.connect(url)
    conn.row_factory = sqlite3.Row
    return conn


_SQLITE = Driver(name="sqlite3", connect=_connect_sqlite, error=sqlite3.Error)

DRIVERS: Dict[str, Driver] = {
    "sqlite3": _SQLITE,
    "sqlite": _SQLITE,
}


# PUBLIC_INTERFACE
class Database:
    """
    Shared storage handle.

    Holds the driver and connection string and hands out one connection per
    operation, so a single instance can be used from every request worker
    without extra locking.

    Only sqlite3 (also spelled 'sqlite') is registered in DRIVERS; any other
    driver name raises StorageError. Another DB-API driver plugs in as a
    Driver entry if it accepts qmark placeholders.
    """

    def __init__(self, driver: str, url: str) -> None:
        try:
            self._driver = DRIVERS[driver.strip().lower()]
        except KeyError:
            supported = ", ".join(sorted(DRIVERS))
            raise StorageError(f"unsupported database driver {driver!r} (supported: {supported})") from None
        self._url = url

    @property
    def driver_name(self) -> str:
        return self._driver.name

    @property
    def error(self) -> Type[Exception]:
        """Base exception class raised by the underlying driver."""
        return self._driver.error

    @contextmanager
    def connect(self) -> Generator[Any, None, None]:
        """
        Yield a fresh connection, commit if the block succeeds and always close.

        Raises:
            StorageError: if the connection cannot be opened.
        """
        try:
            conn = self._driver.connect(self._url)
        except self._driver.error as e:
            raise StorageError(f"could not open database: {e}") from e
        try:
            yield conn
            conn.commit()
        finally:
            conn.close()

    def ping(self) -> None:
        """Liveness check; raises StorageError if the database is unreachable."""
        try:
            with self.connect() as conn:
                conn.execute("SELECT 1").fetchone()
        except self._driver.error as e:
            raise StorageError(f"database ping failed: {e}") from e

    def ensure_schema(self) -> None:
        """Create the todos table if it does not exist yet."""
        try:
            with self.connect() as conn:
                conn.execute(
                    f"""
                    CREATE TABLE IF NOT EXISTS {COLS.table} (
                        {COLS.id} INTEGER PRIMARY KEY AUTOINCREMENT,
                        {COLS.task} TEXT NOT NULL,
                        {COLS.completed} BOOLEAN NOT NULL DEFAULT 0,
                        {COLS.created_at} TIMESTAMP NOT NULL DEFAULT {_NOW_SQL},
                        {COLS.updated_at} TIMESTAMP NOT NULL DEFAULT {_NOW_SQL}
                    )
                    """
                )
                conn.execute(
                    f"CREATE INDEX IF NOT EXISTS idx_{COLS.table}_created_at ON {COLS.table}({COLS.created_at})"
                )
        except self._driver.error as e:
            raise StorageError(f"could not create {COLS.table} table: {e}") from e


# PUBLIC_INTERFACE
def open_database(driver: str, url: str) -> Database:
    """
    Open the storage handle used for the lifetime of the process.

    Resolves the driver, verifies the database is reachable and makes sure the
    todos table exists.

    Raises:
        StorageError: on an unknown driver or an unreachable database.
    """
    db = Database(driver, url)
    db.ping()
    db.ensure_schema()
    logger.info("connected to database (driver=%s)", db.driver_name)
    return db
