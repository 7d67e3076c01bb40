"""Core database connection with ACID transaction support."""

from __future__ import annotations

import logging
import sqlite3
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Generator, Optional

from business_ideas.db.schema import SCHEMA_DDL

logger = logging.getLogger(__name__)


def utc_now() -> str:
    """Timestamp in the same format the schema defaults produce."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class Database:
    """
    SQLite database wrapper with explicit ACID transaction support.

    Implements the Unit-of-Work pattern: every mutation goes through
    ``transaction()``, which commits on success and rolls back on failure.
    """

    def __init__(self, path: Optional[Path | str] = None):
        from business_ideas.config import get_db_path
        if path is None:
            self.path: Path = get_db_path()
        elif isinstance(path, str):
            self.path = Path(path)
        else:
            self.path = path
        self._conn: Optional[sqlite3.Connection] = None
        # Handlers run on a thread pool and share one connection.
        self._lock = threading.RLock()

    # -- connection lifecycle --------------------------------------------------

    def _ensure_dir(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)

    def connection(self) -> sqlite3.Connection:
        if self._conn is None:
            self._ensure_dir()
            self._conn = sqlite3.connect(str(self.path), check_same_thread=False)
            self._conn.row_factory = sqlite3.Row
            self._conn.execute("PRAGMA foreign_keys = ON")
        return self._conn

    def close(self) -> None:
        if self._conn:
            self._conn.close()
            self._conn = None

    def init(self) -> None:
        """Create all tables (idempotent)."""
        conn = self.connection()
        conn.executescript(SCHEMA_DDL)
        conn.commit()
        logger.info("Database initialized at %s", self.path)

    # -- transaction helpers ---------------------------------------------------

    @contextmanager
    def transaction(self) -> Generator[sqlite3.Connection, None, None]:
        """ACID transaction: commits on success, rolls back on exception."""
        with self._lock:
            conn = self.connection()
            try:
                yield conn
                conn.commit()
            except Exception:
                conn.rollback()
                raise

    # -- low-level query helpers -----------------------------------------------

    def fetchone(self, sql: str, params: tuple = ()) -> Optional[dict[str, Any]]:
        with self._lock:
            row = self.connection().execute(sql, params).fetchone()
        return dict(row) if row else None

    def fetchall(self, sql: str, params: tuple = ()) -> list[dict[str, Any]]:
        with self._lock:
            rows = self.connection().execute(sql, params).fetchall()
        return [dict(r) for r in rows]
