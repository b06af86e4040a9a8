# Area: Host
"""
mental_poker._host.database — SQLite storage
============================================

Connection handling and schema setup for persisted games. Every
repository call opens its own short-lived connection, so one database
file can be shared by several hosts in the same process.
"""

from contextlib import closing
from pathlib import Path
from typing import Any, List, Optional
import logging
import sqlite3

logger = logging.getLogger("mental_poker.host.database")

SCHEMA_PATH = Path(__file__).parent / "schema.sql"


def get_connection(db_path: str) -> sqlite3.Connection:
    """Open a connection whose rows behave like dicts."""
    conn = sqlite3.connect(db_path)
    conn.row_factory = sqlite3.Row
    return conn


def init_database(db_path: str) -> None:
    """Create the tables in ``db_path`` if they do not exist yet."""
    schema = SCHEMA_PATH.read_text(encoding="utf-8")
    with closing(get_connection(db_path)) as conn:
        conn.executescript(schema)
        conn.commit()
    logger.info(f"Database initialized at {db_path}")


class BaseRepository:
    """
    Base class for database repositories.

    Args:
        db_path: SQLite file to use
        create_schema: Run schema.sql on construction
    """

    def __init__(self, db_path: str, create_schema: bool = False):
        self.db_path = db_path
        if create_schema:
            init_database(db_path)

    def _execute(self, query: str, params: tuple = ()) -> int:
        """Run a write query and commit. Returns the affected row count."""
        with closing(get_connection(self.db_path)) as conn:
            cursor = conn.execute(query, params)
            conn.commit()
            return cursor.rowcount

    def _fetch_all(self, query: str, params: tuple = ()) -> List[dict]:
        with closing(get_connection(self.db_path)) as conn:
            return [dict(row) for row in conn.execute(query, params).fetchall()]

    def _fetch_one(self, query: str, params: tuple = ()) -> Optional[dict]:
        rows = self._fetch_all(query, params)
        return rows[0] if rows else None

    def _scalar(self, query: str, params: tuple = ()) -> Any:
        row = self._fetch_one(query, params)
        return next(iter(row.values())) if row else None
