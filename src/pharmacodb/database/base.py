"""
Base repository class for read-only database access.
"""
import logging
import sqlite3
from typing import Any, Dict, List, Optional, Tuple, Union

from .connection_pool import ConnectionPool
from ..errors import InternalError

logger = logging.getLogger(__name__)

# SQLite INTEGER is a signed 64-bit value
SQLITE_MIN_INT = -2 ** 63
SQLITE_MAX_INT = 2 ** 63 - 1


def parse_id(identifier: Union[int, str]) -> Optional[int]:
    """
    Convert a row identifier to an int.

    Returns None for anything that is not a plain ASCII integer or does not
    fit in a SQLite INTEGER; such ids cannot match a row.
    """
    if isinstance(identifier, bool):
        return None
    if isinstance(identifier, int):
        value = identifier
    else:
        text = str(identifier)
        digits = text[1:] if text.startswith("-") else text
        if not (digits.isascii() and digits.isdigit()):
            return None
        value = int(text)

    if value < SQLITE_MIN_INT or value > SQLITE_MAX_INT:
        return None
    return value


class BaseRepository:
    """Base repository running parameterized SELECTs through a pool."""

    def __init__(self, pool: ConnectionPool):
        self.pool = pool

    def _fetch_one(self, query: str, params: Tuple = ()) -> Optional[Dict[str, Any]]:
        """Execute query and fetch one result as dict."""
        with self.pool.connection() as conn:
            try:
                row = conn.execute(query, params).fetchone()
            except sqlite3.Error as e:
                logger.error(f"Query failed: {e}")
                raise InternalError(e)
        return dict(row) if row else None

    def _fetch_all(self, query: str, params: Tuple = ()) -> List[Dict[str, Any]]:
        """Execute query and fetch all results as list of dicts."""
        with self.pool.connection() as conn:
            try:
                rows = conn.execute(query, params).fetchall()
            except sqlite3.Error as e:
                logger.error(f"Query failed: {e}")
                raise InternalError(e)
        return [dict(row) for row in rows]
