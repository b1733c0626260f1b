"""
Database connection pooling for SQLite.

The pool is created by the application at startup, injected into the
repositories and closed at shutdown. Every acquired connection is returned
to the pool, including when the query fails.
"""

import logging
import sqlite3
import threading
from pathlib import Path
from queue import Queue, Empty, Full
from contextlib import contextmanager
from typing import Iterator

from ..errors import InternalError

logger = logging.getLogger(__name__)


class ConnectionPool:
    """Thread-safe connection pool for SQLite databases."""

    def __init__(self, db_path: str, pool_size: int = 5, read_only: bool = True, timeout: float = 5.0):
        """
        Initialize connection pool.

        Args:
            db_path: Path to SQLite database
            pool_size: Maximum number of connections kept open
            read_only: Open connections with ``mode=ro``
            timeout: Seconds to wait for a free connection before opening a temporary one
        """
        self.db_path = db_path
        self.pool_size = pool_size
        self.read_only = read_only
        self.timeout = timeout
        self._pool: Queue = Queue(maxsize=pool_size)
        self._lock = threading.Lock()
        self._created_connections = 0

        try:
            for _ in range(pool_size):
                self._pool.put(self._create_connection())
        except InternalError:
            self.close_all()
            raise

    def _create_connection(self) -> sqlite3.Connection:
        """Create a new database connection."""
        try:
            if self.read_only:
                uri = f"{Path(self.db_path).resolve().as_uri()}?mode=ro"
                conn = sqlite3.connect(uri, uri=True, check_same_thread=False)
            else:
                conn = sqlite3.connect(self.db_path, check_same_thread=False)
        except sqlite3.Error as e:
            logger.error(f"Could not open database {self.db_path}: {e}")
            raise InternalError(e)
        conn.row_factory = sqlite3.Row
        with self._lock:
            self._created_connections += 1
        return conn

    @property
    def created_connections(self) -> int:
        return self._created_connections

    @contextmanager
    def connection(self) -> Iterator[sqlite3.Connection]:
        """
        Get a connection from the pool.

        Yields:
            sqlite3.Connection: Database connection
        """
        try:
            conn = self._pool.get(timeout=self.timeout)
        except Empty:
            logger.warning("Connection pool exhausted, opening a temporary connection")
            conn = self._create_connection()

        try:
            yield conn
        finally:
            try:
                self._pool.put_nowait(conn)
            except Full:
                conn.close()

    def close_all(self):
        """Close all connections in the pool."""
        while True:
            try:
                conn = self._pool.get_nowait()
            except Empty:
                break
            conn.close()
