"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool so that concurrent request threads
can share a fixed set of connections. A semaphore in front of the pool
bounds how long a request may wait for a free connection.
"""

import threading
from contextlib import contextmanager

import psycopg2
from psycopg2 import pool

from config import Settings
from utils.logger import get_logger

logger = get_logger(__name__)


class DatabaseUnavailableError(Exception):
    """No pooled connection became free within the configured wait."""


class Database:
    """Explicitly constructed database handle shared by the repositories."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._pool: pool.ThreadedConnectionPool | None = None
        self._slots = threading.BoundedSemaphore(settings.pool_max)
        self._lock = threading.Lock()

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def init_pool(self) -> None:
        """
        Initialize the database connection pool.

        No connection is opened up front, so the service can start before
        the database itself has been created. Connections are opened on
        demand and kept idle in the pool afterwards, up to ``pool_max``.
        """
        with self._lock:
            if self._pool is not None:
                return
            self._pool = pool.ThreadedConnectionPool(
                0, self.settings.pool_max, **self.settings.dsn()
            )
            # putconn() only keeps idle connections while fewer than minconn are pooled.
            self._pool.minconn = self.settings.pool_max
        logger.info(
            f"Database connection pool initialized "
            f"(max={self.settings.pool_max}, wait={self.settings.pool_timeout}s)."
        )

    def get_connection(self):
        """
        Get a connection from the pool.

        Returns:
            A psycopg2 connection object.

        Raises:
            DatabaseUnavailableError: If no connection frees up in time.
            psycopg2.OperationalError: If the database is unreachable.
        """
        if self._pool is None:
            self.init_pool()
        if not self._slots.acquire(timeout=self.settings.pool_timeout):
            logger.warning("Timed out waiting for a pooled database connection.")
            raise DatabaseUnavailableError(
                f"Nenhuma conexão disponível após {self.settings.pool_timeout}s"
            )
        try:
            return self._pool.getconn()
        except Exception:
            self._slots.release()
            raise

    def release_connection(self, conn) -> None:
        """
        Return a connection back to the pool.

        Args:
            conn: The psycopg2 connection to release.
        """
        try:
            if self._pool is not None:
                # Broken connections are discarded instead of reused.
                self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            self._slots.release()

    @contextmanager
    def maintenance_connection(self):
        """
        Yield an autocommit connection to the maintenance database.

        Used for statements that cannot run inside a transaction or inside
        the target database, such as CREATE DATABASE. Not pooled.
        """
        conn = psycopg2.connect(**self.settings.dsn(self.settings.maintenance_database))
        conn.autocommit = True
        try:
            yield conn
        finally:
            conn.close()

    def close_pool(self) -> None:
        """Close all connections in the pool."""
        with self._lock:
            if self._pool is None:
                return
            self._pool.closeall()
            self._pool = None
        logger.info("Database connection pool closed.")
