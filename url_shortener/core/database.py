"""Database module for URL Shortener Service.

This module handles SQLite database operations and provides
dependency injection for FastAPI endpoints. It holds both the link
store (``links``) and the append-only click log (``clicks``).
"""

import sqlite3
import logging
import threading
from contextlib import contextmanager, nullcontext
from typing import Iterator, Optional

from .config import settings
from .exceptions import AlreadyExists, NotFound, StoreUnavailable

logger = logging.getLogger(__name__)

MEMORY_DB = ":memory:"


class Database:
    """Database class for managing SQLite connections and operations."""

    def __init__(self, db_path: Optional[str] = None, timeout: Optional[float] = None):
        """Initialize database settings.

        Args:
            db_path: Path to SQLite database file. Use ":memory:" for in-memory database.
            timeout: Seconds to wait on a locked database before giving up.
        """
        if db_path:
            self.db_path = db_path
        else:
            self.db_path = settings.database_url
        self.timeout = timeout if timeout is not None else settings.database_timeout
        self._local = threading.local()
        self._connections: list[sqlite3.Connection] = []
        self._registry_lock = threading.Lock()
        # An in-memory database lives in a single connection, so every
        # thread shares it and takes turns under this lock.
        self._shared_lock = threading.RLock() if self.is_memory else None

    @property
    def is_memory(self) -> bool:
        return self.db_path == MEMORY_DB

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(
            self.db_path,
            timeout=self.timeout,
            check_same_thread=False,
            isolation_level=None,
        )
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON")
        if not self.is_memory:
            connection.execute("PRAGMA journal_mode = WAL")
        with self._registry_lock:
            self._connections.append(connection)
        return connection

    def _get_connection(self) -> sqlite3.Connection:
        """Create or return the database connection.

        For in-memory databases (":memory:"), one connection is shared by all threads.
        For file-based databases, each thread gets its own connection.

        Returns:
            SQLite connection.
        """
        try:
            if self.is_memory:
                with self._registry_lock:
                    if self._connections:
                        return self._connections[0]
                return self._connect()
            connection = getattr(self._local, "connection", None)
            if connection is None:
                connection = self._connect()
                self._local.connection = connection
            return connection
        except sqlite3.Error as e:
            logger.error(f"Could not open database {self.db_path}: {e}")
            raise StoreUnavailable("Link store is unavailable") from e

    def _guard(self):
        return self._shared_lock if self._shared_lock is not None else nullcontext()

    def close(self) -> None:
        """Close every connection opened by this instance."""
        with self._registry_lock:
            connections, self._connections = self._connections, []
        for connection in connections:
            connection.close()
        self._local = threading.local()

    def init_db(self) -> None:
        """Initialize database tables."""
        create_tables_sql = """
        CREATE TABLE IF NOT EXISTS links (
            code TEXT PRIMARY KEY,
            target_url TEXT NOT NULL,
            created_at TEXT NOT NULL
        );
        CREATE TABLE IF NOT EXISTS clicks (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            code TEXT NOT NULL REFERENCES links(code) ON DELETE CASCADE,
            occurred_at TEXT NOT NULL
        );
        CREATE INDEX IF NOT EXISTS idx_clicks_code_time ON clicks(code, occurred_at);
        CREATE INDEX IF NOT EXISTS idx_links_created_at ON links(created_at);
        """
        with self._guard():
            conn = self._get_connection()
            try:
                conn.executescript(create_tables_sql)
                logger.info("Database initialized successfully")
            except sqlite3.Error as e:
                logger.error(f"Database initialization failed: {e}")
                raise StoreUnavailable("Link store is unavailable") from e

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Connection]:
        """Run the enclosed statements in one all-or-nothing transaction.

        Integrity violations propagate unchanged so callers can map them;
        any other SQLite failure becomes StoreUnavailable.
        """
        with self._guard():
            conn = self._get_connection()
            try:
                conn.execute("BEGIN")
                yield conn
                conn.execute("COMMIT")
            except sqlite3.IntegrityError:
                self._rollback(conn)
                raise
            except sqlite3.Error as e:
                self._rollback(conn)
                logger.error(f"Transaction failed: {e}")
                raise StoreUnavailable("Link store is unavailable") from e
            except BaseException:
                self._rollback(conn)
                raise

    @staticmethod
    def _rollback(conn: sqlite3.Connection) -> None:
        if conn.in_transaction:
            conn.execute("ROLLBACK")

    def execute(
        self, query: str, params: tuple = (), fetch: bool = False
    ) -> Optional[list[dict]]:
        """Execute a single SQL statement.

        Args:
            query: SQL query string.
            params: Query parameters.
            fetch: Whether to fetch results.

        Returns:
            Query results if fetch=True, None otherwise.
        """
        with self._guard():
            conn = self._get_connection()
            try:
                cursor = conn.execute(query, params)
                if fetch:
                    return [dict(row) for row in cursor.fetchall()]
                return None
            except sqlite3.IntegrityError:
                raise
            except sqlite3.Error as e:
                logger.error(f"Query execution failed: {e}")
                raise StoreUnavailable("Link store is unavailable") from e

    def insert_link(self, code: str, target_url: str, created_at: str) -> dict:
        """Insert a link only if the code is not taken.

        The PRIMARY KEY on ``links.code`` makes this a single atomic
        check-and-insert.

        Args:
            code: The short code.
            target_url: The target URL.
            created_at: ISO-8601 creation timestamp.

        Returns:
            Created link record.

        Raises:
            AlreadyExists: The code is already present.
        """
        query = "INSERT INTO links (code, target_url, created_at) VALUES (?, ?, ?)"
        try:
            self.execute(query, (code, target_url, created_at))
        except sqlite3.IntegrityError as e:
            raise AlreadyExists(code) from e
        logger.info(f"Created short URL: {code}")
        return {"code": code, "target_url": target_url, "created_at": created_at}

    def get_link(self, code: str) -> Optional[dict]:
        """Get link record by short code.

        Args:
            code: The short code.

        Returns:
            Link record or None if not found.
        """
        query = "SELECT code, target_url, created_at FROM links WHERE code = ?"
        results = self.execute(query, (code,), fetch=True)
        return results[0] if results else None

    def link_exists(self, code: str) -> bool:
        """Check if a short code already exists."""
        query = "SELECT 1 FROM links WHERE code = ?"
        return bool(self.execute(query, (code,), fetch=True))

    def count_links(self) -> int:
        """Count all stored links."""
        results = self.execute("SELECT COUNT(*) AS total FROM links", fetch=True)
        return results[0]["total"]

    def insert_click(self, code: str, occurred_at: str) -> None:
        """Append one click event.

        Args:
            code: The short code that was resolved.
            occurred_at: ISO-8601 UTC timestamp of the resolution.

        Raises:
            NotFound: The link does not exist.
        """
        query = "INSERT INTO clicks (code, occurred_at) VALUES (?, ?)"
        try:
            self.execute(query, (code, occurred_at))
        except sqlite3.IntegrityError as e:
            raise NotFound(code) from e

    def get_clicks(self, code: str) -> list[dict]:
        """Get all click events for a code, oldest first."""
        query = "SELECT code, occurred_at FROM clicks WHERE code = ? ORDER BY occurred_at, id"
        return self.execute(query, (code,), fetch=True) or []

    def click_summary(
        self, code: str, since: str, until: str
    ) -> Optional[tuple[int, list[dict]]]:
        """Read the all-time total and per-day counts in one transaction.

        Args:
            code: The short code.
            since: Inclusive lower bound (ISO-8601 UTC) for the daily series.
            until: Exclusive upper bound (ISO-8601 UTC) for the daily series.

        Returns:
            ``(total, [{"day": "YYYY-MM-DD", "clicks": n}, ...])`` or None if
            the link does not exist.
        """
        with self.transaction() as conn:
            if conn.execute("SELECT 1 FROM links WHERE code = ?", (code,)).fetchone() is None:
                return None
            total = conn.execute(
                "SELECT COUNT(*) FROM clicks WHERE code = ?", (code,)
            ).fetchone()[0]
            rows = conn.execute(
                """
                SELECT substr(occurred_at, 1, 10) AS day, COUNT(*) AS clicks
                FROM clicks
                WHERE code = ? AND occurred_at >= ? AND occurred_at < ?
                GROUP BY day
                ORDER BY day ASC
                """,
                (code, since, until),
            ).fetchall()
        return total, [dict(row) for row in rows]


# Global database instance
db = Database()


def get_db() -> Database:
    """Get database instance for dependency injection.

    Returns:
        Database instance.
    """
    return db


def get_test_db() -> Database:
    """Get a fresh in-memory database for testing.

    Returns:
        In-memory Database instance.
    """
    test_db = Database(MEMORY_DB)
    test_db.init_db()
    return test_db
