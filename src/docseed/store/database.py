"""SQLite database connection manager for docseed."""

import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator

from loguru import logger

from ..core.exceptions import DatabaseError
from .schema import get_schema


class Database:
    """SQLite database connection manager."""

    def __init__(self, path: Path):
        """Initialize database with path.

        Args:
            path: Path to the SQLite database file.
        """
        self.path = path
        self._connection: sqlite3.Connection | None = None

    @property
    def is_connected(self) -> bool:
        """Whether a connection is currently open."""
        return self._connection is not None

    def connect(self) -> None:
        """Open the database file and ensure the schema exists.

        Calling connect on an open database does nothing.
        """
        if self._connection is not None:
            return

        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self._connection = sqlite3.connect(str(self.path))
            self._connection.row_factory = sqlite3.Row
            self._init_schema()
        except Exception as e:
            if self._connection is not None:
                self._connection.close()
                self._connection = None
            raise DatabaseError(f"Failed to connect to database: {e}") from e

        logger.info(f"Opened document store: {self.path}")

    def close(self) -> None:
        """Close database connection."""
        if self._connection:
            try:
                self._connection.close()
            except Exception as e:
                raise DatabaseError(f"Failed to close database: {e}") from e
            finally:
                self._connection = None
            logger.debug(f"Closed document store: {self.path}")

    @contextmanager
    def transaction(self) -> Iterator[sqlite3.Cursor]:
        """Context manager for database transactions.

        Yields:
            A cursor for executing SQL statements.

        Raises:
            DatabaseError: If connection is not available or transaction fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        cursor = self._connection.cursor()
        try:
            yield cursor
            self._connection.commit()
        except Exception as e:
            self._connection.rollback()
            raise DatabaseError(f"Transaction failed: {e}") from e
        finally:
            cursor.close()

    def execute(self, sql: str, params: tuple = ()) -> sqlite3.Cursor:
        """Execute a SQL query.

        Args:
            sql: SQL statement to execute.
            params: Parameters for the SQL statement.

        Returns:
            A cursor with the query results.

        Raises:
            DatabaseError: If connection is not available or query fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        try:
            return self._connection.execute(sql, params)
        except Exception as e:
            raise DatabaseError(f"Query execution failed: {e}") from e

    def executescript(self, sql: str) -> None:
        """Execute multiple SQL statements.

        Raises:
            DatabaseError: If connection is not available or script fails.
        """
        if not self._connection:
            raise DatabaseError("Database not connected")

        try:
            self._connection.executescript(sql)
        except Exception as e:
            raise DatabaseError(f"Script execution failed: {e}") from e

    def _init_schema(self) -> None:
        """Initialize database schema."""
        self.executescript(get_schema())
