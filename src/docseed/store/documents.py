"""Document storage and retrieval for docseed."""

import sqlite3
from typing import Iterable

from loguru import logger

from ..core.types import DocumentInfo, DocumentMeta, DocumentRecord
from ..metadata.serialization import deserialize_field
from .database import Database
from .schema import DOCUMENT_COLUMNS

_META_COLUMNS = (
    "slug, id, title, description, date, category, categoryLabel, points, contacts, tables"
)

_INSERT_SQL = (
    f"INSERT OR REPLACE INTO documents ({', '.join(DOCUMENT_COLUMNS)}) "
    f"VALUES ({', '.join('?' for _ in DOCUMENT_COLUMNS)})"
)


class DocumentRepository:
    """Repository for the ``documents`` table."""

    def __init__(self, db: Database):
        """Initialize with database connection.

        Args:
            db: Database instance to use for operations.
        """
        self.db = db

    def replace_all(self, records: Iterable[DocumentRecord]) -> int:
        """Replace every row with the given records in one transaction.

        Either the whole new row set is committed or the old one is kept.

        Args:
            records: Records to insert.

        Returns:
            Number of records written.
        """
        params = [record.as_params() for record in records]

        with self.db.transaction() as cursor:
            cursor.execute("DELETE FROM documents")
            cursor.executemany(_INSERT_SQL, params)

        logger.debug(f"Replaced documents table: rows={len(params)}")
        return len(params)

    def count(self) -> int:
        """Count stored documents."""
        cursor = self.db.execute("SELECT COUNT(1) AS count FROM documents")
        return cursor.fetchone()["count"]

    def list_meta(self) -> list[DocumentMeta]:
        """List document metadata ordered by sort key, then slug, descending."""
        cursor = self.db.execute(
            f"""
            SELECT {_META_COLUMNS}
            FROM documents
            ORDER BY sort DESC, slug DESC
            """
        )
        return [self._row_to_meta(row) for row in cursor.fetchall()]

    def get(self, slug: str) -> DocumentInfo | None:
        """Retrieve a document by slug.

        Returns:
            DocumentInfo if found, None otherwise.
        """
        cursor = self.db.execute(
            f"""
            SELECT {_META_COLUMNS}, content
            FROM documents
            WHERE slug = ?
            """,
            (slug,),
        )
        row = cursor.fetchone()
        if row is None:
            return None
        return DocumentInfo(meta=self._row_to_meta(row), content=row["content"] or "")

    def list_slugs(self) -> list[str]:
        """List all slugs in store order."""
        cursor = self.db.execute("SELECT slug FROM documents")
        return [row["slug"] for row in cursor.fetchall()]

    def _row_to_meta(self, row: sqlite3.Row) -> DocumentMeta:
        """Convert a database row to DocumentMeta."""
        return DocumentMeta(
            slug=row["slug"],
            id=row["id"] or "",
            title=row["title"] or "",
            description=row["description"] or "",
            date=row["date"] or "",
            category=row["category"] or "",
            category_label=row["categoryLabel"] or "",
            points=deserialize_field(row["points"]),
            contacts=deserialize_field(row["contacts"]),
            tables=deserialize_field(row["tables"]),
        )
