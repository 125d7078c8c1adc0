"""Data access layer for docseed.

- Database: SQLite connection and transaction management
- DocumentRepository: typed access to the ``documents`` table

Example:
    from docseed.store import Database, DocumentRepository

    db = Database(Path("data/documents.sqlite"))
    db.connect()
    documents = DocumentRepository(db)
"""

from .database import Database
from .documents import DocumentRepository
from .schema import DOCUMENT_COLUMNS, get_schema

__all__ = [
    "Database",
    "DocumentRepository",
    "DOCUMENT_COLUMNS",
    "get_schema",
]
