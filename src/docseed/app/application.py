"""Application container class.

Use create_application() from docseed.app to create a properly
configured instance.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from loguru import logger

if TYPE_CHECKING:
    from ..core.config import Config
    from ..core.types import DocumentInfo, DocumentMeta, SeedResult
    from ..services.documents import DocumentService
    from ..services.seeding import SeedingService
    from ..store.database import Database
    from ..store.documents import DocumentRepository


class Application:
    """Application container with wired services and lifecycle management.

    The store connection is opened on the first query (or by open()) and
    released by close(). Use it as a context manager to guarantee release:

        with create_application(Config()) as app:
            for meta in app.get_all_documents():
                print(meta.slug, meta.title)

    Attributes:
        documents: DocumentService serving the queries.
        seeding: SeedingService that rebuilds the store.
        docs_dir: Resolved source documents directory.
    """

    def __init__(
        self,
        db: "Database",
        document_repo: "DocumentRepository",
        documents: "DocumentService",
        seeding: "SeedingService",
        config: "Config",
        docs_dir: Path,
    ):
        """Initialize Application with wired services.

        This constructor is for internal use. Use create_application() instead.
        """
        self._db = db
        self._document_repo = document_repo
        self._config = config

        self.documents = documents
        self.seeding = seeding
        self.docs_dir = docs_dir

    @property
    def db(self) -> "Database":
        """Get database instance."""
        return self._db

    @property
    def document_repo(self) -> "DocumentRepository":
        """Get document repository."""
        return self._document_repo

    @property
    def config(self) -> "Config":
        """Get application configuration."""
        return self._config

    def open(self) -> "Application":
        """Open the store now instead of on the first query."""
        self.documents.ensure_store()
        return self

    def get_all_documents(self) -> list["DocumentMeta"]:
        return self.documents.get_all_documents()

    def get_document_by_slug(self, slug: str) -> "DocumentInfo":
        return self.documents.get_document_by_slug(slug)

    def get_all_slugs(self) -> list[str]:
        return self.documents.get_all_slugs()

    def reseed(self) -> "SeedResult":
        return self.documents.reseed()

    def close(self) -> None:
        """Clean shutdown of all resources."""
        self._db.close()
        logger.debug("Application closed")

    def __enter__(self) -> "Application":
        """Enter context."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Exit context and clean up resources."""
        self.close()
