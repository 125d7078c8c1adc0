"""Document query service with seed-on-demand caching."""

from __future__ import annotations

from loguru import logger

from ..core.exceptions import DocumentNotFoundError
from ..core.types import DocumentInfo, DocumentMeta, SeedResult
from ..store.database import Database
from ..store.documents import DocumentRepository
from .seeding import SeedingService


class DocumentService:
    """Read access to the document store.

    The store is opened lazily on the first query. Opening it always
    triggers a full seed, so each application starts from the current
    source files. After that, a seed only runs again when the table is
    found empty; later edits to the sources are not picked up until then
    (or until reseed() is called).
    """

    def __init__(self, db: Database, document_repo: DocumentRepository, seeder: SeedingService):
        """Initialize DocumentService.

        Args:
            db: Database backing the store (may be unconnected).
            document_repo: Repository over the ``documents`` table.
            seeder: Seeding service used to (re)populate the table.
        """
        self._db = db
        self._document_repo = document_repo
        self._seeder = seeder

    def ensure_store(self) -> Database:
        """Open the store on first use, seeding it from the sources."""
        if not self._db.is_connected:
            self._db.connect()
            self._seeder.seed_from_source()
        return self._db

    def ensure_seeded(self) -> None:
        """Seed the store if it is open and empty."""
        if not self._db.is_connected:
            return
        if self._document_repo.count() == 0:
            logger.info("Document store is empty, reseeding")
            self._seeder.seed_from_source()

    def reseed(self) -> SeedResult:
        """Force a full seed pass."""
        if not self._db.is_connected:
            self._db.connect()
        return self._seeder.seed_from_source()

    def get_all_documents(self) -> list[DocumentMeta]:
        """List every document, highest sort key first."""
        self.ensure_store()
        self.ensure_seeded()
        return self._document_repo.list_meta()

    def get_document_by_slug(self, slug: str) -> DocumentInfo:
        """Get a single document with its body.

        Raises:
            DocumentNotFoundError: If no document has this slug.
        """
        self.ensure_store()
        self.ensure_seeded()
        document = self._document_repo.get(slug)
        if document is None:
            raise DocumentNotFoundError(slug)
        return document

    def get_all_slugs(self) -> list[str]:
        """List every stored slug."""
        self.ensure_store()
        self.ensure_seeded()
        return self._document_repo.list_slugs()
