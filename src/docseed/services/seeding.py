"""Seeding service: rebuild the document store from source files."""

from __future__ import annotations

import time

from loguru import logger

from ..core.types import DocumentRecord, SeedResult
from ..metadata.coercion import coerce_document
from ..sources.filesystem import FileSystemSource
from ..store.documents import DocumentRepository


class SeedingService:
    """Wipes and repopulates the ``documents`` table from a source directory.

    A seed pass parses every source file first and then swaps the whole
    row set inside one transaction, so readers never see a partial seed.
    Running it twice over unchanged files produces the same rows.

    Example:
        seeder = SeedingService(DocumentRepository(db), FileSystemSource(docs_dir))
        result = seeder.seed_from_source()
        print(f"Seeded {result.documents_written} documents")
    """

    def __init__(self, document_repo: DocumentRepository, source: FileSystemSource):
        """Initialize SeedingService.

        Args:
            document_repo: Repository the rows are written to.
            source: Source of the markdown documents.
        """
        self._document_repo = document_repo
        self._source = source

    def build_records(self) -> list[DocumentRecord]:
        """Parse every source file into a DocumentRecord."""
        return [
            coerce_document(doc.metadata, doc.slug, doc.content)
            for doc in self._source.iter_documents()
        ]

    def seed_from_source(self) -> SeedResult:
        """Replace the store contents with the current source documents.

        Returns:
            SeedResult with the number of documents written.

        Raises:
            DatabaseError: If the transaction fails; the previous rows are kept.
        """
        start = time.perf_counter()
        logger.debug(f"Seeding documents from {self._source.base_path}")

        records = self.build_records()
        written = self._document_repo.replace_all(records)

        elapsed = time.perf_counter() - start
        logger.info(
            f"Seeded {written} documents from {self._source.base_path} in {elapsed * 1000:.1f}ms"
        )
        return SeedResult(
            documents_written=written,
            source_dir=str(self._source.base_path),
            elapsed=elapsed,
        )
