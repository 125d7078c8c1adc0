"""Tests for SeedingService."""

import pytest
from pathlib import Path

from docseed.core.exceptions import DatabaseError
from docseed.services.seeding import SeedingService
from docseed.sources.filesystem import FileSystemSource
from docseed.store import documents as documents_module
from docseed.store.documents import DocumentRepository


@pytest.fixture
def seeder(document_repo: DocumentRepository, docs_dir: Path) -> SeedingService:
    """Provide a SeedingService over the sample documents."""
    return SeedingService(document_repo, FileSystemSource(docs_dir))


def snapshot(document_repo: DocumentRepository) -> list:
    """Every row, fully materialized, in slug order."""
    return sorted(
        (document_repo.get(slug) for slug in document_repo.list_slugs()),
        key=lambda info: info.meta.slug,
    )


class TestSeedFromSource:
    """Tests for seed_from_source()."""

    def test_seeds_every_markdown_file(
        self, seeder: SeedingService, document_repo: DocumentRepository, docs_dir: Path
    ):
        result = seeder.seed_from_source()

        assert result.documents_written == 3
        assert result.source_dir == str(docs_dir)
        assert sorted(document_repo.list_slugs()) == ["guide-1", "intro", "release-12"]

    def test_maps_front_matter(self, seeder: SeedingService, document_repo: DocumentRepository):
        seeder.seed_from_source()

        info = document_repo.get("guide-1")

        assert info.meta.id == "doc-007"
        assert info.meta.title == "Getting Started"
        assert info.meta.description == "First steps"
        assert info.meta.date == "2024-01-15"
        assert info.meta.category == "guides"
        assert info.meta.category_label == "Guides"
        assert info.meta.points == ["Install the package", "Run the seeder"]
        assert info.meta.contacts == ["docs@example.com"]
        assert info.meta.tables == [
            {"name": "versions", "rows": [[1, "alpha"], [2, "beta"]]}
        ]
        assert info.content == "# Getting Started\n\nWelcome.\n"

    def test_document_without_front_matter(
        self, seeder: SeedingService, document_repo: DocumentRepository
    ):
        """A plain file seeds with every field defaulted and content verbatim."""
        seeder.seed_from_source()

        info = document_repo.get("intro")

        assert info.meta.id == ""
        assert info.meta.title == ""
        assert info.meta.description == ""
        assert info.meta.date == ""
        assert info.meta.category == ""
        assert info.meta.category_label == ""
        assert info.meta.points == []
        assert info.meta.contacts == []
        assert info.meta.tables == []
        assert info.content == "# Plain\n\nNo front matter here.\n"
        assert [m.slug for m in document_repo.list_meta()][-1] == "intro"

    def test_sort_keys(self, seeder: SeedingService, document_repo: DocumentRepository):
        """id digits win over slug digits; no digits means 0."""
        seeder.seed_from_source()

        assert [m.slug for m in document_repo.list_meta()] == ["release-12", "guide-1", "intro"]

    def test_seeding_twice_is_idempotent(
        self, seeder: SeedingService, document_repo: DocumentRepository
    ):
        seeder.seed_from_source()
        first = snapshot(document_repo)

        seeder.seed_from_source()
        second = snapshot(document_repo)

        assert first == second

    def test_reseed_drops_removed_files(
        self, seeder: SeedingService, document_repo: DocumentRepository, docs_dir: Path
    ):
        seeder.seed_from_source()
        (docs_dir / "intro.md").unlink()

        seeder.seed_from_source()

        assert "intro" not in document_repo.list_slugs()
        assert document_repo.count() == 2

    def test_malformed_document_does_not_abort(
        self,
        seeder: SeedingService,
        document_repo: DocumentRepository,
        add_document,
    ):
        """Invalid YAML or odd field types still produce a row."""
        add_document("broken-yaml", "---\ntitle: [unclosed\n---\nBody\n")
        add_document("odd-types", "---\ntitle: 42\npoints: not-a-list\n---\nBody\n")

        result = seeder.seed_from_source()

        assert result.documents_written == 5
        broken = document_repo.get("broken-yaml")
        assert broken.meta.title == ""
        assert broken.content.startswith("---\ntitle: [unclosed")
        odd = document_repo.get("odd-types")
        assert odd.meta.title == ""
        assert odd.meta.points == "not-a-list"

    def test_date_keyed_mapping_does_not_abort(
        self,
        seeder: SeedingService,
        document_repo: DocumentRepository,
        add_document,
    ):
        """Date keys inside a structured field are stored as ISO strings."""
        add_document("dated", "---\ntables:\n  2024-01-01: launch\n---\nBody\n")

        result = seeder.seed_from_source()

        assert result.documents_written == 4
        assert sorted(document_repo.list_slugs()) == ["dated", "guide-1", "intro", "release-12"]
        assert document_repo.get("dated").meta.tables == {"2024-01-01": "launch"}

    def test_empty_directory_clears_store(
        self, document_repo: DocumentRepository, docs_dir: Path, tmp_path: Path
    ):
        SeedingService(document_repo, FileSystemSource(docs_dir)).seed_from_source()
        empty = tmp_path / "empty"
        empty.mkdir()

        result = SeedingService(document_repo, FileSystemSource(empty)).seed_from_source()

        assert result.documents_written == 0
        assert document_repo.count() == 0

    def test_store_failure_keeps_previous_rows(
        self, seeder: SeedingService, document_repo: DocumentRepository, monkeypatch
    ):
        """A failed seed leaves the previous complete row set in place."""
        seeder.seed_from_source()
        before = snapshot(document_repo)
        monkeypatch.setattr(documents_module, "_INSERT_SQL", "INSERT INTO missing_table VALUES (?)")

        with pytest.raises(DatabaseError):
            seeder.seed_from_source()

        assert snapshot(document_repo) == before
