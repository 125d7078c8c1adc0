"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from docseed.app import Application, create_application
from docseed.core.config import Config
from docseed.store.database import Database
from docseed.store.documents import DocumentRepository


GUIDE_DOC = """\
---
id: doc-007
title: Getting Started
description: First steps
date: 2024-01-15
category: guides
categoryLabel: Guides
points:
  - Install the package
  - Run the seeder
contacts:
  - docs@example.com
tables:
  - name: versions
    rows:
      - [1, "alpha"]
      - [2, "beta"]
---
# Getting Started

Welcome.
"""

RELEASE_DOC = """\
---
title: Release notes
category: releases
---
Release body.
"""

PLAIN_DOC = "# Plain\n\nNo front matter here.\n"


def write_doc(docs_dir: Path, slug: str, text: str) -> Path:
    """Write a markdown document into docs_dir."""
    path = docs_dir / f"{slug}.md"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """Provide a site root that will hold docs/ and data/."""
    site = tmp_path / "site"
    site.mkdir()
    return site


@pytest.fixture
def docs_dir(site_dir: Path) -> Path:
    """Provide a documents directory with three sample documents."""
    docs = site_dir / "docs"
    docs.mkdir()
    write_doc(docs, "guide-1", GUIDE_DOC)
    write_doc(docs, "release-12", RELEASE_DOC)
    write_doc(docs, "intro", PLAIN_DOC)
    (docs / "notes.txt").write_text("not markdown", encoding="utf-8")
    return docs


@pytest.fixture
def config(docs_dir: Path) -> Config:
    """Provide a Config pinned to the sample documents directory."""
    return Config(docs_dir=docs_dir)


@pytest.fixture
def app(config: Config) -> Application:
    """Provide an unopened Application over the sample documents."""
    application = create_application(config)
    yield application
    application.close()


@pytest.fixture
def test_db_path(tmp_path: Path) -> Path:
    """Provide a temporary database path for tests."""
    return tmp_path / "test.db"


@pytest.fixture
def db(test_db_path: Path) -> Database:
    """Provide a connected database instance."""
    database = Database(test_db_path)
    database.connect()
    yield database
    database.close()


@pytest.fixture
def document_repo(db: Database) -> DocumentRepository:
    """Provide a DocumentRepository instance."""
    return DocumentRepository(db)


@pytest.fixture
def add_document(docs_dir: Path):
    """Provide a helper that writes another document into docs_dir."""

    def _add(slug: str, text: str) -> Path:
        return write_doc(docs_dir, slug, text)

    return _add
