"""Type definitions for docseed."""

from dataclasses import dataclass, field
from typing import Any


@dataclass
class DocumentMeta:
    """Listing view of a stored document (everything but the body)."""

    slug: str
    id: str = ""
    title: str = ""
    description: str = ""
    date: str = ""
    category: str = ""
    category_label: str = ""
    points: list[str] = field(default_factory=list)
    contacts: list[str] = field(default_factory=list)
    tables: Any = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Render with the front-matter key names used by the source files."""
        return {
            "slug": self.slug,
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "date": self.date,
            "category": self.category,
            "categoryLabel": self.category_label,
            "points": self.points,
            "contacts": self.contacts,
            "tables": self.tables,
        }


@dataclass
class DocumentInfo:
    """A single document: metadata plus raw markdown body."""

    meta: DocumentMeta
    content: str

    def to_dict(self) -> dict[str, Any]:
        return {"meta": self.meta.to_dict(), "content": self.content}


@dataclass
class DocumentRecord:
    """A fully populated ``documents`` row, ready to insert.

    Structured fields (``points``, ``contacts``, ``tables``) are already
    serialized to text.
    """

    slug: str
    id: str
    title: str
    description: str
    date: str
    category: str
    category_label: str
    points: str
    contacts: str
    tables: str
    content: str
    sort: int

    def as_params(self) -> tuple:
        """Return values in ``documents`` column order."""
        return (
            self.slug,
            self.id,
            self.title,
            self.description,
            self.date,
            self.category,
            self.category_label,
            self.points,
            self.contacts,
            self.tables,
            self.content,
            self.sort,
        )


@dataclass
class SeedResult:
    """Outcome of a seed pass."""

    documents_written: int
    source_dir: str
    elapsed: float = 0.0
