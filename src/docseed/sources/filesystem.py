"""Filesystem scan of the documents directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from loguru import logger

from .frontmatter import parse_frontmatter


@dataclass
class SourceDocument:
    """A parsed source file.

    Attributes:
        slug: File name with the extension stripped.
        path: Path to the file.
        metadata: Front-matter key/value map (empty if none).
        content: Body text following the front matter.
    """

    slug: str
    path: Path
    metadata: dict
    content: str


def slug_for(filename: str, extension: str = ".md") -> str:
    """Strip a trailing extension from a file name."""
    if extension and filename.endswith(extension):
        return filename[: -len(extension)]
    return filename


class FileSystemSource:
    """Reads every file with a given extension from one directory.

    The scan is not recursive. Files are yielded in name order.
    """

    def __init__(self, base_path: Path, extension: str = ".md", encoding: str = "utf-8"):
        self.base_path = base_path
        self.extension = extension
        self.encoding = encoding

    def list_files(self) -> list[Path]:
        """List matching files in the directory, sorted by name."""
        files = [
            entry
            for entry in self.base_path.iterdir()
            if entry.is_file() and entry.name.endswith(self.extension)
        ]
        return sorted(files, key=lambda p: p.name)

    def read(self, path: Path) -> SourceDocument:
        """Read and parse a single file."""
        raw = path.read_bytes().decode(self.encoding, errors="replace")
        parsed = parse_frontmatter(raw)
        slug = slug_for(path.name, self.extension)
        logger.debug(
            f"Read document: slug={slug!r}, frontmatter={parsed.has_frontmatter}, len={len(parsed.content)}"
        )
        return SourceDocument(slug=slug, path=path, metadata=parsed.data, content=parsed.content)

    def iter_documents(self) -> Iterator[SourceDocument]:
        """Yield a parsed SourceDocument for every matching file."""
        for path in self.list_files():
            yield self.read(path)
