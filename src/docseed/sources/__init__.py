"""Document sources: directory location, scanning and front-matter parsing."""

from .filesystem import FileSystemSource, SourceDocument, slug_for
from .frontmatter import FrontmatterResult, parse_frontmatter
from .locator import (
    default_candidates,
    resolve_documents_directory,
    resolve_paths,
    resolve_store_path,
)

__all__ = [
    "FileSystemSource",
    "SourceDocument",
    "slug_for",
    "FrontmatterResult",
    "parse_frontmatter",
    "default_candidates",
    "resolve_documents_directory",
    "resolve_paths",
    "resolve_store_path",
]
