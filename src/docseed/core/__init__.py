"""Core types, configuration and exceptions for docseed."""

from .config import Config
from .exceptions import (
    DatabaseError,
    DirectoryNotFoundError,
    DocSeedError,
    DocumentError,
    DocumentNotFoundError,
)
from .types import DocumentInfo, DocumentMeta, DocumentRecord, SeedResult

__all__ = [
    "Config",
    "DocSeedError",
    "DatabaseError",
    "DirectoryNotFoundError",
    "DocumentError",
    "DocumentNotFoundError",
    "DocumentMeta",
    "DocumentInfo",
    "DocumentRecord",
    "SeedResult",
]
