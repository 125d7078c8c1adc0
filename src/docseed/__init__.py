"""docseed - front-matter markdown documents cached in SQLite.

Example:
    from docseed import create_application

    with create_application() as app:
        for meta in app.get_all_documents():
            print(meta.slug, meta.title)
"""

from .app import Application, create_application
from .core import (
    Config,
    DatabaseError,
    DirectoryNotFoundError,
    DocSeedError,
    DocumentInfo,
    DocumentMeta,
    DocumentNotFoundError,
)

__version__ = "0.1.0"

__all__ = [
    "Application",
    "create_application",
    "Config",
    "DocSeedError",
    "DatabaseError",
    "DirectoryNotFoundError",
    "DocumentNotFoundError",
    "DocumentMeta",
    "DocumentInfo",
]
