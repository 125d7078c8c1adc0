"""Application composition root.

Example:
    from docseed.app import create_application
    from docseed.core.config import Config

    with create_application(Config.from_env()) as app:
        info = app.get_document_by_slug("getting-started")
"""

from __future__ import annotations

from loguru import logger

from ..core.config import Config
from ..services.documents import DocumentService
from ..services.seeding import SeedingService
from ..sources.filesystem import FileSystemSource
from ..sources.locator import resolve_paths
from ..store.database import Database
from ..store.documents import DocumentRepository
from .application import Application


def create_application(config: Config | None = None) -> Application:
    """Create an Application with all dependencies wired.

    Resolves the documents directory and store path but does not open
    the store; that happens on the first query or on Application.open().

    Args:
        config: Application configuration (default: Config()).

    Returns:
        Configured Application.

    Raises:
        DirectoryNotFoundError: If no documents directory can be found.
    """
    config = config or Config()
    docs_dir, db_path = resolve_paths(config)
    logger.debug(f"Creating application: docs_dir={docs_dir}, db_path={db_path}")

    db = Database(db_path)
    document_repo = DocumentRepository(db)
    source = FileSystemSource(docs_dir, extension=config.extension, encoding=config.encoding)
    seeding = SeedingService(document_repo, source)
    documents = DocumentService(db, document_repo, seeding)

    return Application(
        db=db,
        document_repo=document_repo,
        documents=documents,
        seeding=seeding,
        config=config,
        docs_dir=docs_dir,
    )
