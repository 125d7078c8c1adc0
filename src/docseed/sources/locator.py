"""Locate the source documents directory and the store file.

The documents directory is resolved by probing an ordered list of
candidates relative to the working directory and to this package's
installed location. The first existing directory wins.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable

from loguru import logger

from ..core.config import Config
from ..core.exceptions import DirectoryNotFoundError

DOCS_DIRNAME = "docs"
DATA_DIRNAME = "data"

# How many levels above the module directory to probe.
_MAX_MODULE_DEPTH = 3


def default_candidates(cwd: Path | None = None, module_dir: Path | None = None) -> list[Path]:
    """Build the ordered list of candidate documents directories.

    Args:
        cwd: Working directory to probe from (default: process cwd).
        module_dir: Directory to treat as this module's location.

    Returns:
        Candidate paths, in probe order.
    """
    cwd = cwd if cwd is not None else Path.cwd()
    module_dir = module_dir if module_dir is not None else Path(__file__).resolve().parent

    candidates = [cwd / DOCS_DIRNAME, cwd.parent / DOCS_DIRNAME]
    base = module_dir
    for _ in range(_MAX_MODULE_DEPTH + 1):
        candidates.append(base / DOCS_DIRNAME)
        base = base.parent
    return candidates


def resolve_documents_directory(candidates: Iterable[Path] | None = None) -> Path:
    """Return the first candidate that is an existing directory.

    Args:
        candidates: Paths to probe in order (default: default_candidates()).

    Returns:
        Path to the documents directory.

    Raises:
        DirectoryNotFoundError: If no candidate exists.
    """
    probed = list(candidates) if candidates is not None else default_candidates()
    for candidate in probed:
        if candidate.is_dir():
            logger.debug(f"Resolved documents directory: {candidate}")
            return candidate

    raise DirectoryNotFoundError([str(p) for p in probed])


def resolve_store_path(docs_dir: Path, filename: str = "documents.sqlite") -> Path:
    """Derive the store file path from the documents directory.

    The store lives in a ``data`` directory beside ``docs_dir``.
    """
    return docs_dir.parent / DATA_DIRNAME / filename


def resolve_paths(config: Config) -> tuple[Path, Path]:
    """Resolve (docs_dir, db_path) for a configuration.

    An explicit ``config.docs_dir`` is the only candidate probed.

    Raises:
        DirectoryNotFoundError: If the documents directory cannot be found.
    """
    candidates = [config.docs_dir] if config.docs_dir is not None else None
    docs_dir = resolve_documents_directory(candidates)
    db_path = config.db_path or resolve_store_path(docs_dir, config.db_filename)
    return docs_dir, db_path
