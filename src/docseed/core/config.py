"""Configuration management for docseed."""

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Config:
    """Main application configuration.

    Leaving ``docs_dir`` unset makes the application probe the default
    candidate directories. Leaving ``db_path`` unset places the store in a
    ``data`` directory next to the documents directory.
    """

    docs_dir: Path | None = None
    db_path: Path | None = None
    extension: str = ".md"
    encoding: str = "utf-8"
    db_filename: str = "documents.sqlite"

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        config = cls()

        if docs_dir := os.environ.get("DOCSEED_DOCS_DIR"):
            config.docs_dir = Path(docs_dir)

        if path := os.environ.get("DOCSEED_DB_PATH"):
            config.db_path = Path(path)

        return config
