"""Command-line interface for docseed."""

from .main import main

__all__ = ["main"]
