"""Service layer for docseed."""

from .documents import DocumentService
from .seeding import SeedingService

__all__ = [
    "DocumentService",
    "SeedingService",
]
