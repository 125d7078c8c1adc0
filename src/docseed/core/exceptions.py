"""Custom exceptions for docseed."""


class DocSeedError(Exception):
    """Base exception for all docseed errors."""

    pass


class DatabaseError(DocSeedError):
    """Database operation failed."""

    pass


class DirectoryNotFoundError(DocSeedError):
    """No source documents directory could be located."""

    def __init__(self, candidates: list[str] | None = None):
        """Initialize exception with the probed candidate paths.

        Args:
            candidates: Paths that were checked, in probe order.
        """
        self.candidates = candidates or []
        message = "docs directory not found"
        if self.candidates:
            message += f" (searched: {', '.join(self.candidates)})"
        super().__init__(message)


class DocumentError(DocSeedError):
    """Document operation failed."""

    pass


class DocumentNotFoundError(DocumentError):
    """Document does not exist."""

    def __init__(self, slug: str):
        """Initialize exception with slug.

        Args:
            slug: Slug of the document that was not found.
        """
        self.slug = slug
        super().__init__(f"Document not found for slug: {slug}")
