"""Application composition root and lifecycle management.

Example:
    from docseed.app import create_application

    with create_application() as app:
        slugs = app.get_all_slugs()
"""

from .application import Application
from .factory import create_application

__all__ = [
    "Application",
    "create_application",
]
