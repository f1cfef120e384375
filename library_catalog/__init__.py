"""Library Catalog - Core Application Package

This package contains the core application modules including:
- Borrow history log (history.py)
- Data models (book.py)
- Title-ordered index (index.py)
- Catalog management logic (library.py)
- Read-only display models (models.py)
- CLI interface (main.py)
"""

from library_catalog.book import Book, BookStatus
from library_catalog.errors import CatalogError, DuplicateTitleError, NotFoundError
from library_catalog.history import Event, EventLog
from library_catalog.index import CatalogIndex, normalize_title
from library_catalog.library import CatalogService

__all__ = [
    "Book",
    "BookStatus",
    "CatalogError",
    "CatalogIndex",
    "CatalogService",
    "DuplicateTitleError",
    "Event",
    "EventLog",
    "NotFoundError",
    "normalize_title",
]
