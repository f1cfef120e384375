import logging
from typing import Any, Dict, List, Optional

from library_catalog.book import Book, BookStatus
from library_catalog.errors import DuplicateTitleError, NotFoundError
from library_catalog.index import CatalogIndex, normalize_title

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("title", "author")
STATUS_FILTERS = ("all", "available", "borrowed")


class CatalogService:
    """Manages the collection of books and their lending history.

    This is the only writer of the index. Every mutation keeps the index keyed
    by the book's current title and appends exactly one history entry.
    """

    def __init__(self, index: Optional[CatalogIndex] = None) -> None:
        self.index = index if index is not None else CatalogIndex()

    # ------------------------- Core operations ------------------------- #
    def add(self, title: str, author: str) -> Book:
        """Create a book and index it. Titles are unique regardless of case."""
        if self.index.search_exact(title.strip()) is not None:
            raise DuplicateTitleError(title.strip())

        book = Book(title=title, author=author)
        self.index.insert(book)
        logger.info("Added %r by %r (%s)", book.title, book.author, book.id)
        return book

    def edit(self, book_id: str, new_title: str, new_author: str) -> Book:
        """Change title and author of an existing book and re-index it under the new title."""
        book = self.get(book_id)
        new_title = new_title.strip()

        title_changed = normalize_title(new_title) != normalize_title(book.title)
        if title_changed and self.index.search_exact(new_title) is not None:
            raise DuplicateTitleError(new_title)

        # The index key is derived from the title, so the book has to leave the
        # tree before the title changes and come back after.
        old_title = book.title
        self.index.delete(old_title)
        book.rename(new_title, new_author)
        self.index.insert(book)
        logger.info("Edited %s: %r -> %r", book.id, old_title, book.title)
        return book

    def toggle_status(self, book_id: str) -> Book:
        """Flip Available <-> Borrowed and record the new status in the history."""
        book = self.get(book_id)
        status = book.toggle_status()
        logger.info("Status of %r is now %s", book.title, status.value)
        return book

    def delete(self, title: str) -> Optional[Book]:
        """Remove the book with this title. Returns it, or None when nothing matched."""
        book = self.index.search_exact(title)
        if book is None:
            logger.debug("Delete ignored, no book titled %r", title)
            return None
        self.index.delete(title)
        logger.info("Deleted %r (%s)", book.title, book.id)
        return book

    # ------------------------- Queries ------------------------- #
    def find(self, title: str) -> Optional[Book]:
        return self.index.search_exact(title)

    def get(self, book_id: str) -> Book:
        book = self.index.search_by_id(book_id)
        if book is None:
            raise NotFoundError(book_id)
        return book

    def all_sorted(self) -> List[Book]:
        return self.index.all_sorted()

    def search_by_author(self, text: str) -> List[Book]:
        return self.index.search_by_author(text)

    def count(self) -> int:
        return self.index.count()

    def list_filtered(self, search_text: str = "", search_field: str = "title",
                      status_filter: str = "all") -> List[Book]:
        """Books to display for a search box, search field and status filter.

        Title search is "contains", not the index's exact match, so it filters
        the sorted list. Author search uses the index traversal. Both keep title
        order. Nothing is mutated.
        """
        field = search_field.lower()
        wanted = status_filter.lower()
        if field not in SEARCH_FIELDS:
            raise ValueError(f"Unknown search field: {search_field}. Use title or author.")
        if wanted not in STATUS_FILTERS:
            raise ValueError(f"Unknown status filter: {status_filter}. Use all, available or borrowed.")

        query = search_text.strip()
        if not query:
            books = self.index.all_sorted()
        elif field == "title":
            needle = query.casefold()
            books = [b for b in self.index.all_sorted() if needle in b.title.casefold()]
        else:
            books = self.index.search_by_author(query)

        if wanted != "all":
            books = [b for b in books if b.status.value.lower() == wanted]
        return books

    def statistics(self) -> Dict[str, Any]:
        """Dashboard counts: total, available and borrowed books."""
        books = self.index.all_sorted()
        available = sum(1 for b in books if b.status is BookStatus.AVAILABLE)
        return {
            "total_books": len(books),
            "available": available,
            "borrowed": len(books) - available,
        }
