import logging
from typing import List, Tuple

from library_catalog.library import CatalogService

logger = logging.getLogger(__name__)

SAMPLE_BOOKS: List[Tuple[str, str]] = [
    ("The Great Gatsby", "F. Scott Fitzgerald"),
    ("1984", "George Orwell"),
    ("To Kill a Mockingbird", "Harper Lee"),
    ("Moby Dick", "Herman Melville"),
    ("Dune", "Frank Herbert"),
    ("The Catcher in the Rye", "J.D. Salinger"),
    ("Pride and Prejudice", "Jane Austen"),
    ("The Hobbit", "J.R.R. Tolkien"),
    ("War and Peace", "Leo Tolstoy"),
    ("Brave New World", "Aldous Huxley"),
]

# Marked as borrowed after loading, for demonstration
SAMPLE_BORROWED: Tuple[str, ...] = ("1984", "Dune")


def load_sample_data(service: CatalogService) -> int:
    """Add the sample books through the public API. Returns how many were added."""
    added = 0
    for title, author in SAMPLE_BOOKS:
        if service.find(title) is not None:
            continue
        service.add(title, author)
        added += 1

    for title in SAMPLE_BORROWED:
        book = service.find(title)
        if book is not None and book.is_available:
            service.toggle_status(book.id)

    logger.info("Loaded %d sample books", added)
    return added
