from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

from library_catalog.book import Book
from library_catalog.history import Event


class EventView(BaseModel):
    model_config = ConfigDict(frozen=True)

    status: str
    timestamp: datetime

    @classmethod
    def from_event(cls, event: Event) -> "EventView":
        return cls(status=event.status, timestamp=event.timestamp)


class BookView(BaseModel):
    """Read-only snapshot of a book for rendering. History is newest first."""
    model_config = ConfigDict(frozen=True)

    id: str
    title: str
    author: str
    status: str
    cover_ref: str
    history: List[EventView] = []

    @classmethod
    def from_book(cls, book: Book) -> "BookView":
        return cls(
            id=book.id,
            title=book.title,
            author=book.author,
            status=book.status.value,
            cover_ref=book.cover_ref,
            history=[EventView.from_event(e) for e in book.history.entries_newest_first()],
        )


class StatsModel(BaseModel):
    model_config = ConfigDict(frozen=True)

    total_books: int
    available: int
    borrowed: int
