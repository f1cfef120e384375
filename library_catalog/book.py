from __future__ import annotations

import uuid
from enum import Enum
from typing import Optional
from urllib.parse import quote

from library_catalog.config import settings
from library_catalog.history import EventLog

# Left unescaped in the cover text: unreserved characters plus !*'()
_URI_COMPONENT_SAFE = "-_.!~*'()"


class BookStatus(str, Enum):
    """Lending status of a book."""
    AVAILABLE = "Available"
    BORROWED = "Borrowed"

    def toggled(self) -> "BookStatus":
        if self is BookStatus.AVAILABLE:
            return BookStatus.BORROWED
        return BookStatus.AVAILABLE


def build_cover_ref(title: str, template: Optional[str] = None, max_words: Optional[int] = None) -> str:
    """Placeholder cover URL showing the first few words of the title."""
    template = template or settings.cover_url_template
    max_words = max_words if max_words is not None else settings.cover_title_words
    short_title = " ".join(title.split()[:max_words])
    return template.format(text=quote(short_title, safe=_URI_COMPONENT_SAFE))


class Book:
    """Represents a single book item in the catalog."""

    def __init__(self, title: str, author: str) -> None:
        self._id = f"id_{uuid.uuid4().hex}"
        self.title = title.strip()
        self.author = author.strip()
        self.status = BookStatus.AVAILABLE
        self.cover_ref = build_cover_ref(self.title)
        self._history = EventLog()
        self._history.append("Created")

    @property
    def id(self) -> str:
        return self._id

    @property
    def history(self) -> EventLog:
        return self._history

    @property
    def is_available(self) -> bool:
        return self.status is BookStatus.AVAILABLE

    def rename(self, title: str, author: str) -> None:
        """Change title and author in place. The caller must re-index the book."""
        self.title = title.strip()
        self.author = author.strip()
        self.cover_ref = build_cover_ref(self.title)
        self._history.append("Edited")

    def toggle_status(self) -> BookStatus:
        self.status = self.status.toggled()
        self._history.append(self.status.value)
        return self.status

    def __str__(self) -> str:  # pragma: no cover - string formatting trivial
        return f"{self.title} by {self.author} ({self.status.value})"

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"Book(id={self._id!r}, title={self.title!r})"
