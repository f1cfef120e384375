from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Iterator, List, Optional


@dataclass(frozen=True)
class Event:
    """A single timestamped entry in a book's history."""
    status: str
    timestamp: datetime

    def to_dict(self) -> dict:
        return {"status": self.status, "timestamp": self.timestamp.isoformat()}


class EventLog:
    """Append-only history of status changes for one book.

    Entries are stored oldest first; `entries_newest_first` gives the display
    order. There is no API to remove or rewrite an entry.
    """

    def __init__(self) -> None:
        self._entries: List[Event] = []

    def append(self, status: str) -> Event:
        event = Event(status=status, timestamp=datetime.now())
        self._entries.append(event)
        return event

    def entries_newest_first(self) -> List[Event]:
        # New list on every call; callers may not mutate the log through it
        return list(reversed(self._entries))

    @property
    def latest(self) -> Optional[Event]:
        return self._entries[-1] if self._entries else None

    def __iter__(self) -> Iterator[Event]:
        return iter(list(self._entries))

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:  # pragma: no cover - debugging aid
        return f"EventLog(entries={len(self._entries)})"
