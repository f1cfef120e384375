from datetime import datetime

from library_catalog.history import Event, EventLog


def test_new_log_is_empty():
    log = EventLog()
    assert len(log) == 0
    assert log.entries_newest_first() == []
    assert log.latest is None


def test_entries_newest_first_reverses_storage_order():
    log = EventLog()
    for status in ("Created", "Borrowed", "Available", "Edited"):
        log.append(status)

    assert [e.status for e in log.entries_newest_first()] == ["Edited", "Available", "Borrowed", "Created"]
    assert [e.status for e in log] == ["Created", "Borrowed", "Available", "Edited"]
    assert log.latest.status == "Edited"


def test_append_stamps_current_time():
    before = datetime.now()
    event = EventLog().append("Created")
    after = datetime.now()

    assert isinstance(event, Event)
    assert before <= event.timestamp <= after


def test_entries_newest_first_does_not_expose_storage():
    log = EventLog()
    log.append("Created")

    entries = log.entries_newest_first()
    entries.clear()

    assert len(log) == 1
    assert log.entries_newest_first() is not log.entries_newest_first()


def test_event_to_dict():
    event = Event(status="Borrowed", timestamp=datetime(2024, 5, 1, 12, 30))
    assert event.to_dict() == {"status": "Borrowed", "timestamp": "2024-05-01T12:30:00"}
