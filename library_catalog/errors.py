class CatalogError(Exception):
    """Base class for recoverable catalog errors."""
    pass


class DuplicateTitleError(CatalogError, ValueError):
    """Another book already holds this title (case-insensitive)."""

    def __init__(self, title: str) -> None:
        self.title = title
        super().__init__(f'A book with the title "{title}" already exists.')


class NotFoundError(CatalogError, LookupError):
    """No book matches the given id or title."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"Book {key} not found.")
