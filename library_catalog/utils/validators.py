from typing import Optional


class TextValidator:
    """Input checks the CLI runs before calling into the catalog."""

    @staticmethod
    def is_non_empty(text: Optional[str]) -> bool:
        return text is not None and bool(text.strip())

    @staticmethod
    def validate_title(title: Optional[str]) -> bool:
        return TextValidator.is_non_empty(title)

    @staticmethod
    def validate_author(author: Optional[str]) -> bool:
        return TextValidator.is_non_empty(author)
