"""
Author name rules shared by the book model and the console prompts.

An author name is accepted when, once trimmed, it contains at least one
ASCII letter. Names made only of digits and separators ("123", "12-34",
"(1.2)") get a dedicated message so the user knows why the input was
refused.
"""

import re

NUMERIC_ONLY_PATTERN = re.compile(r"^[0-9\s\-.,()\[\]{}_+=|\\/@#$%^&*~`]+$")
LETTER_PATTERN = re.compile(r"[a-zA-Z]")


def is_purely_numeric(text: str | None) -> bool:
    """Return True when text holds only digits, whitespace and separators."""
    if text is None or not text.strip():
        return False
    return NUMERIC_ONLY_PATTERN.match(text.strip()) is not None


def is_valid_author(author: str | None) -> bool:
    if author is None or not author.strip():
        return False
    return LETTER_PATTERN.search(author.strip()) is not None


def author_error_message(author: str | None) -> str:
    """Explain why an author name was rejected."""
    if author is None or not author.strip():
        return "Author name cannot be empty"
    if is_purely_numeric(author):
        return (
            f"Author name cannot consist entirely of numbers and separators "
            f"(like '{author.strip()}'). Please enter a valid author name with "
            f"alphabetic characters."
        )
    return "Author name must contain at least some alphabetic characters"


def validate_author(author: str | None) -> str:
    """
    Return the author unchanged or raise ValueError with a specific message.

    Raises:
        ValueError: If the name is empty or has no alphabetic character
    """
    if not is_valid_author(author):
        raise ValueError(author_error_message(author))
    return author
