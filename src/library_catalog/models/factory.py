"""Validating constructors for catalog records.

These are the only supported way to build a record from user or file
input. Pydantic's ``ValidationError`` is translated into
``InvalidRecordError`` whose message is the first failing rule, worded for
display.
"""

from pydantic import ValidationError

from ..errors import InvalidRecordError
from .record import BookRecord, PeriodicalRecord


def _first_error_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    cause = error.get("ctx", {}).get("error")
    if isinstance(cause, ValueError):
        return str(cause)
    field = ".".join(str(part) for part in error["loc"])
    return f"{field}: {error['msg']}"


def create_book(
    isbn: str,
    title: str,
    author: str,
    page_count: int,
    available: bool = True,
) -> BookRecord:
    """
    Build a validated book record.

    Raises:
        InvalidRecordError: If any field breaks a book rule
    """
    try:
        return BookRecord(
            id=isbn,
            title=title,
            author=author,
            page_count=page_count,
            available=available,
        )
    except ValidationError as e:
        raise InvalidRecordError(_first_error_message(e)) from e


def create_periodical(
    issn: str,
    title: str,
    issue_number: int,
    available: bool = True,
) -> PeriodicalRecord:
    """
    Build a validated periodical record.

    Raises:
        InvalidRecordError: If any field breaks a periodical rule
    """
    try:
        return PeriodicalRecord(
            id=issn,
            title=title,
            issue_number=issue_number,
            available=available,
        )
    except ValidationError as e:
        raise InvalidRecordError(_first_error_message(e)) from e
