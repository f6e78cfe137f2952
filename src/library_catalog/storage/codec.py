"""
Line codec for the catalog file.

Each record is stored on one line of ``|``-separated fields:

    Book|{isbn}|{title}|{author}|{pages}|{available}
    Periodical|{issn}|{title}|{issue}|{available}

Older catalog files used a shorter layout without the structured fields:

    {kind}|{id}|{title}|{available}

Such lines still load; the missing fields get LEGACY_* defaults. Older
files also tag periodicals as "Magazine", which is read as "Periodical".

A ``|`` or ``\\`` inside a text field is written with a backslash escape.
On read only those two sequences are unescaped. A backslash before any
other character is literal, so fields from files written before escaping
existed load unchanged.

Decoding is per line and stateless. A line that cannot be decoded yields
None (with a warning for anything that looked like a record) and never
affects the lines after it.
"""

import logging
import re
from collections.abc import Iterable, Iterator

from ..errors import InvalidRecordError
from ..models import (
    BookRecord,
    CatalogRecord,
    PeriodicalRecord,
    RecordKind,
    create_book,
    create_periodical,
)

logger = logging.getLogger(__name__)

SEPARATOR = "|"
ESCAPE = "\\"

LEGACY_AUTHOR = "Unknown Author"
LEGACY_PAGE_COUNT = 100
LEGACY_ISSUE_NUMBER = 1

MIN_FIELDS = 3
LEGACY_FIELDS = 4
BOOK_FIELDS = 6
PERIODICAL_FIELDS = 5

KIND_TAGS: dict[str, RecordKind] = {
    "Book": RecordKind.BOOK,
    "Periodical": RecordKind.PERIODICAL,
    "Magazine": RecordKind.PERIODICAL,
}

_INTEGER = re.compile(r"[+-]?[0-9]+")


class DecodeError(ValueError):
    """A single line could not be turned into a record."""


# =============================================================================
# FIELD HELPERS
# =============================================================================


def escape_field(value: str) -> str:
    return value.replace(ESCAPE, ESCAPE * 2).replace(SEPARATOR, ESCAPE + SEPARATOR)


def split_fields(line: str) -> list[str]:
    """
    Split a line on unescaped separators and unescape each field.

    Only ``\\|`` and ``\\\\`` are escape sequences. Any other backslash is
    kept as it is, so "C:\\Temp" from an unescaped file survives a load.
    Trailing empty fields are dropped, so "Book|1|Title|" has three fields.
    """
    fields: list[str] = []
    current: list[str] = []
    i = 0
    while i < len(line):
        char = line[i]
        following = line[i + 1 : i + 2]
        if char == ESCAPE and following in (ESCAPE, SEPARATOR):
            current.append(following)
            i += 2
            continue
        if char == SEPARATOR:
            fields.append("".join(current))
            current = []
        else:
            current.append(char)
        i += 1
    fields.append("".join(current))

    while fields and fields[-1] == "":
        fields.pop()
    return fields


def format_bool(value: bool) -> str:
    return "true" if value else "false"


def parse_bool(text: str) -> bool:
    """Only "true" (any case) is True; every other value reads as False."""
    return text.casefold() == "true"


def parse_int(text: str, label: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise DecodeError(f"{label} is not a whole number: {text!r}")
    return int(text)


# =============================================================================
# ENCODE
# =============================================================================


def encode(record: CatalogRecord) -> str:
    """Serialize a record to one catalog line (without newline)."""
    match record.kind:
        case RecordKind.BOOK:
            fields = [
                RecordKind.BOOK.value,
                escape_field(record.id),
                escape_field(record.title),
                escape_field(record.author),
                str(record.page_count),
                format_bool(record.available),
            ]
        case RecordKind.PERIODICAL:
            fields = [
                RecordKind.PERIODICAL.value,
                escape_field(record.id),
                escape_field(record.title),
                str(record.issue_number),
                format_bool(record.available),
            ]
        case _:
            raise ValueError(f"Cannot encode record of kind {record.kind!r}")
    return SEPARATOR.join(fields)


# =============================================================================
# DECODE
# =============================================================================


def _decode_book(fields: list[str]) -> BookRecord:
    isbn, title = fields[1], fields[2]
    if len(fields) >= BOOK_FIELDS:
        return create_book(
            isbn,
            title,
            fields[3],
            parse_int(fields[4], "Page count"),
            available=parse_bool(fields[5]),
        )
    if len(fields) <= LEGACY_FIELDS:
        available = parse_bool(fields[3]) if len(fields) == LEGACY_FIELDS else True
        return create_book(
            isbn, title, LEGACY_AUTHOR, LEGACY_PAGE_COUNT, available=available
        )
    raise DecodeError(f"Book line has {len(fields)} fields, expected 4 or {BOOK_FIELDS}")


def _decode_periodical(fields: list[str]) -> PeriodicalRecord:
    issn, title = fields[1], fields[2]
    if len(fields) >= PERIODICAL_FIELDS:
        return create_periodical(
            issn,
            title,
            parse_int(fields[3], "Issue number"),
            available=parse_bool(fields[4]),
        )
    available = parse_bool(fields[3]) if len(fields) == LEGACY_FIELDS else True
    return create_periodical(issn, title, LEGACY_ISSUE_NUMBER, available=available)


def decode(line: str) -> CatalogRecord | None:
    """
    Parse one catalog line.

    Returns:
        The record, or None when the line is blank, too short, of an
        unknown kind, or holds invalid values
    """
    line = line.rstrip("\r\n")
    fields = split_fields(line)
    if len(fields) < MIN_FIELDS:
        return None

    kind = KIND_TAGS.get(fields[0])
    if kind is None:
        logger.debug("Skipping line with unknown record kind: %s", fields[0])
        return None

    if len(fields) <= LEGACY_FIELDS:
        logger.warning("Loading %s with legacy format, using default values: %s", kind.value, line)

    try:
        if kind is RecordKind.BOOK:
            return _decode_book(fields)
        return _decode_periodical(fields)
    except (DecodeError, InvalidRecordError) as e:
        logger.warning("Failed to parse item: %s - Error: %s", line, e)
        return None


def decode_lines(lines: Iterable[str]) -> Iterator[CatalogRecord]:
    """Decode many lines, yielding only the ones that produce a record."""
    for line in lines:
        record = decode(line)
        if record is not None:
            yield record
