"""
Query matchers for the catalog.

Each matcher is a plain function ``(records, query) -> list`` with no state,
so callers pick one at call time (see ``get_matcher``). Matchers never raise
on odd input: an empty, blank or missing query simply matches nothing.

TITLE SEARCH: case-insensitive substring test with the untrimmed query.

ID SEARCH:
1. Exact: the trimmed query equals a record id, ignoring case. When any
   record matches exactly, only those are returned.
2. Partial: otherwise the digits of the query are compared with the digits
   of each id, so "0134-685" finds ISBN "978-0134685991". Queries with
   fewer than ``MIN_PARTIAL_DIGITS`` digits match nothing, since a short
   run like "12" would hit most ISBNs.
"""

import logging
import re
from collections.abc import Callable, Iterable

from .models import CatalogRecord

logger = logging.getLogger(__name__)

MIN_PARTIAL_DIGITS = 3

_NON_DIGITS = re.compile(r"[^0-9]")

Matcher = Callable[[Iterable[CatalogRecord], str | None], list[CatalogRecord]]


def _clean_query(query: str | None) -> str | None:
    if query is None:
        return None
    query = query.strip()
    return query or None


def digits_only(text: str) -> str:
    """Strip everything but the ASCII digits 0-9 from text."""
    return _NON_DIGITS.sub("", text)


def match_by_title(records: Iterable[CatalogRecord], query: str | None) -> list[CatalogRecord]:
    """
    Return records whose title contains the query, ignoring case.

    Blank queries match nothing. Otherwise the query is used as typed,
    surrounding whitespace included.
    """
    if _clean_query(query) is None:
        return []

    needle = query.lower()
    return [record for record in records if record.title and needle in record.title.lower()]


def match_by_id(records: Iterable[CatalogRecord], query: str | None) -> list[CatalogRecord]:
    """
    Return records whose id matches the query exactly, or by digits.

    Args:
        records: Records to search, in the order results should keep
        query: ISBN/ISSN or a fragment of at least three digits

    Returns:
        Exact matches if there are any, else partial digit matches
    """
    needle = _clean_query(query)
    if needle is None:
        return []

    # Materialize once, both phases walk the records
    candidates = [record for record in records if getattr(record, "id", None)]

    folded = needle.casefold()
    exact = [record for record in candidates if record.id.casefold() == folded]
    if exact:
        return exact

    query_digits = digits_only(needle)
    if len(query_digits) < MIN_PARTIAL_DIGITS:
        logger.debug("ID query %r has too few digits for partial matching", needle)
        return []

    return [record for record in candidates if query_digits in digits_only(record.id)]


MATCHERS: dict[str, Matcher] = {
    "title": match_by_title,
    "id": match_by_id,
}


def get_matcher(name: str) -> Matcher:
    """
    Look up a matcher by name.

    Raises:
        KeyError: If no matcher is registered under that name
    """
    try:
        return MATCHERS[name]
    except KeyError:
        raise KeyError(
            f"Unknown matcher '{name}'. Choose one of: {', '.join(sorted(MATCHERS))}"
        ) from None
