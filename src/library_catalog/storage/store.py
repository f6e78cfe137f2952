"""
In-memory catalog store with flat-file persistence.

The store keeps records in insertion order plus an index by id, which is
what makes ids unique across the catalog. It is an ordinary object: build
one per catalog file and pass it to whatever needs it.

Persistence goes through the line codec. ``load`` reads the whole file and
replaces the store contents; ``save`` rewrites the whole file by writing a
sibling temporary file and moving it over the target, so an interrupted
save leaves the previous file intact.
"""

import logging
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

from ..errors import DuplicateRecordError, PersistenceError, RecordNotFoundError
from ..models import CatalogRecord, RecordKind, create_book, create_periodical
from ..search import Matcher
from .codec import decode_lines, encode

logger = logging.getLogger(__name__)


class CatalogStore:
    """
    Ordered, id-indexed collection of catalog records.

    Args:
        path: Catalog file used by ``load`` and ``save``. A store without a
            path is memory-only and refuses to persist.
    """

    def __init__(self, path: Path | str | None = None):
        self.path = Path(path) if path is not None else None
        self._records: list[CatalogRecord] = []
        self._by_id: dict[str, CatalogRecord] = {}

    # =========================================================================
    # COLLECTION PROTOCOL
    # =========================================================================

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[CatalogRecord]:
        return iter(list(self._records))

    def __contains__(self, record_id: object) -> bool:
        return record_id in self._by_id

    @property
    def records(self) -> list[CatalogRecord]:
        """Snapshot of all records in insertion order."""
        return list(self._records)

    # =========================================================================
    # WRITE OPERATIONS
    # =========================================================================

    def add(self, record: CatalogRecord) -> CatalogRecord:
        """
        Insert a record.

        Raises:
            DuplicateRecordError: If a record with the same id exists
        """
        if record.id in self._by_id:
            logger.error("Error adding %s: id %s already exists", record.kind.value, record.id)
            raise DuplicateRecordError(record.id)

        self._records.append(record)
        self._by_id[record.id] = record
        logger.info("Added %s: %s (%s)", record.kind.value.lower(), record.title, record.id)
        return record

    def add_book(self, isbn: str, title: str, author: str, page_count: int) -> CatalogRecord:
        """
        Validate and insert a new book.

        Raises:
            DuplicateRecordError: If the ISBN is already in the catalog
            InvalidRecordError: If any field is invalid
        """
        if isbn in self._by_id:
            raise DuplicateRecordError(isbn)
        return self.add(create_book(isbn, title, author, page_count))

    def add_periodical(self, issn: str, title: str, issue_number: int) -> CatalogRecord:
        """
        Validate and insert a new periodical issue.

        Raises:
            DuplicateRecordError: If the ISSN is already in the catalog
            InvalidRecordError: If any field is invalid
        """
        if issn in self._by_id:
            raise DuplicateRecordError(issn)
        return self.add(create_periodical(issn, title, issue_number))

    def remove(self, record_id: str) -> CatalogRecord:
        """Remove and return the record with this id."""
        record = self.get(record_id)
        self._records.remove(record)
        del self._by_id[record_id]
        logger.info("Removed %s: %s", record.kind.value.lower(), record_id)
        return record

    def set_available(self, record_id: str, available: bool) -> CatalogRecord:
        record = self.get(record_id)
        record.available = available
        return record

    def clear(self) -> None:
        self._records.clear()
        self._by_id.clear()

    # =========================================================================
    # READ OPERATIONS
    # =========================================================================

    def get(self, record_id: str) -> CatalogRecord:
        """
        Look up a record by exact id.

        Raises:
            RecordNotFoundError: If no record has this id
        """
        try:
            return self._by_id[record_id]
        except KeyError:
            raise RecordNotFoundError(record_id) from None

    def search(self, matcher: Matcher, query: str | None) -> list[CatalogRecord]:
        """Run a matcher over every record in the catalog."""
        logger.info("Searching with query: %s", query)
        return matcher(self.records, query)

    def available_records(self) -> list[CatalogRecord]:
        return [record for record in self._records if record.available]

    def stats(self) -> dict[str, int]:
        """Counts by kind and availability."""
        books = sum(1 for record in self._records if record.kind is RecordKind.BOOK)
        return {
            "total": len(self._records),
            "books": books,
            "periodicals": len(self._records) - books,
            "available": len(self.available_records()),
        }

    # =========================================================================
    # PERSISTENCE
    # =========================================================================

    def _require_path(self) -> Path:
        if self.path is None:
            raise PersistenceError("This catalog has no data file configured")
        return self.path

    def load(self) -> int:
        """
        Replace the store contents with the records in the data file.

        A missing file means an empty catalog. Lines that fail to decode,
        or repeat an id seen earlier in the file, are skipped.

        Returns:
            Number of records loaded

        Raises:
            PersistenceError: If the file exists but cannot be read
        """
        path = self._require_path()
        self.clear()

        if not path.exists():
            logger.info("Data file %s not found, starting with empty catalog", path)
            return 0

        try:
            with path.open(encoding="utf-8") as f:
                for record in decode_lines(f):
                    if record.id in self._by_id:
                        logger.warning("Skipping duplicate id %s in %s", record.id, path)
                        continue
                    self._records.append(record)
                    self._by_id[record.id] = record
        except OSError as e:
            logger.error("Error loading from file %s: %s", path, e)
            raise PersistenceError(f"Failed to load data from {path}") from e

        logger.info("Loaded %d records from %s", len(self._records), path)
        return len(self._records)

    def save(self) -> None:
        """
        Rewrite the data file with every record, one line each.

        Raises:
            PersistenceError: If the file cannot be written
        """
        path = self._require_path()
        tmp_name = None
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=path.parent,
                prefix=f".{path.name}.",
                suffix=".tmp",
                delete=False,
            ) as f:
                tmp_name = f.name
                for record in self._records:
                    f.write(encode(record) + "\n")
            os.replace(tmp_name, path)
        except OSError as e:
            logger.error("Error saving to file %s: %s", path, e)
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise PersistenceError(f"Failed to save data to {path}") from e

        logger.info("Saved %d records to %s", len(self._records), path)
