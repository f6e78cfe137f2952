"""Exception hierarchy for the library catalog.

Validation and duplicate errors carry a message meant to be shown to the
user as-is. Decode problems while loading a catalog file are not errors:
the offending line is logged and skipped.
"""


class CatalogError(Exception):
    """Base exception for catalog operations."""


class InvalidRecordError(CatalogError):
    """Raised when a candidate record violates a field rule."""


class DuplicateRecordError(CatalogError):
    """Raised when adding a record whose id is already in the catalog."""

    def __init__(self, record_id: str):
        super().__init__(f"A record with id '{record_id}' already exists")
        self.record_id = record_id


class RecordNotFoundError(CatalogError):
    """Raised when no record has the requested id."""

    def __init__(self, record_id: str):
        super().__init__(f"No record found with id '{record_id}'")
        self.record_id = record_id


class PersistenceError(CatalogError):
    """Raised when the catalog file cannot be read or written."""
