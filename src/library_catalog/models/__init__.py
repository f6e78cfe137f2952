"""
Library catalog models.

- BookRecord / PeriodicalRecord: the two record kinds, tagged by ``kind``
- CatalogRecord: discriminated union of both kinds
- create_book / create_periodical: validating constructors
"""

from .factory import create_book, create_periodical
from .record import BookRecord, CatalogRecord, PeriodicalRecord, RecordKind

__all__ = [
    "BookRecord",
    "CatalogRecord",
    "PeriodicalRecord",
    "RecordKind",
    "create_book",
    "create_periodical",
]
