"""
Catalog persistence.

- codec: one record per ``|``-separated line, current and legacy layouts
- store: the in-memory catalog and its load/save cycle
"""

from .codec import decode, decode_lines, encode
from .store import CatalogStore

__all__ = [
    "CatalogStore",
    "decode",
    "decode_lines",
    "encode",
]
