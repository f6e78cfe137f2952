"""
Library Catalog Package.

A catalog of books and periodicals with pluggable search and a flat-file
store.

Key Components:
- models: Pydantic record models and validating constructors
- search: title and ISBN/ISSN matchers
- storage: line codec and the catalog store
- categories: grouping of records for display
- config: settings with Pydantic v2
- cli: interactive console menu
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
