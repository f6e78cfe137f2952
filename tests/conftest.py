"""Shared fixtures for the library catalog tests.

- Sample records covering both kinds and the ids used in search scenarios
- Stores backed by a per-test temporary catalog file
- Configuration reset so tests never share cached settings
"""

from collections.abc import Generator
from pathlib import Path

import pytest

from library_catalog.config import reset_config
from library_catalog.models import BookRecord, PeriodicalRecord, create_book, create_periodical
from library_catalog.storage import CatalogStore


@pytest.fixture
def effective_java() -> BookRecord:
    return create_book("978-0134685991", "Effective Java", "Joshua Bloch", 416)


@pytest.fixture
def design_patterns() -> BookRecord:
    return create_book("978-0596009205", "Head First Design Patterns", "Eric Freeman", 694)


@pytest.fixture
def java_magazine() -> PeriodicalRecord:
    return create_periodical("1234-5678", "Java Magazine", 45)


@pytest.fixture
def sample_records(effective_java, design_patterns, java_magazine) -> list:
    """The demo catalog: two books then one periodical."""
    return [effective_java, design_patterns, java_magazine]


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """Catalog file inside a not-yet-existing sub-directory."""
    return tmp_path / "data" / "library.txt"


@pytest.fixture
def store(catalog_path: Path, sample_records) -> CatalogStore:
    """A store holding the demo catalog, not yet saved."""
    catalog = CatalogStore(catalog_path)
    for record in sample_records:
        catalog.add(record)
    return catalog


@pytest.fixture(autouse=True)
def clean_config() -> Generator[None, None, None]:
    reset_config()
    yield
    reset_config()
