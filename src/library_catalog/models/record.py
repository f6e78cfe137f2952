"""
Catalog record models.

A catalog holds two kinds of records: books (keyed by ISBN) and periodicals
(keyed by ISSN). Both are pydantic models tagged by a ``kind`` field, and
``CatalogRecord`` is the discriminated union of the two. Code that needs
per-kind behaviour switches on ``record.kind`` instead of on the class.

Every field except ``available`` is frozen once the record is built, so a
record can only change by being checked out or returned.
"""

import enum
from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .validators import validate_author


class RecordKind(str, enum.Enum):
    """Record kinds, valued with the tag written to the catalog file."""

    BOOK = "Book"
    PERIODICAL = "Periodical"


def _require_text(value: str, label: str) -> str:
    if not value.strip():
        raise ValueError(f"{label} cannot be empty")
    return value


def _require_positive(value: int, label: str) -> int:
    if value <= 0:
        raise ValueError(f"{label} must be positive")
    return value


class BookRecord(BaseModel):
    """A book identified by its ISBN."""

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal[RecordKind.BOOK] = Field(default=RecordKind.BOOK, frozen=True)

    id: str = Field(
        ...,
        description="ISBN, with or without hyphens",
        frozen=True,
        examples=["978-0134685991", "9780596009205"],
    )

    title: str = Field(
        ...,
        description="The title of the book",
        frozen=True,
        examples=["Effective Java", "Head First Design Patterns"],
    )

    author: str = Field(
        ...,
        description="Author name, must contain at least one letter",
        frozen=True,
        examples=["Joshua Bloch"],
    )

    page_count: int = Field(..., description="Number of pages", frozen=True)

    available: bool = Field(
        default=True,
        description="Whether the book is on the shelf",
    )

    @field_validator("id")
    @classmethod
    def validate_isbn(cls, v: str) -> str:
        return _require_text(v, "ISBN")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v, "Title")

    @field_validator("author")
    @classmethod
    def validate_author_name(cls, v: str) -> str:
        return validate_author(v)

    @field_validator("page_count")
    @classmethod
    def validate_page_count(cls, v: int) -> int:
        return _require_positive(v, "Pages")


class PeriodicalRecord(BaseModel):
    """A single issue of a periodical identified by its ISSN."""

    model_config = ConfigDict(validate_assignment=True)

    kind: Literal[RecordKind.PERIODICAL] = Field(default=RecordKind.PERIODICAL, frozen=True)

    id: str = Field(
        ...,
        description="ISSN of the periodical",
        frozen=True,
        examples=["1234-5678"],
    )

    title: str = Field(
        ...,
        description="The title of the periodical",
        frozen=True,
        examples=["Java Magazine"],
    )

    issue_number: int = Field(..., description="Issue number", frozen=True)

    available: bool = Field(
        default=True,
        description="Whether the issue is on the shelf",
    )

    @field_validator("id")
    @classmethod
    def validate_issn(cls, v: str) -> str:
        return _require_text(v, "ISSN")

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return _require_text(v, "Title")

    @field_validator("issue_number")
    @classmethod
    def validate_issue_number(cls, v: int) -> int:
        return _require_positive(v, "Issue number")


CatalogRecord = Annotated[BookRecord | PeriodicalRecord, Field(discriminator="kind")]
