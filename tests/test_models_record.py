"""
Tests for the catalog record models and their constructors.

These tests verify that:
1. Valid records are built with the expected defaults
2. Invalid input never produces a record
3. Error messages name the broken rule
4. Only availability can change after construction
"""

import pytest
from pydantic import ValidationError

from library_catalog.errors import InvalidRecordError
from library_catalog.models import (
    BookRecord,
    PeriodicalRecord,
    RecordKind,
    create_book,
    create_periodical,
)
from library_catalog.models.validators import (
    author_error_message,
    is_purely_numeric,
    is_valid_author,
)


class TestCreateBook:
    """Test the validating book constructor."""

    def test_create_valid_book(self):
        """Test creating a book with valid data and default availability."""
        book = create_book("978-0134685991", "Effective Java", "Joshua Bloch", 416)

        assert isinstance(book, BookRecord)
        assert book.kind is RecordKind.BOOK
        assert book.id == "978-0134685991"
        assert book.title == "Effective Java"
        assert book.author == "Joshua Bloch"
        assert book.page_count == 416
        assert book.available is True

    def test_empty_isbn_rejected(self):
        """Test that a blank ISBN is rejected."""
        with pytest.raises(InvalidRecordError, match="ISBN cannot be empty"):
            create_book("   ", "Title", "Author", 10)

    def test_empty_title_rejected(self):
        """Test that an empty title is rejected."""
        with pytest.raises(InvalidRecordError, match="Title cannot be empty"):
            create_book("111", "", "Author", 10)

    @pytest.mark.parametrize("pages", [0, -1])
    def test_non_positive_pages_rejected(self, pages):
        """Test that zero or negative page counts are rejected."""
        with pytest.raises(InvalidRecordError, match="Pages must be positive"):
            create_book("111", "Title", "Author", pages)

    def test_numeric_author_rejected(self):
        """Test that a numbers-only author is rejected with its own message."""
        with pytest.raises(InvalidRecordError) as exc_info:
            create_book("111", "Title", "12-34", 10)

        assert "numbers and separators" in str(exc_info.value)
        assert isinstance(exc_info.value.__cause__, ValidationError)

    def test_empty_author_rejected(self):
        """Test that a blank author is rejected."""
        with pytest.raises(InvalidRecordError, match="Author name cannot be empty"):
            create_book("111", "Title", "  ", 10)

    def test_author_with_letters_and_digits_accepted(self):
        """Test that digits are allowed alongside letters."""
        book = create_book("111", "Title", "Agent 47", 10)
        assert book.author == "Agent 47"

    def test_non_numeric_pages_reported_by_field(self):
        """Test that a type error names the offending field."""
        with pytest.raises(InvalidRecordError, match="page_count"):
            create_book("111", "Title", "Author", "many")


class TestCreatePeriodical:
    """Test the validating periodical constructor."""

    def test_create_valid_periodical(self):
        """Test creating a periodical with valid data."""
        issue = create_periodical("1234-5678", "Java Magazine", 45)

        assert isinstance(issue, PeriodicalRecord)
        assert issue.kind is RecordKind.PERIODICAL
        assert issue.issue_number == 45
        assert issue.available is True

    def test_empty_issn_rejected(self):
        """Test that an empty ISSN is rejected."""
        with pytest.raises(InvalidRecordError, match="ISSN cannot be empty"):
            create_periodical("", "Java Magazine", 1)

    def test_non_positive_issue_rejected(self):
        """Test that issue number zero is rejected."""
        with pytest.raises(InvalidRecordError, match="Issue number must be positive"):
            create_periodical("1234-5678", "Java Magazine", 0)

    def test_unavailable_on_creation(self):
        """Test that availability can be set at construction."""
        issue = create_periodical("1234-5678", "Java Magazine", 2, available=False)
        assert issue.available is False


class TestRecordMutability:
    """Only availability may change once a record exists."""

    def test_availability_toggles(self, effective_java):
        """Test that availability can be changed in place."""
        effective_java.available = False
        assert effective_java.available is False

    @pytest.mark.parametrize("field, value", [("id", "999"), ("title", "Other"), ("page_count", 5)])
    def test_other_fields_frozen(self, effective_java, field, value):
        """Test that every other field refuses assignment."""
        with pytest.raises(ValidationError):
            setattr(effective_java, field, value)

    def test_records_compare_by_value(self):
        """Test that records with equal fields are equal."""
        first = create_periodical("1234-5678", "Java Magazine", 45)
        second = create_periodical("1234-5678", "Java Magazine", 45)
        assert first == second


class TestAuthorValidators:
    """Test the author name helpers directly."""

    @pytest.mark.parametrize("name", ["123", "12-34", "(1.2)", "42 / 7"])
    def test_purely_numeric(self, name):
        """Test names made only of digits and separators."""
        assert is_purely_numeric(name) is True
        assert is_valid_author(name) is False

    @pytest.mark.parametrize("name", ["Joshua Bloch", "O'Reilly", "R2D2"])
    def test_valid_names(self, name):
        """Test names that contain at least one letter."""
        assert is_valid_author(name) is True

    def test_missing_name(self):
        """Test that None is treated as an empty name."""
        assert is_valid_author(None) is False
        assert is_purely_numeric(None) is False
        assert author_error_message(None) == "Author name cannot be empty"

    def test_symbols_without_letters(self):
        """Test the message for names without any letter."""
        # Non-ASCII symbols are outside the separator set but still lack a letter
        assert is_purely_numeric("§§") is False
        assert author_error_message("§§") == (
            "Author name must contain at least some alphabetic characters"
        )
