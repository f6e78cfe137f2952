"""
Interactive console for the library catalog.

Usage:
    library-catalog [--data-file PATH] [--debug]
    python -m library_catalog [--data-file PATH] [--debug]

The catalog is loaded from the data file on start and saved on exit.
Validation and duplicate-id errors are shown to the user and the menu
carries on; anything unexpected is logged with its traceback.
"""

import argparse
import logging
import sys
from collections.abc import Callable

from .categories import group_by_kind
from .config import CatalogConfig, get_config
from .errors import CatalogError
from .models import CatalogRecord, RecordKind
from .search import MIN_PARTIAL_DIGITS, digits_only, get_matcher
from .storage import CatalogStore

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

SAMPLE_BOOKS = [
    ("978-0134685991", "Effective Java", "Joshua Bloch", 416),
    ("978-0596009205", "Head First Design Patterns", "Eric Freeman", 694),
]
SAMPLE_PERIODICALS = [
    ("1234-5678", "Java Magazine", 45),
]

MENU = """
=== Library Catalog ===
1. Add Book
2. Add Periodical
3. Search Items
4. Display All Items
5. Save Data
6. Show Statistics
0. Exit"""

SEARCH_TYPES = {"1": "title", "2": "id"}


def configure_logging(config: CatalogConfig) -> None:
    """Send log records to stderr so they stay out of the menu output."""
    logging.basicConfig(
        level=getattr(logging, config.effective_log_level),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )
    if config.debug:
        logger.debug("Debug mode enabled")


def describe(record: CatalogRecord) -> str:
    """One display line for a record."""
    available = "Yes" if record.available else "No"
    match record.kind:
        case RecordKind.BOOK:
            return (
                f"Book: {record.title} by {record.author} "
                f"(ISBN: {record.id}, Pages: {record.page_count}, Available: {available})"
            )
        case RecordKind.PERIODICAL:
            return (
                f"Periodical: {record.title} Issue #{record.issue_number} "
                f"(ISSN: {record.id}, Available: {available})"
            )
    raise ValueError(f"Unknown record kind: {record.kind!r}")


def seed_sample_data(store: CatalogStore) -> None:
    for isbn, title, author, pages in SAMPLE_BOOKS:
        store.add_book(isbn, title, author, pages)
    for issn, title, issue in SAMPLE_PERIODICALS:
        store.add_periodical(issn, title, issue)
    logger.info("Sample data added to empty catalog")


class ConsoleMenu:
    """
    Menu loop over a catalog store.

    ``input_func`` and ``output`` default to the builtins and are replaced
    in tests.
    """

    def __init__(
        self,
        store: CatalogStore,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], None] | None = None,
    ):
        self.store = store
        self._input = input_func or input
        self._output = output or print
        self._actions: dict[str, Callable[[], None]] = {
            "1": self.add_book,
            "2": self.add_periodical,
            "3": self.search,
            "4": self.display_all,
            "5": self.save,
            "6": self.show_stats,
        }

    # =========================================================================
    # PROMPTS
    # =========================================================================

    def prompt_text(self, prompt: str) -> str:
        """Ask until a non-blank answer is given."""
        value = self._input(prompt).strip()
        while not value:
            value = self._input(f"Input cannot be empty. {prompt}").strip()
        return value

    def prompt_positive_int(self, prompt: str) -> int:
        while True:
            raw = self._input(prompt).strip()
            try:
                value = int(raw)
            except ValueError:
                self._output("Please enter a valid number.")
                continue
            if value <= 0:
                self._output("Please enter a positive number.")
                continue
            return value

    # =========================================================================
    # ACTIONS
    # =========================================================================

    def add_book(self) -> None:
        self._output("\n=== Add New Book ===")
        isbn = self.prompt_text("ISBN: ")
        title = self.prompt_text("Title: ")
        author = self.prompt_text("Author: ")
        pages = self.prompt_positive_int("Pages: ")
        self.store.add_book(isbn, title, author, pages)
        self._output("Book added successfully!")

    def add_periodical(self) -> None:
        self._output("\n=== Add New Periodical ===")
        issn = self.prompt_text("ISSN: ")
        title = self.prompt_text("Title: ")
        issue = self.prompt_positive_int("Issue Number: ")
        self.store.add_periodical(issn, title, issue)
        self._output("Periodical added successfully!")

    def search(self) -> None:
        self._output("\n=== Search Items ===")
        self._output("1. Search by Title (partial matching supported)")
        self._output(
            f"2. Search by ID (ISBN/ISSN - partial matching with {MIN_PARTIAL_DIGITS}+ digits)"
        )
        choice = self.prompt_text("Search type: ")
        matcher_name = SEARCH_TYPES.get(choice)
        if matcher_name is None:
            self._output("Invalid choice, using title search")
            matcher_name = "title"
        elif matcher_name == "id":
            self._output("\nID Search Info:")
            self._output("- Enter complete ISBN/ISSN for exact match")
            self._output(f"- Enter at least {MIN_PARTIAL_DIGITS} digits for partial matching")
            self._output("- Example: '134' will find ISBN '978-0134685991'")

        query = self.prompt_text("Search query: ")
        results = self.store.search(get_matcher(matcher_name), query)

        if matcher_name == "id" and not results:
            if len(digits_only(query)) < MIN_PARTIAL_DIGITS:
                self._output(
                    f"No items found. For partial ID search, please enter at least "
                    f"{MIN_PARTIAL_DIGITS} digits."
                )
            else:
                self._output("No items found matching the provided ID or digits.")
        else:
            self._output(f"Found {len(results)} items:")
        for record in results:
            self._output(describe(record))

    def display_all(self) -> None:
        self._output("=== Library Collection ===")
        for line in group_by_kind(self.store).render(describe):
            self._output(line)

    def save(self) -> None:
        self.store.save()
        self._output("Data saved successfully!")

    def show_stats(self) -> None:
        stats = self.store.stats()
        self._output(f"Total items: {stats['total']}")
        self._output(f"Books: {stats['books']}")
        self._output(f"Periodicals: {stats['periodicals']}")
        self._output(f"Available: {stats['available']}")

    # =========================================================================
    # LOOP
    # =========================================================================

    def run(self) -> None:
        """Show the menu until the user picks 0 or input ends, then save."""
        while True:
            self._output(MENU)
            try:
                choice = self._input("Choose an option: ").strip()
            except EOFError:
                choice = "0"

            if choice == "0":
                self.save()
                self._output("Goodbye!")
                return

            action = self._actions.get(choice)
            if action is None:
                self._output("Invalid choice. Please try again.")
                continue

            try:
                action()
            except EOFError:
                self.save()
                return
            except CatalogError as e:
                logger.debug("Menu action %s failed: %s", choice, e)
                self._output(f"Error: {e}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Library catalog console")
    parser.add_argument(
        "--data-file",
        help="Override the catalog file from configuration",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    """Console entry point."""
    args = build_parser().parse_args(argv)

    config = get_config()
    overrides: dict[str, object] = {}
    if args.data_file:
        overrides["data_file"] = args.data_file
    if args.debug:
        overrides["debug"] = True
    if overrides:
        config = CatalogConfig(**{**config.model_dump(), **overrides})

    configure_logging(config)
    logger.info("Using catalog file: %s", config.data_file)

    store = CatalogStore(config.data_file)
    try:
        store.load()
        if len(store) == 0 and config.seed_sample_data:
            seed_sample_data(store)
        ConsoleMenu(store).run()
    except KeyboardInterrupt:
        logger.info("Interrupted by user")
    except CatalogError:
        logger.exception("Catalog error")
        sys.exit(1)


if __name__ == "__main__":
    main()
