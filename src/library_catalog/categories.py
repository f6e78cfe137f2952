"""
Category tree for browsing the catalog.

A Category holds records and nested categories. Counting and rendering
recurse through the tree, so a shelf of shelves reports every record it
contains.
"""

from collections.abc import Callable, Iterable

from .models import CatalogRecord, RecordKind


class Category:
    """A named group of records and sub-categories."""

    def __init__(self, name: str):
        self.name = name
        self._children: list["Category | CatalogRecord"] = []

    def add(self, child: "Category | CatalogRecord") -> None:
        self._children.append(child)

    def remove(self, child: "Category | CatalogRecord") -> None:
        """
        Remove a direct child.

        Raises:
            ValueError: If child is not directly under this category
        """
        self._children.remove(child)

    @property
    def children(self) -> tuple["Category | CatalogRecord", ...]:
        return tuple(self._children)

    @property
    def item_count(self) -> int:
        """Number of records in this category and all sub-categories."""
        return sum(
            child.item_count if isinstance(child, Category) else 1 for child in self._children
        )

    def render(
        self,
        describe: Callable[[CatalogRecord], str],
        indent: int = 0,
    ) -> list[str]:
        """Display lines for the tree, children indented two spaces per level."""
        pad = "  " * indent
        lines = [f"{pad}Category: {self.name} ({self.item_count} items)"]
        for child in self._children:
            if isinstance(child, Category):
                lines.extend(child.render(describe, indent + 1))
            else:
                lines.append(f"{pad}  {describe(child)}")
        return lines


def group_by_kind(records: Iterable[CatalogRecord], name: str = "Library") -> Category:
    """Build a root category with one sub-category per record kind."""
    root = Category(name)
    groups = {
        RecordKind.BOOK: Category("Books"),
        RecordKind.PERIODICAL: Category("Periodicals"),
    }
    for record in records:
        groups[record.kind].add(record)
    for group in groups.values():
        root.add(group)
    return root
