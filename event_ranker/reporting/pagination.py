"""
Result pagination for display layers.

The ranking engine always returns the full ordered list; how much of it is
shown is decided here.  ``ResultWindow`` models "show 5, load 5 more";
``page()`` serves fixed pages for the CLI.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass
class ResultWindow(Generic[T]):
    """A growing prefix of a result list.

    Attributes:
        results:       Full ordered results.
        page_size:     Items revealed per step.
        visible_count: Items currently revealed.
    """

    results: Sequence[T]
    page_size: int = 5
    visible_count: int = field(default=0)

    def __post_init__(self) -> None:
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}.")
        if self.visible_count <= 0:
            self.visible_count = self.page_size

    @property
    def has_more(self) -> bool:
        return self.visible_count < len(self.results)

    def visible(self) -> list[T]:
        return list(self.results[: self.visible_count])

    def show_more(self) -> list[T]:
        """Reveal the next ``page_size`` items and return the newly shown slice."""
        start = min(self.visible_count, len(self.results))
        self.visible_count += self.page_size
        return list(self.results[start : self.visible_count])

    def reset(self, results: Sequence[T] | None = None) -> None:
        """Collapse back to the first page, optionally swapping in new results."""
        if results is not None:
            self.results = results
        self.visible_count = self.page_size


def page(results: Sequence[T], number: int, size: int) -> list[T]:
    """Return 1-based page ``number`` of ``size`` items (empty past the end)."""
    if number < 1:
        raise ValueError(f"Page number must be >= 1, got {number}.")
    if size < 1:
        raise ValueError(f"Page size must be >= 1, got {size}.")
    start = (number - 1) * size
    return list(results[start : start + size])


def page_count(total: int, size: int) -> int:
    """Number of pages needed for ``total`` items (at least 1)."""
    return max(1, -(-total // size))
