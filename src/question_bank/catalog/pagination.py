"""
Module: catalog.pagination

Purpose:
    Incremental "load more" pagination over an ordered result set. Tracks
    a single page counter; the visible slice is always a prefix.

Key Classes:
    - Paginator: Page counter with reset/advance/reveal

Used By:
    - gui.controller
"""

from __future__ import annotations

from typing import List, Sequence, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 12


class Paginator:
    """
    Tracks how much of a result set is revealed.

    Visible count is ``min(page * page_size, len(results))`` and only grows
    between resets.

    Example:
        >>> p = Paginator(page_size=12)
        >>> len(p.visible_slice(range(30)))
        12
        >>> p.advance(); p.advance()
        >>> len(p.visible_slice(range(30)))
        30
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive: {page_size}")
        self._page_size = page_size
        self._page = 1

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    def reset(self) -> None:
        self._page = 1

    def advance(self) -> None:
        """Reveal one more page. Callers check has_more() first."""
        self._page += 1

    def reveal(self, index: int) -> None:
        """Raise the page so position ``index`` is visible. Never lowers it."""
        if index < 0:
            raise ValueError(f"index must be non-negative: {index}")
        self._page = max(self._page, index // self._page_size + 1)

    def visible_count(self, results: Sequence[T]) -> int:
        return min(self._page * self._page_size, len(results))

    def visible_slice(self, results: Sequence[T]) -> List[T]:
        return list(results[: self.visible_count(results)])

    def has_more(self, results: Sequence[T]) -> bool:
        return len(results) > self.visible_count(results)
