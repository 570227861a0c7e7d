"""Incremental reveal of an already-fetched result list."""

from typing import Sequence, TypeVar

from wooinbox.config import DEFAULT_PAGE_SIZE

T = TypeVar("T")


class ResultPager:
    """
    Cursor over a result list that reveals page_size more items per step.

    Usage:
        pager = ResultPager(page_size=5)
        pager.reset(result_set.orders)
        while pager.has_more():
            pager.load_more()
    """

    def __init__(self, page_size: int = DEFAULT_PAGE_SIZE):
        if page_size < 1:
            raise ValueError("page_size must be at least 1")
        self.page_size = page_size
        self._items: list = []
        self._visible_count = 0

    def reset(self, items: Sequence[T]) -> None:
        """Start over with a new result list."""
        self._items = list(items)
        self._visible_count = min(self.page_size, len(self._items))

    @property
    def visible_count(self) -> int:
        return self._visible_count

    @property
    def total(self) -> int:
        return len(self._items)

    def has_more(self) -> bool:
        return self._visible_count < len(self._items)

    def load_more(self) -> None:
        if not self.has_more():
            return
        self._visible_count = min(
            self._visible_count + self.page_size, len(self._items)
        )

    def current_slice(self) -> list:
        return self._items[: self._visible_count]


def reveal(items: Sequence[T], page_size: int = DEFAULT_PAGE_SIZE) -> list[list[T]]:
    """
    Return every slice a user would see by pressing "load more" until done.

    The first slice holds up to page_size items and each following slice
    grows by page_size.
    """
    pager = ResultPager(page_size=page_size)
    pager.reset(items)

    slices = [pager.current_slice()]
    while pager.has_more():
        pager.load_more()
        slices.append(pager.current_slice())
    return slices
