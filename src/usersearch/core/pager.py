"""Offset/limit windowing over a ranked sequence."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterator, Sequence

from ..schemas import User
from .criteria import MAX_PAGE_SIZE, validate_window


@dataclass(frozen=True, slots=True)
class ResultPage:
    """The ``[start, start + count)`` window of a ranked result set."""

    items: tuple[User, ...]
    start: int
    count: int
    total: int

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[User]:
        return iter(self.items)


class SearchPager:
    """Skip ``start`` ranked items and take at most ``count``."""

    def __init__(self, *, max_count: int = MAX_PAGE_SIZE) -> None:
        if not 1 <= max_count <= MAX_PAGE_SIZE:
            raise ValueError(f"max_count must be between 1 and {MAX_PAGE_SIZE}")
        self._max_count = max_count

    @property
    def max_count(self) -> int:
        return self._max_count

    def validate(self, start: int, count: int) -> None:
        validate_window(start, count, max_count=self._max_count)

    def page(
        self,
        ranked: Sequence[User],
        start: int,
        count: int,
        *,
        total: int | None = None,
    ) -> ResultPage:
        """Return the window; ``total`` defaults to ``len(ranked)``.

        A ``start`` at or past the end yields an empty page.
        """
        self.validate(start, count)
        items = tuple(islice(ranked, start, start + count))
        return ResultPage(
            items=items,
            start=start,
            count=count,
            total=len(ranked) if total is None else total,
        )


__all__ = ["ResultPage", "SearchPager"]
