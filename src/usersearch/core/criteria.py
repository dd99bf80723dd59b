"""Search criteria and window validation."""

from __future__ import annotations

from dataclasses import dataclass

from .errors import InvalidArgumentError
from .matcher import normalize_query

MAX_PAGE_SIZE = 25


def validate_window(start: int, count: int, *, max_count: int = MAX_PAGE_SIZE) -> None:
    """Reject a negative ``start`` or a ``count`` outside ``[1, max_count]``."""
    if start < 0:
        raise InvalidArgumentError("start", "Start must be zero or greater")
    if count < 1 or count > max_count:
        raise InvalidArgumentError(
            "count", f"Count must be between 1 and {max_count} inclusive"
        )


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    """Normalized queries plus the requested result window.

    Queries are expected lower-cased and trimmed, with ``None`` for fields the
    caller did not search on. Use :meth:`build` for raw input.
    """

    given_name: str | None = None
    family_name: str | None = None
    email_address: str | None = None
    start: int = 0
    count: int = MAX_PAGE_SIZE

    def __post_init__(self) -> None:
        validate_window(self.start, self.count)

    @classmethod
    def build(
        cls,
        *,
        given_name: str | None = None,
        family_name: str | None = None,
        email_address: str | None = None,
        start: int = 0,
        count: int = MAX_PAGE_SIZE,
    ) -> "SearchCriteria":
        return cls(
            given_name=normalize_query(given_name),
            family_name=normalize_query(family_name),
            email_address=normalize_query(email_address),
            start=start,
            count=count,
        )


__all__ = ["MAX_PAGE_SIZE", "SearchCriteria", "validate_window"]
