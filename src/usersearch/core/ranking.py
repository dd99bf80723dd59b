"""Composite ranking of candidates across the three searchable fields."""

from __future__ import annotations

import heapq
from dataclasses import dataclass
from operator import itemgetter
from typing import Callable, Iterable, Literal, NamedTuple

from ..schemas import User
from .criteria import SearchCriteria
from .errors import SearchCancelledError
from .matcher import FieldMatcher, FieldScore

SelectionStrategy = Literal["sort", "heap"]


class RankKey(NamedTuple):
    """Per-field scores in priority order: e-mail, family name, given name.

    Plain tuple comparison gives the lexicographic field priority; larger
    keys rank first.
    """

    email: float
    family: float
    given: float


def compare_rank_keys(a: RankKey, b: RankKey) -> int:
    """Negative when ``a`` ranks before ``b``, zero when tied, else positive."""
    if a == b:
        return 0
    return -1 if a > b else 1


@dataclass(frozen=True, slots=True)
class FieldScores:
    email: FieldScore
    family: FieldScore
    given: FieldScore

    def to_key(self) -> RankKey:
        return RankKey(
            self.email.sort_value,
            self.family.sort_value,
            self.given.sort_value,
        )


@dataclass
class RankerConfig:
    """Configuration for candidate ordering."""

    selection: SelectionStrategy = "sort"


class CompositeRanker:
    """Order candidates best match first with e-mail > family > given priority.

    Ties keep input order. With ``selection="heap"`` and a ``limit``, only the
    top ``limit`` candidates are selected instead of sorting the whole set;
    the result is identical to the head of the full ordering.
    """

    def __init__(
        self,
        matcher: FieldMatcher | None = None,
        *,
        config: RankerConfig | None = None,
    ) -> None:
        self._matcher = matcher or FieldMatcher()
        self._config = config or RankerConfig()
        if self._config.selection not in ("sort", "heap"):
            raise ValueError(f"Unknown selection strategy: {self._config.selection!r}")

    def field_scores(self, criteria: SearchCriteria, candidate: User) -> FieldScores:
        return FieldScores(
            email=self._matcher.score(criteria.email_address, candidate.email_address),
            family=self._matcher.score(criteria.family_name, candidate.family_name),
            given=self._matcher.score(criteria.given_name, candidate.given_name),
        )

    def rank_key(self, criteria: SearchCriteria, candidate: User) -> RankKey:
        return self.field_scores(criteria, candidate).to_key()

    def rank(
        self,
        criteria: SearchCriteria,
        candidates: Iterable[User],
        *,
        limit: int | None = None,
        should_cancel: Callable[[], bool] | None = None,
    ) -> list[User]:
        keyed: list[tuple[RankKey, User]] = []
        for candidate in candidates:
            if should_cancel is not None and should_cancel():
                raise SearchCancelledError(len(keyed))
            keyed.append((self.rank_key(criteria, candidate), candidate))

        if limit is not None and self._config.selection == "heap":
            selected = heapq.nlargest(limit, keyed, key=itemgetter(0))
        else:
            selected = sorted(keyed, key=itemgetter(0), reverse=True)
            if limit is not None:
                selected = selected[:limit]
        return [candidate for _, candidate in selected]


__all__ = [
    "CompositeRanker",
    "FieldScores",
    "RankKey",
    "RankerConfig",
    "SelectionStrategy",
    "compare_rank_keys",
]
