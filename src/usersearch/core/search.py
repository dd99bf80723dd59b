"""Search orchestration."""

from __future__ import annotations

import time
from typing import Callable, Iterable, Protocol, Sequence, runtime_checkable

import structlog

from ..schemas import User
from .criteria import MAX_PAGE_SIZE, SearchCriteria
from .errors import InvalidArgumentError
from .pager import ResultPage, SearchPager
from .ranking import CompositeRanker


@runtime_checkable
class CandidateSource(Protocol):
    """Supplier of the candidate snapshot for one query."""

    def list_candidates(self) -> Sequence[User]:
        """Return a consistent, read-only enumeration of all current users."""


@runtime_checkable
class CandidatePrefilter(Protocol):
    """Hook for narrowing candidates before scoring.

    Implementations may drop candidates but must keep the relative order of
    the ones they return.
    """

    def filter(self, criteria: SearchCriteria, candidates: Sequence[User]) -> Iterable[User]:
        """Return the candidates worth scoring for ``criteria``."""


class PassThroughPrefilter:
    """Score every candidate."""

    def filter(self, criteria: SearchCriteria, candidates: Sequence[User]) -> Iterable[User]:
        return candidates


class SearchQuery:
    """Validate, score, rank and page one search."""

    def __init__(
        self,
        *,
        source: CandidateSource,
        ranker: CompositeRanker | None = None,
        pager: SearchPager | None = None,
        prefilter: CandidatePrefilter | None = None,
    ) -> None:
        self._source = source
        self._ranker = ranker or CompositeRanker()
        self._pager = pager or SearchPager()
        self._prefilter = prefilter or PassThroughPrefilter()
        self._logger = structlog.get_logger(__name__)

    def search(
        self,
        *,
        given_name: str | None = None,
        family_name: str | None = None,
        email_address: str | None = None,
        start: int = 0,
        count: int = MAX_PAGE_SIZE,
        should_cancel: Callable[[], bool] | None = None,
    ) -> ResultPage:
        try:
            criteria = SearchCriteria.build(
                given_name=given_name,
                family_name=family_name,
                email_address=email_address,
                start=start,
                count=count,
            )
        except InvalidArgumentError as exc:
            self._logger.warning("search.rejected", argument=exc.argument, reason=str(exc))
            raise
        return self.execute(criteria, should_cancel=should_cancel)

    def execute(
        self,
        criteria: SearchCriteria,
        *,
        should_cancel: Callable[[], bool] | None = None,
    ) -> ResultPage:
        """Run ``criteria`` against a fresh candidate snapshot.

        ``should_cancel`` is polled before each candidate is scored; a true
        result aborts with :class:`SearchCancelledError`.
        """
        try:
            self._pager.validate(criteria.start, criteria.count)
        except InvalidArgumentError as exc:
            self._logger.warning("search.rejected", argument=exc.argument, reason=str(exc))
            raise

        started = time.perf_counter()
        snapshot = self._source.list_candidates()
        candidates = list(self._prefilter.filter(criteria, snapshot))

        ranked = self._ranker.rank(
            criteria,
            candidates,
            limit=criteria.start + criteria.count,
            should_cancel=should_cancel,
        )
        page = self._pager.page(
            ranked,
            criteria.start,
            criteria.count,
            total=len(candidates),
        )

        self._logger.info(
            "search.executed",
            has_given_name=criteria.given_name is not None,
            has_family_name=criteria.family_name is not None,
            has_email_address=criteria.email_address is not None,
            start=criteria.start,
            count=criteria.count,
            snapshot_size=len(snapshot),
            scored=len(candidates),
            returned=len(page),
            elapsed_ms=round((time.perf_counter() - started) * 1000, 3),
        )
        return page


__all__ = [
    "CandidatePrefilter",
    "CandidateSource",
    "PassThroughPrefilter",
    "SearchQuery",
]
