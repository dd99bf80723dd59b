"""Fuzzy multi-field ranking engine."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .criteria import MAX_PAGE_SIZE, SearchCriteria, validate_window
from .errors import InvalidArgumentError, SearchCancelledError
from .matcher import FieldMatcher, FieldScore, normalize_query
from .pager import ResultPage, SearchPager
from .ranking import CompositeRanker, RankerConfig, RankKey, compare_rank_keys
from .search import (
    CandidatePrefilter,
    CandidateSource,
    PassThroughPrefilter,
    SearchQuery,
)
from .similarity import SimilarityConfig, SimilarityScorer, similarity

__all__ = [
    "MAX_PAGE_SIZE",
    "CandidatePrefilter",
    "CandidateSource",
    "CompositeRanker",
    "FieldMatcher",
    "FieldScore",
    "InvalidArgumentError",
    "PassThroughPrefilter",
    "RankKey",
    "RankerConfig",
    "ResultPage",
    "SearchCancelledError",
    "SearchCriteria",
    "SearchPager",
    "SearchQuery",
    "SimilarityConfig",
    "SimilarityScorer",
    "compare_rank_keys",
    "normalize_query",
    "similarity",
    "validate_window",
]
