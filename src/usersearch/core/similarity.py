"""Case-insensitive Jaro-Winkler similarity."""

from __future__ import annotations

from dataclasses import dataclass

from rapidfuzz.distance import JaroWinkler

# Winkler prefix boost: up to MAX_PREFIX shared leading characters, each
# worth PREFIX_WEIGHT of the remaining distance, applied only when the plain
# Jaro score is strictly above BOOST_THRESHOLD.
PREFIX_WEIGHT = 0.1
MAX_PREFIX = 4
BOOST_THRESHOLD = 0.7


@dataclass(frozen=True, slots=True)
class SimilarityConfig:
    """Configuration for the Jaro-Winkler scorer."""

    prefix_weight: float = PREFIX_WEIGHT

    def __post_init__(self) -> None:
        # prefix_weight * MAX_PREFIX above 1.0 would push scores past 1.0
        if not 0.0 <= self.prefix_weight <= 1.0 / MAX_PREFIX:
            raise ValueError(
                f"prefix_weight must be within [0, {1.0 / MAX_PREFIX}]"
            )


class SimilarityScorer:
    """Stateless Jaro-Winkler scorer shared by every query.

    The Jaro component counts characters of ``query`` that match characters
    of ``value`` within a window of ``max(len) // 2 - 1`` positions, together
    with the number of transpositions among them. Strings above
    ``BOOST_THRESHOLD`` then receive the Winkler prefix boost.

    Arguments are compared query first, candidate value second.
    """

    def __init__(self, *, config: SimilarityConfig | None = None) -> None:
        self._config = config or SimilarityConfig()

    @property
    def prefix_weight(self) -> float:
        return self._config.prefix_weight

    def similarity(self, query: str, value: str) -> float:
        """Return the similarity of ``query`` to ``value`` in ``[0, 1]``."""
        left = query.lower()
        right = value.lower()

        if not left and not right:
            return 1.0
        if not left or not right:
            return 0.0
        if left == right:
            return 1.0

        score = JaroWinkler.similarity(
            left,
            right,
            prefix_weight=self._config.prefix_weight,
        )
        return min(max(float(score), 0.0), 1.0)

    __call__ = similarity


_DEFAULT_SCORER = SimilarityScorer()


def similarity(query: str, value: str) -> float:
    """Module-level shortcut using the default prefix weight."""
    return _DEFAULT_SCORER.similarity(query, value)


__all__ = [
    "BOOST_THRESHOLD",
    "MAX_PREFIX",
    "PREFIX_WEIGHT",
    "SimilarityConfig",
    "SimilarityScorer",
    "similarity",
]
