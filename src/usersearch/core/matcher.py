"""Per-field query matching."""

from __future__ import annotations

from dataclasses import dataclass

from .similarity import SimilarityScorer


def normalize_query(query: str | None) -> str | None:
    """Trim and lower-case a query; empty queries become ``None``."""
    if query is None:
        return None
    normalized = query.strip().lower()
    return normalized or None


@dataclass(frozen=True, slots=True)
class FieldScore:
    """Similarity of one query to one field, or not applicable."""

    value: float | None

    @classmethod
    def not_applicable(cls) -> "FieldScore":
        return cls(None)

    @property
    def applicable(self) -> bool:
        return self.value is not None

    @property
    def sort_value(self) -> float:
        # Not-applicable fields sort as 0.0. Every candidate in one query
        # shares the same absent fields, so the constant never discriminates.
        return 0.0 if self.value is None else self.value


class FieldMatcher:
    """Score one logical field (given name, family name or e-mail)."""

    def __init__(self, scorer: SimilarityScorer | None = None) -> None:
        self._scorer = scorer or SimilarityScorer()

    def score(self, query: str | None, field_value: str | None) -> FieldScore:
        normalized = normalize_query(query)
        if normalized is None:
            return FieldScore.not_applicable()
        value = (field_value or "").strip().lower()
        return FieldScore(self._scorer.similarity(normalized, value))
