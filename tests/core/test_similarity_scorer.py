from __future__ import annotations

import pytest

from usersearch.core.similarity import (
    BOOST_THRESHOLD,
    MAX_PREFIX,
    PREFIX_WEIGHT,
    SimilarityConfig,
    SimilarityScorer,
    similarity,
)


def test_constants_are_classical_winkler_values():
    assert PREFIX_WEIGHT == 0.1
    assert MAX_PREFIX == 4
    assert BOOST_THRESHOLD == 0.7


@pytest.mark.parametrize("text", ["a", "Dolores", "dolores@holidayextras.com", "De Lish"])
def test_identical_strings_score_one(text: str):
    assert similarity(text, text) == 1.0
    assert similarity(text.upper(), text.lower()) == 1.0


def test_empty_string_edge_cases():
    assert similarity("", "") == 1.0
    assert similarity("", "x") == 0.0
    assert similarity("x", "") == 0.0


@pytest.mark.parametrize(
    ("query", "value", "expected"),
    [
        ("martha", "marhta", 0.961111),
        ("dwayne", "duane", 0.84),
        ("dixon", "dicksonx", 0.813333),
    ],
)
def test_reference_jaro_winkler_values(query: str, value: str, expected: float):
    assert similarity(query, value) == pytest.approx(expected, abs=1e-5)


def test_is_case_insensitive():
    assert similarity("MARTHA", "marhta") == similarity("martha", "MARHTA")


def test_no_prefix_boost_at_or_below_threshold():
    # Jaro is 2/3 with a three character common prefix.
    assert similarity("abcxyz", "abcdef") == pytest.approx(2 / 3)


def test_prefix_boost_above_threshold():
    # Jaro 7/9, prefix 4: 7/9 + 4 * 0.1 * (2/9)
    assert similarity("abcdxz", "abcdef") == pytest.approx(7 / 9 + 0.4 * 2 / 9)


def test_prefix_boost_is_capped_at_four_characters():
    # Jaro 11/12 with a seven character common prefix.
    assert similarity("abcdefgh", "abcdefgx") == pytest.approx(11 / 12 + 0.4 / 12)


def test_configured_prefix_weight_applies():
    scorer = SimilarityScorer(config=SimilarityConfig(prefix_weight=0.2))
    assert scorer.similarity("abcdxz", "abcdef") == pytest.approx(7 / 9 + 0.8 * 2 / 9)
    assert scorer("abcdxz", "abcdef") == scorer.similarity("abcdxz", "abcdef")


def test_prefix_weight_above_quarter_is_rejected():
    with pytest.raises(ValueError):
        SimilarityConfig(prefix_weight=0.3)


def test_scores_are_bounded():
    scorer = SimilarityScorer()
    for query, value in [("dolores", "monmouth"), ("a", "b"), ("haskett", "haskett_")]:
        score = scorer.similarity(query, value)
        assert 0.0 <= score <= 1.0
