from __future__ import annotations

import pytest

from usersearch.core import FieldMatcher, FieldScore, normalize_query, similarity


@pytest.mark.parametrize("query", [None, "", "   ", "\t\n"])
def test_absent_query_is_not_applicable(query):
    result = FieldMatcher().score(query, "Haskett")

    assert result == FieldScore.not_applicable()
    assert not result.applicable
    assert result.sort_value == 0.0


def test_query_and_value_are_trimmed_and_lowered():
    matcher = FieldMatcher()

    result = matcher.score("  DOLORES ", " Dolores  ")

    assert result.applicable
    assert result.value == 1.0


def test_delegates_to_similarity_query_first():
    result = FieldMatcher().score("dixon", "DICKSONX")

    assert result.value == pytest.approx(similarity("dixon", "dicksonx"))


@pytest.mark.parametrize("field_value", ["", None])
def test_empty_field_value_scores_zero(field_value):
    result = FieldMatcher().score("haskett", field_value)

    assert result.applicable
    assert result.value == 0.0


def test_normalize_query():
    assert normalize_query(None) is None
    assert normalize_query("  ") is None
    assert normalize_query(" De Lish ") == "de lish"
