# -*- coding: utf-8 -*-
"""
Unit тесты для нечеткого сравнения текста
"""

import pytest

from edcenter.utils.text_comparison import (allowed_edits, edit_distance,
                                            fuzzy_match_score, normalize_text,
                                            tokenize)


def test_normalize_text():
    assert normalize_text("  John,   SMITH! ") == "john smith"
    assert normalize_text("+998 (90) 123-45-67") == "998 90 1234567"
    assert normalize_text(None) == ""


def test_tokenize():
    assert tokenize("Ali  Karimov") == ["ali", "karimov"]
    assert tokenize("") == []


@pytest.mark.parametrize(
    "source, target, expected",
    [
        ("john", "john", 0),
        ("jhon", "john", 1),
        ("jon", "john", 1),
        ("johnny", "john", 2),
        ("kitten", "sitting", 3),
        ("", "abc", 3),
    ],
)
def test_edit_distance(source, target, expected):
    """Перестановка соседних символов стоит одну правку"""
    assert edit_distance(source, target) == expected


def test_allowed_edits_depends_on_term_length():
    """Короткие слова должны совпадать точно"""
    assert allowed_edits("al") == 0
    assert allowed_edits("ali") == 1
    assert allowed_edits("john") == 2
    assert allowed_edits("karimov") == 2
    assert allowed_edits("karimov", max_edits=1) == 1


class TestFuzzyMatchScore:
    """Тесты оценки релевантности"""

    def test_typo_matches(self):
        """Опечатка в имени находит студента"""
        assert fuzzy_match_score("Jhon", ["John", "Smith", None]) > 0

    def test_exact_match_scores_higher_than_typo(self):
        exact = fuzzy_match_score("john", ["John", "Smith"])
        typo = fuzzy_match_score("jhon", ["John", "Smith"])

        assert exact == 1.0
        assert 0 < typo < exact

    def test_more_matching_terms_score_higher(self):
        fields = ["John", "Smith"]

        assert fuzzy_match_score("john smith", fields) > fuzzy_match_score("john", fields)

    def test_no_match(self):
        assert fuzzy_match_score("zzzzzz", ["John", "Smith"]) == 0.0

    def test_short_terms_must_match_exactly(self):
        assert fuzzy_match_score("al", ["Ali"]) == 0.0
        assert fuzzy_match_score("ali", ["Ali"]) == 1.0

    def test_phone_match(self):
        assert fuzzy_match_score("998901234567", ["+998901234567"]) == 1.0

    def test_empty_query_or_fields(self):
        assert fuzzy_match_score("", ["John"]) == 0.0
        assert fuzzy_match_score("john", [None, ""]) == 0.0
