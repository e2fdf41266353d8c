"""
Unit tests for text normalization and similarity primitives.

Run: pytest tests/unit/test_text_similarity.py -v
"""

import pytest

from recall.grading.text import (
    edit_distance,
    edit_similarity,
    extract_phrases,
    fuzzy_match,
    normalize,
    word_overlap_similarity,
)


class TestNormalize:
    """Test normalize function."""

    def test_lowercases_and_strips_punctuation(self):
        assert normalize("  The Mitochondria!  ") == "the mitochondria"

    def test_punctuation_becomes_word_break(self):
        assert normalize("Hello,world") == "hello world"
        assert normalize("don't") == "don t"

    def test_collapses_whitespace(self):
        assert normalize("a \t b\n\nc") == "a b c"

    def test_empty_and_blank(self):
        assert normalize("") == ""
        assert normalize("   \t\n") == ""
        assert normalize("?!.") == ""

    def test_keeps_letters_of_any_script(self):
        assert normalize("Café Ünïcode") == "café ünïcode"

    def test_underscore_is_a_word_character(self):
        assert normalize("snake_case") == "snake_case"

    def test_idempotent(self):
        once = normalize("It's the -- POWERHOUSE!")
        assert normalize(once) == once


class TestEditDistance:
    """Test Levenshtein distance."""

    def test_kitten_sitting(self):
        assert edit_distance("kitten", "sitting") == 3

    def test_identical(self):
        assert edit_distance("", "") == 0
        assert edit_distance("abc", "abc") == 0

    def test_against_empty(self):
        assert edit_distance("", "abc") == 3
        assert edit_distance("abcd", "") == 4

    def test_symmetric(self):
        assert edit_distance("flaw", "lawn") == edit_distance("lawn", "flaw") == 2

    def test_triangle_inequality(self):
        a, b, c = "mitochondria", "mitocondria", "mitochondrion"
        assert edit_distance(a, c) <= edit_distance(a, b) + edit_distance(b, c)

    def test_counts_code_points(self):
        assert edit_distance("café", "cafe") == 1


class TestFuzzyMatch:
    """Test fuzzy word matching."""

    def test_case_insensitive_equality(self):
        assert fuzzy_match("Cell", "cell")

    def test_containment(self):
        assert fuzzy_match("power", "powerhouse")
        assert fuzzy_match("powerhouse", "power")

    def test_small_typo(self):
        # 1 edit over 12 characters
        assert fuzzy_match("mitocondria", "mitochondria")

    def test_unrelated_words(self):
        assert not fuzzy_match("cat", "dog")

    def test_both_empty(self):
        assert fuzzy_match("", "")

    def test_threshold_is_respected(self):
        # 1 edit over 6 characters = 0.833 similarity
        assert fuzzy_match("colour", "color", threshold=0.8)
        assert not fuzzy_match("colour", "color", threshold=0.9)


class TestWordOverlapSimilarity:
    """Test Jaccard word overlap."""

    def test_identical(self):
        assert word_overlap_similarity("a b c", "a b c") == 100

    def test_disjoint(self):
        assert word_overlap_similarity("a b", "c d") == 0

    def test_partial(self):
        assert word_overlap_similarity("a b", "b c") == pytest.approx(100 / 3)

    def test_ignores_case_punctuation_and_duplicates(self):
        assert word_overlap_similarity("The cell, the CELL.", "the cell") == 100

    def test_empty_inputs(self):
        assert word_overlap_similarity("", "") == 100
        assert word_overlap_similarity("", "a") == 0
        assert word_overlap_similarity("a", "  ") == 0


class TestEditSimilarity:
    """Test edit-distance similarity percentage."""

    def test_identical(self):
        assert edit_similarity("abc", "abc") == 100
        assert edit_similarity("", "") == 100

    def test_completely_different(self):
        assert edit_similarity("abc", "xyz") == 0

    def test_partial(self):
        assert edit_similarity("kitten", "sitting") == pytest.approx((1 - 3 / 7) * 100)


class TestExtractPhrases:
    """Test two-word phrase extraction."""

    def test_skips_short_words(self):
        assert extract_phrases("the cell is the powerhouse") == [
            "the cell",
            "cell the",
            "the powerhouse",
        ]

    def test_no_phrases_from_short_text(self):
        assert extract_phrases("a is of") == []
        assert extract_phrases("mitochondria") == []
        assert extract_phrases("") == []
