"""
Unit tests for weighted keyword coverage.

Run: pytest tests/unit/test_keyword_analyzer.py -v
"""

import pytest

from recall.errors import InvalidItemError
from recall.grading.keywords import analyze_keywords, find_keyword


class TestFindKeyword:
    """Test single keyword detection."""

    def test_verbatim_substring(self):
        assert find_keyword("the mitochondria is the powerhouse", "powerhouse")

    def test_ignores_case_and_punctuation(self):
        assert find_keyword("It's the POWERHOUSE!", "Powerhouse")

    def test_fuzzy_single_word(self):
        assert find_keyword("the mitocondria", "mitochondria")

    def test_missing_single_word(self):
        assert not find_keyword("the ribosome", "mitochondria")

    def test_multi_word_needs_every_word(self):
        assert not find_keyword("reference layer", "reference model")

    def test_multi_word_in_any_order(self):
        assert find_keyword("a model used for reference", "reference model")

    def test_blank_keyword_is_never_found(self):
        assert not find_keyword("the mitochondria", "?!")
        assert not find_keyword("", "   ")

    def test_empty_text_finds_nothing(self):
        assert not find_keyword("", "mitochondria")
        assert not find_keyword("   ", "reference model")


class TestAnalyzeKeywords:
    """Test analyze_keywords scoring."""

    def test_no_keywords_is_full_credit(self):
        result = analyze_keywords("anything at all", [], [])
        assert result.score == 100
        assert result.details == ()

    def test_all_found(self):
        result = analyze_keywords(
            "mitochondria is the powerhouse", ["mitochondria", "powerhouse"], [1, 1]
        )
        assert result.score == 100
        assert all(d.found for d in result.details)

    def test_weighted_partial_coverage(self):
        result = analyze_keywords(
            "seven layer model",
            ["seven layer", "reference model", "network", "communication"],
            [3, 2, 1, 1],
        )
        assert result.score == pytest.approx(300 / 7)
        assert [d.found for d in result.details] == [True, False, False, False]

    def test_details_preserve_order_and_weights(self):
        result = analyze_keywords("beta", ["alpha", "beta", "gamma"], [2, 1, 5])
        assert [(d.keyword, d.found, d.weight) for d in result.details] == [
            ("alpha", False, 2),
            ("beta", True, 1),
            ("gamma", False, 5),
        ]
        assert result.missing == ["alpha", "gamma"]

    def test_weights_default_to_one(self):
        result = analyze_keywords("alpha", ["alpha", "beta"])
        assert result.score == 50
        assert [d.weight for d in result.details] == [1.0, 1.0]

    def test_zero_total_weight_scores_zero(self):
        result = analyze_keywords("alpha", ["alpha"], [0])
        assert result.score == 0
        assert result.details[0].found

    def test_empty_answer_gets_no_credit(self):
        result = analyze_keywords("", ["mitochondria", "powerhouse"], [1, 1])
        assert result.score == 0

    def test_mismatched_weights_raise(self):
        with pytest.raises(InvalidItemError):
            analyze_keywords("alpha", ["alpha", "beta"], [1, 2, 3])

    def test_negative_weight_raises(self):
        with pytest.raises(InvalidItemError):
            analyze_keywords("alpha", ["alpha", "zeta"], [-1, 2])

    def test_blank_keyword_gets_no_credit_for_empty_answer(self):
        result = analyze_keywords("", ["?!"], [1])
        assert result.score == 0
        assert not result.details[0].found

    def test_more_matched_weight_never_lowers_score(self):
        keywords = ["mitochondria", "powerhouse", "cell"]
        weights = [2, 1, 1]
        one = analyze_keywords("mitochondria", keywords, weights)
        two = analyze_keywords("mitochondria powerhouse", keywords, weights)
        three = analyze_keywords("mitochondria powerhouse cell", keywords, weights)
        assert one.score <= two.score <= three.score
        assert three.score == 100
