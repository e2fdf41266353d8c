"""
Weighted keyword coverage.

A keyword is found when the normalized answer contains it verbatim, or
failing that when each of its words fuzzy-matches some word of the answer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ..models import KeywordDetail, validate_keyword_weights
from .text import fuzzy_match, normalize

KEYWORD_FUZZY_THRESHOLD = 0.75


@dataclass(frozen=True)
class KeywordAnalysis:
    """Keyword coverage of one answer."""
    score: float  # 0-100, unrounded
    details: tuple[KeywordDetail, ...]

    @property
    def missing(self) -> list[str]:
        return [d.keyword for d in self.details if not d.found]


def find_keyword(
    text: str,
    keyword: str,
    threshold: float = KEYWORD_FUZZY_THRESHOLD,
) -> bool:
    """
    Check if a keyword (or a fuzzy variant of it) appears in the text.

    Args:
        text: Answer text (normalized or raw)
        keyword: Single- or multi-word keyword
        threshold: Fuzzy similarity cutoff per word

    Returns:
        True if the keyword is present (never for a blank keyword)
    """
    normalized_text = normalize(text)
    normalized_keyword = normalize(keyword)
    if not normalized_keyword:
        return False

    # Fast path: verbatim occurrence
    if normalized_keyword in normalized_text:
        return True

    text_words = normalized_text.split()
    keyword_words = normalized_keyword.split()

    # Multi-word keywords need every word present somewhere
    return all(
        any(fuzzy_match(tw, kw, threshold) for tw in text_words)
        for kw in keyword_words
    )


def analyze_keywords(
    text: str,
    keywords: Sequence[str],
    weights: Sequence[float] | None = None,
    threshold: float = KEYWORD_FUZZY_THRESHOLD,
) -> KeywordAnalysis:
    """
    Compute weighted keyword coverage of an answer.

    Args:
        text: Answer text
        keywords: Keywords in display order
        weights: Weight per keyword (all 1.0 when omitted)
        threshold: Fuzzy similarity cutoff for keyword words

    Returns:
        KeywordAnalysis with a 0-100 score and one detail per keyword

    Raises:
        InvalidItemError: weights and keywords differ in length, or a weight is negative
    """
    if not keywords:
        return KeywordAnalysis(score=100.0, details=())

    if not weights:
        weights = [1.0] * len(keywords)
    else:
        validate_keyword_weights(keywords, weights)

    details = []
    matched_weight = 0.0
    for keyword, weight in zip(keywords, weights):
        found = find_keyword(text, keyword, threshold)
        if found:
            matched_weight += weight
        details.append(KeywordDetail(keyword=keyword, found=found, weight=weight))

    total_weight = sum(weights)
    score = matched_weight / total_weight * 100 if total_weight > 0 else 0.0

    return KeywordAnalysis(score=score, details=tuple(details))
