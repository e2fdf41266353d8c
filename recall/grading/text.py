"""
Text normalization and similarity primitives.

Every comparison in the grader runs on normalized text so that case and
punctuation never affect a score:

    >>> normalize("  The Mitochondria!  ")
    'the mitochondria'
"""

from __future__ import annotations

import re

_NON_WORD = re.compile(r"[^\w\s]")
_WHITESPACE = re.compile(r"\s+")

DEFAULT_FUZZY_THRESHOLD = 0.8


# =============================================================================
# Normalizer
# =============================================================================


def normalize(text: str) -> str:
    """
    Canonicalize free text for comparison.

    Lowercases, replaces punctuation with spaces, collapses whitespace
    runs and trims both ends. Never fails; empty input gives "".
    """
    if not text:
        return ""
    text = _NON_WORD.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", text).strip()


def words(text: str) -> list[str]:
    """Split normalized text into words (empty text has no words)."""
    return normalize(text).split()


# =============================================================================
# Similarity Primitives
# =============================================================================


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance between two strings.

    Counts single code point insertions, deletions and substitutions.
    Keeps only two rows of the DP table.
    """
    if a == b:
        return 0
    if len(a) < len(b):
        a, b = b, a
    if not b:
        return len(a)

    previous = list(range(len(b) + 1))
    for i, ca in enumerate(a, start=1):
        current = [i]
        for j, cb in enumerate(b, start=1):
            if ca == cb:
                current.append(previous[j - 1])
            else:
                current.append(1 + min(previous[j], current[j - 1], previous[j - 1]))
        previous = current
    return previous[-1]


def fuzzy_match(word: str, target: str, threshold: float = DEFAULT_FUZZY_THRESHOLD) -> bool:
    """
    Check whether two words are close enough to count as the same.

    True when they are equal ignoring case, when one contains the other,
    or when their normalized edit similarity reaches `threshold`.
    """
    a = word.lower()
    b = target.lower()

    if a == b:
        return True
    if a in b or b in a:
        return True

    max_len = max(len(a), len(b))
    if max_len == 0:
        return True

    similarity = 1 - edit_distance(a, b) / max_len
    return similarity >= threshold


def word_overlap_similarity(a: str, b: str) -> float:
    """
    Jaccard similarity of the normalized word sets, scaled to 0-100.

    Two empty texts are identical (100); one empty text shares nothing (0).
    """
    words_a = set(words(a))
    words_b = set(words(b))

    if not words_a and not words_b:
        return 100.0
    if not words_a or not words_b:
        return 0.0

    return len(words_a & words_b) / len(words_a | words_b) * 100


def edit_similarity(a: str, b: str) -> float:
    """Edit-distance similarity of two normalized strings, 0-100."""
    max_len = max(len(a), len(b), 1)
    return max(0.0, 1 - edit_distance(a, b) / max_len) * 100


def extract_phrases(text: str, size: int = 2) -> list[str]:
    """
    Contiguous `size`-word phrases of a normalized text.

    Words of two characters or fewer are dropped first, so
    "the cell is the powerhouse" yields ["the cell", "cell the",
    "the powerhouse"].
    """
    significant = [w for w in text.split() if len(w) > 2]
    return [
        " ".join(significant[i:i + size])
        for i in range(len(significant) - size + 1)
    ]
