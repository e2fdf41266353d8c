"""
Multi-Strategy Answer Scorer.

Grades a free-text answer against a QuizItem by blending four signals:

1. Keyword coverage   - weighted keywords found (exactly or fuzzily)
2. Word overlap       - best Jaccard similarity to any accepted answer
3. Edit similarity    - best normalized Levenshtein similarity
4. Phrase bonus       - share of the answer's two-word phrases reproduced

An answer equal to any accepted answer (after normalization) short-circuits
to a perfect score.
"""

from __future__ import annotations

from dataclasses import dataclass

from loguru import logger

from ..config import Settings, get_settings
from ..models import EvaluationResult, KeywordDetail, QuizItem, validate_item_fields
from ..rounding import clamp, round_half_up
from .feedback import Chooser, FeedbackComposer
from .keywords import KEYWORD_FUZZY_THRESHOLD, analyze_keywords
from .text import edit_similarity, extract_phrases, normalize, word_overlap_similarity


@dataclass(frozen=True)
class ScoringConfig:
    """Weights and thresholds for the multi-strategy scorer."""

    keyword_weight: float = 0.45
    overlap_weight: float = 0.25
    edit_weight: float = 0.15
    phrase_weight: float = 0.15
    keyword_fuzzy_threshold: float = KEYWORD_FUZZY_THRESHOLD

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> ScoringConfig:
        """Build config from application settings."""
        settings = settings or get_settings()
        return cls(
            keyword_weight=settings.keyword_weight,
            overlap_weight=settings.overlap_weight,
            edit_weight=settings.edit_weight,
            phrase_weight=settings.phrase_weight,
            keyword_fuzzy_threshold=settings.keyword_fuzzy_threshold,
        )


class AnswerScorer:
    """
    Grades answers against quiz items.

    Holds no per-answer state, so one instance can be shared across
    threads as long as its `rng` is thread-safe.
    """

    def __init__(self, config: ScoringConfig | None = None, rng: Chooser | None = None):
        """
        Initialize scorer.

        Args:
            config: Scoring weights (from settings if None)
            rng: Source of feedback template choices
        """
        self.config = config or ScoringConfig.from_settings()
        self.feedback = FeedbackComposer(rng)

    def evaluate(self, user_answer: str, item: QuizItem) -> EvaluationResult:
        """
        Grade an answer.

        Args:
            user_answer: Raw typed or transcribed answer
            item: Item being answered

        Returns:
            EvaluationResult with a 0-100 score and feedback

        Raises:
            InvalidItemError: Item has no accepted answers or mismatched weights
        """
        validate_item_fields(item.accepted_answers, item.keywords, item.keyword_weights)

        normalized = normalize(user_answer)
        expected = item.accepted_answers[0]
        accepted = [normalize(answer) for answer in item.accepted_answers]

        if normalized in accepted:
            logger.debug(f"Exact match for item {item.id}")
            return self._perfect(normalized, expected, item)

        keywords = analyze_keywords(
            normalized,
            item.keywords,
            item.keyword_weights,
            threshold=self.config.keyword_fuzzy_threshold,
        )
        best_overlap = max(word_overlap_similarity(normalized, answer) for answer in accepted)
        best_edit = max(edit_similarity(normalized, answer) for answer in accepted)
        phrase_bonus = max(self._phrase_bonus(normalized, answer) for answer in accepted)

        combined = (
            keywords.score * self.config.keyword_weight
            + best_overlap * self.config.overlap_weight
            + best_edit * self.config.edit_weight
            + phrase_bonus * self.config.phrase_weight
        )
        score = int(clamp(round_half_up(combined), 0, 100))

        logger.debug(
            f"Scored item {item.id}: keyword={keywords.score:.1f} overlap={best_overlap:.1f} "
            f"edit={best_edit:.1f} phrase={phrase_bonus:.1f} -> {score}"
        )

        return EvaluationResult(
            score=score,
            keyword_score=int(clamp(round_half_up(keywords.score), 0, 100)),
            keyword_details=keywords.details,
            feedback=self.feedback.compose(score, keywords.missing),
            user_answer=normalized,
            expected_answer=expected,
        )

    def _perfect(self, normalized: str, expected: str, item: QuizItem) -> EvaluationResult:
        details = tuple(
            KeywordDetail(keyword=keyword, found=True, weight=weight)
            for keyword, weight in zip(item.keywords, item.keyword_weights)
        )
        return EvaluationResult(
            score=100,
            keyword_score=100,
            keyword_details=details,
            feedback=self.feedback.compose(100),
            user_answer=normalized,
            expected_answer=expected,
        )

    @staticmethod
    def _phrase_bonus(normalized: str, accepted: str) -> float:
        """Percent of the accepted answer's two-word phrases found in the answer."""
        phrases = extract_phrases(accepted, 2)
        if not phrases:
            return 0.0
        matched = sum(1 for phrase in phrases if phrase in normalized)
        return matched / len(phrases) * 100


def evaluate(
    user_answer: str,
    item: QuizItem,
    *,
    rng: Chooser | None = None,
    config: ScoringConfig | None = None,
) -> EvaluationResult:
    """Grade `user_answer` against `item` with a one-off AnswerScorer."""
    return AnswerScorer(config=config, rng=rng).evaluate(user_answer, item)
