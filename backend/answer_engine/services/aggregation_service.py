import logging
from collections.abc import Mapping, Sequence
from typing import Any

from ..question_types import QuestionType
from ..schemas import AnswerSubmission, CategoryPercentages, SessionBreakdown, SessionSummary
from .heuristics import round_half_up

logger = logging.getLogger(__name__)


def _coerce_submission(item: Any, index: int) -> AnswerSubmission:
    if isinstance(item, AnswerSubmission):
        return item
    if isinstance(item, Mapping):
        return AnswerSubmission.model_validate(item)
    raise TypeError(
        f"Response at index {index} must be an AnswerSubmission or mapping, got {type(item).__name__}."
    )


def _mean(values: Sequence[float]) -> float:
    return sum(values) / len(values)


def calculate_final_results(responses: Sequence[Any], total_duration: int = 0) -> SessionSummary:
    """Fold per-question feedback into interview-level metrics.

    Only answers that were not skipped and carry feedback count towards the
    scores. A category without answered questions reports the overall mean
    rather than zero.
    """
    if not isinstance(responses, (list, tuple)):
        raise TypeError(
            f"responses must be a list of answer submissions, got {type(responses).__name__}."
        )

    submissions = [_coerce_submission(item, idx) for idx, item in enumerate(responses)]
    answered = [s for s in submissions if not s.skipped and s.feedback is not None]
    skipped_count = sum(1 for s in submissions if s.skipped)
    duration = int(total_duration or 0)

    if not answered:
        return SessionSummary(
            score=0,
            duration=duration,
            category_percentages=CategoryPercentages(),
            breakdown=SessionBreakdown(
                total_questions=len(submissions),
                answered_questions=0,
                skipped_questions=skipped_count,
            ),
        )

    overall_score = _mean([s.feedback.score for s in answered])
    by_type = {
        question_type: [s for s in answered if s.question_type is question_type]
        for question_type in QuestionType
    }

    def category_score(question_type: QuestionType) -> int:
        group = by_type[question_type]
        if not group:
            return round_half_up(overall_score)
        return round_half_up(_mean([s.feedback.score for s in group]))

    behavioral = category_score(QuestionType.BEHAVIORAL)
    technical = category_score(QuestionType.TECHNICAL)
    coding = category_score(QuestionType.CODING)

    communication = round_half_up(_mean([s.feedback.communication_clarity for s in answered]))
    technical_accuracy = round_half_up(_mean([s.feedback.technical_accuracy for s in answered]))

    summary = SessionSummary(
        score=round_half_up(overall_score),
        duration=duration,
        category_percentages=CategoryPercentages(
            behavioral=behavioral,
            technical=technical,
            coding=coding,
            communication=communication * 10,
            technical_accuracy=technical_accuracy * 10,
            problem_solving=round_half_up((coding + technical) / 2),
        ),
        breakdown=SessionBreakdown(
            total_questions=len(submissions),
            answered_questions=len(answered),
            skipped_questions=skipped_count,
            behavioral_questions=len(by_type[QuestionType.BEHAVIORAL]),
            technical_questions=len(by_type[QuestionType.TECHNICAL]),
            coding_questions=len(by_type[QuestionType.CODING]),
            average_response_time=round_half_up(_mean([s.response_time for s in answered])),
        ),
    )
    logger.debug(
        "Session summary: %s answered, %s skipped, score %s",
        len(answered),
        skipped_count,
        summary.score,
    )
    return summary
