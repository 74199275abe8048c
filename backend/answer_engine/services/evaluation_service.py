import logging
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..question_types import QuestionType
from ..schemas import AnswerSubmission, FeedbackRecord, OverallFeedback, SessionSummary
from . import session_feedback
from .aggregation_service import calculate_final_results
from .answer_gate import is_valid_answer
from .fallback_service import generate_fallback_feedback, skipped_feedback
from .feedback_normalizer import process_feedback
from .llm_service import LLMFeedbackService
from .sanitization import sanitize_input, validate_language

logger = logging.getLogger(__name__)

SOURCE_SKIPPED = "skipped"
SOURCE_INVALID = "invalid"
SOURCE_AI = "ai"
SOURCE_FALLBACK = "fallback"


@dataclass(frozen=True)
class EvaluationOutcome:
    feedback: FeedbackRecord
    source: str
    valid_answer: bool


class EvaluationService:
    def __init__(self, llm_service: LLMFeedbackService | None = None) -> None:
        self.llm_service = llm_service or LLMFeedbackService()

    def evaluate_answer(self, question_text: str, submission: AnswerSubmission) -> EvaluationOutcome:
        is_coding = submission.question_type is QuestionType.CODING

        if submission.skipped:
            return EvaluationOutcome(
                feedback=skipped_feedback(is_coding),
                source=SOURCE_SKIPPED,
                valid_answer=False,
            )

        response_text = sanitize_input(submission.response_text)
        code = sanitize_input(submission.code)
        language = validate_language(submission.language) if is_coding else None
        question_type = submission.question_type.value

        if not is_valid_answer(response_text, submission.question_type, code):
            logger.info(
                "Answer to question %s did not pass the answer gate; scoring heuristically.",
                submission.question_id,
            )
            feedback = generate_fallback_feedback(
                question_type, response_text, code, language, submission.execution_result
            )
            return EvaluationOutcome(feedback=feedback, source=SOURCE_INVALID, valid_answer=False)

        raw_feedback = self.llm_service.evaluate(
            question_text=sanitize_input(question_text),
            question_type=question_type,
            response_text=response_text,
            code=code or None,
            language=language,
            execution_result=submission.execution_result,
        )
        if raw_feedback is None:
            logger.info(
                "AI feedback unavailable for question %s; using heuristic feedback.",
                submission.question_id,
            )
            feedback = generate_fallback_feedback(
                question_type, response_text, code, language, submission.execution_result
            )
            return EvaluationOutcome(feedback=feedback, source=SOURCE_FALLBACK, valid_answer=True)

        return EvaluationOutcome(
            feedback=process_feedback(raw_feedback, is_coding),
            source=SOURCE_AI,
            valid_answer=True,
        )

    def summarize(self, responses: Sequence[Any], total_duration: int = 0) -> SessionSummary:
        return calculate_final_results(responses, total_duration)

    @staticmethod
    def readiness_level(score: float) -> str:
        return session_feedback.readiness_level(score)

    @staticmethod
    def overall_feedback(summary: SessionSummary) -> OverallFeedback:
        return session_feedback.overall_feedback(summary)
