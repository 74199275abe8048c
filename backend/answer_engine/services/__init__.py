"""Service layer exports for answer evaluation and session aggregation."""

from .aggregation_service import calculate_final_results
from .answer_gate import is_valid_answer
from .evaluation_service import EvaluationOutcome, EvaluationService
from .fallback_service import generate_fallback_feedback, skipped_feedback
from .feedback_normalizer import ParsedFeedback, parse_feedback_payload, process_feedback
from .llm_service import LLMFeedbackService
from .session_feedback import overall_feedback, readiness_level

__all__ = [
    "EvaluationOutcome",
    "EvaluationService",
    "LLMFeedbackService",
    "ParsedFeedback",
    "calculate_final_results",
    "generate_fallback_feedback",
    "is_valid_answer",
    "overall_feedback",
    "parse_feedback_payload",
    "process_feedback",
    "readiness_level",
    "skipped_feedback",
]
