import logging
from collections.abc import Mapping
from typing import Any

from ..question_types import QuestionType
from ..schemas import AlgorithmicThinking, CodeMetrics, CodeQuality, ExecutionResult, FeedbackRecord
from .code_analyzer import analyze_code
from .heuristics import HeuristicResult, derived_metric
from .text_analyzer import analyze_behavioral, analyze_technical

logger = logging.getLogger(__name__)

METRIC_DIVISORS = {
    "questionRelevance": 15,
    "correctness": 15,
    "languageBestPractices": 15,
    "efficiency": 20,
    "structureAndReadability": 15,
    "edgeCaseHandling": 25,
    "communicationClarity": 15,
    "technicalAccuracy": 15,
}
CODING_SYNTAX_DIVISOR = 12
TEXT_SYNTAX_DIVISOR = 15

CODING_GROUP_MODELS = {
    "codeMetrics": CodeMetrics,
    "algorithmicThinking": AlgorithmicThinking,
    "codeQuality": CodeQuality,
}


def _coerce_execution_result(execution_result: Any) -> ExecutionResult | None:
    if execution_result is None or isinstance(execution_result, ExecutionResult):
        return execution_result
    if isinstance(execution_result, Mapping):
        return ExecutionResult.model_validate(execution_result)
    raise TypeError(
        f"Execution result must be a mapping or ExecutionResult, got {type(execution_result).__name__}."
    )


def detailed_analysis(question_type: Any, score: int, response_length: int, has_code: bool) -> str:
    if score < 25:
        if question_type == QuestionType.CODING and not has_code:
            return (
                "Failed to provide any code for this coding question. "
                "Shows lack of understanding of requirements."
            )
        return (
            f"Response demonstrates minimal understanding. The {response_length} character "
            "response lacks technical depth."
        )
    if score < 50:
        return (
            f"Basic attempt but lacks technical accuracy and depth. The {response_length} "
            "character answer addresses some aspects but misses key concepts."
        )
    if score < 70:
        return (
            "Solid attempt with reasonable understanding. Could benefit from more specific "
            "examples and deeper technical details."
        )
    return "Good response showing strong technical understanding with appropriate detail."


def overall_assessment(score: int) -> str:
    if score >= 80:
        return "Excellent performance for an intern-level question - shows strong foundation"
    if score >= 65:
        return "Good performance meeting expectations for intern level with room for growth"
    if score >= 50:
        return "Acceptable performance but requires development in key areas"
    if score >= 35:
        return "Below expectations - needs focused study and practice"
    return "Significantly below intern level - requires substantial preparation"


def generate_fallback_feedback(
    question_type: Any,
    response_text: str | None,
    code: str | None = None,
    language: str | None = None,
    execution_result: ExecutionResult | Mapping[str, Any] | None = None,
) -> FeedbackRecord:
    """Build heuristic feedback when the AI scorer is unavailable.

    Dispatch compares the raw ``question_type``: ``coding`` and ``technical``
    get their own analyzers and every other value, recognized or not, is
    scored as a behavioral answer.
    """
    response_text = response_text or ""
    has_code = bool(code and code.strip())
    is_coding = question_type == QuestionType.CODING

    if is_coding:
        result: HeuristicResult = analyze_code(
            code, response_text, _coerce_execution_result(execution_result)
        )
    elif question_type == QuestionType.TECHNICAL:
        result = analyze_technical(response_text)
    else:
        result = analyze_behavioral(response_text)

    logger.debug(
        "Fallback feedback for %s question (language=%s): score %s",
        question_type,
        language,
        result.score,
    )

    score = result.score
    payload: dict[str, Any] = {
        "score": score,
        "strengths": list(result.strengths),
        "improvements": list(result.improvements),
        "detailedAnalysis": detailed_analysis(question_type, score, len(response_text), has_code),
        "overallAssessment": overall_assessment(score),
        "syntax": derived_metric(
            score, CODING_SYNTAX_DIVISOR if is_coding else TEXT_SYNTAX_DIVISOR
        ),
    }
    payload.update(
        {name: derived_metric(score, divisor) for name, divisor in METRIC_DIVISORS.items()}
    )

    if is_coding:
        for name, group in CODING_GROUP_MODELS.items():
            payload[name] = group()

    return FeedbackRecord.model_validate(payload)


def skipped_feedback(is_coding_question: bool = False) -> FeedbackRecord:
    payload: dict[str, Any] = {
        "score": 0,
        "strengths": [],
        "improvements": ["Answer the question instead of skipping it"],
        "detailedAnalysis": "Question skipped",
        "overallAssessment": overall_assessment(0),
        "communicationClarity": 1,
        "technicalAccuracy": 1,
        "questionRelevance": 1,
    }
    if is_coding_question:
        for name, group in CODING_GROUP_MODELS.items():
            payload[name] = {field_name: 1 for field_name in group.model_fields}
    return FeedbackRecord.model_validate(payload)
