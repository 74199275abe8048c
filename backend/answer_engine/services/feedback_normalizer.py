import json
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from ..schemas import FeedbackRecord
from .heuristics import clamp, round_half_up, to_number

logger = logging.getLogger(__name__)

DEFAULT_SCORE = 50
DEFAULT_METRIC = 5
DEFAULT_ANALYSIS = "Response analyzed"
PARSE_FAILED_MESSAGE = "AI feedback parsing failed"
EXCERPT_LENGTH = 100

_JSON_OBJECT = re.compile(r"\{[\s\S]*\}")

CORE_METRICS = {
    "communicationClarity": "communication_clarity",
    "technicalAccuracy": "technical_accuracy",
    "questionRelevance": "question_relevance",
}

RUBRIC_METRICS = {
    "correctness": "correctness",
    "syntax": "syntax",
    "languageBestPractices": "language_best_practices",
    "efficiency": "efficiency",
    "structureAndReadability": "structure_and_readability",
    "edgeCaseHandling": "edge_case_handling",
}

# Group name -> (snake-case group name, sub-metric names, top-level aliases accepted).
CODING_GROUPS = {
    "codeMetrics": (
        "code_metrics",
        {
            "syntaxCorrectness": "syntax_correctness",
            "logicalFlow": "logical_flow",
            "efficiency": "efficiency",
            "readability": "readability",
            "bestPractices": "best_practices",
        },
        True,
    ),
    "algorithmicThinking": (
        "algorithmic_thinking",
        {
            "problemDecomposition": "problem_decomposition",
            "algorithmChoice": "algorithm_choice",
            "edgeCaseHandling": "edge_case_handling",
            "timeComplexity": "time_complexity",
            "spaceComplexity": "space_complexity",
        },
        False,
    ),
    "codeQuality": (
        "code_quality",
        {
            "structure": "structure",
            "naming": "naming",
            "comments": "comments",
            "modularity": "modularity",
            "errorHandling": "error_handling",
        },
        False,
    ),
}


@dataclass(frozen=True)
class ParsedFeedback:
    """Outcome of reading feedback out of free text.

    ``degraded`` is set when no usable JSON object was found; ``data`` then
    holds the minimal stand-in record built from the raw text.
    """

    data: dict[str, Any] = field(default_factory=dict)
    degraded: bool = False
    reason: str | None = None


def _degraded(raw: str, improvement: str, reason: str) -> ParsedFeedback:
    return ParsedFeedback(
        data={
            "score": DEFAULT_SCORE,
            "strengths": [],
            "improvements": [improvement],
            "detailedAnalysis": raw,
        },
        degraded=True,
        reason=reason,
    )


def parse_feedback_payload(raw: str) -> ParsedFeedback:
    match = _JSON_OBJECT.search(raw)
    if not match:
        return _degraded(raw, raw[:EXCERPT_LENGTH] + "...", "no_json_object")

    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return _degraded(raw, PARSE_FAILED_MESSAGE, "invalid_json")

    if not isinstance(parsed, dict):
        return _degraded(raw, PARSE_FAILED_MESSAGE, "invalid_json")

    return ParsedFeedback(data=parsed)


def _lookup(data: Mapping[str, Any], camel: str, snake: str) -> Any:
    value = data.get(camel)
    if value is None:
        value = data.get(snake)
    return value


def _to_score(value: Any) -> int:
    numeric = to_number(value)
    if numeric is None:
        return DEFAULT_SCORE
    return round_half_up(clamp(numeric, 0, 100))


def _to_metric(value: Any, default: int | None = DEFAULT_METRIC) -> int | None:
    numeric = to_number(value)
    if numeric is None:
        return default
    return round_half_up(clamp(numeric, 1, 10))


def _to_points(value: Any) -> list[str]:
    if not isinstance(value, (list, tuple)):
        return []

    points: list[str] = []
    for item in value:
        if item is None:
            continue
        text = str(item).strip()
        if text:
            points.append(text)
    return points


def _to_text(value: Any, default: str | None) -> str | None:
    if value is None:
        return default
    text = str(value).strip()
    return text or default


def _coding_group(data: Mapping[str, Any], group: str) -> dict[str, int]:
    snake_group, sub_metrics, accepts_top_level = CODING_GROUPS[group]
    nested = _lookup(data, group, snake_group)
    if not isinstance(nested, Mapping):
        nested = {}

    values: dict[str, int] = {}
    for camel, snake in sub_metrics.items():
        value = _lookup(nested, camel, snake)
        if value is None and accepts_top_level:
            value = _lookup(data, camel, snake)
        values[camel] = _to_metric(value)
    return values


def _as_mapping(raw_feedback: Any) -> Mapping[str, Any]:
    if isinstance(raw_feedback, FeedbackRecord):
        return raw_feedback.to_payload()

    if isinstance(raw_feedback, str):
        parsed = parse_feedback_payload(raw_feedback)
        if parsed.degraded:
            logger.warning("Falling back to minimal feedback record (%s).", parsed.reason)
        return parsed.data

    if isinstance(raw_feedback, Mapping):
        return raw_feedback

    raise TypeError(
        "Feedback must be a string, a mapping or a FeedbackRecord, "
        f"got {type(raw_feedback).__name__}."
    )


def process_feedback(raw_feedback: Any, is_coding_question: bool = False) -> FeedbackRecord:
    data = _as_mapping(raw_feedback)

    payload: dict[str, Any] = {
        "score": _to_score(data.get("score")),
        "strengths": _to_points(data.get("strengths")),
        "improvements": _to_points(data.get("improvements")),
        "detailedAnalysis": _to_text(
            _lookup(data, "detailedAnalysis", "detailed_analysis"), DEFAULT_ANALYSIS
        ),
        "overallAssessment": _to_text(
            _lookup(data, "overallAssessment", "overall_assessment"), None
        ),
    }

    for camel, snake in CORE_METRICS.items():
        payload[camel] = _to_metric(_lookup(data, camel, snake))

    for camel, snake in RUBRIC_METRICS.items():
        payload[camel] = _to_metric(_lookup(data, camel, snake), default=None)

    if is_coding_question:
        for group in CODING_GROUPS:
            payload[group] = _coding_group(data, group)

    return FeedbackRecord.model_validate(payload)
