from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from .question_types import QuestionType, ResponseType, normalize_question_type


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FrozenCamelModel(CamelModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


def _metric(default: int = 5) -> Any:
    return Field(default=default, ge=1, le=10)


def _optional_metric() -> Any:
    return Field(default=None, ge=1, le=10)


class ExecutionResult(FrozenCamelModel):
    output: str | None = None
    error: str | None = None
    execution_time: float | str | None = Field(
        default=None,
        validation_alias=AliasChoices("executionTime", "execution_time", "cpuTime"),
    )
    memory: float | str | None = None


class CodeMetrics(FrozenCamelModel):
    syntax_correctness: int = _metric()
    logical_flow: int = _metric()
    efficiency: int = _metric()
    readability: int = _metric()
    best_practices: int = _metric()


class AlgorithmicThinking(FrozenCamelModel):
    problem_decomposition: int = _metric()
    algorithm_choice: int = _metric()
    edge_case_handling: int = _metric()
    time_complexity: int = _metric()
    space_complexity: int = _metric()


class CodeQuality(FrozenCamelModel):
    structure: int = _metric()
    naming: int = _metric()
    comments: int = _metric()
    modularity: int = _metric()
    error_handling: int = _metric()


class FeedbackRecord(FrozenCamelModel):
    score: int = Field(ge=0, le=100)
    response_type: ResponseType = ResponseType.COMPLETELY_OFF_TOPIC
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    detailed_analysis: str = "Response analyzed"
    overall_assessment: str | None = None

    communication_clarity: int = _metric()
    technical_accuracy: int = _metric()
    question_relevance: int = _metric()

    correctness: int | None = _optional_metric()
    syntax: int | None = _optional_metric()
    language_best_practices: int | None = _optional_metric()
    efficiency: int | None = _optional_metric()
    structure_and_readability: int | None = _optional_metric()
    edge_case_handling: int | None = _optional_metric()

    code_metrics: CodeMetrics | None = None
    algorithmic_thinking: AlgorithmicThinking | None = None
    code_quality: CodeQuality | None = None

    @model_validator(mode="before")
    @classmethod
    def _derive_response_type(cls, data: Any) -> Any:
        # responseType always follows the score, whatever the caller supplied.
        if not isinstance(data, dict) or "score" not in data:
            return data
        try:
            score = float(data["score"])
        except (TypeError, ValueError):
            return data

        data = {k: v for k, v in data.items() if k not in ("responseType", "response_type")}
        data["responseType"] = ResponseType.from_score(score)
        return data

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True)


class AnswerSubmission(FrozenCamelModel):
    question_id: str = ""
    question_type: QuestionType = QuestionType.TECHNICAL
    response_text: str = ""
    code: str | None = None
    language: str | None = None
    skipped: bool = False
    response_time: int = Field(default=0, ge=0)
    execution_result: ExecutionResult | None = Field(
        default=None,
        validation_alias=AliasChoices("executionResult", "executionResults", "execution_result"),
    )
    feedback: FeedbackRecord | None = None

    @model_validator(mode="before")
    @classmethod
    def _normalize_feedback(cls, data: Any) -> Any:
        # Loose feedback content is clamped and defaulted instead of rejected.
        if not isinstance(data, Mapping):
            return data
        feedback = data.get("feedback")
        if not isinstance(feedback, (Mapping, str)):
            return data

        from .services.feedback_normalizer import process_feedback

        question_type = data.get("questionType", data.get("question_type"))
        is_coding = normalize_question_type(question_type) is QuestionType.CODING
        return {**data, "feedback": process_feedback(feedback, is_coding)}

    @field_validator("question_type", mode="before")
    @classmethod
    def _normalize_question_type(cls, value: Any) -> QuestionType:
        return normalize_question_type(value)

    @field_validator("response_text", mode="before")
    @classmethod
    def _none_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value

    @field_validator("response_time", mode="before")
    @classmethod
    def _coerce_response_time(cls, value: Any) -> Any:
        if value is None or value == "":
            return 0
        if isinstance(value, float):
            return int(value)
        return value


class CategoryPercentages(FrozenCamelModel):
    behavioral: int = 0
    technical: int = 0
    coding: int = 0
    communication: int = 0
    technical_accuracy: int = 0
    problem_solving: int = 0


class SessionBreakdown(FrozenCamelModel):
    total_questions: int = 0
    answered_questions: int = 0
    skipped_questions: int = 0
    behavioral_questions: int = 0
    technical_questions: int = 0
    coding_questions: int = 0
    average_response_time: int = 0


class SessionSummary(FrozenCamelModel):
    score: int = Field(default=0, ge=0, le=100)
    duration: int = 0
    category_percentages: CategoryPercentages = Field(default_factory=CategoryPercentages)
    breakdown: SessionBreakdown = Field(default_factory=SessionBreakdown)


class CategoryScores(FrozenCamelModel):
    technical_knowledge: int = 0
    coding_ability: int = 0
    behavioral_skills: int = 0
    communication: int = 0


class OverallFeedback(FrozenCamelModel):
    readiness_level: str
    strengths: list[str] = Field(default_factory=list)
    improvements: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)
    general_feedback: str = ""
    category_scores: CategoryScores = Field(default_factory=CategoryScores)


class ValidateAnswerIn(CamelModel):
    response_text: str | None = None
    question_type: str | None = None
    code: str | None = None


class ValidateAnswerOut(CamelModel):
    valid: bool
    question_type: QuestionType


class EvaluateAnswerIn(CamelModel):
    question_text: str = ""
    submission: AnswerSubmission


class EvaluateAnswerOut(CamelModel):
    question_id: str
    question_type: QuestionType
    valid_answer: bool
    feedback_source: str
    feedback: FeedbackRecord


class NormalizeFeedbackIn(CamelModel):
    raw_feedback: str | dict[str, Any]
    is_coding_question: bool = False


class SessionSummaryIn(CamelModel):
    responses: list[AnswerSubmission] = Field(default_factory=list)
    total_duration: int = Field(default=0, ge=0)


class SessionReportOut(CamelModel):
    summary: SessionSummary
    readiness_level: str
    overall_feedback: OverallFeedback
