import logging

from fastapi import APIRouter, Depends, HTTPException

from ..config import settings
from ..dependencies import enforce_rate_limit, get_evaluation_service, get_rate_limiter, rate_limit_key
from ..question_types import normalize_question_type
from ..rate_limit import RateLimitStore
from ..schemas import (
    EvaluateAnswerIn,
    EvaluateAnswerOut,
    FeedbackRecord,
    NormalizeFeedbackIn,
    SessionReportOut,
    SessionSummaryIn,
    ValidateAnswerIn,
    ValidateAnswerOut,
)
from ..services.answer_gate import is_valid_answer
from ..services.evaluation_service import EvaluationService
from ..services.feedback_normalizer import process_feedback

router = APIRouter(prefix=settings.api_prefix, tags=["Evaluation"])

logger = logging.getLogger(__name__)


@router.get("/health")
def health_check():
    return {
        "status": "ok",
        "app_name": settings.app_name,
        "version": settings.app_version,
        "ai_feedback_enabled": settings.use_ai_feedback and bool(settings.openai_api_key),
    }


@router.post("/answers/validate", response_model=ValidateAnswerOut)
def validate_answer(payload: ValidateAnswerIn):
    # Gate on the normalized type so the verdict matches the reported type.
    question_type = normalize_question_type(payload.question_type)
    return ValidateAnswerOut(
        valid=is_valid_answer(payload.response_text, question_type, payload.code),
        question_type=question_type,
    )


@router.post(
    "/answers/evaluate",
    response_model=EvaluateAnswerOut,
    dependencies=[Depends(enforce_rate_limit)],
)
def evaluate_answer(
    payload: EvaluateAnswerIn,
    evaluation_service: EvaluationService = Depends(get_evaluation_service),
):
    submission = payload.submission
    try:
        outcome = evaluation_service.evaluate_answer(payload.question_text, submission)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    return EvaluateAnswerOut(
        question_id=submission.question_id,
        question_type=submission.question_type,
        valid_answer=outcome.valid_answer,
        feedback_source=outcome.source,
        feedback=outcome.feedback,
    )


@router.post("/feedback/normalize", response_model=FeedbackRecord)
def normalize_feedback(payload: NormalizeFeedbackIn):
    return process_feedback(payload.raw_feedback, payload.is_coding_question)


@router.post("/sessions/summary", response_model=SessionReportOut)
def summarize_session(
    payload: SessionSummaryIn,
    evaluation_service: EvaluationService = Depends(get_evaluation_service),
):
    try:
        summary = evaluation_service.summarize(payload.responses, payload.total_duration)
    except (TypeError, ValueError) as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    logger.info(
        "Summarized session with %s of %s questions answered.",
        summary.breakdown.answered_questions,
        summary.breakdown.total_questions,
    )
    feedback = evaluation_service.overall_feedback(summary)
    return SessionReportOut(
        summary=summary,
        readiness_level=feedback.readiness_level,
        overall_feedback=feedback,
    )


@router.get("/rate-limit")
def rate_limit_status(
    key: str = Depends(rate_limit_key),
    limiter: RateLimitStore = Depends(get_rate_limiter),
):
    return limiter.info(key)
