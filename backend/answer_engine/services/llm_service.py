import json
import logging
import time
from typing import Any

from ..config import settings
from ..schemas import ExecutionResult

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are evaluating an INTERN candidate's interview response. Provide CONSISTENT scoring "
    "where the numerical score EXACTLY matches the response type. "
    "Scoring bands: 85-100 perfectly-relevant, 65-84 mostly-relevant, 45-64 partially-relevant, "
    "25-44 mostly-irrelevant, 0-24 completely-off-topic. "
    "Return JSON only with keys: score (0-100), responseType, strengths (array), "
    "improvements (array), detailedAnalysis, overallAssessment, questionRelevance (1-10), "
    "correctness (1-10), communicationClarity (1-10), technicalAccuracy (1-10). "
    "For coding questions also return codeMetrics, algorithmicThinking and codeQuality objects "
    "whose values are 1-10."
)


def _truncate(text: str | None, limit: int) -> str | None:
    if text is None or len(text) <= limit:
        return text
    return text[:limit] + "..."


class LLMFeedbackService:
    def __init__(self, client: Any | None = None) -> None:
        self.client = client

        if self.client is None and settings.use_ai_feedback and settings.openai_api_key:
            try:
                from openai import OpenAI

                self.client = OpenAI(api_key=settings.openai_api_key)
            except Exception:
                logger.exception("OpenAI client unavailable; AI feedback disabled.")
                self.client = None

    @property
    def enabled(self) -> bool:
        return self.client is not None

    def build_request(
        self,
        question_text: str,
        question_type: str,
        response_text: str,
        code: str | None = None,
        language: str | None = None,
        execution_result: ExecutionResult | None = None,
    ) -> dict[str, Any]:
        request: dict[str, Any] = {
            "question": _truncate(question_text, 800),
            "question_type": question_type,
            "candidate_response": _truncate(response_text, 1500),
        }
        if code:
            request["code"] = _truncate(code, 1500)
        if language:
            request["language"] = language
        if execution_result is not None:
            request["execution_result"] = {
                "output": execution_result.output or "No output",
                "error": execution_result.error,
            }
        return request

    def evaluate(
        self,
        question_text: str,
        question_type: str,
        response_text: str,
        code: str | None = None,
        language: str | None = None,
        execution_result: ExecutionResult | None = None,
    ) -> str | None:
        """Return the model's raw feedback text, or None when it cannot be obtained."""
        if not self.client:
            return None

        user_content = self.build_request(
            question_text=question_text,
            question_type=question_type,
            response_text=response_text,
            code=code,
            language=language,
            execution_result=execution_result,
        )

        retry_delays = settings.ai_retry_delays or [0.0]
        for idx, delay_seconds in enumerate(retry_delays):
            if delay_seconds > 0:
                time.sleep(delay_seconds)

            try:
                response = self.client.chat.completions.create(
                    model=settings.openai_feedback_model,
                    temperature=0.1,
                    response_format={"type": "json_object"},
                    messages=[
                        {"role": "system", "content": SYSTEM_PROMPT},
                        {"role": "user", "content": json.dumps(user_content)},
                    ],
                    timeout=settings.ai_request_timeout_seconds,
                )
            except Exception:
                logger.warning(
                    "AI feedback attempt %s/%s failed.",
                    idx + 1,
                    len(retry_delays),
                    exc_info=True,
                )
                continue

            raw = response.choices[0].message.content
            if raw:
                return raw

        logger.warning("AI feedback unavailable after %s attempts.", len(retry_delays))
        return None
