# tests/conftest.py
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from backend.answer_engine.config import settings
from backend.answer_engine.main import create_app
from backend.answer_engine.rate_limit import RateLimitStore
from backend.answer_engine.services.evaluation_service import EvaluationService


class FakeLLMService:
    """Stands in for the AI collaborator and records every call."""

    def __init__(self, response: str | None = None) -> None:
        self.response = response
        self.calls: list[dict] = []

    def evaluate(self, **kwargs):
        self.calls.append(kwargs)
        return self.response


class FakeChatClient:
    """Mimics the ``client.chat.completions.create`` surface of the OpenAI SDK."""

    def __init__(self, outcomes: list) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[dict] = []
        self.chat = SimpleNamespace(completions=SimpleNamespace(create=self._create))

    def _create(self, **kwargs):
        self.requests.append(kwargs)
        outcome = self.outcomes.pop(0)
        if isinstance(outcome, Exception):
            raise outcome
        message = SimpleNamespace(content=outcome)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


@pytest.fixture
def no_retry_delays(monkeypatch):
    monkeypatch.setattr(settings, "ai_retry_delays", [0.0, 0.0, 0.0])


@pytest.fixture
def fake_llm():
    return FakeLLMService()


@pytest.fixture
def evaluation_service(fake_llm):
    return EvaluationService(llm_service=fake_llm)


@pytest.fixture
def rate_limiter():
    return RateLimitStore(max_requests=2, window_seconds=60)


@pytest.fixture
def app(evaluation_service, rate_limiter):
    return create_app(evaluation_service=evaluation_service, rate_limiter=rate_limiter)


@pytest.fixture
def client(app):
    return TestClient(app)


@pytest.fixture
def make_chat_client():
    return FakeChatClient
