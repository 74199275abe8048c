# tests/test_config.py
from backend.answer_engine.config import Settings


def test_defaults(monkeypatch):
    for name in (
        "API_PREFIX",
        "LOG_LEVEL",
        "USE_AI_FEEDBACK",
        "OPENAI_API_KEY",
        "AI_RETRY_DELAYS",
        "RATE_LIMIT_MAX_REQUESTS",
        "RATE_LIMIT_WINDOW_SECONDS",
        "MAX_INPUT_LENGTH",
        "APP_PORT",
        "APP_RELOAD",
    ):
        monkeypatch.delenv(name, raising=False)

    config = Settings(_env_file=None)
    assert config.api_prefix == "/api"
    assert config.log_level == "INFO"
    assert config.use_ai_feedback is True
    assert config.openai_api_key is None
    assert config.ai_retry_delays == [0.0, 1.0, 2.5]
    assert config.rate_limit_max_requests == 10
    assert config.rate_limit_window_seconds == 60.0
    assert config.max_input_length == 10000
    assert config.app_port == 8000
    assert config.app_reload is True


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("USE_AI_FEEDBACK", "false")
    monkeypatch.setenv("RATE_LIMIT_MAX_REQUESTS", "3")
    monkeypatch.setenv("AI_RETRY_DELAYS", "[0, 0.5]")
    monkeypatch.setenv("OPENAI_FEEDBACK_MODEL", "gpt-4.1-mini")
    monkeypatch.setenv("APP_PORT", "9100")
    monkeypatch.setenv("APP_RELOAD", "no")

    config = Settings(_env_file=None)
    assert config.use_ai_feedback is False
    assert config.rate_limit_max_requests == 3
    assert config.ai_retry_delays == [0.0, 0.5]
    assert config.openai_feedback_model == "gpt-4.1-mini"
    assert config.app_port == 9100
    assert config.app_reload is False
