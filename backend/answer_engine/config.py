from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    app_name: str = "Interview Answer Evaluation API"
    app_version: str = "0.1.0"

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")

    use_ai_feedback: bool = Field(default=True, alias="USE_AI_FEEDBACK")
    openai_api_key: str | None = Field(default=None, alias="OPENAI_API_KEY")
    openai_feedback_model: str = Field(default="gpt-4o-mini", alias="OPENAI_FEEDBACK_MODEL")
    ai_request_timeout_seconds: float = Field(default=60.0, alias="AI_REQUEST_TIMEOUT_SECONDS")
    ai_retry_delays: list[float] = Field(default=[0.0, 1.0, 2.5], alias="AI_RETRY_DELAYS")

    rate_limit_max_requests: int = Field(default=10, alias="RATE_LIMIT_MAX_REQUESTS")
    rate_limit_window_seconds: float = Field(default=60.0, alias="RATE_LIMIT_WINDOW_SECONDS")

    max_input_length: int = Field(default=10000, alias="MAX_INPUT_LENGTH")

    app_host: str = Field(default="127.0.0.1", alias="APP_HOST")
    app_port: int = Field(default=8000, alias="APP_PORT")
    app_reload: bool = Field(default=True, alias="APP_RELOAD")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


settings = Settings()
