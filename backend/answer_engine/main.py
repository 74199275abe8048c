import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import settings
from .rate_limit import RateLimitStore
from .routers.evaluation import router as evaluation_router
from .services.evaluation_service import EvaluationService


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def create_app(
    evaluation_service: EvaluationService | None = None,
    rate_limiter: RateLimitStore | None = None,
) -> FastAPI:
    configure_logging()

    app = FastAPI(title=settings.app_name, version=settings.app_version)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.evaluation_service = evaluation_service or EvaluationService()
    if rate_limiter is None:
        rate_limiter = RateLimitStore(
            max_requests=settings.rate_limit_max_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )
    app.state.rate_limiter = rate_limiter

    app.include_router(evaluation_router)
    return app


app = create_app()
