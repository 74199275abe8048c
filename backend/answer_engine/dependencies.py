import math

from fastapi import Depends, Header, HTTPException, Request

from .rate_limit import RateLimitStore
from .services.evaluation_service import EvaluationService


def get_rate_limiter(request: Request) -> RateLimitStore:
    return request.app.state.rate_limiter


def get_evaluation_service(request: Request) -> EvaluationService:
    return request.app.state.evaluation_service


def rate_limit_key(request: Request, x_user_id: str | None = Header(default=None)) -> str:
    user_id = (x_user_id or "").strip()
    if user_id:
        return user_id
    return request.client.host if request.client else "anonymous"


def enforce_rate_limit(
    key: str = Depends(rate_limit_key),
    limiter: RateLimitStore = Depends(get_rate_limiter),
) -> None:
    decision = limiter.hit(key)
    if not decision.allowed:
        raise HTTPException(
            status_code=429,
            detail="Rate limit exceeded. Please wait before submitting another answer.",
            headers={"Retry-After": str(math.ceil(decision.retry_after))},
        )
