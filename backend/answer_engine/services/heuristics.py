import math
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from ..question_types import ResponseType


@dataclass(frozen=True)
class HeuristicResult:
    score: int
    strengths: list[str] = field(default_factory=list)
    improvements: list[str] = field(default_factory=list)

    @property
    def response_type(self) -> ResponseType:
        return ResponseType.from_score(self.score)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))


def round_half_up(value: float) -> int:
    """Round .5 away from zero instead of to the nearest even integer."""
    return int(Decimal(str(value)).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def to_number(value: Any) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        numeric = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(numeric) or math.isinf(numeric):
        return None
    return numeric


def derived_metric(score: int, divisor: int) -> int:
    return max(1, score // divisor)
