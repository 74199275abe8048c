import threading
import time
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    remaining: int
    retry_after: float = 0.0


class RateLimitStore:
    """Sliding-window request counter keyed by user."""

    def __init__(
        self,
        max_requests: int,
        window_seconds: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if max_requests < 1:
            raise ValueError("max_requests must be at least 1")
        if window_seconds <= 0:
            raise ValueError("window_seconds must be positive")

        self.max_requests = max_requests
        self.window_seconds = window_seconds
        self._clock = clock
        self._hits: dict[str, deque[float]] = {}
        self._lock = threading.Lock()
        self._last_sweep = clock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._hits)

    def _prune(self, key: str, now: float) -> deque[float] | None:
        hits = self._hits.get(key)
        if hits is None:
            return None

        cutoff = now - self.window_seconds
        while hits and hits[0] <= cutoff:
            hits.popleft()
        if not hits:
            del self._hits[key]
            return None
        return hits

    def _sweep(self, now: float) -> None:
        # Drops keys that have gone quiet; runs at most once per window.
        if now - self._last_sweep < self.window_seconds:
            return
        self._last_sweep = now
        for key in list(self._hits):
            self._prune(key, now)

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        with self._lock:
            self._sweep(now)
            hits = self._prune(key, now)
            if hits is None:
                hits = self._hits[key] = deque()
            elif len(hits) >= self.max_requests:
                retry_after = hits[0] + self.window_seconds - now
                return RateLimitDecision(allowed=False, remaining=0, retry_after=max(0.0, retry_after))

            hits.append(now)
            return RateLimitDecision(allowed=True, remaining=self.max_requests - len(hits))

    def info(self, key: str) -> dict[str, float | int]:
        now = self._clock()
        with self._lock:
            self._sweep(now)
            hits = self._prune(key, now)
            count = len(hits) if hits else 0
            reset_in = hits[0] + self.window_seconds - now if hits else 0.0
            return {
                "requestCount": count,
                "maxRequests": self.max_requests,
                "remaining": max(0, self.max_requests - count),
                "resetIn": round(max(0.0, reset_in), 3),
            }

    def reset(self, key: str | None = None) -> None:
        with self._lock:
            if key is None:
                self._hits.clear()
            else:
                self._hits.pop(key, None)
