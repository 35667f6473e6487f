# This file implements per-client request counters and the pipeline stage that enforces them.
# Each limiter maps a client key to the start of its current window and the hits counted in it.
# Expired counters are swept at most once per window, so idle clients do not accumulate.
# Counters are per-process and reset on restart; nothing is shared across workers.
# The stage runs on the event loop, so counter updates never interleave between requests.

from __future__ import annotations

import logging
import math
import time
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from fastapi import Request, Response
from starlette.middleware.base import RequestResponseEndpoint

from dryclean.api.error_handlers import RateLimitedError, terminal_error_response

LOGGER = logging.getLogger("api.rate_limit")

GENERAL_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
CONTACT_LIMIT_MESSAGE = "Too many contact form submissions from this IP, please try again later."


@dataclass
class WindowCounter:
    window_start: float
    count: int = 0


@dataclass(frozen=True)
class RateLimitDecision:
    allowed: bool
    limit: int
    remaining: int
    reset_after: float
    window_seconds: int

    def headers(self) -> dict[str, str]:
        reset_seconds = str(max(0, math.ceil(self.reset_after)))
        headers = {
            "RateLimit-Policy": f"{self.limit};w={self.window_seconds}",
            "RateLimit-Limit": str(self.limit),
            "RateLimit-Remaining": str(self.remaining),
            "RateLimit-Reset": reset_seconds,
        }
        if not self.allowed:
            headers["Retry-After"] = reset_seconds
        return headers


class SlidingWindowRateLimiter:
    """Count requests per client key inside a fixed-length window."""

    def __init__(
        self,
        *,
        window_seconds: int,
        max_requests: int,
        message: str,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if window_seconds <= 0 or max_requests <= 0:
            raise ValueError("window_seconds and max_requests must be greater than 0.")
        self.window_seconds = window_seconds
        self.max_requests = max_requests
        self.message = message
        self._clock = clock
        self._counters: dict[str, WindowCounter] = {}
        self._last_sweep = clock()

    def hit(self, key: str) -> RateLimitDecision:
        now = self._clock()
        if now - self._last_sweep >= self.window_seconds:
            self._sweep_expired(now)
        counter = self._counters.get(key)
        if counter is None or now - counter.window_start >= self.window_seconds:
            counter = WindowCounter(window_start=now)
            self._counters[key] = counter

        counter.count += 1
        return RateLimitDecision(
            allowed=counter.count <= self.max_requests,
            limit=self.max_requests,
            remaining=max(0, self.max_requests - counter.count),
            reset_after=counter.window_start + self.window_seconds - now,
            window_seconds=self.window_seconds,
        )

    def _sweep_expired(self, now: float) -> None:
        expired = [
            key
            for key, counter in self._counters.items()
            if now - counter.window_start >= self.window_seconds
        ]
        for key in expired:
            del self._counters[key]
        self._last_sweep = now
        if expired:
            LOGGER.debug("Dropped %s expired rate-limit counters", len(expired))

    def reset(self, key: str | None = None) -> None:
        if key is None:
            self._counters.clear()
        else:
            self._counters.pop(key, None)

    def tracked_keys(self) -> int:
        return len(self._counters)


@dataclass(frozen=True)
class RateLimitRule:
    """Apply a limiter to requests whose method and path match."""

    limiter: SlidingWindowRateLimiter
    path_prefix: str
    methods: frozenset[str] | None = None
    exact_path: bool = False

    def matches(self, method: str, path: str) -> bool:
        if self.methods is not None and method.upper() not in self.methods:
            return False
        if self.exact_path:
            return path.rstrip("/") == self.path_prefix
        return path == self.path_prefix or path.startswith(f"{self.path_prefix}/")


def client_key(request: Request) -> str:
    return request.client.host if request.client else "unknown"


def build_rate_limit_middleware(
    rules: list[RateLimitRule],
) -> Callable[[Request, RequestResponseEndpoint], Awaitable[Response]]:
    """Return an HTTP middleware that checks `rules` in order before the route runs."""

    async def rate_limit_middleware(request: Request, call_next: RequestResponseEndpoint) -> Response:
        method = request.method
        path = request.url.path
        key = client_key(request)

        first_decision: RateLimitDecision | None = None
        for rule in rules:
            if not rule.matches(method, path):
                continue
            decision = rule.limiter.hit(key)
            if not decision.allowed:
                LOGGER.warning("Rate limit exceeded key=%s path=%s limit=%s", key, path, decision.limit)
                return terminal_error_response(
                    request,
                    RateLimitedError(rule.limiter.message),
                    status_code=RateLimitedError.status_code,
                    message=rule.limiter.message,
                    headers=decision.headers(),
                )
            if first_decision is None:
                first_decision = decision

        response = await call_next(request)
        if first_decision is not None:
            response.headers.update(first_decision.headers())
        return response

    return rate_limit_middleware
