from __future__ import annotations

from dataclasses import dataclass
from time import time

from django.core.cache import caches

from .http import flash


@dataclass
class LimitResult:
    allowed: bool
    remaining: int
    retry_after: int


def client_ip(request) -> str:
    forwarded = (request.META.get("HTTP_X_FORWARDED_FOR") or "").split(",")[0].strip()
    return forwarded or request.META.get("REMOTE_ADDR") or "0.0.0.0"


def rate_limit(namespace: str, ident: str, limit: int, window_seconds: int) -> LimitResult:
    """Fixed-window counter in the default cache; `limit` hits per window are allowed."""
    cache = caches["default"]
    now = int(time())
    window = now // window_seconds
    key = f"rl:{namespace}:{ident}:{window}"

    if cache.get(key, 0) >= limit:
        return LimitResult(False, 0, (window + 1) * window_seconds - now)
    cache.add(key, 0, timeout=window_seconds)
    used = cache.incr(key)
    return LimitResult(True, max(0, limit - used), 0)


def too_many_requests(result: LimitResult, message: str = "Tente novamente em alguns segundos."):
    resp = flash("Muitas tentativas", message, status=429)
    resp["Retry-After"] = str(max(1, result.retry_after))
    return resp
