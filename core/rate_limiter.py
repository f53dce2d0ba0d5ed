# core/rate_limiter.py

from typing import Dict, List, Optional, Tuple
from threading import Lock
import time

from fastapi import HTTPException, Request


# Sliding-window limiter kept in process memory.
# Each identifier maps to the expiry times of its recorded hits.
_rate_limit_store: Dict[str, List[float]] = {}
_rate_limit_lock = Lock()


def _evict_expired(now: float):
    """Prune expired hits; identifiers with none left are removed."""
    for identifier in list(_rate_limit_store):
        live = [expires for expires in _rate_limit_store[identifier] if expires > now]
        if live:
            _rate_limit_store[identifier] = live
        else:
            del _rate_limit_store[identifier]


def check_rate_limit(
    identifier: str,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> Tuple[bool, int]:
    """
    Record a hit for `identifier` unless it is over the limit.

    Returns:
        (allowed, remaining requests in the current window)
    """
    now = time.time()

    with _rate_limit_lock:
        _evict_expired(now)
        hits = _rate_limit_store.get(identifier, [])

        if len(hits) >= max_requests:
            return False, 0

        hits.append(now + window_seconds)
        _rate_limit_store[identifier] = hits
        return True, max_requests - len(hits)


def tracked_identifiers() -> List[str]:
    with _rate_limit_lock:
        return list(_rate_limit_store)


def reset_rate_limits():
    with _rate_limit_lock:
        _rate_limit_store.clear()


def client_ip(request: Request) -> str:
    forwarded_for = request.headers.get("X-Forwarded-For")
    if forwarded_for:
        # first hop is the original client
        return forwarded_for.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def get_rate_limit_identifier(request: Request, user_key: Optional[str] = None) -> str:
    """Prefer an account key (email, user id); fall back to the client IP."""
    if user_key:
        return f"user:{user_key}"
    return f"ip:{client_ip(request)}"


def require_rate_limit(
    request: Request,
    identifier: Optional[str] = None,
    max_requests: int = 10,
    window_seconds: int = 60,
) -> int:
    """
    Raises:
        HTTPException: 429 Too Many Requests if limit exceeded
    """
    if identifier is None:
        identifier = get_rate_limit_identifier(request)

    allowed, remaining = check_rate_limit(identifier, max_requests, window_seconds)

    if not allowed:
        raise HTTPException(
            status_code=429,
            detail=f"Rate limit exceeded. Maximum {max_requests} requests per {window_seconds} seconds.",
            headers={
                "X-RateLimit-Limit": str(max_requests),
                "X-RateLimit-Window": str(window_seconds),
                "Retry-After": str(window_seconds),
            },
        )

    return remaining
