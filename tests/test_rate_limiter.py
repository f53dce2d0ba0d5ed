# tests/test_rate_limiter.py

"""
Tests for the in-memory rate limiter.
"""

from unittest.mock import patch

from core.rate_limiter import check_rate_limit, tracked_identifiers


def test_limit_and_window():
    with patch("core.rate_limiter.time") as mock_time:
        mock_time.time.return_value = 1000.0
        for _ in range(3):
            allowed, _ = check_rate_limit("user:a@example.com", max_requests=3, window_seconds=60)
            assert allowed

        allowed, remaining = check_rate_limit("user:a@example.com", max_requests=3, window_seconds=60)
        assert not allowed
        assert remaining == 0

        mock_time.time.return_value = 1061.0
        allowed, remaining = check_rate_limit("user:a@example.com", max_requests=3, window_seconds=60)
        assert allowed
        assert remaining == 2


def test_expired_identifiers_are_evicted():
    with patch("core.rate_limiter.time") as mock_time:
        mock_time.time.return_value = 1000.0
        check_rate_limit("user:a@example.com", max_requests=5, window_seconds=900)
        check_rate_limit("user:b@example.com", max_requests=5, window_seconds=900)

        mock_time.time.return_value = 1901.0
        check_rate_limit("user:c@example.com", max_requests=5, window_seconds=900)

    assert tracked_identifiers() == ["user:c@example.com"]
