"""Tests for severity, limited status, duration formatting and messages."""

from __future__ import annotations

import pytest

from ratelimit_explain.engine.render import (
    build_message,
    compute_is_limited,
    compute_severity,
    format_duration,
    format_number,
    pluralize,
)

# ---------------------------------------------------------------------------
# format_duration
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0s"),
        (59, "59s"),
        (60, "1m"),
        (61, "2m"),
        (3599, "60m"),
        (3600, "1h"),
        (3601, "2h"),
        (86399, "24h"),
        (86400, "1d"),
        (90000, "2d"),
    ],
)
def test_format_duration_short(seconds, expected):
    assert format_duration(seconds, "short") == expected


@pytest.mark.parametrize(
    "seconds, expected",
    [
        (0, "0 seconds"),
        (1, "1 second"),
        (30, "30 seconds"),
        (60, "1 minute"),
        (100, "2 minutes"),
        (3600, "1 hour"),
        (7200, "2 hours"),
        (86400, "1 day"),
        (172800, "2 days"),
    ],
)
def test_format_duration_verbose(seconds, expected):
    assert format_duration(seconds, "verbose") == expected


def test_format_duration_defaults_to_verbose():
    assert format_duration(45) == "45 seconds"


def test_format_duration_rounds_half_up():
    assert format_duration(2.5, "short") == "3s"
    assert format_duration(59.5, "short") == "1m"
    assert format_duration(0.4, "short") == "0s"


def test_format_duration_negative_is_zero():
    assert format_duration(-10, "verbose") == "0 seconds"


def test_unknown_style_is_verbose():
    assert format_duration(60, "tiny") == "1 minute"


def test_pluralize():
    assert pluralize(1, "request") == "request"
    assert pluralize(0, "request") == "requests"
    assert pluralize(2, "day") == "days"


def test_format_number():
    assert format_number(100) == "100"
    assert format_number(100.0) == "100"
    assert format_number(2.5) == "2.5"


# ---------------------------------------------------------------------------
# Judgment
# ---------------------------------------------------------------------------


class TestIsLimited:
    def test_remaining_zero(self):
        assert compute_is_limited(0, None) is True

    def test_remaining_takes_precedence(self):
        assert compute_is_limited(5, 120) is False

    def test_retry_after_positive(self):
        assert compute_is_limited(None, 30) is True

    def test_retry_after_zero(self):
        assert compute_is_limited(None, 0) is False

    def test_nothing_known(self):
        assert compute_is_limited(None, None) is False


@pytest.mark.parametrize(
    "remaining, limit, is_limited, expected",
    [
        (0, 100, True, "error"),
        (10, 100, False, "warning"),
        (1, 100, False, "warning"),
        (11, 100, False, "info"),
        (5, None, False, "info"),
        (5, 0, False, "info"),
        (None, 100, True, "error"),
        (None, None, False, "info"),
    ],
)
def test_compute_severity(remaining, limit, is_limited, expected):
    assert compute_severity(remaining, limit, is_limited) == expected


# ---------------------------------------------------------------------------
# build_message
# ---------------------------------------------------------------------------


def _msg(**overrides) -> str:
    fields = {
        "limit": None,
        "remaining": None,
        "resets_in_seconds": None,
        "is_limited": False,
        "style": "verbose",
        "audience": "user",
    }
    fields.update(overrides)
    return build_message(**fields)


class TestLimitedMessages:
    def test_user_with_wait(self):
        assert _msg(is_limited=True, resets_in_seconds=120) == (
            "Too many requests. Try again in 2 minutes."
        )

    def test_user_with_wait_short(self):
        assert _msg(is_limited=True, resets_in_seconds=120, style="short") == (
            "Too many requests. Try again in 2m."
        )

    def test_user_without_wait(self):
        assert _msg(is_limited=True) == "Too many requests. Please try again later."

    def test_developer_short_with_limit_and_wait(self):
        msg = _msg(
            is_limited=True, limit=100, resets_in_seconds=30,
            audience="developer", style="short",
        )
        assert msg == "Rate limit exceeded. Limit 100. Resets in 30s."

    def test_developer_verbose_limit_only(self):
        msg = _msg(is_limited=True, limit=100, audience="developer")
        assert msg == "Rate limit exceeded. Limit is 100 requests."

    def test_developer_bare(self):
        assert _msg(is_limited=True, audience="developer") == "Rate limit exceeded."


class TestRemainingMessages:
    def test_user_with_reset(self):
        assert _msg(remaining=3, resets_in_seconds=40) == (
            "3 requests left. Resets in 40 seconds."
        )

    def test_user_singular(self):
        assert _msg(remaining=1) == "1 request left."

    def test_user_fractional(self):
        assert _msg(remaining=2.5) == "2.5 requests left."

    def test_developer_with_limit_and_reset(self):
        msg = _msg(
            remaining=5, limit=100, resets_in_seconds=90,
            audience="developer", style="short",
        )
        assert msg == "5 requests remaining of 100. Resets in 2m."

    def test_developer_without_limit(self):
        assert _msg(remaining=5, audience="developer") == "5 requests remaining."


class TestFallbackMessages:
    def test_reset_only_user(self):
        assert _msg(resets_in_seconds=60) == "Limits reset in 1 minute."

    def test_reset_only_developer(self):
        assert _msg(resets_in_seconds=60, audience="developer") == (
            "Rate limit resets in 1 minute."
        )

    def test_limit_only_developer_short(self):
        assert _msg(limit=100, audience="developer", style="short") == (
            "Rate limit 100 requests."
        )

    def test_limit_only_developer_verbose(self):
        assert _msg(limit=100, audience="developer") == "Rate limit is 100 requests."

    def test_limit_only_user(self):
        assert _msg(limit=100) == "Request limits apply."

    def test_nothing_user(self):
        assert _msg() == "Request limits apply."

    def test_nothing_developer(self):
        assert _msg(audience="developer") == "Rate limit information unavailable."

    def test_unknown_audience_falls_through(self):
        assert _msg(limit=100, audience="robot") == "Rate limit information unavailable."

    def test_unknown_audience_limited_uses_developer_wording(self):
        assert _msg(is_limited=True, audience="robot") == "Rate limit exceeded."
