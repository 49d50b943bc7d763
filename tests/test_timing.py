"""Tests for reset / retry-after resolution."""

from __future__ import annotations

import pytest

from ratelimit_explain.engine.timing import (
    ResetWindow,
    clamp_seconds,
    classify_reset,
    resolve_reset_seconds,
    resolve_window,
)

NOW_MS = 1707379100000  # 2024-02-08T07:58:20Z


@pytest.mark.parametrize(
    "value, expected",
    [(120, 120), (1.2, 2), (0.01, 1), (0, 0), (-5, 0), (float("inf"), 0)],
)
def test_clamp_seconds(value, expected):
    assert clamp_seconds(value) == expected


@pytest.mark.parametrize(
    "value, kind",
    [
        (1e12, "epoch-ms"),
        (1707379200000, "epoch-ms"),
        (999_999_999_999, "epoch-s"),
        (1e9, "epoch-s"),
        (999_999_999, "relative"),
        (60, "relative"),
    ],
)
def test_classify_reset(value, kind):
    assert classify_reset(value) == kind


class TestResolveResetSeconds:
    def test_epoch_milliseconds(self):
        assert resolve_reset_seconds(1707379200000, NOW_MS) == 100

    def test_epoch_seconds(self):
        assert resolve_reset_seconds(1707379200, NOW_MS) == 100

    def test_relative_seconds(self):
        assert resolve_reset_seconds(30, NOW_MS) == 30

    def test_relative_rounds_up(self):
        assert resolve_reset_seconds(30.2, NOW_MS) == 31

    def test_epoch_seconds_rounds_up(self):
        assert resolve_reset_seconds(1707379200, NOW_MS + 500) == 100

    def test_past_reset_is_zero(self):
        assert resolve_reset_seconds(1707379000, NOW_MS) == 0

    def test_past_millisecond_reset_is_zero(self):
        assert resolve_reset_seconds(1707379000000, NOW_MS) == 0

    def test_non_finite(self):
        assert resolve_reset_seconds(float("nan"), NOW_MS) is None

    def test_returns_int(self):
        assert isinstance(resolve_reset_seconds(30.2, NOW_MS), int)


class TestResolveWindow:
    def test_retry_after_wins(self):
        far_reset = 1707379100 + 100_000
        window = resolve_window(120, far_reset, NOW_MS)
        assert window == ResetWindow(120, 120, "retry-after")

    def test_retry_after_rounds_up(self):
        window = resolve_window(2.1, None, NOW_MS)
        assert window.resets_in_seconds == 3
        assert window.retry_after_seconds == 3

    def test_negative_retry_after_clamped(self):
        assert resolve_window(-10, None, NOW_MS).resets_in_seconds == 0

    def test_reset_only(self):
        window = resolve_window(None, 1707379200, NOW_MS)
        assert window == ResetWindow(100, None, "epoch-s")

    def test_nothing(self):
        assert resolve_window(None, None, NOW_MS) is None
