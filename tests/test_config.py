"""Tests for environment-driven settings."""

from __future__ import annotations

from ratelimit_explain.config import Settings


def test_defaults():
    s = Settings(_env_file=None)
    assert s.default_audience == "user"
    assert s.default_style == "verbose"
    assert s.log_format == "text"


def test_env_prefix(monkeypatch):
    monkeypatch.setenv("RATELIMIT_EXPLAIN_DEFAULT_STYLE", "short")
    monkeypatch.setenv("RATELIMIT_EXPLAIN_LOG_FORMAT", "json")
    s = Settings(_env_file=None)
    assert s.default_style == "short"
    assert s.log_format == "json"
