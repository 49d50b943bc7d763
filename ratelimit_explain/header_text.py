"""Parse pasted ``Key: Value`` header blocks (curl -i output, devtools)."""

from __future__ import annotations

import re

_LINE_SPLIT = re.compile(r"\r?\n")
_LEADING_INT = re.compile(r"[+-]?[0-9]+")


def parse_header_text(text: str) -> dict[str, str]:
    """Return ``{key: value}`` for every ``Key: Value`` line in *text*.

    Lines without a colon (status lines, blanks) are skipped. A repeated key
    keeps its last value.
    """
    headers: dict[str, str] = {}
    for line in _LINE_SPLIT.split(text):
        line = line.strip()
        if not line or ":" not in line:
            continue
        key, _, value = line.partition(":")
        key = key.strip()
        if key:
            headers[key] = value.strip()
    return headers


def parse_now_override(raw: str | None) -> int | None:
    """Read a ms-since-epoch override such as ``"1707379160000"``."""
    if raw is None:
        return None
    match = _LEADING_INT.match(raw.strip())
    if match is None:
        return None
    return int(match.group())
