"""``ratelimit-explain``: explain pasted response headers from the terminal.

Examples::

    curl -si https://api.github.com/rate_limit | ratelimit-explain
    ratelimit-explain -H "Retry-After: 120" --audience developer --json
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from ratelimit_explain.config import settings
from ratelimit_explain.engine.explainer import explain_rate_limit
from ratelimit_explain.engine.models import ExplainOptions
from ratelimit_explain.header_text import parse_header_text, parse_now_override
from ratelimit_explain.logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ratelimit-explain",
        description="Explain X-RateLimit-* and Retry-After response headers",
    )
    parser.add_argument(
        "-f", "--file", type=argparse.FileType("r"), default=None,
        help="Read 'Key: Value' header lines from FILE ('-' for stdin)",
    )
    parser.add_argument(
        "-H", "--header", action="append", default=[], metavar="'KEY: VALUE'",
        help="Add a single header (repeatable, applied after --file)",
    )
    parser.add_argument(
        "--now", type=str, default=None,
        help="Reference time in ms since the epoch (default: current time)",
    )
    parser.add_argument(
        "--audience", choices=["user", "developer"], default=settings.default_audience,
        help=f"Who the message is for (default: {settings.default_audience})",
    )
    parser.add_argument(
        "--style", choices=["short", "verbose"], default=settings.default_style,
        help=f"Duration wording (default: {settings.default_style})",
    )
    parser.add_argument(
        "--json", action="store_true",
        help="Print the full explanation as JSON",
    )
    parser.add_argument(
        "--log-level", default=settings.log_level,
        help=f"Logging level (default: {settings.log_level})",
    )
    return parser


def _read_headers(args: argparse.Namespace) -> dict[str, str]:
    headers: dict[str, str] = {}
    stream = args.file
    if stream is None and not args.header and not sys.stdin.isatty():
        stream = sys.stdin
    if stream is not None:
        headers.update(parse_header_text(stream.read()))
    for line in args.header:
        headers.update(parse_header_text(line))
    return headers


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, settings.log_format)

    headers = _read_headers(args)
    logger.debug("Parsed %d header(s): %s", len(headers), ", ".join(headers))

    options = ExplainOptions(
        now=parse_now_override(args.now),
        audience=args.audience,
        style=args.style,
    )
    explanation = explain_rate_limit(headers, options)

    if args.json:
        print(json.dumps(explanation.to_dict(), indent=2))
    else:
        print(f"[{explanation.severity}] {explanation.message}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
