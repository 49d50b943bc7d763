"""Entry point for ``python -m ratelimit_explain``."""

from __future__ import annotations

import sys

from ratelimit_explain.cli import main

if __name__ == "__main__":
    sys.exit(main())
