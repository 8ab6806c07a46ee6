"""Guard runners for repository hygiene.

Each guard exposes a `run(roots: list[str]) -> int` function that returns
non-zero when error-level violations are found, and a `main()` entry point
that scans the current directory by default.
"""
from __future__ import annotations

import sys
from collections.abc import Callable

from hygiene.config import Settings
from hygiene.errors import WalkError
from hygiene.logging import get_logger, setup_logging

Runner = Callable[[list[str]], int]


def run_guard(name: str, runner: Runner, argv: list[str] | None = None) -> int:
    """Entry point plumbing shared by every guard script.

    A ``WalkError`` aborts the run without a summary and exits with status 2.
    """
    settings = Settings.from_env()
    setup_logging(settings.log_level)
    roots = settings.roots(sys.argv[1:] if argv is None else argv)
    try:
        return runner(roots)
    except WalkError as exc:
        sys.stderr.write(f"FATAL {exc}\n")
        get_logger(__name__).error(
            "walk_failed", extra={"check": name, "path": str(exc.path)}
        )
        return 2
