from __future__ import annotations

import argparse
from collections.abc import Sequence
from functools import partial

from tools.guards import (
    Runner,
    blocked_files_guard,
    consistency_guard,
    file_size_guard,
    frontmatter_guard,
    run_guard,
    whitespace_guard,
)


def run_guards(roots: list[str], fix: bool = False) -> int:
    runners: list[Runner] = [
        blocked_files_guard.run,
        file_size_guard.run,
        frontmatter_guard.run,
        consistency_guard.run,
    ]
    if fix:
        runners.insert(0, whitespace_guard.run)
    else:
        runners.append(partial(whitespace_guard.run, write=False))
    # Every guard runs so one report shows all problems at once.
    results = [runner(roots) for runner in runners]
    return 1 if any(rc != 0 for rc in results) else 0


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Repository hygiene checks")
    ap.add_argument(
        "--fix", action="store_true", help="Rewrite files with whitespace issues first"
    )
    ap.add_argument("roots", nargs="*")
    args = ap.parse_args(list(argv) if argv is not None else None)
    return run_guard("all", partial(run_guards, fix=args.fix), list(args.roots))


if __name__ == "__main__":
    raise SystemExit(main())
