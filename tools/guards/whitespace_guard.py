from __future__ import annotations

import argparse
from collections.abc import Sequence
from functools import partial

from core.models import RunContext, Violation
from core.report import Reporter
from core.runner import run_tree_check
from core.text import normalize_whitespace, try_read_text, write_text_atomic
from core.walker import DEFAULT_EXCLUDED_DIRS, FileEntry
from hygiene.errors import NotTextError, ReasonCode
from tools.guards import run_guard

INCLUDED_EXTS: frozenset[str] = frozenset(
    {".js", ".jsx", ".ts", ".tsx", ".json", ".md", ".yml", ".yaml", ".py"}
)
EXCLUDED_DIRS: frozenset[str] = DEFAULT_EXCLUDED_DIRS


def _unprocessable(entry: FileEntry, reason: str) -> Violation:
    return Violation(
        relative_path=entry.relative_path,
        code=ReasonCode.unprocessable_file,
        message=f"Could not process: {reason}",
        severity="warning",
    )


def check_entry(
    entry: FileEntry, ctx: RunContext, *, write: bool = True
) -> list[Violation]:
    if entry.extension not in INCLUDED_EXTS:
        return []
    try:
        content = try_read_text(entry.absolute_path)
    except NotTextError as exc:
        return [_unprocessable(entry, exc.reason)]
    fixed = normalize_whitespace(content)
    if fixed == content:
        return []
    if not write:
        return [
            Violation(
                relative_path=entry.relative_path,
                code=ReasonCode.needs_normalization,
                message="Trailing whitespace or final newline needs fixing",
            )
        ]
    try:
        write_text_atomic(entry.absolute_path, fixed)
    except OSError as exc:
        return [_unprocessable(entry, exc.strerror or str(exc))]
    ctx.fixed.append(entry.relative_path)
    return []


def run(roots: list[str], *, write: bool = True) -> int:
    reporter = Reporter("common-issues")
    reporter.start("Fixing common issues..." if write else "Checking common issues...")
    check = partial(check_entry, write=write)
    return run_tree_check(roots, check, reporter, EXCLUDED_DIRS).exit_code


def main(argv: Sequence[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        description="Strip trailing whitespace and enforce a single final newline"
    )
    ap.add_argument("--check", action="store_true", help="Report files without rewriting")
    ap.add_argument("roots", nargs="*")
    args = ap.parse_args(list(argv) if argv is not None else None)
    return run_guard(
        "common-issues", partial(run, write=not args.check), list(args.roots)
    )


if __name__ == "__main__":
    raise SystemExit(main())
