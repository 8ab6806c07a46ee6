"""Drivers that feed files to per-file checks and collect the results."""
from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from core.frontmatter import MetadataFile, iter_metadata_files
from core.models import RunContext, RunSummary, Violation
from core.report import Reporter
from core.walker import DEFAULT_EXCLUDED_DIRS, FileEntry, walk

FileCheck = Callable[[FileEntry, RunContext], list[Violation]]
MetadataCheck = Callable[[MetadataFile, RunContext], list[Violation]]


def run_tree_check(
    roots: list[str],
    check: FileCheck,
    reporter: Reporter,
    excluded: frozenset[str] = DEFAULT_EXCLUDED_DIRS,
) -> RunSummary:
    """Walk every root and apply ``check`` to each file in traversal order."""
    ctx = RunContext()

    def visit(entry: FileEntry) -> None:
        ctx.files_scanned += 1
        fixed_before = len(ctx.fixed)
        for violation in check(entry, ctx):
            reporter.record(ctx, violation)
        for path in ctx.fixed[fixed_before:]:
            reporter.progress(f"Fixed: {path}")

    for root in roots:
        walk(Path(root), visit, excluded)
    return reporter.summary(ctx)


def run_metadata_check(
    roots: list[str], check: MetadataCheck, reporter: Reporter
) -> RunSummary:
    """Apply ``check`` to every agent/skill/command document.

    One context spans all roots and directories, so state such as the set of
    seen names is shared by the whole run.
    """
    ctx = RunContext()
    for root in roots:
        for mfile in iter_metadata_files(root):
            ctx.files_scanned += 1
            violations = check(mfile, ctx)
            for violation in violations:
                reporter.record(ctx, violation)
            if not any(v.severity == "error" for v in violations):
                reporter.progress(f"{mfile.relative_path}: Valid")
    return reporter.summary(ctx)
