from __future__ import annotations

import sys

from core.models import RunContext, Violation
from core.report import Reporter
from core.runner import run_tree_check
from core.walker import DEFAULT_EXCLUDED_DIRS, FileEntry
from hygiene.errors import ReasonCode
from tools.guards import run_guard

MIB = 1024 * 1024
DEFAULT_LIMIT = MIB
IMAGE_LIMIT = 500 * 1024

IMAGE_EXTS: frozenset[str] = frozenset({".png", ".jpg", ".jpeg", ".gif", ".svg", ".webp"})
VIDEO_EXTS: frozenset[str] = frozenset({".mp4", ".mov", ".avi", ".mkv", ".webm"})
EXCLUDED_DIRS: frozenset[str] = DEFAULT_EXCLUDED_DIRS | {".cache"}


def limit_for(extension: str) -> int:
    if extension in IMAGE_EXTS:
        return IMAGE_LIMIT
    return DEFAULT_LIMIT


def check_entry(entry: FileEntry, ctx: RunContext) -> list[Violation]:
    if entry.extension in VIDEO_EXTS:
        return [
            Violation(
                relative_path=entry.relative_path,
                code=ReasonCode.video_not_allowed,
                message="Video files not allowed in repository",
            )
        ]
    limit = limit_for(entry.extension)
    if entry.size <= limit:
        return []
    return [
        Violation(
            relative_path=entry.relative_path,
            code=ReasonCode.file_too_large,
            message=(
                f"{entry.size / MIB:.2f}MB exceeds limit of {limit / MIB:.2f}MB"
            ),
        )
    ]


def run(roots: list[str]) -> int:
    reporter = Reporter("file-sizes")
    reporter.start("Checking file sizes...")
    return run_tree_check(roots, check_entry, reporter, EXCLUDED_DIRS).exit_code


def main() -> int:
    return run_guard("file-sizes", run, sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
