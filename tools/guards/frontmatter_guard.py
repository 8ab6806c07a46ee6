from __future__ import annotations

import sys

from core.frontmatter import METADATA_DIRS, MetadataFile, load_record
from core.models import RunContext, Violation
from core.report import Reporter
from core.runner import run_metadata_check
from core.text import try_read_text
from hygiene.errors import FrontmatterError, NotTextError, ReasonCode
from tools.guards import run_guard


def check_file(mfile: MetadataFile, ctx: RunContext) -> list[Violation]:
    try:
        content = try_read_text(mfile.path)
    except NotTextError as exc:
        return [
            Violation(mfile.relative_path, ReasonCode.unreadable_file, exc.reason)
        ]
    try:
        load_record(content)
    except FrontmatterError as exc:
        return [Violation(mfile.relative_path, exc.code, exc.message)]
    return []


def run(roots: list[str]) -> int:
    reporter = Reporter("frontmatter")
    reporter.start(f"Validating frontmatter in: {', '.join(METADATA_DIRS)}")
    return run_metadata_check(roots, check_file, reporter).exit_code


def main() -> int:
    return run_guard("frontmatter", run, sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
