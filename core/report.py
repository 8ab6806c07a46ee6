from __future__ import annotations

import sys
from typing import TextIO

from core.models import RunContext, RunSummary, Violation


class Reporter:
    """Human-readable output of one guard run.

    Violations and warnings go to ``err``; headers, progress lines and the
    final summary go to ``out``.
    """

    def __init__(
        self, check: str, out: TextIO | None = None, err: TextIO | None = None
    ) -> None:
        self.check = check
        self._out = out if out is not None else sys.stdout
        self._err = err if err is not None else sys.stderr

    def start(self, detail: str) -> None:
        self._out.write(f"{detail}\n")

    def progress(self, line: str) -> None:
        self._out.write(f"{line}\n")

    def violation(self, v: Violation) -> None:
        label = "ERROR" if v.severity == "error" else "WARNING"
        self._err.write(f"{label} {v.relative_path}: {v.message}\n")
        if v.contains_credentials:
            self._err.write("   File appears to contain credentials!\n")

    def record(self, ctx: RunContext, v: Violation) -> None:
        ctx.add(v)
        self.violation(v)

    def summary(self, ctx: RunContext) -> RunSummary:
        result = ctx.summary()
        self._out.write(
            f"{self.check}: {result.files_scanned} file(s) scanned, "
            f"{result.error_count} error(s), {result.warning_count} warning(s), "
            f"{result.fixed_count} fixed\n"
        )
        return result
