from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from hygiene.errors import ReasonCode

Severity = Literal["error", "warning"]


@dataclass(frozen=True)
class Violation:
    relative_path: str
    code: ReasonCode
    message: str
    severity: Severity = "error"
    contains_credentials: bool = False


@dataclass(frozen=True)
class RunSummary:
    files_scanned: int
    error_count: int
    warning_count: int
    fixed_count: int

    @property
    def ok(self) -> bool:
        return self.error_count == 0

    @property
    def exit_code(self) -> int:
        return 0 if self.ok else 1


@dataclass
class RunContext:
    """Mutable state of one guard run, owned by the guard's ``run`` function.

    Per-file checks receive it explicitly; nothing here is module-global.
    """

    files_scanned: int = 0
    violations: list[Violation] = field(default_factory=list)
    fixed: list[str] = field(default_factory=list)
    seen_names: set[str] = field(default_factory=set)

    def add(self, violation: Violation) -> None:
        self.violations.append(violation)

    def summary(self) -> RunSummary:
        errors = sum(1 for v in self.violations if v.severity == "error")
        return RunSummary(
            files_scanned=self.files_scanned,
            error_count=errors,
            warning_count=len(self.violations) - errors,
            fixed_count=len(self.fixed),
        )
