from __future__ import annotations

import sys

from core.frontmatter import MetadataFile, parse_frontmatter, validate_record
from core.models import RunContext, Violation
from core.report import Reporter
from core.runner import run_metadata_check
from core.text import try_read_text
from hygiene.errors import FrontmatterError, NotTextError, ReasonCode
from tools.guards import run_guard

# Advisory fields per metadata directory; absence is a warning only.
RECOMMENDED_FIELDS: dict[str, str] = {"agents": "model", "skills": "location"}


def check_file(mfile: MetadataFile, ctx: RunContext) -> list[Violation]:
    rel = mfile.relative_path
    try:
        data = parse_frontmatter(try_read_text(mfile.path))
    except NotTextError as exc:
        return [Violation(rel, ReasonCode.unreadable_file, exc.reason)]
    except FrontmatterError as exc:
        return [Violation(rel, exc.code, exc.message)]

    name = data.get("name")
    if name is None:
        return [Violation(rel, ReasonCode.missing_name, "Missing 'name' field in frontmatter")]
    key = str(name)
    if key in ctx.seen_names:
        return [
            Violation(
                rel, ReasonCode.duplicate_name, f"Duplicate name '{key}' found in project"
            )
        ]
    ctx.seen_names.add(key)

    try:
        validate_record(data)
    except FrontmatterError as exc:
        return [Violation(rel, exc.code, exc.message)]

    out: list[Violation] = []
    field = RECOMMENDED_FIELDS.get(mfile.kind)
    if field is not None and not data.get(field):
        out.append(
            Violation(
                rel,
                ReasonCode.recommended_field,
                f"'{field}' field recommended for {mfile.kind}",
                severity="warning",
            )
        )
    for advisory in ("model", "location"):
        value = data.get(advisory)
        if value is not None and not isinstance(value, str):
            out.append(
                Violation(
                    rel,
                    ReasonCode.recommended_field,
                    f"'{advisory}' should be a string",
                    severity="warning",
                )
            )
    return out


def run(roots: list[str]) -> int:
    reporter = Reporter("agent-consistency")
    reporter.start("Verifying agent/skill/command consistency...")
    return run_metadata_check(roots, check_file, reporter).exit_code


def main() -> int:
    return run_guard("agent-consistency", run, sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
