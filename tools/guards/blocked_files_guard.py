from __future__ import annotations

import re
import sys
from pathlib import Path

from core.matchers import Matcher, PatternMatcher, SubstringMatcher, matches_entry
from core.models import RunContext, Violation
from core.report import Reporter
from core.runner import run_tree_check
from core.text import try_read_text
from core.walker import DEFAULT_EXCLUDED_DIRS, FileEntry
from hygiene.errors import NotTextError, ReasonCode
from tools.guards import run_guard

BLOCKED: tuple[Matcher, ...] = (
    # Environment files
    PatternMatcher(r"^\.env(\..*)?$"),
    PatternMatcher(r"^\.env\.local$"),
    PatternMatcher(r"^\.env\..*\.local$"),
    # Credentials and secrets
    PatternMatcher(r"\.key$"),
    PatternMatcher(r"\.pem$"),
    SubstringMatcher("private_key"),
    SubstringMatcher("secret_key"),
    SubstringMatcher("credentials"),
    SubstringMatcher("oauth_token"),
    SubstringMatcher("api_key"),
    SubstringMatcher("auth_token"),
    # IDE settings with secrets
    PatternMatcher(r"\.vscode/settings\.json$"),
    PatternMatcher(r"\.idea/.*\.xml$"),
    PatternMatcher(r"\.idea/.*\.yml$"),
)

SUSPICIOUS_CONTENT: tuple[re.Pattern[str], ...] = tuple(
    re.compile(p, re.IGNORECASE)
    for p in (
        r"api[_-]?key\s*[:=]",
        r"secret\s*[:=]",
        r"password\s*[:=]",
        r"token\s*[:=]",
        r"private[_-]?key\s*[:=]",
    )
)

EXCLUDED_DIRS: frozenset[str] = DEFAULT_EXCLUDED_DIRS


def contains_credentials(path: Path) -> bool:
    try:
        content = try_read_text(path)
    except NotTextError:
        # Binary or unreadable: the file is still blocked by its name.
        return False
    return any(p.search(content) for p in SUSPICIOUS_CONTENT)


def check_entry(entry: FileEntry, ctx: RunContext) -> list[Violation]:
    if not matches_entry(BLOCKED, entry):
        return []
    return [
        Violation(
            relative_path=entry.relative_path,
            code=ReasonCode.blocked_file,
            message="This file should not be committed. Add to .gitignore",
            contains_credentials=contains_credentials(entry.absolute_path),
        )
    ]


def run(roots: list[str]) -> int:
    reporter = Reporter("blocked-files")
    reporter.start("Checking for blocked/sensitive files...")
    return run_tree_check(roots, check_entry, reporter, EXCLUDED_DIRS).exit_code


def main() -> int:
    return run_guard("blocked-files", run, sys.argv[1:])


if __name__ == "__main__":
    raise SystemExit(main())
