from __future__ import annotations

from pathlib import Path

import pytest

from core.models import RunContext
from core.walker import iter_files
from hygiene.errors import ReasonCode
from tools.guards import blocked_files_guard


def _write(p: Path, text: str = "") -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


@pytest.mark.parametrize("name", [".env", ".env.production", ".env.local", ".env.dev.local"])
def test_dotenv_files_report_exactly_one_error(tmp_path: Path, name: str) -> None:
    _write(tmp_path / name, "DEBUG=1\n")
    ctx = RunContext()

    violations = [
        v for e in iter_files(tmp_path) for v in blocked_files_guard.check_entry(e, ctx)
    ]

    assert len(violations) == 1
    assert violations[0].code is ReasonCode.blocked_file
    assert violations[0].severity == "error"
    assert (tmp_path / name).read_text(encoding="utf-8") == "DEBUG=1\n"


def test_blocked_file_fails_run_and_names_path(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "README.md", "hello\n")
    _write(tmp_path / "certs" / "server.pem", "-----BEGIN-----\n")

    rc = blocked_files_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 1
    assert "ERROR certs/server.pem: This file should not be committed" in captured.err
    assert "README.md" not in captured.err
    assert "blocked-files: 2 file(s) scanned, 1 error(s)" in captured.out


def test_excluded_directories_are_never_flagged(tmp_path: Path) -> None:
    _write(tmp_path / "node_modules" / "deep" / ".env", "TOKEN=1\n")
    _write(tmp_path / "app.py", "x = 1\n")

    assert blocked_files_guard.run([str(tmp_path)]) == 0


def test_credentials_in_content_are_flagged(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "config" / "my-api-key.txt", "API_KEY = abc123\n")

    rc = blocked_files_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "ERROR config/my-api-key.txt" in err
    assert "File appears to contain credentials!" in err


def test_binary_blocked_file_is_still_blocked(tmp_path: Path) -> None:
    (tmp_path / "id.key").write_bytes(b"\x00\x01token=\xff")
    ctx = RunContext()

    [entry] = list(iter_files(tmp_path))
    [violation] = blocked_files_guard.check_entry(entry, ctx)

    assert violation.contains_credentials is False


@pytest.mark.parametrize(
    ("rel", "blocked"),
    [
        (".vscode/settings.json", True),
        (".vscode/extensions.json", False),
        (".idea/workspace.xml", True),
        ("docs/Secret-Key-Rotation.md", True),
        ("src/credentials/loader.py", True),
        ("src/oauth_token_store.py", True),
        ("src/tokenizer.py", False),
    ],
)
def test_blocked_patterns(tmp_path: Path, rel: str, blocked: bool) -> None:
    _write(tmp_path / rel, "x\n")

    assert blocked_files_guard.run([str(tmp_path)]) == (1 if blocked else 0)


def test_clean_tree_reports_zero_totals(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    rc = blocked_files_guard.run([str(tmp_path)])

    assert rc == 0
    assert "blocked-files: 0 file(s) scanned, 0 error(s), 0 warning(s), 0 fixed" in (
        capsys.readouterr().out
    )
