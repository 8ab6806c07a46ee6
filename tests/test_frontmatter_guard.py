from __future__ import annotations

from pathlib import Path

import pytest

from core.frontmatter import MetadataFile
from core.models import RunContext
from hygiene.errors import ReasonCode
from tools.guards import frontmatter_guard


def _write(p: Path, text: str) -> None:
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(text, encoding="utf-8")


def test_valid_file_passes(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _write(tmp_path / "agents" / "foo.md", "---\nname: foo\ndescription: bar\n---\nbody")

    rc = frontmatter_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 0
    assert "agents/foo.md: Valid" in captured.out
    assert captured.err == ""


def test_missing_end_delimiter_is_distinct(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "commands" / "run.md", "---\nname: run\ndescription: d\n")

    rc = frontmatter_guard.run([str(tmp_path)])
    err = capsys.readouterr().err

    assert rc == 1
    assert "ERROR commands/run.md: Missing frontmatter end delimiter" in err
    assert "Missing required fields" not in err


def test_each_failure_is_one_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "skills" / "a.md", "no frontmatter\n")
    _write(tmp_path / "skills" / "b.md", "---\nname: [x\n---\n")
    _write(tmp_path / "skills" / "c.md", "---\nname: c\n---\n")
    _write(tmp_path / "skills" / "d.md", "---\nname: d\ndescription: 7\n---\n")

    rc = frontmatter_guard.run([str(tmp_path)])
    captured = capsys.readouterr()

    assert rc == 1
    assert "ERROR skills/a.md: Missing frontmatter start" in captured.err
    assert "ERROR skills/b.md: Invalid YAML - " in captured.err
    assert "ERROR skills/c.md: Missing required fields: description" in captured.err
    assert "ERROR skills/d.md: 'description' must be a non-empty string" in captured.err
    assert "frontmatter: 4 file(s) scanned, 4 error(s)" in captured.out


def test_missing_directories_are_skipped(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    _write(tmp_path / "README.md", "no frontmatter here\n")

    rc = frontmatter_guard.run([str(tmp_path)])

    assert rc == 0
    assert "frontmatter: 0 file(s) scanned" in capsys.readouterr().out


def test_undecodable_file_is_an_error(tmp_path: Path) -> None:
    path = tmp_path / "agents" / "bad.md"
    path.parent.mkdir()
    path.write_bytes(b"---\nname: caf\xe9\n---\n")

    [violation] = frontmatter_guard.check_file(
        MetadataFile("agents", path, "agents/bad.md"), RunContext()
    )

    assert violation.code is ReasonCode.unreadable_file
    assert violation.severity == "error"


def test_non_string_model_does_not_fail(tmp_path: Path) -> None:
    _write(tmp_path / "agents" / "a.md", "---\nname: a\ndescription: d\nmodel: 4\n---\n")

    assert frontmatter_guard.run([str(tmp_path)]) == 0
