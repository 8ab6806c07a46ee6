"""Frontmatter extraction and validation for agent/skill/command documents.

A document starts with a line that is exactly ``---``, followed by a YAML
mapping, closed by another ``---`` line. Each failed step raises
``FrontmatterError`` with its own reason code so guards can report them
distinctly.
"""
from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

import yaml
from pydantic import ValidationError

from hygiene.errors import FrontmatterError, ReasonCode, WalkError
from hygiene.models import FrontmatterRecord

METADATA_DIRS: tuple[str, ...] = ("agents", "skills", "commands")
REQUIRED_FIELDS: tuple[str, ...] = ("name", "description")
DELIMITER = "---"


@dataclass(frozen=True)
class MetadataFile:
    kind: str
    path: Path
    relative_path: str


def iter_metadata_files(root: str | Path) -> Iterator[MetadataFile]:
    """Markdown files directly inside each metadata directory that exists."""
    base = Path(root).absolute()
    for kind in METADATA_DIRS:
        directory = base / kind
        if not directory.is_dir():
            continue
        try:
            children = sorted(directory.iterdir(), key=lambda p: p.name)
        except OSError as exc:
            raise WalkError(directory, f"cannot list directory: {exc.strerror or exc}") from exc
        for path in children:
            if path.suffix == ".md" and path.is_file():
                yield MetadataFile(kind, path, path.relative_to(base).as_posix())


def split_frontmatter(content: str) -> str:
    """Return the raw YAML between the opening and closing delimiters."""
    lines = content.splitlines()
    if not lines or lines[0].rstrip() != DELIMITER:
        raise FrontmatterError(
            ReasonCode.missing_frontmatter_start, "Missing frontmatter start"
        )
    for index, line in enumerate(lines[1:], start=1):
        if line.rstrip() == DELIMITER:
            return "\n".join(lines[1:index])
    raise FrontmatterError(
        ReasonCode.missing_frontmatter_end, "Missing frontmatter end delimiter"
    )


def parse_frontmatter(content: str) -> dict[str, object]:
    raw = split_frontmatter(content)
    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        detail = " ".join(str(exc).split())
        raise FrontmatterError(ReasonCode.invalid_yaml, f"Invalid YAML - {detail}") from exc
    if not isinstance(data, dict):
        raise FrontmatterError(
            ReasonCode.invalid_yaml, "Invalid YAML - frontmatter must be a mapping"
        )
    return {str(k): v for k, v in data.items()}


def validate_record(data: dict[str, object]) -> FrontmatterRecord:
    missing = [f for f in REQUIRED_FIELDS if data.get(f) is None]
    if missing:
        raise FrontmatterError(
            ReasonCode.missing_fields,
            f"Missing required fields: {', '.join(missing)}",
        )
    try:
        return FrontmatterRecord.model_validate(data)
    except ValidationError as exc:
        field = str(exc.errors()[0]["loc"][0])
        raise FrontmatterError(
            ReasonCode.invalid_field, f"'{field}' must be a non-empty string"
        ) from exc


def load_record(content: str) -> FrontmatterRecord:
    return validate_record(parse_frontmatter(content))
