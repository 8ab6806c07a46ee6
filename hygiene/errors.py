from __future__ import annotations

from enum import Enum
from pathlib import Path


class ReasonCode(str, Enum):
    blocked_file = "blocked-file"
    video_not_allowed = "video-not-allowed"
    file_too_large = "file-too-large"
    needs_normalization = "needs-normalization"
    unprocessable_file = "unprocessable-file"
    unreadable_file = "unreadable-file"
    missing_frontmatter_start = "missing-frontmatter-start"
    missing_frontmatter_end = "missing-frontmatter-end"
    invalid_yaml = "invalid-yaml"
    missing_fields = "missing-fields"
    invalid_field = "invalid-field"
    missing_name = "missing-name"
    duplicate_name = "duplicate-name"
    recommended_field = "recommended-field"


class HygieneError(Exception):
    """Base class for all guard errors."""


class WalkError(HygieneError):
    """The tree could not be traversed; the whole run is aborted."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


class NotTextError(HygieneError):
    """File content is binary or not valid UTF-8."""

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f"{path}: not a text file ({reason})")
        self.path = path
        self.reason = reason


class FrontmatterError(HygieneError):
    """A frontmatter block failed one step of validation.

    The ``code`` tells which step failed so callers can report distinct
    violations for missing delimiters, YAML errors and field problems.
    """

    def __init__(self, code: ReasonCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
