"""Deterministic depth-first file tree walker shared by every guard."""
from __future__ import annotations

import os
import stat
from collections.abc import Callable, Iterator
from dataclasses import dataclass
from pathlib import Path

from hygiene.errors import WalkError
from hygiene.logging import get_logger

DEFAULT_EXCLUDED_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        "dist",
        "build",
        ".next",
        ".venv",
        "__pycache__",
        ".mypy_cache",
        ".pytest_cache",
        ".ruff_cache",
    }
)

_log = get_logger(__name__)


@dataclass(frozen=True)
class FileEntry:
    absolute_path: Path
    relative_path: str
    name: str
    extension: str
    size: int


def _stat(path: Path) -> os.stat_result:
    try:
        return path.stat()
    except OSError as exc:
        raise WalkError(path, f"cannot stat: {exc.strerror or exc}") from exc


def _list_dir(path: Path) -> list[Path]:
    try:
        return sorted(path.iterdir(), key=lambda p: p.name)
    except OSError as exc:
        raise WalkError(path, f"cannot list directory: {exc.strerror or exc}") from exc


def iter_files(
    root: str | Path, excluded: frozenset[str] = DEFAULT_EXCLUDED_DIRS
) -> Iterator[FileEntry]:
    """Yield every file under ``root`` exactly once, sorted by name per level.

    Directories whose name is in ``excluded`` are pruned at any depth.
    Symlinks are followed; a symlink cycle, a directory reachable through
    more than one path, or any I/O failure raises ``WalkError`` instead of
    skipping or repeating part of the tree.
    """
    base = Path(root).absolute()
    st = _stat(base)
    if not stat.S_ISDIR(st.st_mode):
        raise WalkError(base, "root is not a directory")
    _log.debug("walk_start", extra={"path": str(base)})
    key = (st.st_dev, st.st_ino)
    yield from _walk_dir(base, base, excluded, {key}, {key})


def _walk_dir(
    base: Path,
    directory: Path,
    excluded: frozenset[str],
    active: set[tuple[int, int]],
    visited: set[tuple[int, int]],
) -> Iterator[FileEntry]:
    for child in _list_dir(directory):
        st = _stat(child)
        if stat.S_ISDIR(st.st_mode):
            if child.name in excluded:
                continue
            key = (st.st_dev, st.st_ino)
            if key in active:
                raise WalkError(child, "symlink cycle detected")
            if key in visited:
                raise WalkError(child, "directory already visited through another path")
            active.add(key)
            visited.add(key)
            yield from _walk_dir(base, child, excluded, active, visited)
            active.discard(key)
            continue
        yield FileEntry(
            absolute_path=child,
            relative_path=child.relative_to(base).as_posix(),
            name=child.name,
            extension=child.suffix.lower(),
            size=st.st_size,
        )


def walk(
    root: str | Path,
    on_file: Callable[[FileEntry], None],
    excluded: frozenset[str] = DEFAULT_EXCLUDED_DIRS,
) -> None:
    for entry in iter_files(root, excluded):
        on_file(entry)
