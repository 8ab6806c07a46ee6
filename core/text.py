from __future__ import annotations

import os
import tempfile
from pathlib import Path

from hygiene.errors import NotTextError


def try_read_text(path: Path) -> str:
    """Read ``path`` as UTF-8 without newline translation.

    Raises ``NotTextError`` when the file cannot be read, contains NUL bytes,
    or is not valid UTF-8. Callers decide whether that matters.
    """
    try:
        raw = path.read_bytes()
    except OSError as exc:
        raise NotTextError(path, f"unreadable: {exc.strerror or exc}") from exc
    if b"\x00" in raw:
        raise NotTextError(path, "contains NUL bytes")
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise NotTextError(path, f"invalid utf-8 at byte {exc.start}") from exc


def normalize_whitespace(content: str) -> str:
    """Strip trailing whitespace per line and end with exactly one newline.

    ``\\r`` counts as trailing whitespace, so CRLF line endings become LF.
    Empty (or whitespace-only) content normalizes to the empty string.
    """
    lines = [line.rstrip() for line in content.split("\n")]
    out = "\n".join(lines).rstrip("\n")
    return out + "\n" if out else ""


def write_text_atomic(path: Path, text: str) -> None:
    """Replace ``path`` with ``text`` so readers see old or new content only.

    Symlinks are written through: the link target is replaced, the link stays.
    """
    target = path.resolve()
    fd, tmp_name = tempfile.mkstemp(prefix=f".{target.name}.", suffix=".tmp", dir=target.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as fh:
            fh.write(text.encode("utf-8"))
            fh.flush()
            os.fsync(fh.fileno())
        os.chmod(tmp_path, target.stat().st_mode & 0o7777)
        os.replace(tmp_path, target)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
