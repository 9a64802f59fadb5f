"""Filesystem helpers shared by barrel and report writers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from .logging import get_logger

logger = get_logger("utils")


def atomic_write_text(path: Path, content: str) -> None:
    """Replace ``path`` with ``content`` via a temp file in the same directory."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    os.close(fd)
    tmp = Path(tmp_path)
    try:
        tmp.write_text(content, encoding="utf-8")
        tmp.replace(path)
    except Exception:
        tmp.unlink(missing_ok=True)
        raise
    logger.debug("Wrote %s (%d bytes)", path, len(content))


def relativize(path: Path, base: Path | None = None) -> str:
    """Return ``path`` relative to ``base`` (cwd by default) when possible."""
    try:
        return path.relative_to(base or Path.cwd()).as_posix()
    except ValueError:
        return str(path)
