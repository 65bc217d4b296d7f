"""Shared helpers: config directory resolution and atomic file writes."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def peertime_dir() -> Path:
    """Return the config directory (``$PEERTIME_DIR`` or ``~/.peertime``)."""
    env = os.environ.get("PEERTIME_DIR", "").strip()
    if env:
        return Path(env).expanduser()
    return Path.home() / ".peertime"


def atomic_write_text(path: Path, text: str) -> None:
    """Write text to ``path`` via a temp file + rename.

    Parent directories are created. Readers never observe a half-written file.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(
        dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp"
    )
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, path)
    except BaseException:
        try:
            os.unlink(tmp_name)
        except OSError:
            pass
        raise
