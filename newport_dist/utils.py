"""Shared file helpers used by the dist steps."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Optional


def write_text(path: Path, content: str, *, newline: Optional[str] = None) -> None:
    """Write text to file ensuring parent directories exist."""

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8", newline=newline)


def write_text_atomic(path: Path, content: str) -> None:
    """Write text through a sibling temp file and swap it into place."""

    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as handle:
            handle.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise


def prepend_text(path: Path, prefix: str) -> None:
    """Insert ``prefix`` at the very start of a text file."""

    content = path.read_text(encoding="utf-8")
    path.write_text(prefix + content, encoding="utf-8", newline="")
