"""Recursive, idempotent removal of paths and glob matches."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List, Optional, Union

from .match import match_patterns

logger = logging.getLogger(__name__)


def _remove_path(path: Path) -> bool:
    if path.is_symlink() or path.is_file():
        path.unlink(missing_ok=True)
        return True
    if path.is_dir():
        shutil.rmtree(path)
        return True
    return False


def remove(base: Union[str, Path], pattern: Optional[str] = None) -> List[Path]:
    """Delete ``base``, or only the files under it that match ``pattern``.

    ``base`` is always taken literally; glob characters in it are not
    expanded. Missing targets and patterns without matches are a no-op.
    """

    base_path = Path(base)
    if not base_path.is_absolute():
        base_path = Path.cwd() / base_path

    if pattern is None:
        candidates = [base_path]
    else:
        candidates = [base_path / relative for relative in match_patterns(pattern, base_path)]

    removed: List[Path] = []
    for candidate in candidates:
        if _remove_path(candidate):
            removed.append(candidate)

    logger.debug("Removed %d path(s) for %s %s", len(removed), base_path, pattern or "")
    return removed
