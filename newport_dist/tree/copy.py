"""Structure-preserving file copies."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import List

from ..exceptions import SourceNotFoundError
from .match import Patterns, literal_patterns, match_patterns

logger = logging.getLogger(__name__)


def copy_tree(patterns: Patterns, base: Path, destination: Path, *, optional: bool = False) -> List[Path]:
    """Copy every file selected by ``patterns`` under ``base`` into ``destination``.

    Relative structure is preserved and existing files are overwritten. A
    missing ``base`` or a literal pattern without a match is an error unless
    ``optional`` is set; a glob that selects nothing is not.
    """

    base = Path(base)
    destination = Path(destination)

    if not base.is_dir():
        if optional:
            logger.debug("Optional source %s is missing; nothing to copy", base)
            return []
        raise SourceNotFoundError(base)

    if not optional:
        for literal in literal_patterns(patterns):
            if not (base / literal).is_file():
                raise SourceNotFoundError(base / literal)

    written: List[Path] = []
    for relative in match_patterns(patterns, base):
        target = destination / relative
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copy2(base / relative, target)
        written.append(target)

    logger.debug("Copied %d file(s) from %s to %s", len(written), base, destination)
    return written
