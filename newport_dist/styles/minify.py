"""Minified companions for compiled CSS."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from ..utils import write_text
from .toolchain import DEFAULT_TOOLCHAIN, Toolchain

logger = logging.getLogger(__name__)

MIN_SUFFIX = ".min"


def minified_path(path: Path) -> Path:
    return path.with_name(f"{path.stem}{MIN_SUFFIX}{path.suffix}")


def minify_stylesheets(paths: Iterable[Path], *, toolchain: Toolchain = DEFAULT_TOOLCHAIN) -> List[Path]:
    """Write ``X.min.css`` next to every ``X.css``; the source file is left untouched."""

    written: List[Path] = []
    for path in sorted(set(Path(p) for p in paths)):
        if path.stem.endswith(MIN_SUFFIX):
            continue
        target = minified_path(path)
        write_text(target, toolchain.minify(path.read_text(encoding="utf-8")))
        written.append(target)
        logger.debug("Minified %s -> %s", path.name, target.name)
    return written
