"""Stylesheet compilation: compile, prefix, rename, write."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable, Sequence

from ..exceptions import SourceNotFoundError, StylesheetCompileError
from ..utils import write_text
from .rename import RenameTable
from .toolchain import DEFAULT_TOOLCHAIN, Toolchain

logger = logging.getLogger(__name__)

DEFAULT_PRECISION = 10


def compile_stylesheets(
    entries: Sequence[Path],
    include_paths: Iterable[Path],
    destination: Path,
    *,
    rename: RenameTable,
    toolchain: Toolchain = DEFAULT_TOOLCHAIN,
    precision: int = DEFAULT_PRECISION,
) -> Dict[Path, str]:
    """Compile each entry in order and write the CSS under ``destination``.

    Returns a mapping of written CSS path to its content.
    """

    includes = [Path(path) for path in include_paths]
    outputs: Dict[Path, str] = {}
    for entry in entries:
        entry = Path(entry)
        if not entry.is_file():
            raise SourceNotFoundError(entry)
        try:
            css = toolchain.compile(entry, includes, precision)
        except StylesheetCompileError as exc:
            logger.error("Stylesheet compile error in %s: %s", entry.name, exc.detail)
            raise
        css = toolchain.prefix(css)
        target = Path(destination) / rename.output_name(entry)
        write_text(target, css)
        outputs[target] = css
        logger.info("Compiled %s -> %s", entry.name, target.name)
    return outputs
