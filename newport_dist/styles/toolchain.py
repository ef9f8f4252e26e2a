"""External stylesheet tools, bundled behind one seam."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

from ..exceptions import StylesheetCompileError

CompileFn = Callable[[Path, Sequence[Path], int], str]
TransformFn = Callable[[str], str]


def sass_compile(entry: Path, include_paths: Sequence[Path], precision: int) -> str:
    import sass

    try:
        return sass.compile(
            filename=str(entry),
            include_paths=[str(path) for path in include_paths],
            precision=precision,
        )
    except sass.CompileError as exc:
        raise StylesheetCompileError(entry, str(exc)) from exc


def keep_prefixes(css: str) -> str:
    """Default vendor prefix pass: returns the CSS unchanged.

    It adds no vendor prefixes and never strips an existing one. Pass a real
    prefixer through ``Toolchain(prefix=...)`` when prefixed output is needed.
    """

    return css


def rcssmin_minify(css: str) -> str:
    import rcssmin

    return rcssmin.cssmin(css)


@dataclass(frozen=True, slots=True)
class Toolchain:
    compile: CompileFn = sass_compile
    prefix: TransformFn = keep_prefixes
    minify: TransformFn = rcssmin_minify


DEFAULT_TOOLCHAIN = Toolchain()
