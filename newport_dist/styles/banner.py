"""Version banners stamped into distributed files."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from ..utils import prepend_text


def css_banner(display_name: str, version: str) -> str:
    return f"/*! {display_name} {version} */"


def scss_banner(display_name: str, version: str) -> str:
    return f"// {display_name} {version}"


def readme_banner(display_name: str, version: str) -> str:
    # Trailing spaces are kept so the README matches previously published ones.
    return f"# {display_name} \n# Version: {version} "


def prepend_banner(files: Iterable[Path], banner: str) -> List[Path]:
    """Prepend ``banner`` as the first line of every file."""

    stamped: List[Path] = []
    for path in files:
        prepend_text(Path(path), banner + "\n")
        stamped.append(Path(path))
    return stamped
