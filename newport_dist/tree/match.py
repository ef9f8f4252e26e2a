"""Glob selection over a base directory.

Patterns are POSIX-style and relative to the base directory. ``**`` crosses
directory boundaries, a trailing ``**`` selects every file below it, and a
leading ``!`` removes files matched by earlier patterns. Only regular files
are ever selected. Wildcards never match hidden entries (names starting with
``.``); a literal pattern may still name one.
"""

from __future__ import annotations

import os
import re
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Pattern, Set, Union

Patterns = Union[str, Iterable[str]]

NEGATION_PREFIX = "!"

_MAGIC_RE = re.compile(r"[*?\[]")


def has_magic(pattern: str) -> bool:
    return _MAGIC_RE.search(pattern) is not None


def as_pattern_list(patterns: Patterns) -> List[str]:
    if isinstance(patterns, str):
        return [patterns]
    return [str(pattern) for pattern in patterns]


def normalize_pattern(pattern: str) -> str:
    normalized = pattern.replace("\\", "/")
    while normalized.startswith("./"):
        normalized = normalized[2:]
    if normalized == "**" or normalized.endswith("/**"):
        normalized += "/*"
    return normalized


def literal_patterns(patterns: Patterns) -> List[str]:
    """Return the positive patterns that contain no glob characters."""

    return [
        normalize_pattern(pattern)
        for pattern in as_pattern_list(patterns)
        if not pattern.startswith(NEGATION_PREFIX) and not has_magic(pattern)
    ]


def _translate_segment(segment: str) -> str:
    out: List[str] = []
    index = 0
    while index < len(segment):
        char = segment[index]
        if char == "*":
            out.append("[^/]*")
        elif char == "?":
            out.append("[^/]")
        elif char == "[":
            end = segment.find("]", index + 2)
            if end == -1:
                out.append(re.escape(char))
            else:
                body = segment[index + 1:end]
                if body.startswith("!"):
                    body = "^" + body[1:]
                out.append(f"[{body}]")
                index = end
        else:
            out.append(re.escape(char))
        index += 1
    return "".join(out)


def compile_pattern(pattern: str) -> Pattern[str]:
    """Translate a normalized glob into a regex over relative POSIX paths."""

    parts = pattern.split("/")
    regex: List[str] = []
    for index, part in enumerate(parts):
        last = index == len(parts) - 1
        if part == "**":
            regex.append(".*" if last else "(?:[^/]+/)*")
        else:
            regex.append(_translate_segment(part) + ("" if last else "/"))
    return re.compile("".join(regex) + r"\Z")


def _raise(error: OSError) -> None:
    raise error


def walk_files(base: Path) -> List[str]:
    """List visible files below ``base`` as relative POSIX paths.

    Unreadable directories raise instead of being skipped.
    """

    files: List[str] = []
    for current, dirs, names in os.walk(base, onerror=_raise):
        dirs[:] = sorted(name for name in dirs if not name.startswith("."))
        relative_dir = Path(current).relative_to(base)
        for name in names:
            if name.startswith("."):
                continue
            files.append((relative_dir / name).as_posix() if relative_dir.parts else name)
    return files


def _expand(pattern: str, base: Path, files: List[str]) -> Set[str]:
    if not has_magic(pattern):
        return {PurePosixPath(pattern).as_posix()} if (base / pattern).is_file() else set()
    compiled = compile_pattern(pattern)
    return {relative for relative in files if compiled.match(relative)}


def match_patterns(patterns: Patterns, base: Path) -> List[Path]:
    """Resolve ``patterns`` against ``base`` and return sorted relative file paths."""

    base = Path(base)
    if not base.is_dir():
        return []

    files: Optional[List[str]] = None
    selected: Set[str] = set()
    for raw in as_pattern_list(patterns):
        negated = raw.startswith(NEGATION_PREFIX)
        body = normalize_pattern(raw[len(NEGATION_PREFIX):] if negated else raw)
        if files is None and has_magic(body):
            files = walk_files(base)
        expanded = _expand(body, base, files or [])
        if negated:
            selected -= expanded
        else:
            selected |= expanded
    return [Path(relative) for relative in sorted(selected)]
