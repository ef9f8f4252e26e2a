"""Declarative output naming for compiled stylesheets."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import FrozenSet, Tuple

CSS_EXTENSION = ".css"


@dataclass(frozen=True, slots=True)
class RenameRule:
    prefix: str
    replacement: str


@dataclass(frozen=True, slots=True)
class RenameTable:
    """Maps a source stem to an output stem.

    The stem is the filename minus its last extension, so
    ``index-scoped.rtl.scss`` has the stem ``index-scoped.rtl``. Passthrough
    stems win over rules; the first rule whose prefix matches replaces that
    prefix; anything else is left as is.
    """

    rules: Tuple[RenameRule, ...] = ()
    passthrough: FrozenSet[str] = field(default_factory=frozenset)

    def output_stem(self, stem: str) -> str:
        if stem in self.passthrough:
            return stem
        for rule in self.rules:
            if stem.startswith(rule.prefix):
                return rule.replacement + stem[len(rule.prefix):]
        return stem

    def output_name(self, source: Path | str) -> str:
        return self.output_stem(Path(source).stem) + CSS_EXTENSION

    @classmethod
    def for_module(cls, module_name: str, *, prefix: str = "index-scoped", passthrough=("nds-fonts",)) -> "RenameTable":
        return cls(rules=(RenameRule(prefix=prefix, replacement=module_name),), passthrough=frozenset(passthrough))
