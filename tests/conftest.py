from __future__ import annotations

import json
import re
from pathlib import Path
from typing import Sequence

import pytest

from newport_dist.config import BuildContext, DistConfig
from newport_dist.exceptions import StylesheetCompileError
from newport_dist.styles import Toolchain

ICONS_DIST = Path("node_modules") / "@salesforce-ux" / "icons" / "dist"

SAMPLE_MANIFEST: dict = {
    "name": "newport-design-system-internal",
    "description": "Vlocity Newport Design System",
    "version": "2.4.1",
    "license": "BSD-3-Clause",
    "important": "internal build marker",
    "scripts": {"dist": "node scripts/dist.js"},
    "dependencies": {"async": "^2.6.0"},
    "devDependencies": {"gulp": "^4.0.0"},
    "optionalDependencies": {"fsevents": "*"},
    "engines": {"node": ">=10"},
    "repository": {"type": "git", "url": "https://github.com/vlocityinc/newport-design-system"},
}


def _write(path: Path, content: str | bytes) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    if isinstance(content, bytes):
        path.write_bytes(content)
    else:
        path.write_text(content, encoding="utf-8")


def _fake_compile(entry: Path, include_paths: Sequence[Path], precision: int) -> str:
    source = entry.read_text(encoding="utf-8")
    if "@error" in source:
        raise StylesheetCompileError(entry, "Error: forced failure on line 1")
    lines = [line for line in source.splitlines() if line.strip() and not line.lstrip().startswith(("//", "@import"))]
    return "\n".join(lines) + "\n"


def _fake_minify(css: str) -> str:
    return re.sub(r"\s+", "", css)


@pytest.fixture()
def toolchain() -> Toolchain:
    return Toolchain(compile=_fake_compile, minify=_fake_minify)


@pytest.fixture()
def project(tmp_path: Path) -> Path:
    root = tmp_path / "newport-design-system"
    _write(root / "package.json", json.dumps(SAMPLE_MANIFEST, indent=2))
    _write(root / "README-dist.md", "## Usage\n\nInstall from npm.\n")
    _write(root / "RELEASENOTES.md", "# Release notes\n")
    _write(root / "RELEASENOTES.general.md", "# General\n")

    _write(root / "ui" / "index-scoped.scss", "@import 'components/button/base/index';\n.nds-scope {\n  color: red;\n}\n")
    _write(root / "ui" / "index-scoped.rtl.scss", ".nds-scope {\n  direction: rtl;\n}\n")
    _write(root / "ui" / "nds-fonts.scss", "@font-face {\n  font-family: 'Nds';\n}\n")
    _write(root / "ui" / "components" / "button" / "base" / "_index.scss", ".nds-button {\n  margin: 0;\n}\n")
    _write(root / "ui" / "components" / "button" / "tokens" / "button.yml", "props:\n  BUTTON_COLOR: red\n")
    _write(root / "ui" / "vendor" / "_normalize.scss", "html { margin: 0; }\n")
    _write(root / "ui" / "components" / "button" / "docs.mdx", "ignored\n")

    assets = root / "assets"
    _write(assets / "fonts" / "webfonts" / "NdsSans.woff2", b"\x00woff2")
    _write(assets / "fonts" / "webfonts" / "NdsSans.ttf", b"\x00ttf")
    _write(assets / "images" / "logo.svg", "<svg/>")
    _write(assets / "images" / "spinners" / "spin.gif", b"GIF89a")
    _write(assets / "images" / "themes" / "oneApp" / "banner.png", b"\x89PNG")
    _write(assets / "licenses" / "License-for-Sass.txt", "sass license\n")
    _write(assets / "licenses" / "License-for-font.txt", "font license\n")
    _write(assets / "licenses" / "License-for-images.txt", "images license\n")
    _write(assets / "downloads" / "swatches" / "Newport.ase", b"ASEF")

    _write(root / "design-tokens" / "base.yml", "props: {}\n")
    _write(root / "design-tokens" / "aliases" / "color.yml", "aliases: {}\n")

    icons = root / ICONS_DIST
    _write(icons / "ui.icons.json", json.dumps({"utility": ["add"]}))
    icon_set = icons / "salesforce-lightning-design-system-icons"
    _write(icon_set / "utility" / "add.svg", "<svg/>")
    _write(icon_set / "utility" / "add.png", b"\x89PNG")
    _write(icon_set / "utility" / "add_120.png", b"\x89PNG")
    _write(icon_set / "utility-sprite" / "svg" / "symbols.svg", "<svg/>")
    return root


@pytest.fixture()
def context(project: Path) -> BuildContext:
    return BuildContext.from_config(DistConfig(), project)


@pytest.fixture()
def sample_manifest() -> dict:
    return json.loads(json.dumps(SAMPLE_MANIFEST))
