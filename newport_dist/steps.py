"""The ordered dist step list."""

from __future__ import annotations

import logging
from functools import partial
from typing import List

from .config import BuildContext
from .manifest import edit_manifest, publishable_manifest
from .pipeline import PipelineResult, Step, run_steps
from .styles import (
    DEFAULT_TOOLCHAIN,
    RenameTable,
    Toolchain,
    compile_stylesheets,
    css_banner,
    minify_stylesheets,
    prepend_banner,
    readme_banner,
    scss_banner,
)
from .tree import copy_tree, match_patterns, remove
from .utils import write_text

logger = logging.getLogger(__name__)

ROOT_FILES = ["package.json", "README-dist.md", "RELEASENOTES*"]
README_TEMPLATE = "README-dist.md"
README_NAME = "README.md"

SCSS_PATTERNS = ["**/*.scss", "**/*.rtl.scss"]
FONT_PATTERNS = ["**/*", "!**/*.ttf"]
IMAGE_PATTERNS = ["**/*", "!themes/**"]
COMPONENT_TOKEN_PATTERNS = ["components/**/tokens/**/*.yml"]

CSS_BANNER_PATTERNS = ["**/*.css", "**/*.rtl.css", "scss/index*"]
SCSS_BANNER_PATTERNS = ["scss/**/*.scss", "!scss/index*.scss", "!scss/vendor/**"]

STAGING_DIRS = ["swatches", "design-tokens", "ui", "scss", "__internal"]
PRUNED_ICON_PATTERN = "**/*.png"


def _clean_output(context: BuildContext) -> None:
    remove(context.roots.dist)
    context.roots.dist.mkdir(parents=True, exist_ok=True)


def _clean_manifest(context: BuildContext) -> None:
    edit_manifest(
        context.dist_path("package.json"),
        partial(publishable_manifest, package_name=context.config.package_name),
    )


def _compile_styles(context: BuildContext, toolchain: Toolchain) -> None:
    config = context.config
    compile_stylesheets(
        [context.dist_path("scss", entry) for entry in config.entry_stylesheets],
        [context.roots.node_modules],
        context.dist_path("assets", "styles"),
        rename=RenameTable.for_module(
            config.module_name,
            prefix=config.rename_prefix,
            passthrough=config.passthrough_stems,
        ),
        toolchain=toolchain,
        precision=config.sass_precision,
    )


def _minify_styles(context: BuildContext, toolchain: Toolchain) -> None:
    styles = context.dist_path("assets", "styles")
    minify_stylesheets(
        [styles / relative for relative in match_patterns(["*.css", "*.rtl.css"], styles)],
        toolchain=toolchain,
    )


def _stamp(context: BuildContext, patterns: List[str], banner: str) -> None:
    dist = context.roots.dist
    stamped = prepend_banner([dist / relative for relative in match_patterns(patterns, dist)], banner)
    logger.debug("Stamped %d file(s) with %r", len(stamped), banner)


def _write_readme(context: BuildContext) -> None:
    template = context.dist_path(README_TEMPLATE)
    banner = readme_banner(context.display_name, context.version)
    write_text(context.dist_path(README_NAME), banner + "\n" + template.read_text(encoding="utf-8"))


def build_dist_steps(context: BuildContext, *, toolchain: Toolchain = DEFAULT_TOOLCHAIN) -> List[Step]:
    roots = context.roots
    config = context.config
    dist = context.dist_path
    licenses = roots.assets / "licenses"
    icons_package = roots.node_modules / config.icons_package
    version = context.version
    name = context.display_name

    steps = [
        Step("clean output", partial(_clean_output, context)),
        Step("root files copy", partial(copy_tree, ROOT_FILES, roots.project, dist())),
        Step("package manifest cleanup", partial(_clean_manifest, context)),
        # Sass
        Step("scss copy", partial(copy_tree, SCSS_PATTERNS, roots.ui, dist("scss"))),
        Step("sass license copy", partial(copy_tree, "License-for-Sass.txt", licenses, dist("scss"))),
        # Icons
        Step("icon copy", partial(copy_tree, "**", icons_package / config.icon_set, dist("assets", "icons"))),
        Step("icon list copy", partial(copy_tree, config.icon_list, icons_package, dist())),
        # Fonts
        Step("font copy", partial(copy_tree, FONT_PATTERNS, roots.assets / "fonts", dist("assets", "fonts"))),
        Step("font license copy", partial(copy_tree, "License-for-font.txt", licenses, dist("assets", "fonts"))),
        # Images
        Step("image copy", partial(copy_tree, IMAGE_PATTERNS, roots.assets / "images", dist("assets", "images"))),
        Step(
            "image license copy",
            partial(copy_tree, "License-for-images.txt", licenses, dist("assets", "images")),
        ),
        # Swatches
        Step(
            "swatches copy",
            partial(copy_tree, "**", roots.assets / "downloads" / "swatches", dist("swatches"), optional=True),
        ),
        # Design tokens
        Step("design tokens copy", partial(copy_tree, "**/*.*", roots.design_tokens, dist("design-tokens"))),
        Step("component tokens copy", partial(copy_tree, COMPONENT_TOKEN_PATTERNS, roots.ui, dist("ui"))),
        # Stylesheets
        Step("stylesheet compile", partial(_compile_styles, context, toolchain)),
        Step("stylesheet minify", partial(_minify_styles, context, toolchain)),
        Step("css banner", partial(_stamp, context, CSS_BANNER_PATTERNS, css_banner(name, version))),
        Step("scss banner", partial(_stamp, context, SCSS_BANNER_PATTERNS, scss_banner(name, version))),
        Step("readme banner", partial(_write_readme, context)),
        # Cleanup
        Step("readme template cleanup", partial(remove, dist(README_TEMPLATE))),
    ]
    steps.extend(Step(f"{staging} cleanup", partial(remove, dist(staging))) for staging in STAGING_DIRS)
    steps.append(Step("png icon cleanup", partial(remove, dist("assets", "icons"), PRUNED_ICON_PATTERN)))

    if config.step_timeout is not None:
        steps = [Step(step.name, step.action, timeout=config.step_timeout) for step in steps]
    return steps


def run_dist(context: BuildContext, *, toolchain: Toolchain = DEFAULT_TOOLCHAIN) -> PipelineResult:
    """Assemble the distribution for ``context``."""

    logger.info("Building %s %s into %s", context.display_name, context.version, context.roots.dist)
    return run_steps(build_dist_steps(context, toolchain=toolchain))
