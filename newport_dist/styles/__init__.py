"""Stylesheet compile, minify and banner helpers."""

from .banner import css_banner, prepend_banner, readme_banner, scss_banner
from .compiler import compile_stylesheets
from .minify import minified_path, minify_stylesheets
from .rename import RenameRule, RenameTable
from .toolchain import DEFAULT_TOOLCHAIN, Toolchain

__all__ = [
    "DEFAULT_TOOLCHAIN",
    "RenameRule",
    "RenameTable",
    "Toolchain",
    "compile_stylesheets",
    "css_banner",
    "minified_path",
    "minify_stylesheets",
    "prepend_banner",
    "readme_banner",
    "scss_banner",
]
