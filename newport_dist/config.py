"""Configuration and build context for the dist pipeline."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .exceptions import ConfigError
from .manifest import PUBLISHED_PACKAGE_NAME, load_manifest

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_NAME = "dist.config.yml"
ENV_OUTPUT_DIR = "NEWPORT_DIST_OUTPUT_DIR"
ENV_NODE_MODULES = "NEWPORT_DIST_NODE_MODULES"


class DistConfig(BaseModel):
    display_name: str = "Vlocity Newport Design System"
    module_name: str = "vlocity-newport-design-system"
    package_name: str = PUBLISHED_PACKAGE_NAME

    ui_dir: str = "ui"
    assets_dir: str = "assets"
    design_tokens_dir: str = "design-tokens"
    node_modules_dir: str = "node_modules"
    output_dir: str = "dist"

    icons_package: str = Field(
        default="@salesforce-ux/icons/dist",
        description="Icon package directory, relative to node_modules.",
    )
    icon_set: str = "salesforce-lightning-design-system-icons"
    icon_list: str = "ui.icons.json"

    entry_stylesheets: List[str] = Field(
        default_factory=lambda: ["index-scoped.scss", "index-scoped.rtl.scss", "nds-fonts.scss"]
    )
    rename_prefix: str = "index-scoped"
    passthrough_stems: List[str] = Field(default_factory=lambda: ["nds-fonts"])
    sass_precision: int = Field(default=10, ge=1)
    step_timeout: Optional[float] = Field(default=None, gt=0)

    model_config = ConfigDict(extra="forbid")


@dataclass(frozen=True, slots=True)
class SourceRoots:
    """Absolute paths every step resolves against."""

    project: Path
    ui: Path
    assets: Path
    design_tokens: Path
    node_modules: Path
    dist: Path

    @classmethod
    def from_config(cls, config: DistConfig, project_root: Path) -> "SourceRoots":
        root = Path(project_root).resolve()

        def _resolve(value: str) -> Path:
            candidate = Path(value)
            return (candidate if candidate.is_absolute() else root / candidate).resolve()

        roots = cls(
            project=root,
            ui=_resolve(config.ui_dir),
            assets=_resolve(config.assets_dir),
            design_tokens=_resolve(config.design_tokens_dir),
            node_modules=_resolve(config.node_modules_dir),
            dist=_resolve(config.output_dir),
        )
        roots._check_output_root()
        return roots

    def _check_output_root(self) -> None:
        # The output root is wiped on every run; it must not contain any source.
        sources = {
            "project": self.project,
            "ui": self.ui,
            "assets": self.assets,
            "design_tokens": self.design_tokens,
            "node_modules": self.node_modules,
        }
        for name, source in sources.items():
            if self.dist == source or self.dist in source.parents:
                raise ConfigError(f"Output directory {self.dist} would overwrite the {name} root {source}.")


@dataclass(frozen=True, slots=True)
class BuildContext:
    """Everything a step needs to know about the current run."""

    roots: SourceRoots
    config: DistConfig
    version: str

    @classmethod
    def from_config(cls, config: DistConfig, project_root: Path) -> "BuildContext":
        roots = SourceRoots.from_config(config, project_root)
        manifest_path = roots.project / "package.json"
        if not manifest_path.is_file():
            raise ConfigError(f"Project manifest not found: {manifest_path}")
        version = load_manifest(manifest_path).version
        return cls(roots=roots, config=config, version=version)

    @property
    def display_name(self) -> str:
        return self.config.display_name

    @property
    def module_name(self) -> str:
        return self.config.module_name

    def dist_path(self, *parts: str) -> Path:
        return self.roots.dist.joinpath(*parts)


def _read_yaml(path: Path) -> Dict[str, Any]:
    try:
        loaded = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path}: {exc}") from exc
    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")
    return loaded


def load_config(project_root: Path, config_path: Optional[Path] = None) -> DistConfig:
    """Build a ``DistConfig`` from YAML, ``.env`` and environment overrides.

    ``config_path`` must exist when given explicitly; otherwise
    ``dist.config.yml`` in the project root is used if present.
    """

    root = Path(project_root)
    env_file = root / ".env"
    if env_file.exists():
        load_dotenv(env_file)

    payload: Dict[str, Any] = {}
    if config_path is not None:
        path = Path(config_path)
        if not path.is_absolute():
            path = root / path
        if not path.is_file():
            raise ConfigError(f"Config file not found: {path}")
        payload = _read_yaml(path)
    elif (root / DEFAULT_CONFIG_NAME).is_file():
        payload = _read_yaml(root / DEFAULT_CONFIG_NAME)

    output_override = os.environ.get(ENV_OUTPUT_DIR)
    if output_override:
        payload["output_dir"] = output_override
    node_modules_override = os.environ.get(ENV_NODE_MODULES)
    if node_modules_override:
        payload["node_modules_dir"] = node_modules_override

    try:
        config = DistConfig.model_validate(payload)
    except ValidationError as exc:
        raise ConfigError(f"Invalid dist configuration: {exc}") from exc
    logger.debug("Loaded dist configuration: %s", config.model_dump())
    return config
