from __future__ import annotations

from pathlib import Path

import pytest

from newport_dist.config import ENV_NODE_MODULES, ENV_OUTPUT_DIR, BuildContext, DistConfig, load_config
from newport_dist.exceptions import ConfigError


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv(ENV_OUTPUT_DIR, "")
    monkeypatch.delenv(ENV_OUTPUT_DIR)
    monkeypatch.setenv(ENV_NODE_MODULES, "")
    monkeypatch.delenv(ENV_NODE_MODULES)


def test_defaults_without_config_file(project: Path) -> None:
    config = load_config(project)

    assert config == DistConfig()
    assert config.entry_stylesheets == ["index-scoped.scss", "index-scoped.rtl.scss", "nds-fonts.scss"]


def test_yaml_config_is_applied(project: Path) -> None:
    (project / "dist.config.yml").write_text("module_name: acme-ds\noutput_dir: build/dist\n", encoding="utf-8")

    config = load_config(project)
    context = BuildContext.from_config(config, project)

    assert config.module_name == "acme-ds"
    assert context.roots.dist == (project / "build" / "dist").resolve()
    assert context.roots.dist.is_absolute()
    assert context.version == "2.4.1"


def test_env_overrides_win(project: Path, monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    (project / "dist.config.yml").write_text("output_dir: build/dist\n", encoding="utf-8")
    monkeypatch.setenv(ENV_OUTPUT_DIR, str(tmp_path / "elsewhere"))

    context = BuildContext.from_config(load_config(project), project)

    assert context.roots.dist == (tmp_path / "elsewhere").resolve()


def test_dotenv_file_is_loaded(project: Path) -> None:
    (project / ".env").write_text(f"{ENV_NODE_MODULES}=vendor/npm\n", encoding="utf-8")

    config = load_config(project)

    assert config.node_modules_dir == "vendor/npm"


@pytest.mark.parametrize(
    "content",
    ["- just\n- a list\n", "unknown_key: 1\n", "sass_precision: 0\n", "module_name: [unclosed\n"],
)
def test_invalid_config_raises(project: Path, content: str) -> None:
    (project / "dist.config.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(project)


def test_explicit_config_must_exist(project: Path) -> None:
    with pytest.raises(ConfigError):
        load_config(project, Path("missing.yml"))


def test_context_requires_project_manifest(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        BuildContext.from_config(DistConfig(), tmp_path)


@pytest.mark.parametrize("output_dir", [".", "..", "ui", "assets", "node_modules", "design-tokens"])
def test_output_root_may_not_contain_sources(project: Path, output_dir: str) -> None:
    with pytest.raises(ConfigError):
        BuildContext.from_config(DistConfig(output_dir=output_dir), project)

    assert (project / "ui" / "index-scoped.scss").exists()


def test_output_root_inside_project_is_allowed(project: Path) -> None:
    context = BuildContext.from_config(DistConfig(output_dir="build/dist"), project)

    assert context.roots.dist == (project / "build" / "dist").resolve()
