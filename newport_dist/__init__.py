"""Distribution packaging for the Vlocity Newport Design System."""

__version__ = "0.1.0"
from .config import BuildContext, DistConfig, SourceRoots, load_config
from .exceptions import (
    ConfigError,
    ManifestError,
    PipelineError,
    SourceNotFoundError,
    StepFailedError,
    StepTimeoutError,
    StylesheetCompileError,
)
from .manifest import dump_manifest, edit_manifest, load_manifest, publishable_manifest
from .pipeline import PipelineResult, Step, run_steps
from .steps import build_dist_steps, run_dist
from .tree import copy_tree, match_patterns, remove

__all__ = [
    "__version__",
    "BuildContext",
    "DistConfig",
    "SourceRoots",
    "load_config",
    "ConfigError",
    "ManifestError",
    "PipelineError",
    "SourceNotFoundError",
    "StepFailedError",
    "StepTimeoutError",
    "StylesheetCompileError",
    "dump_manifest",
    "edit_manifest",
    "load_manifest",
    "publishable_manifest",
    "PipelineResult",
    "Step",
    "run_steps",
    "build_dist_steps",
    "run_dist",
    "copy_tree",
    "match_patterns",
    "remove",
]
