"""Package manifest helpers."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Callable, Iterable

from pydantic import ValidationError

from .exceptions import ManifestError
from .schemas.package import PackageManifest
from .utils import write_text_atomic

logger = logging.getLogger(__name__)

PUBLISHED_PACKAGE_NAME = "@vlocity/newport-design-system"

BUILD_ONLY_FIELDS = (
    "scripts",
    "dependencies",
    "devDependencies",
    "optionalDependencies",
    "engines",
    "important",
)


def load_manifest(path: Path) -> PackageManifest:
    """Load a package manifest from JSON."""

    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ManifestError(f"Malformed package manifest {path}: {exc}") from exc
    if not isinstance(payload, dict):
        raise ManifestError(f"Package manifest {path} must be a JSON object.")
    try:
        return PackageManifest.model_validate(payload)
    except ValidationError as exc:
        raise ManifestError(f"Invalid package manifest {path}: {exc}") from exc


def dump_manifest(manifest: PackageManifest, path: Path) -> None:
    """Write a manifest to disk, replacing the previous file in one move."""

    payload = manifest.model_dump(mode="json")
    write_text_atomic(path, json.dumps(payload, indent=2, ensure_ascii=False) + "\n")


def edit_manifest(path: Path, transform: Callable[[PackageManifest], PackageManifest]) -> PackageManifest:
    """Load, transform and write back the manifest at ``path``."""

    manifest = transform(load_manifest(path))
    dump_manifest(manifest, path)
    return manifest


def strip_fields(manifest: PackageManifest, fields: Iterable[str]) -> PackageManifest:
    """Return a copy of ``manifest`` without ``fields``."""

    payload = manifest.model_dump()
    for field_name in fields:
        payload.pop(field_name, None)
    return PackageManifest.model_validate(payload)


def publishable_manifest(
    manifest: PackageManifest,
    *,
    package_name: str = PUBLISHED_PACKAGE_NAME,
    removed_fields: Iterable[str] = BUILD_ONLY_FIELDS,
) -> PackageManifest:
    """Rename the package and drop build-only fields."""

    renamed = manifest.model_copy(update={"name": package_name})
    cleaned = strip_fields(renamed, removed_fields)
    logger.debug("Cleaned manifest %s -> %s", manifest.name, cleaned.name)
    return cleaned
