"""Schema definitions for dist metadata."""

from .package import PackageManifest

__all__ = [
    "PackageManifest",
]
