"""Pydantic model describing the npm package descriptor."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PackageManifest(BaseModel):
    name: str = Field(..., description="Package name as published to the registry.")
    version: str = Field(..., description="Package version; stamped into every banner.")

    # package.json carries many more keys (description, repository, files...)
    # which are passed through untouched.
    model_config = ConfigDict(extra="allow")
