"""Exception hierarchy for the dist pipeline."""

from __future__ import annotations

from typing import Optional


class PipelineError(RuntimeError):
    """Base class for every failure that aborts a dist run."""


class ConfigError(PipelineError):
    """Raised when the dist configuration cannot be loaded or validated."""


class SourceNotFoundError(PipelineError):
    """Raised when a required source path is missing."""

    def __init__(self, path: object, message: Optional[str] = None) -> None:
        self.path = path
        super().__init__(message or f"Source not found: {path}")


class ManifestError(PipelineError):
    """Raised when the package manifest is malformed."""


class StylesheetCompileError(PipelineError):
    """Raised when a stylesheet entry fails to compile."""

    def __init__(self, entry: object, detail: str) -> None:
        self.entry = entry
        self.detail = detail
        super().__init__(f"Failed to compile {entry}: {detail}")


class StepFailedError(PipelineError):
    """Raised by the runner when a step fails; wraps the underlying error."""

    def __init__(self, step: str, cause: BaseException) -> None:
        self.step = step
        self.cause = cause
        super().__init__(f"{step} failed: {cause}")


class StepTimeoutError(PipelineError):
    """Raised when a step runs longer than its declared timeout."""

    def __init__(self, step: str, timeout: float, elapsed: float) -> None:
        self.step = step
        self.timeout = timeout
        self.elapsed = elapsed
        super().__init__(f"Step '{step}' took {elapsed:.2f}s (timeout {timeout:.2f}s)")
