"""Sequential, fail-fast step runner."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

from .exceptions import StepFailedError, StepTimeoutError

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Step:
    """One unit of pipeline work. Steps communicate only through the filesystem."""

    name: str
    action: Callable[[], object]
    timeout: Optional[float] = None


@dataclass(slots=True)
class StepOutcome:
    name: str
    elapsed: float

    def to_dict(self) -> Dict[str, object]:
        return {"name": self.name, "elapsed": round(self.elapsed, 4)}


@dataclass(slots=True)
class PipelineResult:
    status: str = "ok"
    steps: List[StepOutcome] = field(default_factory=list)

    @property
    def completed(self) -> List[str]:
        return [outcome.name for outcome in self.steps]

    @property
    def elapsed(self) -> float:
        return sum(outcome.elapsed for outcome in self.steps)

    def to_dict(self) -> Dict[str, object]:
        return {
            "status": self.status,
            "elapsed": round(self.elapsed, 4),
            "steps": [outcome.to_dict() for outcome in self.steps],
        }


def run_steps(steps: Sequence[Step]) -> PipelineResult:
    """Run ``steps`` in order, stopping at the first failure.

    The failing step's error is re-raised as ``StepFailedError`` with the
    original exception chained; no later step runs.
    """

    result = PipelineResult()
    total = len(steps)
    for index, step in enumerate(steps, start=1):
        logger.info("[%d/%d] %s", index, total, step.name)
        started = time.perf_counter()
        try:
            step.action()
        except Exception as exc:
            logger.error("Step '%s' failed: %s", step.name, exc)
            raise StepFailedError(step.name, exc) from exc
        elapsed = time.perf_counter() - started
        if step.timeout is not None and elapsed > step.timeout:
            logger.error("Step '%s' exceeded its %.2fs timeout", step.name, step.timeout)
            raise StepTimeoutError(step.name, step.timeout, elapsed)
        logger.debug("Step '%s' finished in %.3fs", step.name, elapsed)
        result.steps.append(StepOutcome(name=step.name, elapsed=elapsed))
    return result
