"""Minimal saga driver: ordered steps with per-step compensation.

Each step's action runs only after the previous one succeeded. On failure
(including task cancellation) the driver walks the completed steps
backwards and runs their compensations. Compensation errors are logged and
swallowed so the original error is always the one that propagates.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from tenant_management.shared.cancellation import CancellationToken
from tenant_management.shared.logging import get_logger

logger = get_logger(__name__)

StepCallable = Callable[[], Awaitable[Any]]


@dataclass(frozen=True)
class SagaStep:
    """One forward action and the compensation that undoes it (if any)."""

    name: str
    action: StepCallable
    compensation: StepCallable | None = None


class Saga:
    """Runs SagaSteps in order; compensates completed steps on failure."""

    def __init__(self, name: str) -> None:
        self.name = name

    async def run(
        self,
        steps: Sequence[SagaStep],
        cancellation: CancellationToken | None = None,
    ) -> None:
        """Execute steps forward; on error compensate and re-raise the original error.

        Cancellation is checked before every step. A step that raised is not
        compensated itself; steps that must undo a partially applied side
        effect are split so the side effect is its own completed step.
        """
        completed: list[SagaStep] = []
        try:
            for step in steps:
                if cancellation is not None:
                    cancellation.raise_if_cancelled(f"{self.name}.{step.name}")
                logger.debug("Saga %s: running step %s", self.name, step.name)
                await step.action()
                completed.append(step)
        except (Exception, asyncio.CancelledError) as exc:
            logger.warning(
                "Saga %s failed after %d completed step(s) (%s: %s), attempting to rollback changes...",
                self.name,
                len(completed),
                type(exc).__name__,
                exc,
            )
            await self._compensate(completed)
            raise

    async def _compensate(self, completed: list[SagaStep]) -> None:
        for step in reversed(completed):
            if step.compensation is None:
                continue
            logger.warning("Saga %s: rollback step %s", self.name, step.name)
            try:
                await step.compensation()
            except Exception:
                # Log and swallow: must not mask the error being propagated.
                logger.exception(
                    "Saga %s: rollback of step %s failed", self.name, step.name
                )
