from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .errors import BatchFailure, PostconditionFailed, SetupCancelled
from .prompt import Prompter
from .state_store import record_outcome

logger = logging.getLogger(__name__)


class FailurePolicy(enum.Enum):
    ABORT = "abort"
    CONTINUE = "continue"


class Status(enum.Enum):
    SKIPPED = "skipped"
    COMPLETED = "completed"
    FAILED = "failed"


@dataclass(frozen=True)
class StepOutcome:
    step_id: str
    status: Status
    reason: Optional[str] = None


class Step(Protocol):
    """A single idempotent, confirmation-gated step."""

    step_id: str
    description: str
    expectation: str
    failure_policy: FailurePolicy

    def skip_reason(self) -> Optional[str]:
        ...

    def is_done(self) -> bool:
        ...

    def apply(self) -> None:
        ...

    def verify(self) -> bool:
        ...


@dataclass(frozen=True)
class PipelineResult:
    outcomes: List[StepOutcome] = field(default_factory=list)

    @property
    def ran_steps(self) -> List[str]:
        return [o.step_id for o in self.outcomes if o.status is Status.COMPLETED]

    @property
    def skipped_steps(self) -> List[str]:
        return [o.step_id for o in self.outcomes if o.status is Status.SKIPPED]

    @property
    def failed(self) -> List[StepOutcome]:
        return [o for o in self.outcomes if o.status is Status.FAILED]


def _run_one(step: Step, prompter: Prompter, *, dry_run: bool) -> StepOutcome:
    reason = step.skip_reason()
    if reason:
        logger.info("Skipping step %s (%s)", step.step_id, reason)
        return StepOutcome(step.step_id, Status.SKIPPED, reason)

    if step.is_done():
        logger.info("%s: already done, skipping", step.description)
        return StepOutcome(step.step_id, Status.SKIPPED, "already done")

    if not prompter.confirm_step(step.description):
        raise SetupCancelled(step.step_id)

    logger.info("Running step %s", step.step_id)
    try:
        step.apply()
    except BatchFailure as e:
        if step.failure_policy is FailurePolicy.ABORT:
            raise
        logger.error("%s", e)
        return StepOutcome(step.step_id, Status.FAILED, str(e))

    if dry_run:
        logger.info("Dry run: not verifying %s", step.step_id)
    elif not step.verify():
        raise PostconditionFailed(step.step_id, step.expectation)

    logger.info("Step %s completed", step.step_id)
    return StepOutcome(step.step_id, Status.COMPLETED)


def run_pipeline(
    *,
    steps: Sequence[Step],
    prompter: Prompter,
    state: Dict[str, Any],
    dry_run: bool = False,
) -> PipelineResult:
    """Run steps once, in order. No retries, no rollback.

    Any SetupError other than a BatchFailure under CONTINUE policy aborts the
    run; later steps are never attempted.
    """

    result = PipelineResult()
    exe = state.setdefault("execution", {})

    for step in steps:
        exe["current_step"] = step.step_id
        outcome = _run_one(step, prompter, dry_run=dry_run)
        record_outcome(state, outcome.step_id, outcome.status.value, outcome.reason)
        result.outcomes.append(outcome)

    exe["current_step"] = None
    return result
