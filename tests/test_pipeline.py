from __future__ import annotations

from typing import List, Optional

import pytest

from silverblue_setup.errors import BatchFailure, CommandFailed, PostconditionFailed, SetupCancelled
from silverblue_setup.pipeline import FailurePolicy, Status, run_pipeline

from .conftest import answering


class FakeStep:
    def __init__(
        self,
        step_id: str,
        *,
        done: bool = False,
        works: bool = True,
        raises: Optional[Exception] = None,
        policy: FailurePolicy = FailurePolicy.ABORT,
        skip: Optional[str] = None,
        log: Optional[List[str]] = None,
    ) -> None:
        self.step_id = step_id
        self.description = f"Do {step_id}"
        self.expectation = f"{step_id} output is missing"
        self.failure_policy = policy
        self.done = done
        self.works = works
        self.raises = raises
        self.skip = skip
        self.log = log if log is not None else []

    def skip_reason(self) -> Optional[str]:
        return self.skip

    def is_done(self) -> bool:
        return self.done

    def apply(self) -> None:
        self.log.append(self.step_id)
        if self.raises:
            raise self.raises
        if self.works:
            self.done = True

    def verify(self) -> bool:
        return self.done


def test_runs_pending_steps_and_skips_done_ones() -> None:
    log: List[str] = []
    steps = [FakeStep("a", log=log), FakeStep("b", done=True, log=log), FakeStep("c", log=log)]
    state: dict = {}

    result = run_pipeline(steps=steps, prompter=answering("y", "y"), state=state)

    assert log == ["a", "c"]
    assert result.ran_steps == ["a", "c"]
    assert result.skipped_steps == ["b"]
    assert state["execution"]["outcomes"]["b"] == {"status": "skipped", "reason": "already done"}
    assert state["execution"]["current_step"] is None


def test_second_pass_performs_no_actions() -> None:
    log: List[str] = []
    steps = [FakeStep(s, log=log) for s in ("a", "b", "c")]
    run_pipeline(steps=steps, prompter=answering("y", "y", "y"), state={})
    log.clear()

    # No answers available: any prompt would read EOF and cancel.
    result = run_pipeline(steps=steps, prompter=answering(), state={})

    assert log == []
    assert result.ran_steps == []
    assert result.skipped_steps == ["a", "b", "c"]


def test_declining_stops_before_action_and_later_steps() -> None:
    log: List[str] = []
    steps = [FakeStep("a", log=log), FakeStep("b", log=log), FakeStep("c", log=log)]

    with pytest.raises(SetupCancelled) as exc:
        run_pipeline(steps=steps, prompter=answering("y", "n"), state={})

    assert exc.value.step_id == "b"
    assert log == ["a"]


def test_command_failure_aborts_run() -> None:
    log: List[str] = []
    steps = [FakeStep("a", raises=CommandFailed(["false"], 1), log=log), FakeStep("b", log=log)]

    with pytest.raises(CommandFailed):
        run_pipeline(steps=steps, prompter=answering("y", "y"), state={})
    assert log == ["a"]


def test_missing_outcome_after_success_is_postcondition_failure() -> None:
    steps = [FakeStep("a", works=False)]

    with pytest.raises(PostconditionFailed) as exc:
        run_pipeline(steps=steps, prompter=answering("y"), state={})
    assert "a output is missing" in str(exc.value)


def test_dry_run_skips_verification() -> None:
    result = run_pipeline(steps=[FakeStep("a", works=False)], prompter=answering("y"), state={}, dry_run=True)
    assert result.ran_steps == ["a"]


def test_batch_failure_under_continue_policy_records_and_moves_on() -> None:
    log: List[str] = []
    steps = [
        FakeStep("batch", raises=BatchFailure("apps", ["x"]), policy=FailurePolicy.CONTINUE, log=log),
        FakeStep("after", log=log),
    ]
    state: dict = {}

    result = run_pipeline(steps=steps, prompter=answering("y", "y"), state=state)

    assert log == ["batch", "after"]
    assert [o.step_id for o in result.failed] == ["batch"]
    assert result.failed[0].status is Status.FAILED
    assert state["execution"]["outcomes"]["batch"]["status"] == "failed"


def test_batch_failure_under_abort_policy_raises() -> None:
    steps = [FakeStep("batch", raises=BatchFailure("apps", ["x"])), FakeStep("after")]
    with pytest.raises(BatchFailure):
        run_pipeline(steps=steps, prompter=answering("y", "y"), state={})


def test_phase_skip_happens_without_prompting() -> None:
    log: List[str] = []
    steps = [FakeStep("layer", skip="post-reboot phase", log=log)]

    result = run_pipeline(steps=steps, prompter=answering(), state={})

    assert log == []
    assert result.outcomes[0].reason == "post-reboot phase"
