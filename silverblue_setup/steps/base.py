from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from ..config import SetupConfig
from ..phase import Phase
from ..pipeline import FailurePolicy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SetupContext:
    cfg: SetupConfig
    phase: Phase
    dry_run: bool = False


class ProvisionStep:
    step_id = ""
    description = ""
    expectation = "the expected outcome is missing"
    failure_policy = FailurePolicy.ABORT
    # Takes effect only after a reboot; runs in the pre-reboot phase only.
    reboot_required = False
    # Uses binaries from layered packages; runs in the post-reboot phase only.
    needs_layered_packages = False

    def __init__(self, ctx: SetupContext) -> None:
        self.ctx = ctx

    @property
    def cfg(self) -> SetupConfig:
        return self.ctx.cfg

    @property
    def dry_run(self) -> bool:
        return self.ctx.dry_run

    def skip_reason(self) -> Optional[str]:
        if self.reboot_required and self.ctx.phase.post_reboot:
            return "post-reboot phase"
        if self.needs_layered_packages and not self.ctx.phase.post_reboot:
            return "layered packages not available until reboot"
        return None

    def is_done(self) -> bool:
        raise NotImplementedError

    def apply(self) -> None:
        raise NotImplementedError

    def verify(self) -> bool:
        return self.is_done()


class LocalBinaryStep(ProvisionStep):
    """A step whose outcome is one executable in the local bin directory."""

    binary = ""

    @property
    def target(self):
        return self.cfg.local_bin / self.binary

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"{self.target} does not exist"

    def is_done(self) -> bool:
        return self.target.is_file()
