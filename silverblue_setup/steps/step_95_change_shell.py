from __future__ import annotations

import logging
import os
import pwd

from ..lib.command import run_cmd
from .base import ProvisionStep

logger = logging.getLogger(__name__)


def login_shell() -> str:
    return pwd.getpwuid(os.getuid()).pw_shell


class ChangeShellStep(ProvisionStep):
    step_id = "95_change_shell"
    reboot_required = True

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"Change default shell to {self.cfg.target_shell} (requires reboot to take effect)"

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"the login shell is still {login_shell()}"

    def is_done(self) -> bool:
        return login_shell() == self.cfg.target_shell

    def apply(self) -> None:
        # chsh asks for the user's password.
        run_cmd(["chsh", "-s", self.cfg.target_shell], capture=False, dry_run=self.dry_run)
