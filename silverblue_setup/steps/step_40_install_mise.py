from __future__ import annotations

from ..lib.fetch import run_remote_script
from .base import LocalBinaryStep


class InstallMiseStep(LocalBinaryStep):
    step_id = "40_install_mise"
    description = "Install Mise (version manager)"
    binary = "mise"

    def apply(self) -> None:
        # The mise installer always targets ~/.local/bin.
        run_remote_script(self.cfg.tool_setting("mise", "installer"), dry_run=self.dry_run)
