from __future__ import annotations

from ..lib.fetch import run_remote_script
from .base import LocalBinaryStep


class InstallStarshipStep(LocalBinaryStep):
    step_id = "50_install_starship"
    description = "Install Starship prompt"
    binary = "starship"

    def apply(self) -> None:
        run_remote_script(
            self.cfg.tool_setting("starship", "installer"),
            ["-b", str(self.cfg.local_bin)],
            dry_run=self.dry_run,
        )
