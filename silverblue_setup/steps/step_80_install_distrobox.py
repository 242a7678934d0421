from __future__ import annotations

import logging

from ..lib.command import run_cmd, which
from ..lib.fetch import run_remote_script
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class InstallDistroboxStep(ProvisionStep):
    step_id = "80_install_distrobox"
    description = "Install Distrobox"
    expectation = "distrobox is not on PATH or in the local bin directory"

    def _which(self) -> str | None:
        return which("distrobox", extra_dirs=[str(self.cfg.local_bin)])

    def is_done(self) -> bool:
        return self._which() is not None

    def apply(self) -> None:
        run_remote_script(
            self.cfg.tool_setting("distrobox", "installer"),
            ["--prefix", str(self.cfg.tool_setting("distrobox", "prefix"))],
            dry_run=self.dry_run,
        )

    def verify(self) -> bool:
        exe = self._which()
        if exe is None:
            return False
        r = run_cmd([exe, "--version"], check=False)
        logger.info("Distrobox version: %s", r.stdout.strip())
        return True
