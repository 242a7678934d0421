from __future__ import annotations

import logging
from pathlib import Path

from ..lib.command import run_cmd
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class StowDotfilesStep(ProvisionStep):
    step_id = "30_stow_dotfiles"
    description = "Install dotfiles using GNU Stow"
    needs_layered_packages = True

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"symlinks were not created ({self.cfg.dotfiles_marker} is not a symlink)"

    def is_done(self) -> bool:
        return self.cfg.dotfiles_marker.is_symlink()

    def apply(self) -> None:
        home = Path.home()
        run_cmd(["stow", "-t", str(home), "."], cwd=str(self.cfg.dotfiles_dir), dry_run=self.dry_run)
        logger.info("Refreshing font cache...")
        run_cmd(["fc-cache", "--really-force"], dry_run=self.dry_run)
