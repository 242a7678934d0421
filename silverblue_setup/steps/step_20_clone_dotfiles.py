from __future__ import annotations

import logging

from ..lib.command import run_cmd
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class CloneDotfilesStep(ProvisionStep):
    step_id = "20_clone_dotfiles"
    description = "Clone dotfiles repository"

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"{self.cfg.dotfiles_dir} was not created"

    def is_done(self) -> bool:
        return self.cfg.dotfiles_dir.is_dir()

    def apply(self) -> None:
        dest = self.cfg.dotfiles_dir
        dest.parent.mkdir(parents=True, exist_ok=True)
        name, email = self.cfg.git_identity
        run_cmd(
            [
                "git",
                "-c",
                f"user.name={name}",
                "-c",
                f"user.email={email}",
                "clone",
                self.cfg.dotfiles_repo,
                str(dest),
            ],
            capture=False,
            dry_run=self.dry_run,
        )
