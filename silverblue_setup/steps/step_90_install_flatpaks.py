from __future__ import annotations

import logging

from ..errors import BatchFailure
from ..lib.flatpak import add_remote, has_remote, install_app, missing_apps
from ..pipeline import FailurePolicy
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class InstallFlatpaksStep(ProvisionStep):
    step_id = "90_install_flatpaks"
    description = "Install Flatpak applications"
    # Every app is attempted before the collected failures abort the run.
    failure_policy = FailurePolicy.ABORT

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"applications are missing: {' '.join(missing_apps(self.cfg.flatpak_apps))}"

    def is_done(self) -> bool:
        return has_remote(self.cfg.flatpak_remote) and not missing_apps(self.cfg.flatpak_apps)

    def apply(self) -> None:
        remote = self.cfg.flatpak_remote
        if not has_remote(remote):
            logger.info("Adding %s remote...", remote)
            add_remote(remote, self.cfg.flatpak_remote_url, dry_run=self.dry_run)

        apps = self.cfg.flatpak_apps
        logger.info("Installing %d Flatpak applications...", len(apps))
        failed = [app for app in apps if not install_app(app, remote=remote, dry_run=self.dry_run)]
        if failed:
            raise BatchFailure("Flatpak applications", failed)
        logger.info("%d Flatpak applications installed successfully", len(apps))
