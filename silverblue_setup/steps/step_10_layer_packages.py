from __future__ import annotations

import logging

from ..lib.rpm_ostree import layer_packages, missing_packages
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class LayerPackagesStep(ProvisionStep):
    step_id = "10_layer_packages"
    reboot_required = True

    @property
    def _names(self) -> list[str]:
        return [p.name for p in self.cfg.layered_packages]

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"Layer {', '.join(self._names)} via rpm-ostree (requires reboot to take effect)"

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"packages are not layered: {', '.join(missing_packages(self._names))}"

    def is_done(self) -> bool:
        return not missing_packages(self._names)

    def apply(self) -> None:
        missing = set(missing_packages(self._names))
        sources = [p.source for p in self.cfg.layered_packages if p.name in missing]
        logger.info("Installing %s...", ", ".join(sorted(missing)))
        layer_packages(sources, dry_run=self.dry_run)
        logger.info("NOTE: These packages will not be available until you reboot")
