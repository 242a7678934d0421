from __future__ import annotations

import logging

from ..errors import SetupError
from ..lib.command import which
from ..lib.distrobox import assemble_create, missing_containers
from .base import ProvisionStep

logger = logging.getLogger(__name__)


class CreateContainersStep(ProvisionStep):
    step_id = "85_create_containers"

    @property
    def description(self) -> str:  # type: ignore[override]
        return f"Create Distrobox containers ({', '.join(self.cfg.container_names)})"

    @property
    def expectation(self) -> str:  # type: ignore[override]
        return f"containers are missing: {', '.join(self._missing())}"

    def _exe(self) -> str:
        return which("distrobox", extra_dirs=[str(self.cfg.local_bin)]) or "distrobox"

    def _missing(self) -> list[str]:
        return missing_containers(self.cfg.container_names, self._exe())

    def is_done(self) -> bool:
        return not self._missing()

    def apply(self) -> None:
        definition = self.cfg.container_definition
        if not definition.is_file():
            raise SetupError(f"Container definition not found: {definition}")
        logger.info("Creating Distrobox containers from %s...", definition)
        assemble_create(definition, self._exe(), dry_run=self.dry_run)
