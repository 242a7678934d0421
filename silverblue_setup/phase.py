from __future__ import annotations

import enum
import logging
from typing import Iterable, Optional

from .lib.command import command_exists

logger = logging.getLogger(__name__)


class Phase(enum.Enum):
    NOT_STARTED = "not_started"
    PACKAGES_LAYERED = "packages_layered"
    FULLY_PROVISIONED = "fully_provisioned"

    @property
    def post_reboot(self) -> bool:
        return self is not Phase.NOT_STARTED


def detect_phase(marker_tool: str, recorded: Optional[str] = None, *, extra_dirs: Iterable[str] = ()) -> Phase:
    """Derive the run phase once, at startup.

    The marker tool is itself one of the layered packages, so finding it on
    PATH is taken as evidence the layering phase is behind us. This is a
    heuristic: it says nothing about the other layered packages. The
    recorded phase only refines a present marker, never overrides a missing
    one.
    """

    if not command_exists(marker_tool, extra_dirs=extra_dirs):
        logger.info("Pre-reboot phase (%s not found)", marker_tool)
        return Phase.NOT_STARTED

    if recorded == Phase.FULLY_PROVISIONED.value:
        phase = Phase.FULLY_PROVISIONED
    else:
        phase = Phase.PACKAGES_LAYERED
    logger.info("Post-reboot phase detected (%s is available): %s", marker_tool, phase.value)
    return phase
