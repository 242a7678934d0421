from __future__ import annotations

import logging
import os

from .config import SetupConfig
from .errors import PreflightError

logger = logging.getLogger(__name__)


def run_preflight(cfg: SetupConfig) -> None:
    """Safety checks. Nothing mutating or networked happens before these pass."""

    logger.info("Running pre-flight checks...")

    if os.geteuid() == 0:
        raise PreflightError("This script must not be run as root")

    missing = [p for p in (cfg.ssh_key, cfg.ssh_pubkey) if not p.is_file()]
    if missing:
        raise PreflightError(
            f"SSH keys not found: {', '.join(str(p) for p in missing)}. "
            f"Copy them to {cfg.ssh_key}[.pub] before running this script"
        )

    cfg.local_bin.mkdir(parents=True, exist_ok=True)
    logger.info("Pre-flight checks passed")
