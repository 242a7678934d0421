from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..lib.archive import extract_binary
from ..lib.command import run_cmd
from ..lib.fetch import download
from .base import LocalBinaryStep

logger = logging.getLogger(__name__)


class InstallRcloneStep(LocalBinaryStep):
    step_id = "60_install_rclone"
    description = "Install rclone"
    binary = "rclone"

    def apply(self) -> None:
        url = self.cfg.tool_setting("rclone", "archive")
        with tempfile.TemporaryDirectory(prefix="rclone-") as tmp:
            archive = download(url, Path(tmp) / "rclone.zip", dry_run=self.dry_run)
            if self.dry_run:
                return
            extract_binary(archive, self.cfg.tool_setting("rclone", "member"), self.cfg.local_bin)

        r = run_cmd([str(self.target), "version"], check=False)
        if r.stdout:
            logger.info("rclone version: %s", r.stdout.splitlines()[0])
