from __future__ import annotations

import logging
import tempfile
from pathlib import Path

from ..lib.archive import extract_binary
from ..lib.fetch import download, latest_release_asset_url
from .base import LocalBinaryStep

logger = logging.getLogger(__name__)


class InstallLazygitStep(LocalBinaryStep):
    step_id = "70_install_lazygit"
    description = "Install LazyGit"
    binary = "lazygit"

    def apply(self) -> None:
        url = latest_release_asset_url(
            self.cfg.tool_setting("lazygit", "releases_api"),
            self.cfg.tool_setting("lazygit", "asset_suffix"),
            dry_run=self.dry_run,
        )
        logger.info("LazyGit release asset: %s", url)
        with tempfile.TemporaryDirectory(prefix="lazygit-") as tmp:
            archive = download(url, Path(tmp) / "lazygit.tar.gz", dry_run=self.dry_run)
            if self.dry_run:
                return
            extract_binary(archive, self.cfg.tool_setting("lazygit", "member"), self.cfg.local_bin)
