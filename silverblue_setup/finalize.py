from __future__ import annotations

import logging
from typing import Any, Dict

from .lib.command import run_cmd
from .phase import Phase
from .prompt import Prompter

logger = logging.getLogger(__name__)

PRE_REBOOT_SUMMARY = """
========================================
Pre-reboot phase completed!
========================================

The following items were configured:
- ZSH, GNU Stow, and 1Password (layered via rpm-ostree)
- Default shell changed to ZSH

IMPORTANT: You MUST reboot for the following changes to take effect:
- rpm-ostree layered packages (ZSH, Stow, 1Password)
- Default shell change

After reboot, run this script again to continue setup.
"""

POST_REBOOT_SUMMARY = """
========================================
Setup completed successfully!
========================================

The following items were installed:
- Dotfiles (cloned and symlinked)
- Mise (version manager)
- Starship prompt
- rclone
- LazyGit
- 1Password
- Distrobox and containers (dev, build-neovim, build-mise-erlang)
- Flatpak applications

Your development environment is ready to use!
"""


def finalize(*, phase: Phase, state: Dict[str, Any], prompter: Prompter, dry_run: bool = False) -> None:
    if phase is Phase.NOT_STARTED:
        state["phase"] = Phase.NOT_STARTED.value
        prompter.show(PRE_REBOOT_SUMMARY)
        if prompter.ask("Would you like to reboot now?"):
            logger.info("Rebooting system...")
            run_cmd(["sudo", "reboot"], capture=False, dry_run=dry_run)
        else:
            logger.info("Pre-reboot phase complete. Please reboot when ready, then re-run this script.")
        return

    if dry_run:
        logger.info("Dry run: phase not recorded as %s", Phase.FULLY_PROVISIONED.value)
    else:
        state["phase"] = Phase.FULLY_PROVISIONED.value
    prompter.show(POST_REBOOT_SUMMARY)
