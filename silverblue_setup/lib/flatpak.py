from __future__ import annotations

import logging
from typing import List, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def has_remote(name: str) -> bool:
    r = run_cmd(["flatpak", "remote-list", "--columns=name"], check=False)
    return r.returncode == 0 and name in r.stdout.split()


def add_remote(name: str, url: str, *, dry_run: bool = False) -> None:
    run_cmd(["flatpak", "remote-add", "--if-not-exists", name, url], dry_run=dry_run)


def installed_apps() -> List[str]:
    r = run_cmd(["flatpak", "list", "--app", "--columns=application"], check=False)
    if r.returncode != 0:
        return []
    return [line.strip() for line in r.stdout.splitlines() if line.strip()]


def missing_apps(apps: Sequence[str]) -> List[str]:
    have = set(installed_apps())
    return [a for a in apps if a not in have]


def install_app(app: str, *, remote: str | None = None, dry_run: bool = False) -> bool:
    """Install or update one app. Returns False instead of raising on failure."""

    argv = ["flatpak", "install"]
    if remote:
        argv.append(remote)
    argv += [app, "--noninteractive", "--or-update"]
    r = run_cmd(argv, check=False, dry_run=dry_run)
    if r.returncode != 0:
        logger.warning("flatpak install %s failed (%s)", app, r.returncode)
        return False
    return True
