from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Sequence

from ..errors import SetupError
from .command import run_cmd

logger = logging.getLogger(__name__)


def rpm_installed(package: str) -> bool:
    r = run_cmd(["rpm", "-q", package], check=False)
    return r.returncode == 0


def _matches(entry: str, package: str) -> bool:
    # Local packages are recorded by NEVRA (e.g. 1password-8.10.36-1.x86_64).
    return entry == package or entry.startswith(package + "-")


def requested_packages(status: Dict[str, Any]) -> List[str]:
    """Packages requested in the newest deployment (pending if one is staged)."""

    deployments = status.get("deployments") or []
    if not deployments:
        return []
    newest = deployments[0] or {}
    out: list[str] = []
    for key in ("requested-packages", "requested-local-packages", "packages"):
        for entry in newest.get(key) or []:
            if str(entry) not in out:
                out.append(str(entry))
    return out


def load_status() -> Dict[str, Any]:
    r = run_cmd(["rpm-ostree", "status", "--json"], check=False)
    if r.returncode != 0 or not r.stdout.strip():
        return {}
    try:
        data = json.loads(r.stdout)
    except ValueError as e:
        raise SetupError(f"Unreadable rpm-ostree status output: {e}") from e
    if not isinstance(data, dict):
        raise SetupError(f"rpm-ostree status must be an object, got {type(data).__name__}")
    return data


def missing_packages(packages: Sequence[str]) -> List[str]:
    """Return packages neither installed now nor layered into the pending deployment."""

    requested = requested_packages(load_status())
    missing: list[str] = []
    for p in packages:
        if rpm_installed(p):
            continue
        if any(_matches(e, p) for e in requested):
            continue
        missing.append(p)
    return missing


def layer_packages(sources: Sequence[str], *, dry_run: bool = False) -> None:
    if not sources:
        return
    run_cmd(["rpm-ostree", "install", *sources], capture=False, dry_run=dry_run)
