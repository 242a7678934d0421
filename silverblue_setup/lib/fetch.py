from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Sequence

from ..errors import SetupError
from .command import run_cmd

logger = logging.getLogger(__name__)


def fetch_text(url: str, *, dry_run: bool = False) -> str:
    return run_cmd(["curl", "-fsSL", url], dry_run=dry_run).stdout


def download(url: str, dest: Path, *, dry_run: bool = False) -> Path:
    dest.parent.mkdir(parents=True, exist_ok=True)
    run_cmd(["curl", "-fsSL", url, "-o", str(dest)], dry_run=dry_run)
    return dest


def run_remote_script(url: str, args: Sequence[str] = (), *, dry_run: bool = False) -> None:
    """Equivalent of `curl <url> | sh -s -- <args>`."""

    script = fetch_text(url, dry_run=dry_run)
    argv = ["sh", "-s"]
    if args:
        argv += ["--", *args]
    run_cmd(argv, input_text=script, dry_run=dry_run)


def latest_release_asset_url(api_url: str, suffix: str, *, dry_run: bool = False) -> str:
    """Pick the first asset of the latest GitHub release whose URL ends with suffix."""

    if dry_run:
        run_cmd(["curl", "-fsSL", api_url], dry_run=True)
        return f"{api_url}#{suffix}"

    release: Dict[str, Any] = json.loads(fetch_text(api_url))
    for asset in release.get("assets") or []:
        url = str(asset.get("browser_download_url") or "")
        if url.lower().endswith(suffix.lower()):
            return url
    raise SetupError(f"No release asset ending in {suffix} at {api_url}")
