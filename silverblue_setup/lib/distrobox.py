from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Sequence

from .command import run_cmd

logger = logging.getLogger(__name__)


def parse_list(output: str) -> List[str]:
    """Extract container names from `distrobox list` table output.

    ID           | NAME  | STATUS        | IMAGE
    0f1c2d3e4f5a | dev   | Up 2 hours    | registry.fedoraproject.org/fedora-toolbox:40
    """

    names: list[str] = []
    for line in output.splitlines():
        cols = [c.strip() for c in line.split("|")]
        if len(cols) < 2 or not cols[1] or cols[1].upper() == "NAME":
            continue
        names.append(cols[1])
    return names


def list_containers(executable: str = "distrobox") -> List[str]:
    r = run_cmd([executable, "list", "--no-color"], check=False)
    if r.returncode != 0:
        return []
    return parse_list(r.stdout)


def missing_containers(names: Sequence[str], executable: str = "distrobox") -> List[str]:
    have = set(list_containers(executable))
    return [n for n in names if n not in have]


def assemble_create(definition: Path, executable: str = "distrobox", *, dry_run: bool = False) -> None:
    # distrobox-assemble is shipped next to distrobox; prefer the sibling binary.
    assemble = str(Path(executable).with_name("distrobox-assemble")) if "/" in executable else "distrobox-assemble"
    run_cmd(
        [assemble, "create", "--file", str(definition)],
        cwd=str(definition.parent),
        capture=False,
        dry_run=dry_run,
    )
