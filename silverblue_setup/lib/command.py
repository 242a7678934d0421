from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from typing import Iterable, Mapping, Sequence

from ..errors import CommandFailed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=False hands the terminal to the child (password prompts, progress bars).
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", _fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = subprocess.PIPE if capture else None
    try:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=pipe,
            stderr=pipe,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
    except FileNotFoundError as e:
        if check:
            raise CommandFailed(argv_list, 127, str(e)) from e
        return CmdResult(argv=argv_list, returncode=127, stdout="", stderr=str(e))

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise CommandFailed(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


def which(name: str, *, extra_dirs: Iterable[str] = ()) -> str | None:
    """Resolve a command on PATH, then in extra_dirs (e.g. ~/.local/bin)."""
    search = [os.environ.get("PATH", os.defpath), *[str(d) for d in extra_dirs]]
    return shutil.which(name, path=os.pathsep.join(p for p in search if p))


def command_exists(name: str, *, extra_dirs: Iterable[str] = ()) -> bool:
    return which(name, extra_dirs=extra_dirs) is not None
