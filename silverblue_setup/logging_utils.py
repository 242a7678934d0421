from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Optional

from .errors import SetupError

logger = logging.getLogger(__name__)

FILE_FORMAT = logging.Formatter(
    fmt="%(asctime)s %(levelname)s %(name)s: %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%S%z",
)
CONSOLE_FORMAT = logging.Formatter(fmt="[%(levelname)s] %(message)s")


def configure_logging(level: int = logging.INFO, also_console: bool = True) -> None:
    """Configure console logging.

    Safe to call before preflight: nothing is written to disk here. The log
    file is attached by attach_log_file() once preflight has passed.
    """

    root = logging.getLogger()
    root.setLevel(level)

    # Avoid duplicate handlers if configure_logging() is called multiple times.
    if getattr(root, "_silverblue_console", False):
        return

    if also_console:
        console = logging.StreamHandler()
        console.setFormatter(CONSOLE_FORMAT)
        root.addHandler(console)
    setattr(root, "_silverblue_console", True)


def attach_log_file(log_path: Path, fallback: Optional[Path] = None) -> Path:
    """Mirror every record into a log file.

    Tries log_path, then fallback. Returns the path actually used; a second
    call returns the first call's path without adding another handler.
    """

    root = logging.getLogger()
    current = getattr(root, "_silverblue_log_path", None)
    if current is not None:
        return current

    candidates: Iterable[Path] = [log_path] if fallback is None else [log_path, fallback]
    for candidate in candidates:
        try:
            candidate.parent.mkdir(parents=True, exist_ok=True)
            handler = logging.FileHandler(str(candidate))
        except OSError as e:
            logger.warning("Cannot write log file %s: %s", candidate, e)
            continue
        handler.setFormatter(FILE_FORMAT)
        root.addHandler(handler)
        setattr(root, "_silverblue_log_path", candidate)
        logger.info("Logging to %s (requested=%s)", candidate, log_path)
        return candidate

    raise SetupError(f"No writable log file location (tried {log_path} and {fallback})")
