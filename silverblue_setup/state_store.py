from __future__ import annotations

import json
import logging
import time
from pathlib import Path
from typing import Any, Dict

import yaml

from .errors import StateError

logger = logging.getLogger(__name__)


def _is_yaml(path: Path) -> bool:
    # Anything that is not .yaml/.yml is treated as JSON.
    return path.suffix.lower() in {".yaml", ".yml"}


def load_state(path: str) -> Dict[str, Any]:
    """Read the run record; a missing file is an empty record."""

    p = Path(path).expanduser()
    if not p.exists():
        return {}

    try:
        text = p.read_text(encoding="utf-8")
        data = (yaml.safe_load(text) or {}) if _is_yaml(p) else json.loads(text)
    except (OSError, ValueError, yaml.YAMLError) as e:
        raise StateError(f"Cannot read state file {p}: {e}. Fix or delete it and re-run.") from e

    if not isinstance(data, dict):
        raise StateError(f"State file {p} must contain an object, got {type(data).__name__}")

    return data


def save_state(path: str, state: Dict[str, Any]) -> None:
    """Write the run record through a sibling temp file so a crash never truncates it."""

    p = Path(path).expanduser()
    p.parent.mkdir(parents=True, exist_ok=True)

    if _is_yaml(p):
        text = yaml.safe_dump(state, sort_keys=False)
    else:
        text = json.dumps(state, indent=2, sort_keys=True)

    tmp = p.with_name(p.name + ".tmp")
    tmp.write_text(text + "\n", encoding="utf-8")
    tmp.replace(p)


def ensure_defaults(state: Dict[str, Any]) -> Dict[str, Any]:
    """Fill required keys with defaults (without overriding recorded values).

    The state file is a record of what happened. It never decides whether a
    step runs; each step's own check does that.
    """

    state.setdefault("version", 1)
    state.setdefault("phase", None)
    state.setdefault("execution", {})

    exe = state["execution"]
    exe["current_step"] = None
    exe["started_at"] = time.time()
    exe["outcomes"] = {}
    exe.setdefault("errors", [])

    return state


def record_outcome(state: Dict[str, Any], step_id: str, status: str, reason: str | None = None) -> None:
    outcomes = state.setdefault("execution", {}).setdefault("outcomes", {})
    entry: Dict[str, Any] = {"status": status}
    if reason:
        entry["reason"] = reason
    outcomes[step_id] = entry


def record_error(state: Dict[str, Any], step_id: str | None, error: str) -> None:
    state.setdefault("execution", {}).setdefault("errors", []).append(
        {"step": step_id, "error": error, "ts": time.time()}
    )
