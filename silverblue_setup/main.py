from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from .config import load_setup_config
from .errors import SetupError
from .finalize import finalize
from .logging_utils import attach_log_file, configure_logging
from .phase import detect_phase
from .pipeline import run_pipeline
from .preflight import run_preflight
from .prompt import Prompter
from .state_store import ensure_defaults, load_state, record_error, save_state
from .steps import (
    ChangeShellStep,
    CloneDotfilesStep,
    CreateContainersStep,
    InstallDistroboxStep,
    InstallFlatpaksStep,
    InstallLazygitStep,
    InstallMiseStep,
    InstallRcloneStep,
    InstallStarshipStep,
    LayerPackagesStep,
    SetupContext,
    StowDotfilesStep,
)

logger = logging.getLogger(__name__)


def build_steps(ctx: SetupContext):
    return [
        LayerPackagesStep(ctx),
        CloneDotfilesStep(ctx),
        StowDotfilesStep(ctx),
        InstallMiseStep(ctx),
        InstallStarshipStep(ctx),
        InstallRcloneStep(ctx),
        InstallLazygitStep(ctx),
        InstallDistroboxStep(ctx),
        CreateContainersStep(ctx),
        InstallFlatpaksStep(ctx),
        ChangeShellStep(ctx),
    ]


def run(
    *,
    config_path: Optional[str] = None,
    state_path: Optional[str] = None,
    log_path: Optional[str] = None,
    dry_run: bool = False,
    prompter: Optional[Prompter] = None,
) -> Dict[str, Any]:
    """Run preflight, every step, then the completion message. Raises SetupError."""

    cfg = load_setup_config(config_path)
    prompter = prompter or Prompter()

    run_preflight(cfg)
    attach_log_file(Path(log_path).expanduser() if log_path else cfg.log_file, cfg.log_fallback)

    state_path = state_path or cfg.state_file
    state = ensure_defaults(load_state(state_path))

    phase = detect_phase(cfg.phase_marker, state.get("phase"))
    if phase.post_reboot:
        logger.info("Skipping rpm-ostree and shell change steps")
    ctx = SetupContext(cfg=cfg, phase=phase, dry_run=dry_run)

    try:
        result = run_pipeline(steps=build_steps(ctx), prompter=prompter, state=state, dry_run=dry_run)
    except SetupError as e:
        record_error(state, (state.get("execution") or {}).get("current_step"), str(e))
        raise
    else:
        for outcome in result.failed:
            record_error(state, outcome.step_id, outcome.reason or outcome.status.value)
        if result.failed:
            raise SetupError("; ".join(o.reason or o.step_id for o in result.failed))
        finalize(phase=phase, state=state, prompter=prompter, dry_run=dry_run)
        return state
    finally:
        save_state(state_path, state)


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(prog="silverblue-setup", description="Bootstrap a Fedora Silverblue workstation.")
    p.add_argument("--config", default=None, help="YAML file merged over the bundled defaults")
    p.add_argument("--state", default=None, help="Path to run record (json|yaml)")
    p.add_argument("--log", default=None, help="Path to setup log")
    p.add_argument("--dry-run", action="store_true", help="Log commands without executing them")

    args = p.parse_args(argv)
    configure_logging()

    try:
        run(
            config_path=args.config,
            state_path=args.state,
            log_path=args.log,
            dry_run=bool(args.dry_run),
        )
    except SetupError as e:
        logger.error("%s", e)
        return 1
    return 0
