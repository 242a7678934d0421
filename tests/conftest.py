from __future__ import annotations

import io
from pathlib import Path
from typing import Callable, Dict, List, Sequence

import pytest

from silverblue_setup.config import SetupConfig, _deep_merge, load_setup_config
from silverblue_setup.lib.command import CmdResult
from silverblue_setup.phase import Phase
from silverblue_setup.prompt import Prompter
from silverblue_setup.steps import SetupContext


class CommandRecorder:
    """Stands in for run_cmd; answers from a table of argv-prefix -> result."""

    def __init__(self) -> None:
        self.calls: List[List[str]] = []
        self.kwargs: List[Dict] = []
        self.rules: List[tuple] = []

    def on(self, prefix: Sequence[str], *, returncode: int = 0, stdout: str = "") -> None:
        self.rules.append((list(prefix), returncode, stdout))

    def __call__(self, argv, **kwargs) -> CmdResult:
        argv = list(argv)
        self.calls.append(argv)
        self.kwargs.append(kwargs)
        rc, out = 0, ""
        for prefix, r, o in self.rules:
            if argv[: len(prefix)] == prefix:
                rc, out = r, o
        if rc != 0 and kwargs.get("check", True):
            from silverblue_setup.errors import CommandFailed

            raise CommandFailed(argv, rc, "")
        return CmdResult(argv=argv, returncode=rc, stdout=out, stderr="")

    def ran(self, *prefix: str) -> bool:
        return any(c[: len(prefix)] == list(prefix) for c in self.calls)


@pytest.fixture
def recorder() -> CommandRecorder:
    return CommandRecorder()


@pytest.fixture
def home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    h = tmp_path / "home"
    h.mkdir()
    monkeypatch.setenv("HOME", str(h))
    return h


@pytest.fixture
def cfg(home: Path) -> SetupConfig:
    base = load_setup_config()
    return SetupConfig(
        raw=_deep_merge(
            base.raw,
            {
                "paths": {
                    "state_file": str(home / "state.json"),
                    "log_file": str(home / "setup.log"),
                },
                "flatpak": {"apps": ["org.example.One", "org.example.Two", "org.example.Three"]},
            },
        )
    )


@pytest.fixture
def make_ctx(cfg: SetupConfig) -> Callable[..., SetupContext]:
    def _make(phase: Phase = Phase.PACKAGES_LAYERED, dry_run: bool = False) -> SetupContext:
        return SetupContext(cfg=cfg, phase=phase, dry_run=dry_run)

    return _make


def answering(*answers: str) -> Prompter:
    return Prompter(stdin=io.StringIO("".join(a + "\n" for a in answers)), stdout=io.StringIO())


@pytest.fixture
def yes_prompter() -> Prompter:
    return answering(*(["y"] * 20))
