from __future__ import annotations

from pathlib import Path

import pytest

from silverblue_setup import preflight
from silverblue_setup.config import SetupConfig
from silverblue_setup.errors import PreflightError
from silverblue_setup.preflight import run_preflight


def _write_keys(home: Path) -> None:
    keys = home / ".ssh" / "keys.d"
    keys.mkdir(parents=True)
    (keys / "default").write_text("private\n")
    (keys / "default.pub").write_text("public\n")


def test_refuses_root(cfg: SetupConfig, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    _write_keys(home)
    monkeypatch.setattr(preflight.os, "geteuid", lambda: 0)
    with pytest.raises(PreflightError, match="must not be run as root"):
        run_preflight(cfg)


def test_missing_public_key(cfg: SetupConfig, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(preflight.os, "geteuid", lambda: 1000)
    keys = home / ".ssh" / "keys.d"
    keys.mkdir(parents=True)
    (keys / "default").write_text("private\n")

    with pytest.raises(PreflightError, match="default.pub"):
        run_preflight(cfg)
    assert not (home / ".local" / "bin").exists()


def test_creates_local_bin(cfg: SetupConfig, home: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(preflight.os, "geteuid", lambda: 1000)
    _write_keys(home)
    run_preflight(cfg)
    assert (home / ".local" / "bin").is_dir()
