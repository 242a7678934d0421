from __future__ import annotations

from pathlib import Path

import pytest

from silverblue_setup.errors import StateError
from silverblue_setup.state_store import ensure_defaults, load_state, record_error, record_outcome, save_state


def test_missing_state_is_empty(tmp_path: Path) -> None:
    assert load_state(str(tmp_path / "none.json")) == {}


def test_json_record(tmp_path: Path) -> None:
    path = str(tmp_path / "nested" / "state.json")
    state = ensure_defaults({"phase": "packages_layered"})
    record_outcome(state, "20_clone_dotfiles", "completed")
    record_outcome(state, "90_install_flatpaks", "failed", "boom")
    record_error(state, "90_install_flatpaks", "boom")
    save_state(path, state)
    assert [p.name for p in (tmp_path / "nested").iterdir()] == ["state.json"]

    loaded = load_state(path)
    assert loaded["phase"] == "packages_layered"
    assert loaded["execution"]["outcomes"]["20_clone_dotfiles"] == {"status": "completed"}
    assert loaded["execution"]["outcomes"]["90_install_flatpaks"]["reason"] == "boom"
    assert loaded["execution"]["errors"][0]["step"] == "90_install_flatpaks"


def test_yaml_record(tmp_path: Path) -> None:
    path = str(tmp_path / "state.yaml")
    save_state(path, ensure_defaults({}))
    assert load_state(path)["version"] == 1


def test_new_run_clears_previous_outcomes() -> None:
    state = {"execution": {"outcomes": {"old": {"status": "completed"}}, "errors": [{"step": "x"}]}}
    ensure_defaults(state)
    assert state["execution"]["outcomes"] == {}
    assert state["execution"]["errors"] == [{"step": "x"}]


def test_non_mapping_state_rejected(tmp_path: Path) -> None:
    p = tmp_path / "state.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(StateError):
        load_state(str(p))


def test_corrupt_state_names_the_file(tmp_path: Path) -> None:
    p = tmp_path / "state.json"
    p.write_text("{not json", encoding="utf-8")
    with pytest.raises(StateError, match="state.json"):
        load_state(str(p))
