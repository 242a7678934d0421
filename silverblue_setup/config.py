from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from .errors import ConfigError

MANIFESTS_DIR = Path(__file__).resolve().parent / "manifests"
DEFAULTS_PATH = MANIFESTS_DIR / "defaults.yaml"


def _expand(p: str) -> Path:
    return Path(p).expanduser()


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(base)
    for k, v in override.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


@dataclass(frozen=True)
class LayeredPackage:
    name: str
    source: str


@dataclass(frozen=True)
class SetupConfig:
    raw: Dict[str, Any]

    def _section(self, key: str) -> Dict[str, Any]:
        return self.raw.get(key) or {}

    def _tool(self, name: str) -> Dict[str, Any]:
        return self._section("tools").get(name) or {}

    @property
    def ssh_key(self) -> Path:
        return _expand(str(self._section("paths").get("ssh_key") or "~/.ssh/keys.d/default"))

    @property
    def ssh_pubkey(self) -> Path:
        return self.ssh_key.with_name(self.ssh_key.name + ".pub")

    @property
    def local_bin(self) -> Path:
        return _expand(str(self._section("paths").get("local_bin") or "~/.local/bin"))

    @property
    def state_file(self) -> str:
        return str(_expand(str(self._section("paths").get("state_file") or "~/.local/state/silverblue-setup/state.json")))

    @property
    def log_file(self) -> Path:
        return _expand(str(self._section("paths").get("log_file") or "~/.local/state/silverblue-setup/setup.log"))

    @property
    def log_fallback(self) -> Path:
        # Used when the log_file directory cannot be created or written.
        name = str(self._section("paths").get("log_fallback_name") or "silverblue-setup.log")
        return Path.cwd() / name

    @property
    def phase_marker(self) -> str:
        return str(self.raw.get("phase_marker") or "stow")

    @property
    def layered_packages(self) -> List[LayeredPackage]:
        out: list[LayeredPackage] = []
        for item in self.raw.get("layered_packages") or []:
            if isinstance(item, str):
                out.append(LayeredPackage(name=item, source=item))
            else:
                name = str(item["name"])
                out.append(LayeredPackage(name=name, source=str(item.get("source") or name)))
        return out

    @property
    def dotfiles_repo(self) -> str:
        return str(self._section("dotfiles")["repo"])

    @property
    def dotfiles_dir(self) -> Path:
        return _expand(str(self._section("dotfiles").get("dir") or "~/code/dotfiles"))

    @property
    def dotfiles_marker(self) -> Path:
        return _expand(str(self._section("dotfiles").get("marker") or "~/.zshrc"))

    @property
    def git_identity(self) -> tuple[str, str]:
        d = self._section("dotfiles")
        return (str(d.get("git_user_name") or "Bootstrap"), str(d.get("git_user_email") or "bootstrap@example.com"))

    def tool_setting(self, tool: str, key: str) -> str:
        value = self._tool(tool).get(key)
        if not value:
            raise ConfigError(f"tools.{tool}.{key} missing from config")
        return str(value)

    @property
    def container_definition(self) -> Path:
        p = _expand(str(self._section("containers").get("definition") or "distrobox.ini"))
        return p if p.is_absolute() else MANIFESTS_DIR / p

    @property
    def container_names(self) -> List[str]:
        return [str(n) for n in self._section("containers").get("names") or []]

    @property
    def flatpak_remote(self) -> str:
        return str(self._section("flatpak").get("remote") or "flathub")

    @property
    def flatpak_remote_url(self) -> str:
        return str(self._section("flatpak").get("remote_url") or "https://flathub.org/repo/flathub.flatpakrepo")

    @property
    def flatpak_apps(self) -> List[str]:
        return [str(a) for a in self._section("flatpak").get("apps") or []]

    @property
    def target_shell(self) -> str:
        return str(self._section("shell").get("target") or "/bin/zsh")


def _load_yaml(p: Path) -> Dict[str, Any]:
    try:
        raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Cannot read config {p}: {e}") from e
    if not isinstance(raw, dict):
        raise ConfigError(f"{p} must contain a mapping/object")
    return raw


def load_setup_config(path: Optional[str] = None) -> SetupConfig:
    """Load bundled defaults, deep-merging the YAML file at path over them."""

    raw = _load_yaml(DEFAULTS_PATH)
    if path:
        p = Path(path).expanduser()
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        if p.suffix.lower() not in {".yaml", ".yml"}:
            raise ConfigError(f"Config file must be YAML: {p}")
        raw = _deep_merge(raw, _load_yaml(p))
    return SetupConfig(raw=raw)
