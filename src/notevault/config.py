"""Configuration: program settings from notevault.toml/env, vault path from ~/.vaultconfig.json."""

from __future__ import annotations

import json
import logging
import os
import shlex
import sys
from dataclasses import dataclass, field

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".vaultconfig.json"
_SETTINGS_FILENAME = "notevault.toml"
_DEFAULT_LAUNCHER = ["open", "-a", "Obsidian"]


class ConfigError(Exception):
    """Vault config could not be read, parsed or written."""


# ── Program settings (TOML + environment) ────────────────────


@dataclass
class ProgramsConfig:
    """External programs the vault operations shell out to."""

    editor: str = "nano"
    launcher: list[str] = field(default_factory=lambda: list(_DEFAULT_LAUNCHER))
    git: str = "git"


@dataclass
class SyncConfig:
    """How `push` talks to the remote repository."""

    commit_message: str = "Update via CLI"
    remote: str | None = None
    branch: str | None = None


@dataclass
class Settings:
    """Top-level notevault settings."""

    programs: ProgramsConfig = field(default_factory=ProgramsConfig)
    sync: SyncConfig = field(default_factory=SyncConfig)
    log_level: str = "WARNING"


def _launcher_from_env(default: list[str]) -> list[str]:
    raw = os.getenv("NOTEVAULT_LAUNCHER")
    if raw is None:
        return default
    return shlex.split(raw)


def _home() -> Path | None:
    try:
        return Path.home()
    except RuntimeError:
        return None


def _read_settings_file(path: Path) -> dict:
    """Parse a settings file; an unreadable or malformed one counts as empty."""
    try:
        return tomllib.loads(path.read_text())
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring settings file %s: %s", path, e)
        return {}


def load_settings(settings_path: Path | None = None) -> Settings:
    """Load settings from environment variables and optional notevault.toml.

    Priority: environment variables > notevault.toml > defaults.
    """
    file_data: dict = {}
    if settings_path and settings_path.exists():
        file_data = _read_settings_file(settings_path)
    else:
        # Search current dir and ~/.notevault/
        candidates = [Path.cwd() / _SETTINGS_FILENAME]
        home = _home()
        if home is not None:
            candidates.append(home / ".notevault" / _SETTINGS_FILENAME)
        for candidate in candidates:
            if candidate.exists():
                file_data = _read_settings_file(candidate)
                break

    programs_data = file_data.get("programs", {})
    sync_data = file_data.get("sync", {})

    launcher = programs_data.get("launcher", _DEFAULT_LAUNCHER)
    if isinstance(launcher, str):
        launcher = shlex.split(launcher)

    return Settings(
        programs=ProgramsConfig(
            editor=os.getenv("NOTEVAULT_EDITOR", programs_data.get("editor", "nano")),
            launcher=_launcher_from_env(list(launcher)),
            git=os.getenv("NOTEVAULT_GIT", programs_data.get("git", "git")),
        ),
        sync=SyncConfig(
            commit_message=os.getenv(
                "NOTEVAULT_COMMIT_MESSAGE", sync_data.get("commit_message", "Update via CLI")
            ),
            remote=os.getenv("NOTEVAULT_REMOTE", sync_data.get("remote")),
            branch=os.getenv("NOTEVAULT_BRANCH", sync_data.get("branch")),
        ),
        log_level=os.getenv("NOTEVAULT_LOG_LEVEL", file_data.get("log_level", "WARNING")),
    )


# ── Persisted vault path ─────────────────────────────────────


@dataclass
class VaultConfig:
    """The one persisted setting: where the vault lives."""

    vault_path: str = ""

    def to_dict(self) -> dict:
        return {"vaultPath": self.vault_path}

    @classmethod
    def from_dict(cls, data: object) -> VaultConfig:
        if not isinstance(data, dict):
            raise ConfigError(f"expected a JSON object, got {type(data).__name__}")
        vault_path = data.get("vaultPath", "")
        if not isinstance(vault_path, str):
            raise ConfigError("'vaultPath' must be a string")
        return cls(vault_path=vault_path)


def default_config_path() -> Path:
    """~/.vaultconfig.json, or ./.vaultconfig.json when there is no home directory."""
    home = _home()
    if home is None:
        return Path(".") / CONFIG_FILENAME
    return home / CONFIG_FILENAME


class ConfigStore:
    """Reads and writes the vault config file."""

    def __init__(self, path: Path | None = None) -> None:
        self.path = path or default_config_path()

    def load(self) -> VaultConfig:
        """Load the config, writing an empty default on first run."""
        if not self.path.exists():
            config = VaultConfig()
            logger.info("No config at %s, writing default", self.path)
            self.save(config)
            return config

        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"cannot read {self.path}: {e}") from e
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as e:
            raise ConfigError(f"invalid JSON in {self.path}: {e}") from e

        config = VaultConfig.from_dict(data)
        logger.debug("Loaded config from %s: %s", self.path, config)
        return config

    def save(self, config: VaultConfig) -> None:
        data = json.dumps(config.to_dict(), indent=2, ensure_ascii=False)
        try:
            self.path.write_text(data, encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"cannot write {self.path}: {e}") from e
        logger.debug("Saved config to %s", self.path)
