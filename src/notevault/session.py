"""Vault session: the current vault path plus the collaborators operations need."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path

from notevault.config import ConfigStore, Settings, VaultConfig
from notevault.gateway import ExitOutcome, ProcessGateway, SubprocessGateway

logger = logging.getLogger(__name__)

NOTE_SUFFIX = ".md"


class VaultError(Exception):
    """Vault or note cannot be addressed (unset vault, bad note name)."""


@dataclass
class VaultSession:
    """State shared by every command in one REPL session."""

    store: ConfigStore
    vault_path: str = ""
    settings: Settings = field(default_factory=Settings)
    gateway: ProcessGateway = field(default_factory=SubprocessGateway)

    @classmethod
    def from_config(
        cls,
        store: ConfigStore,
        config: VaultConfig,
        settings: Settings | None = None,
        gateway: ProcessGateway | None = None,
    ) -> VaultSession:
        return cls(
            store=store,
            vault_path=config.vault_path,
            settings=settings or Settings(),
            gateway=gateway or SubprocessGateway(),
        )

    # ── Paths ─────────────────────────────────────────────────

    def require_vault(self) -> Path:
        if not self.vault_path:
            raise VaultError("No vault configured. Use 'setvault <path>' first.")
        return Path(self.vault_path)

    def note_path(self, name: str) -> Path:
        """<vault>/<name>.md; names must not reach outside the vault."""
        forbidden = ["\x00", os.sep] + ([os.altsep] if os.altsep else [])
        if name in (".", "..") or any(ch in name for ch in forbidden):
            raise VaultError(f"Invalid note name: {name!r}")
        return self.require_vault() / f"{name}{NOTE_SUFFIX}"

    def set_vault_path(self, new_path: str) -> None:
        """Switch the active vault and persist it."""
        self.vault_path = new_path
        logger.info("Vault path set to %s", new_path)
        self.store.save(VaultConfig(vault_path=new_path))

    # ── External programs ─────────────────────────────────────

    def run_editor(self, path: Path) -> ExitOutcome:
        return self.gateway.run(self.settings.programs.editor, [str(path)], attach_terminal=True)

    def launch_app(self) -> ExitOutcome:
        if not self.settings.programs.launcher:
            return ExitOutcome(started=False, error="no launcher configured")
        program, *args = self.settings.programs.launcher
        return self.gateway.run(program, args, attach_terminal=False)

    def git(self, *args: str) -> ExitOutcome:
        """Run a git subcommand scoped to the vault directory."""
        vault = self.require_vault()
        return self.gateway.run(
            self.settings.programs.git, ["-C", str(vault), *args], attach_terminal=True
        )
