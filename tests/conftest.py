"""Shared fixtures: an isolated config store, a vault dir and a recording gateway."""

from __future__ import annotations

import pytest
from pathlib import Path

from notevault.config import ConfigStore, Settings
from notevault.gateway import ExitOutcome
from notevault.session import VaultSession


class FakeGateway:
    """Records every run() call and answers from a queue of outcomes."""

    def __init__(self, outcomes: list[ExitOutcome] | None = None):
        self.calls: list[tuple[str, list[str], bool]] = []
        self._outcomes = list(outcomes or [])

    def run(self, program, args, *, attach_terminal) -> ExitOutcome:
        self.calls.append((program, list(args), attach_terminal))
        if self._outcomes:
            return self._outcomes.pop(0)
        return ExitOutcome(argv=[program, *args], returncode=0 if attach_terminal else None)


@pytest.fixture
def gateway() -> FakeGateway:
    return FakeGateway()


@pytest.fixture
def store(tmp_path: Path) -> ConfigStore:
    return ConfigStore(tmp_path / ".vaultconfig.json")


@pytest.fixture
def vault(tmp_path: Path) -> Path:
    path = tmp_path / "vault"
    path.mkdir()
    return path


@pytest.fixture
def session(store: ConfigStore, vault: Path, gateway: FakeGateway) -> VaultSession:
    return VaultSession(store=store, vault_path=str(vault), settings=Settings(), gateway=gateway)
