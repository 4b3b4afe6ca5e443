"""Tests for git push orchestration."""

from pathlib import Path

from notevault.gateway import ExitOutcome
from notevault.session import VaultSession
from notevault.sync import push_changes

from conftest import FakeGateway


def ok() -> ExitOutcome:
    return ExitOutcome(argv=["git"], returncode=0)


def failed(rc: int = 1) -> ExitOutcome:
    return ExitOutcome(argv=["git"], returncode=rc)


class TestPushChanges:
    def test_three_steps_in_order(self, session: VaultSession, vault: Path, gateway, capsys):
        assert push_changes(session) is True

        v = str(vault)
        assert gateway.calls == [
            ("git", ["-C", v, "add", "."], True),
            ("git", ["-C", v, "commit", "-m", "Update via CLI"], True),
            ("git", ["-C", v, "push"], True),
        ]
        assert "Changes pushed" in capsys.readouterr().out

    def test_commit_failure_still_pushes(self, session: VaultSession, capsys):
        session.gateway = gw = FakeGateway([ok(), failed(), ok()])
        assert push_changes(session) is True
        assert [c[1][2] for c in gw.calls] == ["add", "commit", "push"]
        out = capsys.readouterr().out
        assert "Error committing" in out
        assert "Changes pushed" in out

    def test_add_failure_aborts(self, session: VaultSession, capsys):
        session.gateway = gw = FakeGateway([failed(128)])
        assert push_changes(session) is False
        assert len(gw.calls) == 1
        assert "Error staging changes: exit status 128" in capsys.readouterr().out

    def test_push_failure_reported(self, session: VaultSession, capsys):
        session.gateway = FakeGateway([ok(), ok(), failed()])
        assert push_changes(session) is False
        out = capsys.readouterr().out
        assert "Error pushing" in out
        assert "Changes pushed" not in out

    def test_git_missing(self, session: VaultSession, capsys):
        session.gateway = gw = FakeGateway([
            ExitOutcome(argv=["git"], started=False, error="No such file or directory"),
        ])
        assert push_changes(session) is False
        assert len(gw.calls) == 1
        assert "could not start git" in capsys.readouterr().out

    def test_remote_and_branch(self, session: VaultSession, gateway: FakeGateway):
        session.settings.sync.remote = "origin"
        session.settings.sync.branch = "main"
        session.settings.sync.commit_message = "notes sync"
        push_changes(session)
        assert gateway.calls[1][1][-2:] == ["-m", "notes sync"]
        assert gateway.calls[2][1][2:] == ["push", "origin", "main"]

    def test_custom_git_binary(self, session: VaultSession, gateway: FakeGateway):
        session.settings.programs.git = "/opt/git/bin/git"
        push_changes(session)
        assert {c[0] for c in gateway.calls} == {"/opt/git/bin/git"}

    def test_unset_vault(self, session: VaultSession, gateway: FakeGateway, capsys):
        session.vault_path = ""
        assert push_changes(session) is False
        assert gateway.calls == []
        assert "No vault configured" in capsys.readouterr().out
