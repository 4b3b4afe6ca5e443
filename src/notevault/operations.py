"""Note and vault operations invoked by the command dispatcher.

Each operation prints its outcome for the user and never raises for
expected failures (missing note, unreadable vault, failed editor). Return
values exist for callers and tests; the REPL ignores them.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from notevault.config import ConfigError
from notevault.session import NOTE_SUFFIX, VaultError, VaultSession

logger = logging.getLogger(__name__)


def _resolve(session: VaultSession, name: str) -> Path | None:
    try:
        return session.note_path(name)
    except VaultError as e:
        print(e)
        return None


def _note_entries(session: VaultSession) -> list[str] | None:
    """Names of top-level *.md files, in directory order. None if unreadable."""
    try:
        vault = session.require_vault()
        with os.scandir(vault) as it:
            return [
                entry.name
                for entry in it
                if not entry.is_dir() and entry.name.endswith(NOTE_SUFFIX)
            ]
    except VaultError as e:
        print(e)
    except (OSError, ValueError) as e:
        logger.debug("Cannot read vault %r: %s", session.vault_path, e)
        print(f"Error reading vault: {e}")
    return None


# ── Notes ─────────────────────────────────────────────────────


def create_note(session: VaultSession, name: str) -> Path | None:
    path = _resolve(session, name)
    if path is None:
        return None

    try:
        os.lstat(path)
    except FileNotFoundError:
        pass
    except OSError as e:
        print(f"Error checking note: {e}")
        return None
    else:
        print(f"Note already exists: {path}")
        return None

    try:
        # "x" so a file appearing between the check and here is never truncated
        with open(path, "x", encoding="utf-8"):
            pass
    except OSError as e:
        print(f"Error creating note: {e}")
        return None

    logger.info("Created note %s", path)
    print(f"Note created: {path}")
    return path


def edit_note(session: VaultSession, name: str) -> bool:
    """Open an existing note in the editor; blocks until the editor exits."""
    path = _resolve(session, name)
    if path is None:
        return False
    if not path.exists():
        print(f"Note does not exist: {path}")
        return False

    outcome = session.run_editor(path)
    if not outcome.ok:
        print(f"Error editing note: {outcome.describe()}")
        return False
    return True


def delete_note(session: VaultSession, name: str) -> bool:
    path = _resolve(session, name)
    if path is None:
        return False
    if not path.exists():
        print(f"Note does not exist: {path}")
        return False

    try:
        path.unlink()
    except OSError as e:
        print(f"Error deleting note: {e}")
        return False

    logger.info("Deleted note %s", path)
    print(f"Note deleted: {path}")
    return True


def list_notes(session: VaultSession) -> list[str]:
    names = _note_entries(session)
    if names is None:
        return []

    print("Notes:")
    for name in names:
        print(f" - {name}")
    return names


def search_notes(session: VaultSession, keyword: str) -> list[str]:
    """Notes whose file name contains keyword, ignoring case."""
    names = _note_entries(session)
    if names is None:
        return []

    needle = keyword.casefold()
    matches = [name for name in names if needle in name.casefold()]

    print(f'Notes with "{keyword}" in their name:')
    for name in matches:
        print(f" - {name}")
    if not matches:
        print("No notes match the search.")
    return matches


# ── Vault ─────────────────────────────────────────────────────


def show_vault_path(session: VaultSession) -> str:
    print(f"Vault location: {session.vault_path}")
    return session.vault_path


def set_vault_path(session: VaultSession, new_path: str) -> bool:
    """Point the session at new_path, creating the directory if needed, and persist it."""
    if not os.path.exists(new_path):
        try:
            os.makedirs(new_path)
        except (OSError, ValueError) as e:
            print(f"Error creating vault: {e}")
            return False
        logger.info("Created vault directory %s", new_path)
        print(f"New vault created at: {new_path}")

    try:
        session.set_vault_path(new_path)
    except ConfigError as e:
        print(f"Error saving configuration: {e}")
        return False

    print(f"Vault path updated: {new_path}")
    return True


def open_app(session: VaultSession) -> bool:
    outcome = session.launch_app()
    if not outcome.ok:
        print(f"Error launching app: {outcome.describe()}")
        return False
    print("App launched!")
    return True
