"""Push the vault to its git remote: add, commit, push."""

from __future__ import annotations

import logging

from notevault.session import VaultError, VaultSession

logger = logging.getLogger(__name__)


def _push_args(session: VaultSession) -> list[str]:
    args = ["push"]
    sync = session.settings.sync
    if sync.remote:
        args.append(sync.remote)
        if sync.branch:
            args.append(sync.branch)
    return args


def push_changes(session: VaultSession) -> bool:
    """Stage everything, commit, push. A failed commit does not stop the push."""
    try:
        session.require_vault()
    except VaultError as e:
        print(e)
        return False

    outcome = session.git("add", ".")
    if not outcome.ok:
        print(f"Error staging changes: {outcome.describe()}")
        return False

    outcome = session.git("commit", "-m", session.settings.sync.commit_message)
    if not outcome.ok:
        # Usually "nothing to commit"; earlier commits may still need pushing.
        logger.info("Commit failed (%s), pushing anyway", outcome.describe())
        print(f"Error committing (no changes?): {outcome.describe()}")

    outcome = session.git(*_push_args(session))
    if not outcome.ok:
        print(f"Error pushing: {outcome.describe()}")
        return False

    print("Changes pushed to the git remote.")
    return True
