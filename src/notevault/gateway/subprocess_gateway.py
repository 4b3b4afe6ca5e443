"""Gateway backed by the subprocess module."""

from __future__ import annotations

import logging
import subprocess

from notevault.gateway.base import ExitOutcome

logger = logging.getLogger(__name__)


class SubprocessGateway:
    """Runs external programs: attached to this terminal, or detached.

    Detached children are kept in ``_detached`` and reaped with poll() on
    every later run(), so finished launchers do not linger as zombies.
    """

    def __init__(self) -> None:
        self._detached: list[subprocess.Popen] = []

    def run(self, program: str, args: list[str], *, attach_terminal: bool) -> ExitOutcome:
        self.reap()
        cmd = [program, *args]
        if attach_terminal:
            return self._run_attached(cmd)
        return self._launch_detached(cmd)

    def reap(self) -> int:
        """Collect exited detached children. Returns how many are still running."""
        self._detached = [proc for proc in self._detached if proc.poll() is None]
        return len(self._detached)

    def _run_attached(self, cmd: list[str]) -> ExitOutcome:
        logger.debug("Running: %s", " ".join(cmd))
        try:
            # No stdio redirection: the child inherits our terminal.
            result = subprocess.run(cmd)
        except OSError as e:
            logger.debug("Failed to start %s: %s", cmd[0], e)
            return ExitOutcome(argv=cmd, started=False, error=str(e))

        if result.returncode != 0:
            logger.debug("%s exited with rc=%d", cmd[0], result.returncode)
        return ExitOutcome(argv=cmd, returncode=result.returncode)

    def _launch_detached(self, cmd: list[str]) -> ExitOutcome:
        logger.debug("Launching: %s", " ".join(cmd))
        try:
            proc = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as e:
            logger.debug("Failed to launch %s: %s", cmd[0], e)
            return ExitOutcome(argv=cmd, started=False, error=str(e))

        self._detached.append(proc)
        logger.info("Launched %s (pid=%d)", cmd[0], proc.pid)
        return ExitOutcome(argv=cmd)
