"""Process gateway protocol and shared types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable


@dataclass
class ExitOutcome:
    """Result of running an external program."""

    argv: list[str] = field(default_factory=list)
    started: bool = True
    returncode: int | None = None  # None for detached launches
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.started and not self.returncode

    def describe(self) -> str:
        """Human-readable failure text (empty when ok)."""
        if not self.started:
            return f"could not start {self.argv[0] if self.argv else 'program'}: {self.error}"
        if self.returncode is not None and self.returncode < 0:
            return f"terminated by signal {-self.returncode}"
        if self.returncode:
            return f"exit status {self.returncode}"
        return ""


@runtime_checkable
class ProcessGateway(Protocol):
    """Protocol that all process gateways must implement."""

    def run(self, program: str, args: list[str], *, attach_terminal: bool) -> ExitOutcome:
        """Run program with args.

        attach_terminal=True shares stdin/stdout/stderr and blocks until exit.
        attach_terminal=False starts it detached and returns immediately.
        """
        ...
