"""Interactive REPL: reads commands from stdin until quit/exit or EOF."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from notevault.dispatcher import FAREWELL, Dispatcher

logger = logging.getLogger(__name__)

PROMPT = "> "


class ReplLoop:
    """Prompt, read a line, dispatch; one command at a time."""

    def __init__(self, dispatcher: Dispatcher, stdin: TextIO | None = None) -> None:
        self.dispatcher = dispatcher
        self._stdin = stdin
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def run(self) -> None:
        self._running = True

        print("-- notevault: your notes from the terminal --")
        print("Type 'help' for the list of commands or 'quit' to leave.")

        while self._running:
            try:
                line = self._read_input()
            except KeyboardInterrupt:
                print(f"\n{FAREWELL}")
                break

            if line is None:
                # EOF ends the session silently.
                print()
                break

            self._running = self.dispatcher.dispatch(line)

        self._running = False
        logger.debug("REPL stopped")

    def stop(self) -> None:
        self._running = False

    def _read_input(self) -> str | None:
        stream = self._stdin or sys.stdin
        sys.stdout.write(PROMPT)
        sys.stdout.flush()
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            raw = stream.readline()
        else:
            # Bytes in, so a line that is not valid UTF-8 cannot end the session.
            raw = buffer.readline().decode("utf-8", errors="replace")
        if not raw:
            return None
        return raw.rstrip("\r\n")
