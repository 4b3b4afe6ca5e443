"""Entry point: python -m notevault (or the `notevault` script).

Loads settings and the persisted vault path, then runs the interactive REPL.
"""

from __future__ import annotations

import logging

from notevault.config import ConfigError, ConfigStore, VaultConfig, load_settings


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main() -> None:
    settings = load_settings()
    _setup_logging(settings.log_level)

    from notevault.cli import ReplLoop
    from notevault.dispatcher import Dispatcher
    from notevault.session import VaultSession

    store = ConfigStore()
    try:
        config = store.load()
    except ConfigError as e:
        print(f"Error loading configuration: {e}")
        config = VaultConfig()

    session = VaultSession.from_config(store, config, settings=settings)
    ReplLoop(Dispatcher(session)).run()


if __name__ == "__main__":
    main()
