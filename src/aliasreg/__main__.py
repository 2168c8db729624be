"""Entry point: python -m aliasreg <command> [args]

Loads the registry named by the configuration, runs one command and writes
the registry back if the command changed it. ``python -m aliasreg help``
lists the commands.
"""

from __future__ import annotations

import logging
import sys

from aliasreg.cli import HELP, UsageError, run
from aliasreg.config import load_config
from aliasreg.registry import OperationFailed, Registry


def _setup_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    config = load_config()
    _setup_logging(config.log_level)

    try:
        registry = Registry.from_file(config.registry_path)
        run(args, registry)
        registry.save(config.registry_path)
    except UsageError as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.stderr.write(HELP)
        sys.exit(2)
    except OperationFailed as exc:
        print(f"error: {exc}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
