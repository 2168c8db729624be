"""Command dispatch for ``aliasreg <command> [args]``."""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence
from typing import TextIO

from aliasreg.registry import Registry

logger = logging.getLogger(__name__)

HELP = """\
usage: aliasreg <command> [args]
commands:
  help|h                              print this help
  add|a alias|a NAME PATH [NAME PATH ...]
                                      add aliases
  add|a group|g NAME [NAME ...]       add empty groups
  rem|r alias|a NAME [NAME ...]       remove aliases
  rem|r group|g NAME [NAME ...]       remove groups and everything in them
  list|l                              print the alias tree
  info|i NAME [NAME ...]              print the path behind each alias

NAME is colon-separated (group:subgroup:alias). A leading ':' makes the rest
of NAME a single top-level alias name, colons included.
"""


class UsageError(Exception):
    """The command line does not match any command shape."""


def _entry_kind(params: Sequence[str]) -> str:
    if len(params) < 2:
        raise UsageError("not enough arguments")
    kind = params[0]
    if kind in ("alias", "a"):
        return "alias"
    if kind in ("group", "g"):
        return "group"
    raise UsageError(f"type '{kind}' not recognized")


def _add(params: Sequence[str], registry: Registry) -> None:
    kind = _entry_kind(params)
    names = params[1:]
    if kind == "group":
        for name in names:
            registry.add_group(name)
        return
    if len(names) % 2:
        raise UsageError("aliases must be given as NAME PATH pairs")
    for name, path in zip(names[::2], names[1::2]):
        registry.add_alias(name, path)


def _remove(params: Sequence[str], registry: Registry) -> None:
    kind = _entry_kind(params)
    for name in params[1:]:
        if kind == "group":
            registry.remove_group(name)
        else:
            registry.remove_alias(name)


def run(args: Sequence[str], registry: Registry, out: TextIO | None = None) -> None:
    """Execute one command against ``registry``. Saving is left to the caller."""
    out = out or sys.stdout
    if not args:
        raise UsageError("not enough arguments")

    cmd, params = args[0], list(args[1:])
    logger.debug("Command %s %s", cmd, params)
    if cmd in ("help", "h"):
        out.write(HELP)
    elif cmd in ("add", "a"):
        _add(params, registry)
    elif cmd in ("rem", "r"):
        _remove(params, registry)
    elif cmd in ("list", "l"):
        print(registry.list(), file=out)
    elif cmd in ("info", "i"):
        if not params:
            raise UsageError("not enough arguments")
        for accession in params:
            print(f"{accession}\t{registry.get_path(accession)}", file=out)
    else:
        raise UsageError(f"command '{cmd}' not recognized")
