"""Alias registry: a root group bound to a file, with a dirty flag.

Accessions are colon-delimited (``work:proj:src``). A leading colon makes the
rest of the string a single root-level alias name, colons included.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from aliasreg.registry.errors import InvalidArgument, RegistryIOError, reclassify
from aliasreg.registry.group import EditAction, Group, decode, encode

logger = logging.getLogger(__name__)

DELIMITER = ":"
ROOT_SCOPE_MARKER = ":"


def split_accession(accession: str) -> list[str]:
    """Split ``a:b:c`` into segments. Empty accessions and segments are rejected."""
    if not accession:
        raise InvalidArgument("empty accession")
    segments = accession.split(DELIMITER)
    if not all(segments):
        raise InvalidArgument(f"empty name in accession {accession!r}")
    return segments


class Registry:
    """In-memory alias tree that is written back only after a change."""

    def __init__(self, root: Group | None = None) -> None:
        self.root = root if root is not None else Group()
        self.changed = False

    @classmethod
    def from_file(cls, path: Path) -> Registry:
        registry = cls()
        registry.load(path)
        return registry

    # ── Persistence ───────────────────────────────────────────

    def load(self, path: Path) -> None:
        """Replace the tree with the file's contents. A missing file means empty."""
        path = Path(path)
        try:
            data = path.read_bytes()
        except OSError as exc:
            logger.debug("No readable registry at %s (%s); starting empty", path, exc)
            self.root = Group()
            self.changed = False
            return
        self.root = decode(data)
        self.changed = False
        logger.debug("Loaded alias registry from %s (%d bytes)", path, len(data))

    def save(self, path: Path) -> bool:
        """Write the tree to ``path`` if it changed. Returns True when written.

        The file is replaced via a temporary sibling and ``os.replace`` so an
        interrupted write never leaves a truncated registry behind.
        """
        if not self.changed:
            return False
        # a symlinked registry keeps its link; only the target is rewritten
        path = Path(os.path.realpath(path))
        data = encode(self.root)
        tmp = path.with_name(path.name + ".tmp")
        with reclassify(RegistryIOError, "could not save alias registry"):
            path.parent.mkdir(parents=True, exist_ok=True)
            try:
                tmp.write_bytes(data)
                os.replace(tmp, path)
            except OSError:
                tmp.unlink(missing_ok=True)
                raise
        self.changed = False
        logger.info("Saved alias registry to %s (%d bytes)", path, len(data))
        return True

    # ── Lookup ────────────────────────────────────────────────

    def _alias_segments(self, accession: str) -> list[str]:
        if accession.startswith(ROOT_SCOPE_MARKER):
            name = accession[len(ROOT_SCOPE_MARKER):]
            if not name:
                raise InvalidArgument("root-scope alias name is empty")
            return [name]
        return split_accession(accession)

    def get_path(self, accession: str) -> str:
        """Return the path an alias accession points to."""
        return self.root.get_path(self._alias_segments(accession))

    # ── Edits ─────────────────────────────────────────────────

    def _edit(self, segments: list[str], action: EditAction, value: str | None = None) -> None:
        self.root.edit(segments, action, value)
        self.changed = True
        logger.debug("%s %s", action.value, DELIMITER.join(segments))

    def add_alias(self, name: str, path: str) -> None:
        with reclassify(InvalidArgument, "failed to add alias"):
            self._edit(self._alias_segments(name), EditAction.ADD_ALIAS, path)

    def remove_alias(self, name: str) -> None:
        with reclassify(InvalidArgument, "failed to remove alias"):
            self._edit(self._alias_segments(name), EditAction.REMOVE_ALIAS)

    def add_group(self, name: str) -> None:
        self._edit(split_accession(name), EditAction.ADD_GROUP)

    def remove_group(self, name: str) -> None:
        self._edit(split_accession(name), EditAction.REMOVE_GROUP)

    # ── Listing ───────────────────────────────────────────────

    def list(self) -> str:
        """Render the whole tree, one entry per line, tab-indented by depth."""
        return "\n".join(self.root.iter_lines())
