"""Alias group tree + binary codec (no file I/O).

On-disk layout of one group, repeated recursively for subgroups:

    child_count:u8  (0x01 name\\0 path\\0 | 0x02 name\\0 <group>)*

Aliases are written before subgroups, each sorted by name bytes, so the same
tree always encodes to the same bytes.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

from aliasreg.registry.cursor import ByteReader, ByteWriter
from aliasreg.registry.errors import DecodeError, InvalidArgument, NotFound, reclassify

logger = logging.getLogger(__name__)

ALIAS_TAG = 0x01
GROUP_TAG = 0x02
MAX_CHILDREN = 0xFF

EMPTY_PLACEHOLDER = "(none)"
INDENT = "\t"

# surrogateescape lets arbitrary on-disk bytes survive a decode/encode cycle
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class EditAction(Enum):
    ADD_GROUP = "add_group"
    REMOVE_GROUP = "remove_group"
    ADD_ALIAS = "add_alias"
    REMOVE_ALIAS = "remove_alias"


def _to_bytes(text: str) -> bytes:
    return text.encode(_ENCODING, _ERRORS)


def _to_str(raw: bytes) -> str:
    return raw.decode(_ENCODING, _ERRORS)


def _sorted_names(names: Iterable[str]) -> list[str]:
    return sorted(names, key=_to_bytes)


def _push_text(writer: ByteWriter, kind: str, text: str) -> None:
    with reclassify(InvalidArgument, f"cannot encode {kind} {text!r}"):
        writer.push_cstr(_to_bytes(text))


def _check_text(kind: str, text: str, allow_empty: bool = False) -> None:
    if not text and not allow_empty:
        raise InvalidArgument(f"{kind} must not be empty")
    if "\0" in text:
        raise InvalidArgument(f"{kind} must not contain a NUL byte: {text!r}")


@dataclass
class Group:
    """A node holding aliases (name -> path) and named subgroups."""

    aliases: dict[str, str] = field(default_factory=dict)
    subgroups: dict[str, Group] = field(default_factory=dict)

    @property
    def child_count(self) -> int:
        return len(self.aliases) + len(self.subgroups)

    @property
    def is_empty(self) -> bool:
        return not self.aliases and not self.subgroups

    # ── Codec ─────────────────────────────────────────────────

    @classmethod
    def decode(cls, reader: ByteReader) -> Group:
        """Consume exactly one group encoding from ``reader``."""
        group = cls()
        with reclassify(DecodeError, "invalid data"):
            count = reader.pop()
            for _ in range(count):
                tag = reader.pop()
                if tag == ALIAS_TAG:
                    name = _to_str(reader.pop_cstr())
                    group.aliases[name] = _to_str(reader.pop_cstr())
                elif tag == GROUP_TAG:
                    name = _to_str(reader.pop_cstr())
                    group.subgroups[name] = cls.decode(reader)
                else:
                    raise DecodeError(f"invalid data: unknown child tag {tag:#04x}")
        return group

    def encode(self) -> bytes:
        """Return the encoding of this group and everything below it."""
        writer = ByteWriter()
        self._write(writer)
        return writer.getvalue()

    def _write(self, writer: ByteWriter) -> None:
        count = self.child_count
        if count > MAX_CHILDREN:
            raise InvalidArgument(
                f"group has {count} children; at most {MAX_CHILDREN} can be saved"
            )
        writer.push(count)
        for name in _sorted_names(self.aliases):
            writer.push(ALIAS_TAG)
            _push_text(writer, "alias name", name)
            _push_text(writer, "alias path", self.aliases[name])
        for name in _sorted_names(self.subgroups):
            writer.push(GROUP_TAG)
            _push_text(writer, "group name", name)
            self.subgroups[name]._write(writer)

    # ── Accession lookup & edit ───────────────────────────────

    def get_path(self, segments: Sequence[str]) -> str:
        """Resolve ``segments`` (group names, then an alias name) to a path."""
        if not segments:
            raise InvalidArgument("empty accession")
        with reclassify(NotFound, "invalid alias"):
            if len(segments) == 1:
                return self.aliases[segments[0]]
            child = self.subgroups[segments[0]]
        return child.get_path(segments[1:])

    def edit(
        self,
        segments: Sequence[str],
        action: EditAction,
        value: str | None = None,
    ) -> None:
        """Apply ``action`` to the last segment, inside existing groups only."""
        if not segments:
            raise InvalidArgument("empty accession")
        name = segments[0]
        if len(segments) > 1:
            with reclassify(NotFound, "invalid name/accession; failed to edit"):
                child = self.subgroups[name]
            child.edit(segments[1:], action, value)
            return

        if action is EditAction.ADD_GROUP:
            _check_text("group name", name)
            self._check_room(name, self.subgroups)
            if name in self.aliases:
                logger.warning("Name %r now refers to both an alias and a group", name)
            self.subgroups[name] = Group()
        elif action is EditAction.REMOVE_GROUP:
            self.subgroups.pop(name, None)
        elif action is EditAction.ADD_ALIAS:
            if value is None:
                raise InvalidArgument(f"alias {name!r} needs a path")
            _check_text("alias name", name)
            _check_text("alias path", value, allow_empty=True)
            self._check_room(name, self.aliases)
            if name in self.subgroups:
                logger.warning("Name %r now refers to both an alias and a group", name)
            self.aliases[name] = value
        elif action is EditAction.REMOVE_ALIAS:
            self.aliases.pop(name, None)
        else:
            raise InvalidArgument(f"invalid edit action: {action!r}")

    def _check_room(self, name: str, mapping: dict) -> None:
        if name not in mapping and self.child_count >= MAX_CHILDREN:
            raise InvalidArgument(
                f"cannot add {name!r}: group already holds {MAX_CHILDREN} entries"
            )

    # ── Listing ───────────────────────────────────────────────

    def iter_lines(self, indent: str = "") -> Iterator[str]:
        """Yield the tree as text lines: aliases, then ``name:`` per subgroup."""
        if self.is_empty:
            yield f"{indent}{EMPTY_PLACEHOLDER}"
            return
        for name in _sorted_names(self.aliases):
            yield f"{indent}{name}"
        for name in _sorted_names(self.subgroups):
            yield f"{indent}{name}:"
            yield from self.subgroups[name].iter_lines(indent + INDENT)


def decode(data: bytes) -> Group:
    """Decode a whole registry file. Bytes after the root group are an error."""
    reader = ByteReader(data)
    root = Group.decode(reader)
    if reader.remaining:
        raise DecodeError(f"invalid data: {reader.remaining} trailing byte(s)")
    return root


def encode(root: Group) -> bytes:
    """Encode a whole registry tree."""
    return root.encode()
