"""Sequential byte cursors used by the registry codec (no file I/O)."""

from __future__ import annotations

TERMINATOR = 0


class CursorExhausted(EOFError):
    """Raised when a reader has no bytes left."""


class ByteReader:
    """Pops bytes from the front of a buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._pos = 0

    @property
    def remaining(self) -> int:
        return len(self._data) - self._pos

    def pop(self) -> int:
        """Return the next byte, or raise ``CursorExhausted``."""
        if self._pos >= len(self._data):
            raise CursorExhausted(f"unexpected end of data at offset {self._pos}")
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def pop_cstr(self) -> bytes:
        """Return the bytes up to the next terminator, consuming it."""
        end = self._data.find(TERMINATOR, self._pos)
        if end < 0:
            self._pos = len(self._data)
            raise CursorExhausted("missing string terminator")
        chunk = self._data[self._pos:end]
        self._pos = end + 1
        return chunk


class ByteWriter:
    """Appends bytes to a growing buffer."""

    def __init__(self) -> None:
        self._buf = bytearray()

    def push(self, byte: int) -> None:
        self._buf.append(byte)

    def push_cstr(self, data: bytes) -> None:
        if TERMINATOR in data:
            raise ValueError("embedded terminator byte")
        self._buf += data
        self._buf.append(TERMINATOR)

    def getvalue(self) -> bytes:
        return bytes(self._buf)
