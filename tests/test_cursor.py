"""Tests for the byte cursors."""

import pytest

from aliasreg.registry.cursor import ByteReader, ByteWriter, CursorExhausted


class TestByteReader:
    def test_pop_until_exhausted(self):
        reader = ByteReader(b"\x01\x02")
        assert reader.pop() == 1
        assert reader.pop() == 2
        assert reader.remaining == 0
        with pytest.raises(CursorExhausted):
            reader.pop()

    def test_pop_cstr(self):
        reader = ByteReader(b"abc\x00\x00rest")
        assert reader.pop_cstr() == b"abc"
        assert reader.pop_cstr() == b""
        assert reader.remaining == 4

    def test_pop_cstr_without_terminator(self):
        reader = ByteReader(b"abc")
        with pytest.raises(CursorExhausted, match="terminator"):
            reader.pop_cstr()
        assert reader.remaining == 0


class TestByteWriter:
    def test_push(self):
        writer = ByteWriter()
        writer.push(2)
        writer.push_cstr(b"name")
        assert writer.getvalue() == b"\x02name\x00"

    def test_embedded_terminator(self):
        with pytest.raises(ValueError):
            ByteWriter().push_cstr(b"a\x00b")
