"""Tests for the binary reader/writer primitives and GUIDs."""

import pytest

from typetree.errors import DecodeError, TruncatedError
from typetree.parsers import BinaryReader, read_stringz
from typetree.utils import BinaryWriter, UnityGUID, read_guid, write_guid


def test_reader_little_and_big_endian():
    assert BinaryReader(b"\x01\x00\x00\x00").read_i32() == 1
    assert BinaryReader(b"\x00\x00\x00\x01", '>').read_i32() == 1
    assert BinaryReader(b"\xff\xff\xff\xff").read_i32() == -1
    assert BinaryReader(b"\xff\xff\xff\xff").read_u32() == 0xFFFFFFFF


def test_reader_short_read_raises_truncated():
    reader = BinaryReader(b"\x01\x00")
    with pytest.raises(TruncatedError) as excinfo:
        reader.read_i32()
    assert excinfo.value.offset == 0
    assert excinfo.value.needed == 4
    assert excinfo.value.available == 2
    assert reader.tell() == 0


def test_read_bytes_bounds():
    reader = BinaryReader(b"abcdef", offset=2)
    assert reader.read_bytes(3) == b"cde"
    assert reader.remaining_bytes == 1
    with pytest.raises(TruncatedError):
        reader.read_bytes(2)
    with pytest.raises(DecodeError):
        reader.read_bytes(-1)


def test_read_stringz_limits():
    reader = BinaryReader(b"5.0.1f1\x00rest")
    assert reader.read_stringz(255) == "5.0.1f1"
    assert reader.tell() == 8

    with pytest.raises(TruncatedError):
        BinaryReader(b"no terminator").read_stringz(255)

    with pytest.raises(DecodeError):
        BinaryReader(b"toolong\x00").read_stringz(3)


def test_read_stringz_function():
    assert read_stringz(b"ab\x00cd\x00", 3) == ("cd", 6)
    assert read_stringz(b"ab", 0) == (None, 2)


def test_invalid_byte_order():
    with pytest.raises(ValueError):
        BinaryReader(b"", 'x')
    with pytest.raises(ValueError):
        BinaryWriter('!')


def test_writer_primitives():
    writer = BinaryWriter('>')
    writer.write_i32(1)
    writer.write_i16(-2)
    writer.write_u8(3)
    writer.write_bool(True)
    writer.write_stringz("ab")
    assert writer.getvalue() == b"\x00\x00\x00\x01\xff\xfe\x03\x01ab\x00"
    assert len(writer) == 11


def test_writer_rejects_bad_strings():
    writer = BinaryWriter()
    with pytest.raises(ValueError):
        writer.write_stringz("a\x00b")
    with pytest.raises(ValueError):
        writer.write_stringz("abcd", max_len=3)


def test_guid_codec_and_text():
    guid = UnityGUID(bytes.fromhex("0123456789abcdef0011223344556677"))
    assert str(guid) == "1032547698badcfe0011223344556677"
    assert UnityGUID.from_hex(str(guid)) == guid

    writer = BinaryWriter()
    write_guid(writer, guid)
    assert read_guid(BinaryReader(writer.getvalue())) == guid


def test_guid_size_checked():
    with pytest.raises(ValueError):
        UnityGUID(b"short")
    with pytest.raises(TruncatedError):
        read_guid(BinaryReader(b"\x00" * 15))
