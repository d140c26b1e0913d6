"""
Binary Writer

Sequential writer for TypeTree binary data. Mirrors the read primitives of
parsers.base.BinaryReader.
"""

import io
import struct

from ..constants import STRING_MAX_LENGTH


class BinaryWriter:
    """
    Append-only writer over an in-memory buffer.

    Usage:
        writer = BinaryWriter('<')
        writer.write_stringz("5.0.1f1")
        writer.write_i32(0)
        data = writer.getvalue()
    """

    def __init__(self, byte_order: str = '<'):
        """
        Args:
            byte_order: struct byte order prefix, '<' or '>'
        """
        if byte_order not in ('<', '>'):
            raise ValueError(f"Invalid byte order: {byte_order!r}")
        self.byte_order = byte_order
        self._buffer = io.BytesIO()

    def _pack(self, fmt: str, value):
        self._buffer.write(struct.pack(self.byte_order + fmt, value))

    def write_u8(self, value: int):
        self._pack('B', value)

    def write_bool(self, value: bool):
        self._pack('B', 1 if value else 0)

    def write_i16(self, value: int):
        self._pack('h', value)

    def write_i32(self, value: int):
        self._pack('i', value)

    def write_bytes(self, data: bytes):
        self._buffer.write(data)

    def write_stringz(self, value: str, max_len: int = STRING_MAX_LENGTH):
        """
        Write a null-terminated UTF-8 string.

        Args:
            value: String to write
            max_len: Maximum encoded length (excluding terminator) a reader accepts
        """
        encoded = value.encode('utf-8')
        if b'\x00' in encoded:
            raise ValueError(f"String contains a null byte: {value!r}")
        if len(encoded) > max_len:
            raise ValueError(f"String longer than {max_len} bytes: {value!r}")
        self._buffer.write(encoded + b'\x00')

    def getvalue(self) -> bytes:
        return self._buffer.getvalue()

    def __len__(self) -> int:
        return self._buffer.tell()
