"""
Base utilities for TypeTree binary parsing.

This module provides shared utilities used by the parsers:
- read_stringz: Read null-terminated strings
- BinaryReader: Sequential, bounds-checked reader over a byte buffer
"""

import struct
from typing import Optional, Tuple

from ..constants import STRING_MAX_LENGTH
from ..errors import DecodeError, TruncatedError


def read_stringz(data: bytes, offset: int, max_len: Optional[int] = None) -> Tuple[Optional[str], int]:
    """
    Read a null-terminated string from binary data.

    Args:
        data: Binary data to read from
        offset: Starting offset in the data
        max_len: Maximum string length in bytes, excluding the terminator

    Returns:
        Tuple of (string, new_offset after null terminator).
        The string is None when no terminator is found.
    """
    end = data.find(b'\x00', offset)
    if end == -1:
        return None, len(data)
    if max_len is not None and end - offset > max_len:
        raise DecodeError(f"String at offset {offset} exceeds {max_len} bytes")
    return data[offset:end].decode('utf-8', errors='replace'), end + 1


class BinaryReader:
    """
    Sequential reader for TypeTree binary data.

    Every read is bounds-checked: running out of data raises TruncatedError
    instead of returning short results.

    Usage:
        reader = BinaryReader(data, byte_order='>')
        revision = reader.read_stringz(255)
        attributes = reader.read_i32()
    """

    def __init__(self, data: bytes, byte_order: str = '<', offset: int = 0):
        """
        Initialize reader.

        Args:
            data: Binary data to read
            byte_order: struct byte order prefix, '<' or '>'
            offset: Offset to start reading from (default 0)
        """
        if byte_order not in ('<', '>'):
            raise ValueError(f"Invalid byte order: {byte_order!r}")
        self.data = bytes(data)
        self.byte_order = byte_order
        self.offset = offset

    def tell(self) -> int:
        return self.offset

    def seek(self, offset: int):
        self.offset = offset

    @property
    def remaining_bytes(self) -> int:
        """Number of bytes remaining to be read."""
        return max(0, len(self.data) - self.offset)

    def _require(self, size: int):
        if size > self.remaining_bytes:
            raise TruncatedError(self.offset, size, self.remaining_bytes)

    def _unpack(self, fmt: str, size: int):
        self._require(size)
        value = struct.unpack_from(self.byte_order + fmt, self.data, self.offset)[0]
        self.offset += size
        return value

    def read_i8(self) -> int:
        return self._unpack('b', 1)

    def read_u8(self) -> int:
        return self._unpack('B', 1)

    def read_bool(self) -> bool:
        return self._unpack('B', 1) != 0

    def read_i16(self) -> int:
        return self._unpack('h', 2)

    def read_i32(self) -> int:
        return self._unpack('i', 4)

    def read_u32(self) -> int:
        return self._unpack('I', 4)

    def read_bytes(self, size: int) -> bytes:
        """
        Read exactly size bytes.

        Args:
            size: Number of bytes, must not be negative
        """
        if size < 0:
            raise DecodeError(f"Negative length {size} at offset {self.offset}")
        self._require(size)
        chunk = self.data[self.offset:self.offset + size]
        self.offset += size
        return chunk

    def read_stringz(self, max_len: int = STRING_MAX_LENGTH) -> str:
        """
        Read a null-terminated string of at most max_len bytes.

        Raises:
            TruncatedError: No terminator before the end of data
            DecodeError: The string is longer than max_len
        """
        value, new_offset = read_stringz(self.data, self.offset, max_len)
        if value is None:
            raise TruncatedError(self.offset, self.remaining_bytes + 1, self.remaining_bytes)
        self.offset = new_offset
        return value
