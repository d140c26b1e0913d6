"""
TypeTree Errors

Every failure aborts the current read/write call. Nothing is retried: these
conditions mean malformed input or an unimplemented format, not transient faults.
"""


class TypeTreeError(Exception):
    """Base class for all TypeTree decode/encode failures."""


class DecodeError(TypeTreeError, ValueError):
    """The input bytes do not describe a valid TypeTree."""


class TruncatedError(DecodeError):
    """The stream ended before a declared count or length was satisfied."""

    def __init__(self, offset: int, needed: int, available: int):
        super().__init__(
            f"Unexpected end of data at offset {offset}: need {needed} bytes, {available} available"
        )
        self.offset = offset
        self.needed = needed
        self.available = available


class UnresolvedStringError(DecodeError):
    """A string offset resolved in neither the external nor the internal table."""

    def __init__(self, offset: int, what: str = "string"):
        super().__init__(f"Unresolved {what} offset {offset} (0x{offset & 0xFFFFFFFF:08X})")
        self.offset = offset


class EncodeError(TypeTreeError):
    """The in-memory TypeTree cannot be serialized."""


class UnsupportedFormatError(EncodeError):
    """Encoding was requested for a format this package cannot write."""
