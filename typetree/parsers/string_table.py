"""
String Table

Offset-addressed pool of null-terminated strings. Modern TypeTrees store
field and type names as offsets into either a per-tree (external) table
that follows the field records, or the common-string pool built into the
engine (internal table).

Buffer layout:
    "AABB\\0AnimationClip\\0..."
    offset 0 -> "AABB", offset 5 -> "AnimationClip", ...
"""

from typing import Dict, Iterable, List, Optional

import numpy as np

from ..constants import COMMON_STRINGS


class StringTable:
    """
    Immutable mapping from string start offset to string.

    Only offsets that begin a null-terminated run are indexed. Any other
    offset (mid-string, negative, past the end) resolves to None, and so does
    a trailing run with no terminator.

    Usage:
        table = StringTable.load(b"m_Name\\0int\\0")
        table.get(7)   # "int"
        table.get(2)   # None
    """

    def __init__(self, strings: Optional[Dict[int, str]] = None):
        self._strings: Dict[int, str] = dict(strings or {})

    @classmethod
    def load(cls, data: bytes) -> 'StringTable':
        """
        Build a table by scanning a buffer of null-terminated strings.

        Args:
            data: Raw string table bytes

        Returns:
            StringTable indexed by each string's start offset
        """
        buffer = np.frombuffer(bytes(data), dtype=np.uint8)
        terminators = np.flatnonzero(buffer == 0)

        strings: Dict[int, str] = {}
        start = 0
        for end in terminators.tolist():
            strings[start] = bytes(buffer[start:end]).decode('utf-8', errors='replace')
            start = end + 1
        return cls(strings)

    @classmethod
    def from_strings(cls, values: Iterable[str]) -> 'StringTable':
        """Build a table from strings laid out in order, each null-terminated."""
        return cls.load(build_string_buffer(values))

    @classmethod
    def default(cls) -> 'StringTable':
        """The engine's common-string pool."""
        return cls.from_strings(COMMON_STRINGS)

    def get(self, offset: int) -> Optional[str]:
        return self._strings.get(offset)

    def offset_of(self, value: str) -> Optional[int]:
        """Return the first offset holding value, or None."""
        for offset, string in self._strings.items():
            if string == value:
                return offset
        return None

    def offsets(self) -> List[int]:
        return sorted(self._strings)

    def __contains__(self, offset) -> bool:
        return offset in self._strings

    def __len__(self) -> int:
        return len(self._strings)

    def __repr__(self) -> str:
        return f"StringTable({len(self._strings)} strings)"


def build_string_buffer(values: Iterable[str]) -> bytes:
    """Join strings into a table buffer, each followed by a null byte."""
    return b''.join(value.encode('utf-8') + b'\x00' for value in values)
