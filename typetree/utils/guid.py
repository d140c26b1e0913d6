"""
Asset GUIDs

TypeTree entries of the modern format carry 16-byte GUIDs identifying the
class (and, for scripted classes, the script). They are opaque to the decoder
and are round-tripped byte for byte.
"""

from dataclasses import dataclass

from ..constants import GUID_SIZE


@dataclass(frozen=True)
class UnityGUID:
    """A 16-byte GUID stored exactly as it appears on disk."""
    data: bytes

    def __post_init__(self):
        if len(self.data) != GUID_SIZE:
            raise ValueError(f"GUID must be {GUID_SIZE} bytes, got {len(self.data)}")

    @classmethod
    def from_hex(cls, text: str) -> 'UnityGUID':
        """
        Parse the 32-digit text form produced by __str__.

        Args:
            text: Hex string as written in .meta files

        Returns:
            UnityGUID with the on-disk byte layout
        """
        if len(text) != GUID_SIZE * 2:
            raise ValueError(f"GUID text must be {GUID_SIZE * 2} hex digits: {text!r}")
        # Each byte is printed low nibble first
        swapped = ''.join(text[i + 1] + text[i] for i in range(0, len(text), 2))
        return cls(bytes.fromhex(swapped))

    def __str__(self) -> str:
        return ''.join(f"{b & 0x0F:x}{b >> 4:x}" for b in self.data)


def read_guid(reader) -> UnityGUID:
    """Read a GUID from a BinaryReader."""
    return UnityGUID(reader.read_bytes(GUID_SIZE))


def write_guid(writer, guid: UnityGUID):
    """Write a GUID to a BinaryWriter."""
    writer.write_bytes(guid.data)
