#!/usr/bin/env python3
"""
Decoder Configuration

Parser for the optional typetree INI file. Controls byte order, string
limits and how strictly tree levels are checked.

INI Format:
    [typetree]
    byte_order = big
    revision_max_length = 255
    string_max_length = 256
    strict_levels = false
"""

import configparser
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from ..constants import REVISION_MAX_LENGTH, STRING_MAX_LENGTH

SECTION = "typetree"

_BYTE_ORDERS = {
    '<': '<',
    'little': '<',
    'le': '<',
    '>': '>',
    'big': '>',
    'be': '>',
}


def parse_byte_order(value: str) -> str:
    """
    Normalize a byte order name to a struct prefix.

    Args:
        value: '<', '>', 'little', 'big', 'le' or 'be'

    Returns:
        '<' or '>'
    """
    key = value.strip().lower()
    if key not in _BYTE_ORDERS:
        raise ValueError(f"Unknown byte order: {value!r}")
    return _BYTE_ORDERS[key]


@dataclass
class DecoderConfig:
    """Settings shared by the TypeTree parser and serializer"""
    byte_order: str = '<'
    revision_max_length: int = REVISION_MAX_LENGTH
    string_max_length: int = STRING_MAX_LENGTH
    strict_levels: bool = False  # reject tree level jumps greater than +1

    def __post_init__(self):
        """Validate configuration"""
        self.byte_order = parse_byte_order(self.byte_order)

        if self.revision_max_length <= 0:
            raise ValueError(f"revision_max_length must be positive, got {self.revision_max_length}")

        if self.string_max_length <= 0:
            raise ValueError(f"string_max_length must be positive, got {self.string_max_length}")


def load_decoder_config(config_path: Union[str, Path]) -> DecoderConfig:
    """
    Load decoder settings from an INI file.

    Keys missing from the [typetree] section keep their defaults.

    Args:
        config_path: Path to the INI file

    Returns:
        DecoderConfig
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    parser = configparser.ConfigParser()
    parser.read(config_path, encoding='utf-8')

    if not parser.has_section(SECTION):
        return DecoderConfig()

    section = parser[SECTION]
    defaults = DecoderConfig()
    return DecoderConfig(
        byte_order=section.get('byte_order', defaults.byte_order),
        revision_max_length=section.getint('revision_max_length', defaults.revision_max_length),
        string_max_length=section.getint('string_max_length', defaults.string_max_length),
        strict_levels=section.getboolean('strict_levels', defaults.strict_levels),
    )
