"""
typetree

Decoder and legacy encoder for the TypeTree block of game engine asset files.

Usage:
    from typetree import VersionInfo, read_type_tree, write_type_tree

    tree = read_type_tree(data, VersionInfo(asset_version=15))
    for type_class in tree:
        print(type_class.class_id, type_class.type_tree)
"""

from .config import DecoderConfig, load_decoder_config
from .data_types import Type, TypeClass, TypeNode, TypeTree, TypeTreeFormat, VersionInfo
from .errors import (
    TypeTreeError,
    DecodeError,
    TruncatedError,
    UnresolvedStringError,
    EncodeError,
    UnsupportedFormatError,
)
from .parsers import BinaryReader, StringTable, TypeTreeParser, read_type_tree
from .serialization import TypeTreeSerializer, write_type_tree
from .utils import BinaryWriter, UnityGUID

__version__ = "0.1.0"

__all__ = [
    'DecoderConfig',
    'load_decoder_config',
    'Type',
    'TypeClass',
    'TypeNode',
    'TypeTree',
    'TypeTreeFormat',
    'VersionInfo',
    'TypeTreeError',
    'DecodeError',
    'TruncatedError',
    'UnresolvedStringError',
    'EncodeError',
    'UnsupportedFormatError',
    'BinaryReader',
    'StringTable',
    'TypeTreeParser',
    'read_type_tree',
    'TypeTreeSerializer',
    'write_type_tree',
    'BinaryWriter',
    'UnityGUID',
]
