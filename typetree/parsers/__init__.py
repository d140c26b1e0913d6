"""
TypeTree Binary Parsers

- base: Shared utilities (read_stringz, BinaryReader)
- string_table: StringTable for external and common-string pools
- type_tree: TypeTreeParser for legacy and modern TypeTree blocks

Usage:
    from typetree.parsers import TypeTreeParser, BinaryReader

    parser = TypeTreeParser(VersionInfo(asset_version=9))
    tree = parser.read(BinaryReader(data, '>'))
    for type_class in tree:
        print(type_class.class_id, type_class.type_tree.type)
"""

# Base utilities
from .base import (
    read_stringz,
    BinaryReader,
)

# String tables
from .string_table import (
    StringTable,
    build_string_buffer,
)

# TypeTree parser
from .type_tree import (
    TypeTreeParser,
    read_type_tree,
    read_node_legacy,
    read_node_modern,
    read_type_legacy,
    read_type_modern,
    resolve_string,
    build_tree,
)

__all__ = [
    # Base
    'read_stringz',
    'BinaryReader',
    # String tables
    'StringTable',
    'build_string_buffer',
    # TypeTree
    'TypeTreeParser',
    'read_type_tree',
    'read_node_legacy',
    'read_node_modern',
    'read_type_legacy',
    'read_type_modern',
    'resolve_string',
    'build_tree',
]
