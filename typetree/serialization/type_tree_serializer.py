#!/usr/bin/env python3
"""
TypeTree Serializer

Writes a TypeTree back to its binary form. Only the legacy recursive layout
(asset_version < 14) can be written; modern trees raise UnsupportedFormatError
before a single byte is produced.

Structure (legacy):
- stringZ revision, i32 attributes (asset_version >= 7)
- i32 class_count
- Per class: i32 class_id, then the field tree in pre-order
  (Type record, i32 child_count, children)
- i32 padding = 0 (asset_version >= 7)
"""

import struct
from typing import Optional

from ..config import DecoderConfig
from ..data_types import Type, TypeNode, TypeTree, TypeTreeFormat
from ..errors import EncodeError, UnsupportedFormatError
from ..utils import BinaryWriter, logDebug


def write_type_legacy(writer: BinaryWriter, field_type: Type, max_len: int):
    """Write one legacy Type record with inline names."""
    writer.write_stringz(field_type.type_name, max_len)
    writer.write_stringz(field_type.field_name, max_len)
    writer.write_i32(field_type.byte_size)
    writer.write_i32(field_type.index)
    writer.write_i32(field_type.is_array)
    writer.write_i32(field_type.version)
    writer.write_i32(field_type.meta_flag)


def write_node_legacy(writer: BinaryWriter, node: TypeNode, max_len: int):
    """Write a field tree node and its children in pre-order."""
    write_type_legacy(writer, node.type, max_len)
    writer.write_i32(len(node.children))
    for child in node.children:
        write_node_legacy(writer, child, max_len)


class TypeTreeSerializer:
    """
    Serializer for legacy TypeTrees.

    Usage:
        data = TypeTreeSerializer().write(tree)
    """

    def __init__(self, config: Optional[DecoderConfig] = None):
        self.config = config or DecoderConfig()

    def write(self, tree: TypeTree) -> bytes:
        """
        Serialize a TypeTree.

        Returns:
            The encoded TypeTree block

        Raises:
            UnsupportedFormatError: The tree uses the modern layout
            EncodeError: The tree cannot be represented
        """
        writer = BinaryWriter(self.config.byte_order)
        self.write_to(writer, tree)
        return writer.getvalue()

    def write_to(self, writer: BinaryWriter, tree: TypeTree):
        """
        Serialize into an existing writer.

        The whole tree is encoded into a scratch buffer first, so on failure
        nothing reaches writer.
        """
        if tree.format is TypeTreeFormat.MODERN:
            raise UnsupportedFormatError(
                f"Writing TypeTrees for asset version {tree.version_info.asset_version} "
                f"(modern layout) is not supported"
            )

        scratch = BinaryWriter(writer.byte_order)
        try:
            self._write_legacy(scratch, tree)
        except (ValueError, struct.error) as e:
            raise EncodeError(str(e)) from e

        writer.write_bytes(scratch.getvalue())
        logDebug(f"Wrote TypeTree v{tree.version_info.asset_version}: "
                 f"{len(tree.classes)} classes, {len(scratch)} bytes")

    def _write_legacy(self, writer: BinaryWriter, tree: TypeTree):
        has_revision = TypeTreeFormat.has_revision(tree.version_info.asset_version)

        if has_revision:
            writer.write_stringz(tree.version_info.unity_revision, self.config.revision_max_length)
            writer.write_i32(tree.attributes)

        writer.write_i32(len(tree.classes))

        for type_class in tree.classes:
            if type_class.type_tree is None:
                raise EncodeError(f"Class {type_class.class_id} has no field tree")
            writer.write_i32(type_class.class_id)
            write_node_legacy(writer, type_class.type_tree, self.config.string_max_length)

        if has_revision:
            writer.write_i32(0)  # padding


def write_type_tree(tree: TypeTree, config: Optional[DecoderConfig] = None) -> bytes:
    """Serialize a TypeTree to bytes. See TypeTreeSerializer.write."""
    return TypeTreeSerializer(config).write(tree)
