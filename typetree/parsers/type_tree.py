"""
TypeTree Parser

Decodes the TypeTree block of an asset file: the per-class field trees that
describe how every serialized object is laid out.

File format:
- Header (asset_version >= 7):
  - stringZ revision (max 255 bytes)
  - i32 attributes
- Modern (asset_version >= 14):
  - bool embedded
  - i32 class_count
  - Per class:
    - i32 class_id
    - GUID script_guid (only when class_id < 0)
    - GUID class_guid
    - Field tree (only when embedded):
      - i32 field_count
      - i32 string_table_size
      - Type records (24 bytes each):
        - i16 version
        - u8 tree_level
        - u8 is_array
        - i32 type_offset
        - i32 name_offset
        - i32 byte_size
        - i32 index
        - i32 meta_flag
      - string_table_size bytes of null-terminated strings
- Legacy (asset_version < 14):
  - i32 class_count
  - Per class:
    - i32 class_id
    - Field tree node (recursive):
      - stringZ type_name
      - stringZ field_name
      - i32 byte_size
      - i32 index
      - i32 is_array
      - i32 version
      - i32 meta_flag
      - i32 child_count
      - child_count nodes
  - i32 padding (asset_version >= 7)
"""

import dataclasses
from typing import List, Optional

from ..config import DecoderConfig
from ..constants import COMMON_STRING_MASK
from ..data_types import Type, TypeClass, TypeNode, TypeTree, TypeTreeFormat, VersionInfo
from ..errors import DecodeError, UnresolvedStringError
from ..utils import logDebug, logWarning, read_guid
from .base import BinaryReader
from .string_table import StringTable


def read_type_legacy(reader: BinaryReader, max_len: int) -> Type:
    """Read one legacy Type record with inline names."""
    type_name = reader.read_stringz(max_len)
    field_name = reader.read_stringz(max_len)
    return Type(
        type_name=type_name,
        field_name=field_name,
        byte_size=reader.read_i32(),
        index=reader.read_i32(),
        is_array=reader.read_i32(),
        version=reader.read_i32(),
        meta_flag=reader.read_i32(),
    )


def read_type_modern(reader: BinaryReader) -> Type:
    """Read one modern Type record. Names stay unresolved offsets."""
    version = reader.read_i16()
    tree_level = reader.read_u8()
    is_array = reader.read_u8()
    type_offset = reader.read_i32()
    name_offset = reader.read_i32()
    return Type(
        version=version,
        tree_level=tree_level,
        is_array=is_array,
        type_offset=type_offset,
        name_offset=name_offset,
        byte_size=reader.read_i32(),
        index=reader.read_i32(),
        meta_flag=reader.read_i32(),
    )


def read_node_legacy(reader: BinaryReader, level: int = 0,
                     max_len: Optional[int] = None) -> TypeNode:
    """
    Recursively read a legacy field tree node and its children.

    Args:
        reader: Positioned at the node's Type record
        level: Tree level assigned to this node
        max_len: Maximum inline string length

    Returns:
        TypeNode with all descendants attached
    """
    if max_len is None:
        max_len = DecoderConfig().string_max_length

    field_type = read_type_legacy(reader, max_len)
    field_type.tree_level = level
    node = TypeNode(field_type)

    child_count = reader.read_i32()
    if child_count < 0:
        raise DecodeError(f"Negative child count {child_count} for field '{field_type.field_name}'")

    for _ in range(child_count):
        node.add(read_node_legacy(reader, level + 1, max_len))

    return node


def resolve_string(offset: int, external: StringTable, internal: StringTable,
                   what: str = "string") -> str:
    """
    Resolve a string offset, external table first, then the common strings.

    Raises:
        UnresolvedStringError: Neither table has a string at offset
    """
    value = external.get(offset)
    if value is None:
        value = internal.get(offset & COMMON_STRING_MASK)
    if value is None:
        raise UnresolvedStringError(offset, what)
    return value


def build_tree(types: List[Type], strict_levels: bool = False) -> Optional[TypeNode]:
    """
    Rebuild the field hierarchy from depth-first records tagged with tree levels.

    Each record becomes a child of the nearest preceding record with a lower
    level. The cursor climbs parent links only, so this is a single pass.

    Args:
        types: Records in wire order
        strict_levels: Raise on level jumps greater than +1 instead of tolerating them

    Returns:
        Root node, or None for an empty list
    """
    root: Optional[TypeNode] = None
    cursor: Optional[TypeNode] = None

    for field_type in types:
        node = TypeNode(field_type)

        if cursor is None:
            root = cursor = node
            continue

        level = field_type.tree_level
        while cursor.parent is not None and cursor.level >= level:
            cursor = cursor.parent

        if level <= cursor.level:
            # Only the root can be left here: nothing above it to climb to
            logWarning(f"Field '{field_type.field_name}' at level {level} "
                       f"follows the root; attached under root '{cursor.type.field_name}'")
        elif level > cursor.level + 1:
            msg = (f"Tree level jumps from {cursor.level} to {level} "
                   f"at field '{field_type.field_name}'")
            if strict_levels:
                raise DecodeError(msg)
            logWarning(msg)

        cursor = cursor.add(node)

    return root


def read_node_modern(reader: BinaryReader, internal_table: StringTable,
                     strict_levels: bool = False) -> Optional[TypeNode]:
    """
    Read a flattened field tree with its external string table.

    Args:
        reader: Positioned at the field count
        internal_table: Common-string pool used when the external table misses
        strict_levels: See build_tree

    Returns:
        Root node of the rebuilt tree, or None when the tree has no fields
    """
    field_count = reader.read_i32()
    string_table_size = reader.read_i32()
    if field_count < 0:
        raise DecodeError(f"Negative field count {field_count} at offset {reader.tell() - 8}")

    types = [read_type_modern(reader) for _ in range(field_count)]

    external_table = StringTable.load(reader.read_bytes(string_table_size))

    for field_type in types:
        field_type.field_name = resolve_string(field_type.name_offset, external_table,
                                               internal_table, "field name")
        field_type.type_name = resolve_string(field_type.type_offset, external_table,
                                              internal_table, "type name")

    return build_tree(types, strict_levels)


class TypeTreeParser:
    """
    Parser for the TypeTree block of an asset file.

    The wire layout is chosen once from the asset version: legacy and modern
    trees are decoded by separate methods that share nothing but the header.

    Usage:
        parser = TypeTreeParser(VersionInfo(asset_version=15))
        tree = parser.read(BinaryReader(data, '>'))
        print(tree.revision)
        transform = tree.get_class_by_id(4)
    """

    def __init__(self, version_info: VersionInfo, config: Optional[DecoderConfig] = None):
        """
        Args:
            version_info: Version context of the asset. Never modified.
            config: Decoder settings (defaults when None)
        """
        self.version_info = version_info
        self.config = config or DecoderConfig()

    @property
    def format(self) -> TypeTreeFormat:
        return self.version_info.format

    def read(self, reader: BinaryReader) -> TypeTree:
        """
        Decode a TypeTree.

        Returns:
            TypeTree whose version_info carries the revision read from the data

        Raises:
            TruncatedError: Data ended early
            UnresolvedStringError: A name offset resolved nowhere
            DecodeError: Other malformed input
        """
        asset_version = self.version_info.asset_version
        version_info = dataclasses.replace(self.version_info)
        tree = TypeTree(version_info=version_info)

        if TypeTreeFormat.has_revision(asset_version):
            version_info.unity_revision = reader.read_stringz(self.config.revision_max_length)
            tree.attributes = reader.read_i32()

        if self.format is TypeTreeFormat.MODERN:
            self._read_modern(reader, tree)
        else:
            self._read_legacy(reader, tree)

        logDebug(f"TypeTree v{asset_version} ({self.format.value}): {len(tree.classes)} classes, "
                 f"revision '{version_info.unity_revision}', embedded={tree.embedded}")
        return tree

    def _read_class_count(self, reader: BinaryReader) -> int:
        class_count = reader.read_i32()
        if class_count < 0:
            raise DecodeError(f"Negative class count {class_count} at offset {reader.tell() - 4}")
        return class_count

    def _read_modern(self, reader: BinaryReader, tree: TypeTree):
        """Decode classes in the flattened, string-table based layout."""
        internal_table = StringTable.default()

        tree.embedded = reader.read_bool()
        class_count = self._read_class_count(reader)

        for _ in range(class_count):
            type_class = TypeClass(class_id=reader.read_i32())

            if type_class.class_id < 0:
                type_class.script_guid = read_guid(reader)

            type_class.class_guid = read_guid(reader)

            if tree.embedded:
                type_class.type_tree = read_node_modern(reader, internal_table,
                                                        self.config.strict_levels)

            logDebug(f"  class {type_class.class_id}: "
                     f"{_count_fields(type_class.type_tree)} fields")
            tree.classes.append(type_class)

    def _read_legacy(self, reader: BinaryReader, tree: TypeTree):
        """Decode classes in the recursive, inline-string layout."""
        class_count = self._read_class_count(reader)

        for _ in range(class_count):
            type_class = TypeClass(class_id=reader.read_i32())
            type_class.type_tree = read_node_legacy(reader, 0, self.config.string_max_length)

            logDebug(f"  class {type_class.class_id}: "
                     f"{_count_fields(type_class.type_tree)} fields")
            tree.classes.append(type_class)

        tree.embedded = class_count > 0

        if TypeTreeFormat.has_revision(self.version_info.asset_version):
            reader.read_i32()  # padding


def _count_fields(node: Optional[TypeNode]) -> int:
    if node is None:
        return 0
    return sum(1 for _ in node.walk())


def read_type_tree(data: bytes, version_info: VersionInfo,
                   config: Optional[DecoderConfig] = None, offset: int = 0) -> TypeTree:
    """
    Decode a TypeTree from raw bytes.

    Args:
        data: Buffer holding the TypeTree block
        version_info: Version context of the asset
        config: Decoder settings (defaults when None)
        offset: Start of the TypeTree block within data

    Returns:
        Decoded TypeTree
    """
    config = config or DecoderConfig()
    reader = BinaryReader(data, config.byte_order, offset)
    return TypeTreeParser(version_info, config).read(reader)
