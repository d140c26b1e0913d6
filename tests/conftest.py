"""
Shared fixtures: hand-assembled TypeTree blobs.

The helpers pack bytes with struct directly so decoder tests do not depend
on the serializer.
"""

import struct

import pytest

from typetree.utils import close_logging, init_logging

GUID_A = bytes(range(16))
GUID_B = bytes(range(16, 32))


@pytest.fixture(autouse=True)
def reset_logging():
    """Start every test with fresh warning/error tallies."""
    close_logging()
    init_logging()
    yield
    close_logging()


def stringz(value: str) -> bytes:
    return value.encode('utf-8') + b'\x00'


def legacy_node(type_name, field_name, children=(), byte_size=4, index=0,
                is_array=0, version=1, meta_flag=0, bo='<') -> bytes:
    """Pack a legacy node and its (already packed) children."""
    data = stringz(type_name) + stringz(field_name)
    data += struct.pack(bo + '5i', byte_size, index, is_array, version, meta_flag)
    data += struct.pack(bo + 'i', len(children))
    for child in children:
        data += child
    return data


def legacy_tree(classes, asset_version, revision="3.4.0f5", attributes=0, bo='<') -> bytes:
    """classes: list of (class_id, packed_root_node)."""
    data = b''
    if asset_version >= 7:
        data += stringz(revision) + struct.pack(bo + 'i', attributes)
    data += struct.pack(bo + 'i', len(classes))
    for class_id, node in classes:
        data += struct.pack(bo + 'i', class_id) + node
    if asset_version >= 7:
        data += struct.pack(bo + 'i', 0)
    return data


def modern_record(level, type_offset, name_offset, byte_size=4, index=0,
                  is_array=0, version=1, meta_flag=0, bo='<') -> bytes:
    return struct.pack(bo + 'hBBiiiii', version, level, is_array, type_offset,
                       name_offset, byte_size, index, meta_flag)


def modern_field_tree(records, strings: bytes, bo='<') -> bytes:
    """records: packed modern records; strings: raw external table."""
    return struct.pack(bo + 'ii', len(records), len(strings)) + b''.join(records) + strings


def modern_tree(classes, embedded=True, revision="5.0.1f1", attributes=0,
                asset_version=15, bo='<') -> bytes:
    """classes: list of (class_id, script_guid or None, class_guid, field_tree bytes)."""
    data = stringz(revision) + struct.pack(bo + 'i', attributes)
    data += struct.pack(bo + '?i', embedded, len(classes))
    for class_id, script_guid, class_guid, field_tree in classes:
        data += struct.pack(bo + 'i', class_id)
        if script_guid is not None:
            data += script_guid
        data += class_guid
        if embedded:
            data += field_tree
    return data


@pytest.fixture
def transform_legacy_node():
    """A small Transform-like legacy tree."""
    position = legacy_node("Vector3f", "m_LocalPosition", byte_size=12, children=[
        legacy_node("float", "x", index=2),
        legacy_node("float", "y", index=3),
        legacy_node("float", "z", index=4),
    ], index=1)
    children = legacy_node("vector", "m_Children", byte_size=-1, index=5, children=[
        legacy_node("Array", "Array", byte_size=-1, is_array=1, meta_flag=0x4000, index=6, children=[
            legacy_node("int", "size", index=7),
        ]),
    ])
    return legacy_node("Transform", "Base", byte_size=-1, children=[position, children])
