"""Tests for the legacy (recursive) TypeTree layout."""

import struct

import pytest

from typetree import TruncatedError, DecodeError, TypeTreeFormat, TypeTreeParser, VersionInfo, read_type_tree
from typetree.config import DecoderConfig
from typetree.parsers import BinaryReader, read_node_legacy

from conftest import legacy_node, legacy_tree


def test_read_node_assigns_levels(transform_legacy_node):
    root = read_node_legacy(BinaryReader(transform_legacy_node), 0)

    assert root.type.type_name == "Transform"
    assert root.type.field_name == "Base"
    assert root.type.byte_size == -1
    assert root.level == 0
    assert root.parent is None
    assert [c.type.field_name for c in root] == ["m_LocalPosition", "m_Children"]

    position = root.find("m_LocalPosition")
    assert position.level == 1
    assert position.parent is root
    assert [c.type.field_name for c in position] == ["x", "y", "z"]
    assert all(c.level == 2 for c in position)

    array = root.find("m_Children").find("Array")
    assert array.type.is_array == 1
    assert array.type.meta_flag == 0x4000
    assert array.find("size").level == 3


def test_read_tree_with_revision(transform_legacy_node):
    data = legacy_tree([(4, transform_legacy_node), (1, legacy_node("GameObject", "Base"))],
                       asset_version=9, revision="3.4.0f5", attributes=5)
    tree = read_type_tree(data, VersionInfo(asset_version=9))

    assert tree.format is TypeTreeFormat.LEGACY
    assert tree.revision == "3.4.0f5"
    assert tree.attributes == 5
    assert tree.embedded is True
    assert tree.class_ids == [4, 1]
    assert tree.get_class_by_id(1).type_tree.type.type_name == "GameObject"
    assert tree.get_class_by_id(4).script_guid is None
    assert tree.get_class_by_id(4).class_guid is None


def test_padding_word_is_consumed(transform_legacy_node):
    data = legacy_tree([(4, transform_legacy_node)], asset_version=8)
    reader = BinaryReader(data)
    TypeTreeParser(VersionInfo(asset_version=8)).read(reader)
    assert reader.remaining_bytes == 0


def test_pre_revision_versions_have_no_header_or_padding():
    data = legacy_tree([(1, legacy_node("GameObject", "Base"))], asset_version=6)
    tree = read_type_tree(data, VersionInfo(asset_version=6, unity_revision="2.6.1"))

    assert tree.revision == "2.6.1"
    assert tree.attributes == 0
    assert len(tree) == 1
    assert data == struct.pack('<i', 1) + struct.pack('<i', 1) + legacy_node("GameObject", "Base")


def test_empty_tree_is_not_embedded():
    data = legacy_tree([], asset_version=9)
    tree = read_type_tree(data, VersionInfo(asset_version=9))
    assert tree.embedded is False
    assert tree.classes == []


def test_caller_version_info_is_not_modified(transform_legacy_node):
    version_info = VersionInfo(asset_version=9)
    tree = read_type_tree(legacy_tree([(4, transform_legacy_node)], asset_version=9), version_info)
    assert version_info.unity_revision == ""
    assert tree.version_info is not version_info
    assert tree.version_info.unity_revision == "3.4.0f5"


def test_big_endian(transform_legacy_node):
    node = legacy_node("GameObject", "Base", byte_size=-1, bo='>')
    data = legacy_tree([(1, node)], asset_version=9, bo='>')
    tree = read_type_tree(data, VersionInfo(asset_version=9), DecoderConfig(byte_order='big'))
    assert tree.classes[0].type_tree.type.byte_size == -1


@pytest.mark.parametrize("cut", [1, 10, 30])
def test_truncated_input(transform_legacy_node, cut):
    data = legacy_tree([(4, transform_legacy_node)], asset_version=9)
    with pytest.raises(TruncatedError):
        read_type_tree(data[:-cut], VersionInfo(asset_version=9))


def test_negative_counts_are_rejected():
    bad_classes = b"3.4.0f5\x00" + struct.pack('<ii', 0, -1)
    with pytest.raises(DecodeError):
        read_type_tree(bad_classes, VersionInfo(asset_version=9))

    bad_children = legacy_node("int", "x")[:-4] + struct.pack('<i', -2)
    with pytest.raises(DecodeError):
        read_node_legacy(BinaryReader(bad_children))
