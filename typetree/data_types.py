"""
Data types for decoded TypeTrees.

A TypeTree is a list of TypeClass entries. Each embedded class owns a tree of
TypeNode objects, and every node wraps one Type field record.
"""

import weakref
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Optional, Tuple

from .constants import MODERN_MIN_ASSET_VERSION, REVISION_MIN_ASSET_VERSION
from .utils.guid import UnityGUID


class TypeTreeFormat(Enum):
    """Wire layout of a TypeTree, selected once from the asset format version."""
    LEGACY = "legacy"  # recursive, inline strings
    MODERN = "modern"  # flattened, level-tagged, string tables

    @classmethod
    def from_asset_version(cls, asset_version: int) -> 'TypeTreeFormat':
        if asset_version >= MODERN_MIN_ASSET_VERSION:
            return cls.MODERN
        return cls.LEGACY

    @staticmethod
    def has_revision(asset_version: int) -> bool:
        """Revision string, attributes and legacy padding exist from version 7 on."""
        return asset_version >= REVISION_MIN_ASSET_VERSION


@dataclass
class VersionInfo:
    """Version context of the surrounding asset file."""
    asset_version: int
    unity_revision: str = ""  # e.g. "5.0.1f1", empty when unknown

    @property
    def format(self) -> TypeTreeFormat:
        return TypeTreeFormat.from_asset_version(self.asset_version)


@dataclass
class Type:
    """Metadata of a single serialized field."""
    type_name: str = ""
    field_name: str = ""
    byte_size: int = 0  # -1 marks variable size
    index: int = 0
    is_array: int = 0
    version: int = 1
    meta_flag: int = 0  # opaque, semantics depend on the engine revision
    tree_level: int = 0

    # Modern format only: raw string table offsets (signed int32 as stored)
    name_offset: int = 0
    type_offset: int = 0

    def __str__(self) -> str:
        return f"{self.type_name} {self.field_name}"


@dataclass(eq=False)
class TypeNode:
    """
    Node of a class field tree.

    Children are owned by the node. The parent link is a weak reference and is
    only used for navigation and for level reconstruction while decoding.
    """
    type: Type
    children: List['TypeNode'] = field(default_factory=list)
    _parent_ref: Optional['weakref.ReferenceType[TypeNode]'] = field(default=None, repr=False)

    @property
    def parent(self) -> Optional['TypeNode']:
        if self._parent_ref is None:
            return None
        return self._parent_ref()

    @property
    def level(self) -> int:
        return self.type.tree_level

    def add(self, child: 'TypeNode') -> 'TypeNode':
        """Append a child node and point its parent link here."""
        child._parent_ref = weakref.ref(self)
        self.children.append(child)
        return child

    def find(self, field_name: str) -> Optional['TypeNode']:
        """Return the first direct child with the given field name."""
        for child in self.children:
            if child.type.field_name == field_name:
                return child
        return None

    def walk(self, depth: int = 0) -> Iterator[Tuple[int, 'TypeNode']]:
        """Pre-order traversal yielding (depth, node) pairs, depth 0 for self."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def __iter__(self) -> Iterator['TypeNode']:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)

    def __eq__(self, other) -> bool:
        if not isinstance(other, TypeNode):
            return NotImplemented
        return self.type == other.type and self.children == other.children


@dataclass
class TypeClass:
    """One class entry: class ID, optional GUIDs and its field tree."""
    class_id: int
    script_guid: Optional[UnityGUID] = None  # modern format, class_id < 0 only
    class_guid: Optional[UnityGUID] = None  # modern format only
    type_tree: Optional[TypeNode] = None  # None when not embedded

    @property
    def is_script(self) -> bool:
        return self.class_id < 0


@dataclass
class TypeTree:
    """All class field trees of one asset file."""
    version_info: VersionInfo
    classes: List[TypeClass] = field(default_factory=list)
    attributes: int = 0
    embedded: bool = False

    @property
    def format(self) -> TypeTreeFormat:
        return self.version_info.format

    @property
    def revision(self) -> str:
        return self.version_info.unity_revision

    @property
    def class_ids(self) -> List[int]:
        return [type_class.class_id for type_class in self.classes]

    def get_class_by_id(self, class_id: int) -> Optional[TypeClass]:
        """Return the first class with this ID in file order, or None."""
        for type_class in self.classes:
            if type_class.class_id == class_id:
                return type_class
        return None

    def __iter__(self) -> Iterator[TypeClass]:
        return iter(self.classes)

    def __len__(self) -> int:
        return len(self.classes)
