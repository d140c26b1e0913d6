"""
Serialization Package

Writes decoded TypeTrees back to their binary form (legacy layout only).
"""

from .type_tree_serializer import (
    TypeTreeSerializer,
    write_type_tree,
    write_node_legacy,
    write_type_legacy,
)
