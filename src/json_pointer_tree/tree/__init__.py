"""Tree subpackage for the mutable JSON node model.

Re-exports the public API for the tree module:
- JsonNode: frozen dataclass representing a node; containers mutate in place
- NodeType: StrEnum of the node kinds (NULL, BOOL, NUMBER, STRING, ARRAY, OBJECT, MISSING)
- MISSING: sentinel returned by failed pointer lookups
- TreeBuilder: converts decoded JSON values into JsonNode trees and back
"""

from json_pointer_tree.tree.builder import JsonValue, TreeBuilder
from json_pointer_tree.tree.nodes import (
    MISSING,
    JsonNode,
    NodeType,
    array_node,
    bool_node,
    null_node,
    number_node,
    object_node,
    string_node,
)

__all__ = [
    "MISSING",
    "JsonNode",
    "JsonValue",
    "NodeType",
    "TreeBuilder",
    "array_node",
    "bool_node",
    "null_node",
    "number_node",
    "object_node",
    "string_node",
]
