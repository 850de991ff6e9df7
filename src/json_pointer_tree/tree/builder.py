"""TreeBuilder: converts decoded JSON values into a JsonNode tree and back.

Uses recursive dispatch to convert JSON dicts, lists, and scalar values into
a tree of JsonNode objects.  Only the value types produced by ``json.loads``
are accepted; arbitrary Python objects go through ValueSerializer instead.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from json_pointer_tree.tree.nodes import (
    JsonNode,
    NodeType,
    array_node,
    bool_node,
    null_node,
    number_node,
    object_node,
    string_node,
)

__all__ = ["JsonValue", "TreeBuilder"]

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None


@dataclass
class TreeBuilder:
    """Converts decoded JSON values into JsonNode trees and back.

    The dispatch order is critical: bool MUST be checked before int because
    bool is a subclass of int in Python (isinstance(True, int) is True).

    Example::
        builder = TreeBuilder()
        tree = builder.build({"user": {"name": "John"}})
        # tree: OBJECT -> {"user": OBJECT -> {"name": STRING("John")}}
        builder.to_python(tree) == {"user": {"name": "John"}}  # True
    """

    def build(self, value: JsonValue) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value: Any valid JSON value (dict, list, str, int, float, bool, None).

        Returns:
            A JsonNode tree rooted at the appropriate node type.

        Raises:
            TypeError: If value (or anything nested in it) is not a JSON type.
        """
        # CRITICAL: bool MUST be checked before int; bool subclasses int in Python
        if isinstance(value, bool):
            return bool_node(value)

        if isinstance(value, dict):
            return self._build_object(value)

        if isinstance(value, list):
            return self._build_array(value)

        if isinstance(value, (int, float)):
            return number_node(value)

        if isinstance(value, str):
            return string_node(value)

        if value is None:
            return null_node()

        raise TypeError(f"Unsupported JSON value type: {type(value)!r}")

    def _build_object(self, obj: dict[str, Any]) -> JsonNode:
        fields: dict[str, JsonNode] = {}
        for key, val in obj.items():
            if not isinstance(key, str):
                raise TypeError(f"JSON object keys must be str, got {type(key)!r}")
            fields[key] = self.build(val)
        return object_node(fields)

    def _build_array(self, arr: list[Any]) -> JsonNode:
        return array_node([self.build(item) for item in arr])

    def to_python(self, node: JsonNode) -> JsonValue:
        """Convert a JsonNode tree back into plain JSON values.

        Raises:
            TypeError: If the tree contains the MISSING sentinel, which has no
                JSON representation.
        """
        if node.node_type == NodeType.OBJECT:
            return {key: self.to_python(child) for key, child in node.fields.items()}
        if node.node_type == NodeType.ARRAY:
            return [self.to_python(child) for child in node.items]
        if node.node_type == NodeType.NULL:
            return None
        if node.node_type in (NodeType.BOOL, NodeType.NUMBER, NodeType.STRING):
            return node.value  # type: ignore[no-any-return]
        raise TypeError("MISSING node has no JSON representation")
