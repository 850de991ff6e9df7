"""JsonNode dataclass and NodeType StrEnum for the mutable JSON tree.

A tree is built from JsonNode values.  OBJECT and ARRAY nodes are the only
mutable containers: their ``fields`` dict and ``items`` list are changed in
place.  Scalars (NULL, BOOL, NUMBER, STRING) are immutable and are replaced
wholesale when written.  MISSING is a sentinel returned by failed lookups.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

__all__ = [
    "MISSING",
    "JsonNode",
    "NodeType",
    "array_node",
    "bool_node",
    "null_node",
    "number_node",
    "object_node",
    "string_node",
]


class NodeType(StrEnum):
    """Enumeration of the node kinds in a JSON tree.

    StrEnum values are the lowercased member names:
    - NULL    -> "null"    : explicit JSON null
    - BOOL    -> "bool"    : true / false
    - NUMBER  -> "number"  : int or float
    - STRING  -> "string"  : text
    - ARRAY   -> "array"   : ordered sequence of nodes
    - OBJECT  -> "object"  : mapping of string keys to nodes
    - MISSING -> "missing" : no node exists at the requested location
    """

    NULL = auto()
    BOOL = auto()
    NUMBER = auto()
    STRING = auto()
    ARRAY = auto()
    OBJECT = auto()
    MISSING = auto()


@dataclass(frozen=True, slots=True)
class JsonNode:
    """A node in a mutable JSON tree.

    Attributes:
        node_type: Which kind of node this is (see NodeType).
        value:     Python payload for BOOL, NUMBER and STRING nodes; None for
                   every other kind.
        items:     Children of an ARRAY node, in order.  Empty for other kinds.
        fields:    Children of an OBJECT node keyed by property name.  Empty
                   for other kinds.

    The dataclass is frozen: attributes are never reassigned.  Containers are
    mutated through ``items`` and ``fields`` directly.
    """

    node_type: NodeType
    value: Any = None
    items: list[JsonNode] = field(default_factory=list)
    fields: dict[str, JsonNode] = field(default_factory=dict)

    @property
    def is_container(self) -> bool:
        return self.node_type in (NodeType.OBJECT, NodeType.ARRAY)

    @property
    def is_object(self) -> bool:
        return self.node_type == NodeType.OBJECT

    @property
    def is_array(self) -> bool:
        return self.node_type == NodeType.ARRAY

    @property
    def is_null(self) -> bool:
        return self.node_type == NodeType.NULL

    @property
    def is_missing(self) -> bool:
        return self.node_type == NodeType.MISSING

    def __len__(self) -> int:
        """Number of children for containers, 0 for everything else."""
        if self.node_type == NodeType.OBJECT:
            return len(self.fields)
        if self.node_type == NodeType.ARRAY:
            return len(self.items)
        return 0

    def __repr__(self) -> str:
        if self.node_type == NodeType.OBJECT:
            return f"JsonNode.object({self.fields!r})"
        if self.node_type == NodeType.ARRAY:
            return f"JsonNode.array({self.items!r})"
        if self.node_type in (NodeType.NULL, NodeType.MISSING):
            return f"JsonNode.{self.node_type}"
        return f"JsonNode.{self.node_type}({self.value!r})"


# Returned by failed lookups; distinct from an explicit JSON null.
MISSING = JsonNode(node_type=NodeType.MISSING)


def null_node() -> JsonNode:
    return JsonNode(node_type=NodeType.NULL)


def bool_node(value: bool) -> JsonNode:
    return JsonNode(node_type=NodeType.BOOL, value=value)


def number_node(value: int | float) -> JsonNode:
    return JsonNode(node_type=NodeType.NUMBER, value=value)


def string_node(value: str) -> JsonNode:
    return JsonNode(node_type=NodeType.STRING, value=value)


def array_node(items: list[JsonNode] | None = None) -> JsonNode:
    """Create an ARRAY node that owns ``items`` (a fresh list when None)."""
    return JsonNode(node_type=NodeType.ARRAY, items=items if items is not None else [])


def object_node(fields: dict[str, JsonNode] | None = None) -> JsonNode:
    """Create an OBJECT node that owns ``fields`` (a fresh dict when None)."""
    return JsonNode(
        node_type=NodeType.OBJECT, fields=fields if fields is not None else {}
    )
