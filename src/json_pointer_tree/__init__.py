"""JSON pointer tree - pointer-addressed reads and auto-vivifying writes on JSON trees."""

from __future__ import annotations

from json_pointer_tree.api import get_by_pointer, set_by_pointer, to_node
from json_pointer_tree.config import TreeConfig
from json_pointer_tree.errors import (
    ConversionError,
    JsonTreeError,
    SerializationError,
    TreeDecodeError,
    WriteFailure,
)
from json_pointer_tree.mapper import JsonMapper
from json_pointer_tree.pointer.parser import parse_pointer
from json_pointer_tree.tree.nodes import MISSING, JsonNode, NodeType

__version__: str = "0.1.0"
__all__: list[str] = [
    "MISSING",
    "ConversionError",
    "JsonMapper",
    "JsonNode",
    "JsonTreeError",
    "NodeType",
    "SerializationError",
    "TreeConfig",
    "TreeDecodeError",
    "WriteFailure",
    "get_by_pointer",
    "parse_pointer",
    "set_by_pointer",
    "to_node",
]
