"""Pointer subpackage: JSON Pointer parsing and tree navigation.

Re-exports the public API for the pointer module:
- parse_pointer / join_pointer / escape_segment / unescape_segment: RFC 6901 tokens
- parse_index / normalize_index: array index helpers
- get_by_pointer / resolve: read path, returns MISSING on any failed step
- set_by_pointer / assign: write path with auto-vivification
- PointerCache: LRU memo of parsed pointers
"""

from json_pointer_tree.pointer.cache import PointerCache
from json_pointer_tree.pointer.navigator import (
    assign,
    get_by_pointer,
    resolve,
    set_by_pointer,
)
from json_pointer_tree.pointer.parser import (
    escape_segment,
    join_pointer,
    normalize_index,
    parse_index,
    parse_pointer,
    unescape_segment,
)

__all__ = [
    "PointerCache",
    "assign",
    "escape_segment",
    "get_by_pointer",
    "join_pointer",
    "normalize_index",
    "parse_index",
    "parse_pointer",
    "resolve",
    "set_by_pointer",
    "unescape_segment",
]
