"""Public API functions for json-pointer-tree.

Each call builds fresh collaborators from the given config, so no state is
shared between calls.  Use ``JsonMapper`` to keep a configuration and a
parsed-pointer cache across calls.
"""

from __future__ import annotations

from typing import Any

from json_pointer_tree.coercion import ValueCoercer
from json_pointer_tree.config import TreeConfig
from json_pointer_tree.pointer import navigator
from json_pointer_tree.tree.nodes import JsonNode

__all__ = ["get_by_pointer", "set_by_pointer", "to_node"]


def get_by_pointer(root: JsonNode, pointer: str | None) -> JsonNode:
    """Return the node at ``pointer`` in ``root``.

    Args:
        root:    Any node.
        pointer: RFC 6901 style pointer; ``""`` and ``"/"`` return ``root``.

    Returns:
        The node found, or ``MISSING`` when any step fails.  An explicit JSON
        null is returned as a NULL node, never as ``MISSING``.
    """
    return navigator.get_by_pointer(root, pointer)


def set_by_pointer(
    root: JsonNode,
    pointer: str | None,
    value: Any,
    config: TreeConfig | None = None,
) -> bool:
    """Write ``value`` at ``pointer``, creating missing containers.

    Args:
        root:    OBJECT or ARRAY node, mutated in place.
        pointer: Target location.  The root pointer clears ``root``.
        value:   None, bool, int, float, str, a JsonNode, or any structured
                 value ``ValueSerializer`` understands.  Values that cannot be
                 serialized are stored as null.
        config:  Serialization settings and array padding limit.  Defaults to
                 ``TreeConfig()`` when None.

    Returns:
        True on success.  False when the write was rejected; intermediate
        containers created before the rejection are kept.
    """
    return navigator.set_by_pointer(root, pointer, value, config=config)


def to_node(value: Any, config: TreeConfig | None = None) -> JsonNode:
    """Coerce ``value`` into a node exactly as a pointer write would."""
    return ValueCoercer(config=config).to_node(value)
