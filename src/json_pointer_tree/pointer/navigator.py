"""Pointer navigation over a mutable JsonNode tree.

Read path (``get_by_pointer`` / ``resolve``):
    Never raises.  Any step that cannot be taken yields the MISSING sentinel,
    which is distinct from an explicit JSON null.

Write path (``set_by_pointer`` / ``assign``):
    Mutates the root in place and reports success as a bool.  All segments
    but the last are walked to find the parent of the target, creating
    missing containers on the way.  The kind of each created container is
    chosen by looking at the *next* segment: a non-negative integer token
    yields an ARRAY, anything else an OBJECT.  This lets one call materialize
    a whole nested path of the right shape.

    Writes are not transactional.  Containers created by earlier steps of a
    walk that fails later are left in place.

Array rules:
    Negative indices count from the end (``-1`` is the last element).  During
    the walk, an index past the end pads the array with explicit nulls up to
    the target, and an in-bounds null placeholder is replaced by the new
    container.  At the final segment, ``index == len`` appends, an in-bounds
    index overwrites, and anything else is rejected; there is no padding at
    the final segment.
"""

from __future__ import annotations

import logging
from typing import Any

from json_pointer_tree.coercion import ValueCoercer
from json_pointer_tree.config import TreeConfig
from json_pointer_tree.errors import WriteFailure
from json_pointer_tree.pointer.parser import (
    join_pointer,
    normalize_index,
    parse_index,
    parse_pointer,
)
from json_pointer_tree.tree.nodes import (
    MISSING,
    JsonNode,
    NodeType,
    array_node,
    null_node,
    object_node,
)

__all__ = ["assign", "get_by_pointer", "resolve", "set_by_pointer"]

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Read path
# ---------------------------------------------------------------------------


def get_by_pointer(root: JsonNode, pointer: str | None) -> JsonNode:
    """Return the node at ``pointer``, or MISSING when there is none.

    Example::
        root = codec.loads('{"books": [{"title": "A"}, {"title": "B"}]}')
        get_by_pointer(root, "/books/-1/title")   # STRING("B")
        get_by_pointer(root, "/books/5/title")    # MISSING
    """
    return resolve(root, parse_pointer(pointer))


def resolve(root: JsonNode, segments: tuple[str, ...]) -> JsonNode:
    """Follow already-parsed ``segments`` from ``root``."""
    node = root
    for segment in segments:
        node = _child(node, segment)
        if node.node_type == NodeType.MISSING:
            return MISSING
    return node


def _child(node: JsonNode, segment: str) -> JsonNode:
    if node.node_type == NodeType.OBJECT:
        return node.fields.get(segment, MISSING)
    if node.node_type == NodeType.ARRAY:
        index = parse_index(segment)
        if index is None:
            return MISSING
        index = normalize_index(index, len(node.items))
        if 0 <= index < len(node.items):
            return node.items[index]
        return MISSING
    return MISSING


# ---------------------------------------------------------------------------
# Write path
# ---------------------------------------------------------------------------


def set_by_pointer(
    root: JsonNode,
    pointer: str | None,
    value: Any,
    *,
    coercer: ValueCoercer | None = None,
    config: TreeConfig | None = None,
) -> bool:
    """Write ``value`` at ``pointer``, creating missing containers.

    Args:
        root:    Root container (OBJECT or ARRAY); mutated in place.
        pointer: Target location.  ``""`` and ``"/"`` address the root itself,
                 in which case the root container is cleared.
        value:   Any value ``ValueCoercer`` accepts.
        coercer: Converts ``value`` into a node.  Defaults to a fresh
                 ``ValueCoercer`` built from ``config``.
        config:  Supplies ``max_array_padding`` and, when no coercer is given,
                 the serialization settings.

    Returns:
        True when the value was written.  False when the write was rejected;
        the tree may still have been extended by intermediate creation.
    """
    if pointer is None:
        _reject(WriteFailure.PATH_MALFORMED, (), "pointer is None")
        return False
    if coercer is None:
        coercer = ValueCoercer(config=config)
    max_padding = config.max_array_padding if config is not None else None
    return assign(
        root, parse_pointer(pointer), value, coercer, max_array_padding=max_padding
    )


def assign(
    root: JsonNode,
    segments: tuple[str, ...],
    value: Any,
    coercer: ValueCoercer,
    *,
    max_array_padding: int | None = None,
) -> bool:
    """Write ``value`` at already-parsed ``segments``.  See ``set_by_pointer``."""
    if not isinstance(root, JsonNode) or not root.is_container:
        kind = root.node_type if isinstance(root, JsonNode) else type(root).__name__
        _reject(WriteFailure.INVALID_ROOT, segments, f"root is {kind}, not a container")
        return False

    if not segments:
        # The root cannot change kind, so addressing it empties it instead.
        root.fields.clear()
        root.items.clear()
        return True

    parent = _walk_to_parent(root, segments, max_array_padding)
    if isinstance(parent, WriteFailure):
        return False
    return _set_child(parent, segments, value, coercer)


def _walk_to_parent(
    root: JsonNode,
    segments: tuple[str, ...],
    max_array_padding: int | None,
) -> JsonNode | WriteFailure:
    node = root
    for position, segment in enumerate(segments[:-1]):
        following = segments[position + 1]

        if node.node_type == NodeType.OBJECT:
            child = node.fields.get(segment)
            if child is None:
                child = _new_container(following)
                node.fields[segment] = child
            node = child
            continue

        if node.node_type == NodeType.ARRAY:
            index = parse_index(segment)
            if index is None:
                return _reject(
                    WriteFailure.PATH_MALFORMED,
                    segments,
                    f"array cannot be addressed by {segment!r}",
                )
            items = node.items
            index = normalize_index(index, len(items))
            if index < 0:
                return _reject(
                    WriteFailure.INDEX_OUT_OF_RANGE,
                    segments,
                    f"index {segment} out of range for array of size {len(items)}",
                )
            if index < len(items) and not items[index].is_null:
                node = items[index]
                continue
            padding = index - len(items)
            if max_array_padding is not None and padding > max_array_padding:
                return _reject(
                    WriteFailure.INDEX_OUT_OF_RANGE,
                    segments,
                    f"index {index} needs {padding} placeholders, "
                    f"limit is {max_array_padding}",
                )
            while len(items) <= index:
                items.append(null_node())
            child = _new_container(following)
            items[index] = child
            node = child
            continue

        return _reject(
            WriteFailure.PATH_MALFORMED,
            segments,
            f"cannot descend into {node.node_type} node at {segment!r}",
        )
    return node


def _set_child(
    parent: JsonNode,
    segments: tuple[str, ...],
    value: Any,
    coercer: ValueCoercer,
) -> bool:
    last = segments[-1]

    if parent.node_type == NodeType.OBJECT:
        parent.fields[last] = coercer.to_node(value)
        return True

    if parent.node_type == NodeType.ARRAY:
        index = parse_index(last)
        if index is None:
            _reject(
                WriteFailure.PATH_MALFORMED,
                segments,
                f"array cannot be addressed by {last!r}",
            )
            return False
        items = parent.items
        index = normalize_index(index, len(items))
        if index < 0 or index > len(items):
            _reject(
                WriteFailure.INDEX_OUT_OF_RANGE,
                segments,
                f"index {last} out of range for array of size {len(items)}",
            )
            return False
        node = coercer.to_node(value)
        if index == len(items):
            items.append(node)
        else:
            items[index] = node
        return True

    _reject(
        WriteFailure.PATH_MALFORMED,
        segments,
        f"cannot set {last!r} on {parent.node_type} node",
    )
    return False


def _new_container(following: str) -> JsonNode:
    """ARRAY when the next segment is a non-negative index, OBJECT otherwise."""
    index = parse_index(following)
    if index is not None and index >= 0:
        return array_node()
    return object_node()


def _reject(kind: WriteFailure, segments: tuple[str, ...], detail: str) -> WriteFailure:
    logger.warning(
        "Pointer write rejected (%s) at %r: %s", kind, join_pointer(segments), detail
    )
    return kind
