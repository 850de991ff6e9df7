"""Text codec: JSON text <-> JsonNode trees, via the stdlib ``json`` module.

Only strict JSON is accepted and produced: the ``NaN``/``Infinity`` literals
the ``json`` module tolerates by default are rejected in both directions.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

from json_pointer_tree.errors import SerializationError, TreeDecodeError
from json_pointer_tree.tree.builder import TreeBuilder
from json_pointer_tree.tree.nodes import JsonNode

__all__ = ["dumps", "is_json_or_array", "load", "loads"]

# Stateless, safe to share.
_builder = TreeBuilder()


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not valid JSON")


def loads(text: str | bytes) -> JsonNode:
    """Decode JSON text into a tree.

    Raises:
        TreeDecodeError: If ``text`` is not valid JSON.
    """
    try:
        decoded = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, UnicodeDecodeError) as exc:
        raise TreeDecodeError(f"invalid JSON: {exc}") from exc
    return _builder.build(decoded)


def load(path: str | Path) -> JsonNode:
    """Decode the UTF-8 JSON file at ``path`` into a tree.

    Raises:
        OSError: If the file cannot be read.
        TreeDecodeError: If the content is not valid JSON.
    """
    return loads(Path(path).read_bytes())


def dumps(node: JsonNode, *, indent: int | None = None) -> str:
    """Print a tree as JSON text (non-ASCII characters are kept as is).

    Raises:
        SerializationError: If the tree holds a non-finite number.
        TypeError: If the tree contains the MISSING sentinel.
    """
    try:
        return json.dumps(
            _builder.to_python(node), ensure_ascii=False, indent=indent, allow_nan=False
        )
    except ValueError as exc:
        raise SerializationError(f"tree is not valid JSON: {exc}", "float") from exc


def is_json_or_array(text: str | bytes | None) -> bool:
    """True only when ``text`` decodes to a JSON object or array."""
    if text is None or not text.strip():
        return False
    try:
        node = loads(text)
    except TreeDecodeError:
        return False
    return node.is_container
