"""JsonMapper: configured facade over codec, serializer and pointer navigation.

This is the wiring layer between the individual components and callers that
want one object holding a configuration.  A mapper owns:

- a ``TreeConfig`` (time zone, date patterns, serialization switches)
- a ``ValueSerializer`` / ``ValueCoercer`` pair built from that config
- a ``PointerCache`` so repeated pointers are parsed once

Text-level helpers (``read_tree``, ``to_json``, ``from_json``) report bad
input by returning None and logging, the way callers of a general JSON
utility expect.  Pointer writes report failure through their bool result.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from pathlib import Path
from types import TracebackType
from typing import Any

from json_pointer_tree import codec
from json_pointer_tree.binding import bind
from json_pointer_tree.coercion import ValueCoercer
from json_pointer_tree.config import TreeConfig
from json_pointer_tree.errors import (
    ConversionError,
    SerializationError,
    TreeDecodeError,
)
from json_pointer_tree.pointer.cache import PointerCache
from json_pointer_tree.pointer.navigator import assign, resolve
from json_pointer_tree.serializer import ValueSerializer
from json_pointer_tree.temporal import parse_date, parse_datetime
from json_pointer_tree.tree.builder import TreeBuilder
from json_pointer_tree.tree.nodes import JsonNode, NodeType, array_node, object_node

__all__ = ["JsonMapper"]

logger = logging.getLogger(__name__)


class JsonMapper:
    """Configured entry point for JSON trees and pointer operations.

    Two separate ``JsonMapper`` instances never share state: each has its own
    serializer and pointer cache.

    Example::

        from json_pointer_tree import JsonMapper, TreeConfig

        with JsonMapper(TreeConfig(time_zone="Asia/Shanghai")) as mapper:
            root = mapper.read_tree('{"username": "yxadmin"}')
            mapper.set(root, "/username", "new")
            mapper.set(root, "/roles/0", "admin")
            mapper.to_json(root)  # '{"username": "new", "roles": ["admin"]}'
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self._config: TreeConfig = config if config is not None else TreeConfig()
        self._serializer = ValueSerializer(self._config)
        self._coercer = ValueCoercer(self._serializer)
        self._pointers = PointerCache(self._config.pointer_cache_size)
        self._builder = TreeBuilder()
        logger.debug("JsonMapper created (time_zone=%s)", self._config.time_zone)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def __enter__(self) -> JsonMapper:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def close(self) -> None:
        """Drop cached pointers.  The mapper stays usable afterwards."""
        self._pointers.clear()
        logger.debug("JsonMapper closed")

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> TreeConfig:
        return self._config

    @property
    def pointer_cache(self) -> PointerCache:
        return self._pointers

    # ------------------------------------------------------------------
    # Text and value conversion
    # ------------------------------------------------------------------

    def read_tree(self, source: str | bytes | Path | None) -> JsonNode | None:
        """Parse JSON text, or the file at a ``Path``, into a tree.

        Returns:
            The tree, or None for blank text, a missing file or invalid JSON.
        """
        if source is None:
            return None
        if isinstance(source, Path):
            if not source.is_file():
                logger.error("JSON file not found: %s", source)
                return None
            try:
                return codec.load(source)
            except (OSError, TreeDecodeError):
                logger.error("Failed to read JSON file %s", source, exc_info=True)
                return None
        if not source.strip():
            return None
        try:
            return codec.loads(source)
        except TreeDecodeError:
            logger.error("Failed to parse JSON text: %.200r", source, exc_info=True)
            return None

    def to_json(self, value: Any, *, indent: int | None = None) -> str | None:
        """Serialize ``value`` (a tree or any supported Python value) to text."""
        if value is None:
            return None
        try:
            return codec.dumps(self._serializer.serialize(value), indent=indent)
        except SerializationError:
            logger.error(
                "Failed to serialize %s to JSON", type(value).__name__, exc_info=True
            )
            return None

    def from_json(
        self, text: str | bytes | None, target: type[Any] | None = None
    ) -> Any:
        """Decode JSON text into plain Python values, or into ``target``.

        Returns:
            The decoded value; None for blank or invalid text, and for text
            that cannot be bound to ``target`` (logged at ERROR).
        """
        tree = self.read_tree(text)
        if tree is None:
            return None
        plain = self._builder.to_python(tree)
        if target is None:
            return plain
        try:
            return bind(target, plain)
        except ConversionError:
            logger.error(
                "Failed to convert JSON text to %s: %.200r",
                getattr(target, "__name__", target),
                text,
                exc_info=True,
            )
            return None

    def convert(self, value: Any, target: type[Any] | None = None) -> Any:
        """Convert any supported value into plain JSON values, or into ``target``.

        The value is serialized with this mapper's configuration first, so
        ``convert(account, AccountView)`` maps between types with matching
        property names.

        Raises:
            SerializationError: If ``value`` cannot be represented.
            ConversionError: If the serialized value does not fit ``target``.
        """
        plain = self._builder.to_python(self._serializer.serialize(value))
        if target is None:
            return plain
        return bind(target, plain)

    def to_node(self, value: Any) -> JsonNode:
        """Coerce ``value`` into a node; unsupported values become null."""
        return self._coercer.to_node(value)

    def create_object_node(self) -> JsonNode:
        return object_node()

    def create_array_node(self) -> JsonNode:
        return array_node()

    def is_json_or_array(self, text: str | bytes | None) -> bool:
        return codec.is_json_or_array(text)

    # ------------------------------------------------------------------
    # Pointer operations
    # ------------------------------------------------------------------

    def get(self, root: JsonNode, pointer: str | None) -> JsonNode:
        """Node at ``pointer`` or MISSING.  See ``navigator.get_by_pointer``."""
        return resolve(root, self._pointers.segments(pointer))

    def set(self, root: JsonNode, pointer: str | None, value: Any) -> bool:
        """Write ``value`` at ``pointer``.  See ``navigator.set_by_pointer``."""
        if pointer is None:
            logger.warning("Pointer write rejected: pointer is None")
            return False
        return assign(
            root,
            self._pointers.segments(pointer),
            value,
            self._coercer,
            max_array_padding=self._config.max_array_padding,
        )

    def get_datetime(self, root: JsonNode, pointer: str | None) -> datetime | None:
        """Parse the string at ``pointer`` as a datetime; None when absent or invalid."""
        node = self.get(root, pointer)
        if node.node_type != NodeType.STRING:
            return None
        return parse_datetime(node.value)

    def get_date(self, root: JsonNode, pointer: str | None) -> date | None:
        node = self.get(root, pointer)
        if node.node_type != NodeType.STRING:
            return None
        return parse_date(node.value)
