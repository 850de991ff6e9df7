"""ValueSerializer: converts arbitrary Python values into JsonNode trees.

This is the general-purpose value-to-tree facility used when a pointer write
receives something other than a plain scalar.  It understands the usual
structured Python values (mappings, sequences, sets, dataclasses, enums,
datetimes, decimals, numpy scalars and arrays, objects exposing
``model_dump()``/``to_dict()``) and raises SerializationError for anything it
cannot represent, including reference cycles, nesting deeper than the
interpreter recursion limit, non-finite floats, and exceptions raised by
``model_dump()``/``to_dict()`` hooks.

Serialization rules that depend on configuration (time zone, date patterns,
None-valued attributes, large integers, ignored types) come from the
TreeConfig passed to the constructor.
"""

from __future__ import annotations

import base64
import dataclasses
import enum
import math
import types
import uuid
from collections.abc import Mapping, Sequence, Set
from datetime import date, datetime, time
from decimal import Decimal
from pathlib import PurePath
from typing import Any

import numpy as np

from json_pointer_tree.config import TreeConfig
from json_pointer_tree.errors import SerializationError
from json_pointer_tree.temporal import format_date, format_datetime
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

__all__ = ["MAX_SAFE_INTEGER", "ValueSerializer"]

MAX_SAFE_INTEGER = 2**53 - 1
"""Largest integer a JavaScript number represents exactly."""


class ValueSerializer:
    """Converts arbitrary Python values into JsonNode trees.

    Dispatch order matters: bool before int (bool subclasses int), Enum before
    its mixin base (IntEnum is an int, StrEnum is a str), datetime before date
    (datetime subclasses date), and str/bytes before the generic sequence
    branch.

    Example::
        serializer = ValueSerializer()
        serializer.serialize({"when": datetime(2025, 7, 9, 15, 19, 49)})
        # OBJECT -> {"when": STRING("2025-07-09 15:19:49")}
    """

    def __init__(self, config: TreeConfig | None = None) -> None:
        self._config: TreeConfig = config if config is not None else TreeConfig()

    @property
    def config(self) -> TreeConfig:
        return self._config

    def serialize(self, value: Any) -> JsonNode:
        """Convert ``value`` to a JsonNode.

        Raises:
            SerializationError: If ``value`` (or anything nested in it) cannot
                be represented as JSON.
        """
        return self._serialize(value, set())

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------

    def _serialize(self, value: Any, active: set[int]) -> JsonNode:
        if isinstance(value, JsonNode):
            if value.node_type == NodeType.MISSING:
                raise SerializationError(
                    "MISSING node cannot be written into a tree", "JsonNode"
                )
            return value

        if value is None:
            return null_node()

        # Enum first: IntEnum/StrEnum members would otherwise match int/str.
        if isinstance(value, enum.Enum):
            return self._serialize(value.value, active)

        # bool before int
        if isinstance(value, bool):
            return bool_node(value)

        if isinstance(value, int):
            return self._serialize_int(value)

        if isinstance(value, float):
            if not math.isfinite(value):
                raise SerializationError(
                    f"non-finite float cannot be serialized: {value}", "float"
                )
            return number_node(value)

        if isinstance(value, str):
            return string_node(value)

        if isinstance(value, datetime):
            return string_node(format_datetime(value, self._config))

        if isinstance(value, date):
            return string_node(format_date(value, self._config))

        if isinstance(value, time):
            return string_node(value.isoformat())

        if isinstance(value, Decimal):
            return self._serialize_decimal(value)

        if isinstance(value, (uuid.UUID, PurePath)):
            return string_node(str(value))

        if isinstance(value, (bytes, bytearray, memoryview)):
            return string_node(base64.b64encode(bytes(value)).decode("ascii"))

        if isinstance(value, np.generic):
            return self._serialize(value.item(), active)

        if isinstance(value, np.ndarray):
            return self._serialize(value.tolist(), active)

        return self._serialize_structured(value, active)

    def _serialize_int(self, value: int) -> JsonNode:
        if self._config.large_int_as_string and abs(value) > MAX_SAFE_INTEGER:
            return string_node(str(value))
        return number_node(value)

    def _serialize_decimal(self, value: Decimal) -> JsonNode:
        if not value.is_finite():
            raise SerializationError(
                f"non-finite Decimal cannot be serialized: {value}", "Decimal"
            )
        if value == value.to_integral_value():
            return self._serialize_int(int(value))
        return number_node(float(value))

    # ------------------------------------------------------------------
    # Containers and objects
    # ------------------------------------------------------------------

    def _serialize_structured(self, value: Any, active: set[int]) -> JsonNode:
        if isinstance(value, types.ModuleType) or callable(value):
            raise SerializationError(
                f"cannot serialize value of type {type(value).__name__}",
                type(value).__name__,
            )

        marker = id(value)
        if marker in active:
            raise SerializationError(
                f"reference cycle detected at {type(value).__name__}",
                type(value).__name__,
            )
        active.add(marker)
        try:
            return self._serialize_container(value, active)
        except RecursionError as exc:
            raise SerializationError(
                f"nesting too deep at {type(value).__name__}", type(value).__name__
            ) from exc
        finally:
            active.discard(marker)

    def _serialize_container(self, value: Any, active: set[int]) -> JsonNode:
        if isinstance(value, Mapping):
            fields: dict[str, JsonNode] = {}
            for key, item in value.items():
                if self._is_ignored(item):
                    continue
                fields[self._key(key)] = self._serialize(item, active)
            return object_node(fields)

        if isinstance(value, Sequence):
            return array_node([self._serialize(item, active) for item in value])

        if isinstance(value, Set):
            return array_node([self._serialize(item, active) for item in _ordered(value)])

        if dataclasses.is_dataclass(value):
            return self._serialize_attributes(
                {f.name: getattr(value, f.name) for f in dataclasses.fields(value)},
                active,
            )

        for hook in ("model_dump", "to_dict"):
            method = getattr(value, hook, None)
            if callable(method):
                try:
                    dumped = method()
                except Exception as exc:
                    raise SerializationError(
                        f"{type(value).__name__}.{hook}() failed: {exc}",
                        type(value).__name__,
                    ) from exc
                return self._serialize(dumped, active)

        attrs = getattr(value, "__dict__", None)
        if isinstance(attrs, dict):
            return self._serialize_attributes(
                {k: v for k, v in attrs.items() if not k.startswith("_")}, active
            )

        raise SerializationError(
            f"cannot serialize value of type {type(value).__name__}",
            type(value).__name__,
        )

    def _serialize_attributes(self, attrs: dict[str, Any], active: set[int]) -> JsonNode:
        fields: dict[str, JsonNode] = {}
        for name, item in attrs.items():
            if item is None and self._config.omit_none_fields:
                continue
            if self._is_ignored(item):
                continue
            fields[name] = self._serialize(item, active)
        return object_node(fields)

    def _is_ignored(self, value: Any) -> bool:
        ignored = self._config.ignored_types
        return bool(ignored) and isinstance(value, ignored)

    def _key(self, key: Any) -> str:
        if isinstance(key, str):
            return key
        if isinstance(key, enum.Enum):
            return self._key(key.value)
        if isinstance(key, bool):
            return "true" if key else "false"
        if key is None:
            return "null"
        if isinstance(key, (int, float, uuid.UUID)):
            return str(key)
        raise SerializationError(
            f"cannot use {type(key).__name__} as an object key", type(key).__name__
        )


def _ordered(values: Set[Any]) -> list[Any]:
    """Sorted members when they are orderable, insertion order otherwise."""
    try:
        return sorted(values)
    except TypeError:
        return list(values)
