"""ValueCoercer: turns a value handed to a pointer write into a JsonNode.

Plain scalars map straight onto the matching node kind and existing nodes
pass through unchanged, so pre-built subtrees can be composed.  Everything
else is delegated to ValueSerializer.  A value the serializer cannot
represent, or whose conversion raises any other exception, degrades to an
explicit null and a warning is logged; the failure never reaches the caller
of the write.
"""

from __future__ import annotations

import logging
import math
from typing import Any

from json_pointer_tree.config import TreeConfig
from json_pointer_tree.serializer import ValueSerializer
from json_pointer_tree.tree.nodes import (
    JsonNode,
    NodeType,
    bool_node,
    null_node,
    number_node,
    string_node,
)

__all__ = ["ValueCoercer"]

logger = logging.getLogger(__name__)


class ValueCoercer:
    """Converts write values into JsonNode instances.

    Args:
        serializer: The serializer used for structured values.  Defaults to a
            ``ValueSerializer`` built from ``config``.
        config: Used only when ``serializer`` is None.
    """

    def __init__(
        self,
        serializer: ValueSerializer | None = None,
        config: TreeConfig | None = None,
    ) -> None:
        self._serializer = serializer if serializer is not None else ValueSerializer(config)

    def to_node(self, value: Any) -> JsonNode:
        if value is None:
            return null_node()
        if isinstance(value, JsonNode):
            if value.node_type == NodeType.MISSING:
                logger.warning("MISSING node written as a value; storing null instead")
                return null_node()
            return value
        # Exact types only: subclasses such as IntEnum go through the serializer.
        if type(value) is bool:
            return bool_node(value)
        if type(value) is int or (type(value) is float and math.isfinite(value)):
            return number_node(value)
        if type(value) is str:
            return string_node(value)
        try:
            return self._serializer.serialize(value)
        except Exception:
            logger.warning(
                "Cannot serialize value of type %s into a JSON node; storing null",
                type(value).__name__,
                exc_info=True,
            )
            return null_node()
