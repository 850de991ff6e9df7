"""Tests for TreeBuilder.

Covers all JSON types, nesting, bool/int dispatch ordering, empty
containers, key order, conversion back to plain values, and TypeError on
input that json.loads could never produce.
"""

from __future__ import annotations

from typing import Any

import pytest

from json_pointer_tree.tree.builder import TreeBuilder
from json_pointer_tree.tree.nodes import MISSING, NodeType, object_node

# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def builder() -> TreeBuilder:
    """A fresh TreeBuilder instance for each test."""
    return TreeBuilder()


# ---------------------------------------------------------------------------
# build()
# ---------------------------------------------------------------------------


class TestScalars:
    def test_bool_before_int(self, builder: TreeBuilder) -> None:
        node = builder.build(True)
        assert node.node_type == NodeType.BOOL
        assert node.value is True

    def test_int(self, builder: TreeBuilder) -> None:
        node = builder.build(7)
        assert node.node_type == NodeType.NUMBER
        assert node.value == 7
        assert type(node.value) is int

    def test_float(self, builder: TreeBuilder) -> None:
        assert builder.build(0.5).value == 0.5

    def test_string(self, builder: TreeBuilder) -> None:
        assert builder.build("hi").node_type == NodeType.STRING

    def test_none(self, builder: TreeBuilder) -> None:
        assert builder.build(None).node_type == NodeType.NULL


class TestContainers:
    def test_nested(self, builder: TreeBuilder) -> None:
        tree = builder.build({"user": {"tags": ["a", 1, None]}})
        tags = tree.fields["user"].fields["tags"]
        assert tags.node_type == NodeType.ARRAY
        assert [child.node_type for child in tags.items] == [
            NodeType.STRING,
            NodeType.NUMBER,
            NodeType.NULL,
        ]

    def test_empty(self, builder: TreeBuilder) -> None:
        assert builder.build({}) == object_node()
        assert builder.build([]).items == []

    def test_key_order_preserved(self, builder: TreeBuilder) -> None:
        tree = builder.build({"z": 1, "a": 2, "m": 3})
        assert list(tree.fields) == ["z", "a", "m"]


class TestInvalidInput:
    @pytest.mark.parametrize("value", [object(), {1, 2}, (1, 2), b"raw"])
    def test_non_json_value(self, builder: TreeBuilder, value: Any) -> None:
        with pytest.raises(TypeError, match="Unsupported JSON value type"):
            builder.build(value)

    def test_non_str_key(self, builder: TreeBuilder) -> None:
        with pytest.raises(TypeError, match="keys must be str"):
            builder.build({1: "x"})


# ---------------------------------------------------------------------------
# to_python()
# ---------------------------------------------------------------------------


class TestToPython:
    @pytest.mark.parametrize(
        "value",
        [
            {"a": [1, 2.5, "s", True, None], "b": {}},
            [[], [{}], [[None]]],
            "plain",
            None,
        ],
    )
    def test_build_then_to_python(self, builder: TreeBuilder, value: Any) -> None:
        assert builder.to_python(builder.build(value)) == value

    def test_missing_has_no_representation(self, builder: TreeBuilder) -> None:
        with pytest.raises(TypeError, match="MISSING"):
            builder.to_python(MISSING)

    def test_missing_nested(self, builder: TreeBuilder) -> None:
        with pytest.raises(TypeError):
            builder.to_python(object_node({"a": MISSING}))
