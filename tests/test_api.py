"""Tests for the public API functions exported from json_pointer_tree."""

from __future__ import annotations

from datetime import date

import json_pointer_tree
from json_pointer_tree import (
    MISSING,
    NodeType,
    TreeConfig,
    codec,
    get_by_pointer,
    parse_pointer,
    set_by_pointer,
    to_node,
)


class TestExports:
    def test_functions_reachable_from_package(self) -> None:
        assert json_pointer_tree.get_by_pointer is get_by_pointer
        assert json_pointer_tree.set_by_pointer is set_by_pointer

    def test_parse_pointer_exported(self) -> None:
        assert parse_pointer("/a~1b/0") == ("a/b", "0")


class TestGetBySetBy:
    def test_credentials_update_sequence(self) -> None:
        root = codec.loads('{"username": "yxadmin", "password": "secret"}')
        assert set_by_pointer(root, "/username", "new")
        assert set_by_pointer(root, "/newNode", 123)
        assert set_by_pointer(root, "/newNode2", ["x", "y", "z"])
        assert set_by_pointer(root, "/username", None)
        assert codec.dumps(root) == (
            '{"username": null, "password": "secret", '
            '"newNode": 123, "newNode2": ["x", "y", "z"]}'
        )

    def test_get_missing(self) -> None:
        root = codec.loads("{}")
        assert get_by_pointer(root, "/a/b") is MISSING

    def test_config_applies_to_values(self) -> None:
        root = codec.loads("{}")
        config = TreeConfig(date_format="%d.%m.%Y")
        assert set_by_pointer(root, "/on", date(2024, 12, 31), config)
        assert get_by_pointer(root, "/on").value == "31.12.2024"

    def test_config_applies_padding_limit(self) -> None:
        root = codec.loads("{}")
        assert not set_by_pointer(root, "/a/3/b", 1, TreeConfig(max_array_padding=0))
        assert set_by_pointer(root, "/b/0/c", 1, TreeConfig(max_array_padding=0))


class TestToNode:
    def test_scalar(self) -> None:
        assert to_node("x").node_type == NodeType.STRING

    def test_structured(self) -> None:
        node = to_node({"a": (1, 2)})
        assert node.fields["a"].node_type == NodeType.ARRAY

    def test_with_config(self) -> None:
        node = to_node({"n": 2**60}, TreeConfig(large_int_as_string=False))
        assert node.fields["n"].value == 2**60
