"""pytest plugin for json-pointer-tree.

Auto-discovered by pytest via the pytest11 entry point declared in pyproject.toml.
When the package is installed (even in editable mode), pytest discovers this plugin
automatically -- no conftest.py changes are needed.

Source: https://docs.pytest.org/en/stable/how-to/writing_plugins.html
"""

from __future__ import annotations

from typing import Any

import pytest

from json_pointer_tree import JsonNode, get_by_pointer, to_node


@pytest.fixture(scope="session")
def assert_pointer_value() -> Any:
    """Fixture that returns a callable pointer-value asserter.

    The fixture is session-scoped because the returned callable is stateless.

    Usage in tests::

        def test_username(assert_pointer_value):
            root = codec.loads('{"user": {"name": "John"}}')
            assert_pointer_value(root, "/user/name", "John")

        def test_absent(assert_pointer_value):
            with pytest.raises(AssertionError, match=r"missing"):
                assert_pointer_value(root, "/user/age", 30)

    Returns:
        A callable ``_assert(root, pointer, expected) -> None`` that raises
        ``AssertionError`` when the node at ``pointer`` is not equal to
        ``to_node(expected)``.
    """

    def _assert(root: JsonNode, pointer: str, expected: Any) -> None:
        actual = get_by_pointer(root, pointer)
        wanted = to_node(expected)
        if actual != wanted:
            raise AssertionError(
                f"value at {pointer!r} differs:\n"
                f"  actual:   {actual!r}\n"
                f"  expected: {wanted!r}"
            )

    return _assert
