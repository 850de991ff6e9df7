"""JSON Pointer (RFC 6901) parsing helpers.

Pointers are split into unescaped segments once per call.  Parsing never
raises: a token that makes no sense for the tree it is applied to is kept as
a literal key and simply fails to resolve later.

Policy:
- ``""``, ``"/"`` and None address the document root (no segments).
- A single leading ``/`` is optional.
- Empty segments from consecutive or trailing slashes are dropped, so
  ``"/a//b/"`` parses to ``("a", "b")``.  The empty key is not addressable.
- Tokens are unescaped ``~1`` -> ``/`` first, then ``~0`` -> ``~``.
"""

from __future__ import annotations

from collections.abc import Iterable

MAX_INDEX_DIGITS = 18
"""Longest digit run (ignoring leading zeros) accepted as an array index."""

__all__ = [
    "MAX_INDEX_DIGITS",
    "escape_segment",
    "join_pointer",
    "normalize_index",
    "parse_index",
    "parse_pointer",
    "unescape_segment",
]


def unescape_segment(token: str) -> str:
    """Decode the RFC 6901 escapes in a single token."""
    # the order of the replacements matters: "~01" must decode to "~1", not "/"
    return token.replace("~1", "/").replace("~0", "~")


def escape_segment(key: str) -> str:
    """Encode a property name so it can be used as a pointer token."""
    return key.replace("~", "~0").replace("/", "~1")


def parse_pointer(pointer: str | None) -> tuple[str, ...]:
    """Split a pointer expression into unescaped segments.

    Args:
        pointer: A ``/``-delimited pointer such as ``"/users/0/name"``.  The
            leading slash is optional.

    Returns:
        The segments in traversal order.  Empty for the document root.

    Example::
        parse_pointer("/a~1b/0")   # ("a/b", "0")
        parse_pointer("a//b/")     # ("a", "b")
        parse_pointer("/")         # ()
    """
    if not pointer or pointer == "/":
        return ()
    path = pointer[1:] if pointer.startswith("/") else pointer
    return tuple(unescape_segment(raw) for raw in path.split("/") if raw)


def join_pointer(segments: Iterable[str | int]) -> str:
    """Build a pointer string from raw (unescaped) segments."""
    out = [escape_segment(str(seg)) for seg in segments]
    if not out:
        return ""
    return "/" + "/".join(out)


def parse_index(token: str | None) -> int | None:
    """Parse an array index token.

    Accepts an optional leading ``-`` followed by one or more ASCII digits.
    Returns None for anything else (``"+1"``, ``" 1"``, ``"1.0"``, ``"-"``),
    and for tokens with more than ``MAX_INDEX_DIGITS`` significant digits,
    which no in-memory array can be addressed by.
    """
    if not token:
        return None
    digits = token[1:] if token[0] == "-" else token
    if not digits or not (digits.isascii() and digits.isdigit()):
        return None
    significant = digits.lstrip("0") or "0"
    if len(significant) > MAX_INDEX_DIGITS:
        return None
    index = int(significant)
    return -index if token[0] == "-" else index


def normalize_index(index: int, length: int) -> int:
    """Map a negative index onto ``length``; ``-1`` is the last element.

    The result may still be negative when ``-index > length``.
    """
    return length + index if index < 0 else index
