"""Failure kinds and exception hierarchy for JSON tree operations."""

from __future__ import annotations

from enum import StrEnum, auto

__all__ = [
    "ConversionError",
    "JsonTreeError",
    "SerializationError",
    "TreeDecodeError",
    "WriteFailure",
]


class WriteFailure(StrEnum):
    """Why a pointer write was rejected.

    The write path reports failure as a plain ``False``; these values name
    the reason in log records.

    - PATH_MALFORMED:     a segment does not fit the node it is applied to
                          (object key against an array, descent into a scalar).
    - INDEX_OUT_OF_RANGE: an array index normalizes below zero or lies past
                          the permitted append position.
    - INVALID_ROOT:       the root is not an object or array.
    """

    PATH_MALFORMED = auto()
    INDEX_OUT_OF_RANGE = auto()
    INVALID_ROOT = auto()


class JsonTreeError(Exception):
    """Base exception for json-pointer-tree errors."""


class SerializationError(JsonTreeError):
    """Raised when a value cannot be represented as a JSON tree node."""

    def __init__(self, message: str, value_type: str = "") -> None:
        super().__init__(message)
        self.value_type = value_type


class TreeDecodeError(JsonTreeError, ValueError):
    """Raised when JSON text cannot be decoded into a tree."""


class ConversionError(JsonTreeError, ValueError):
    """Raised when plain JSON values cannot be bound to a target type.

    Attributes:
        path: Pointer to the offending value within the converted document.
    """

    def __init__(self, message: str, path: str = "") -> None:
        super().__init__(f"{message} at {path!r}" if path else message)
        self.path = path
