"""Bind plain JSON values onto typed Python targets.

This is the reverse direction of ValueSerializer: the dicts, lists and
scalars produced by ``json.loads`` or ``TreeBuilder.to_python`` are turned
into instances of a requested type.  Dataclasses are built field by field
from their type hints, so nested dataclasses, containers and optionals are
bound recursively.  Unknown properties are ignored and missing ones fall
back to the field defaults.

Strings are accepted where the serializer writes strings: dates and
datetimes are parsed leniently (see ``temporal``), integers may arrive as
decimal strings (large-int rule), and bytes as base64.

Example::

    @dataclass
    class Account:
        username: str
        created: datetime
        roles: list[str] = field(default_factory=list)

    bind(Account, {"username": "ann", "created": "2025-07-09 15:19:49"})
    # Account(username='ann', created=datetime(2025, 7, 9, 15, 19, 49), roles=[])
"""

from __future__ import annotations

import base64
import binascii
import dataclasses
import enum
import types
import typing
import uuid
from collections.abc import Mapping, Sequence
from collections.abc import Set as AbstractSet
from datetime import date, datetime, time
from decimal import Decimal, InvalidOperation
from pathlib import PurePath
from typing import Any, TypeVar

from json_pointer_tree.errors import ConversionError
from json_pointer_tree.pointer.parser import escape_segment
from json_pointer_tree.temporal import parse_date, parse_datetime

__all__ = ["bind"]

T = TypeVar("T")

_SEQUENCE_ORIGINS = (list, Sequence)
_SET_ORIGINS = (set, frozenset, AbstractSet)
_MAPPING_ORIGINS = (dict, Mapping)


def bind(target: type[T], value: Any) -> T:
    """Build an instance of ``target`` from plain JSON ``value``.

    Raises:
        ConversionError: If ``value`` does not fit ``target``.  The error
            carries the pointer of the offending value.
    """
    return _bind(target, value, "")  # type: ignore[no-any-return]


def _bind(target: Any, value: Any, path: str) -> Any:
    if target is Any or target is object:
        return value

    origin = typing.get_origin(target)
    if origin is typing.Union or origin is types.UnionType:
        return _bind_union(target, value, path)

    if value is None:
        raise ConversionError(f"null is not a valid {_name(target)}", path)

    if origin is not None:
        return _bind_generic(origin, typing.get_args(target), value, path)

    if isinstance(target, type):
        if dataclasses.is_dataclass(target):
            return _bind_dataclass(target, value, path)
        if issubclass(target, enum.Enum):
            return _bind_enum(target, value, path)
        return _bind_scalar(target, value, path)

    raise ConversionError(f"unsupported target type {target!r}", path)


def _bind_union(target: Any, value: Any, path: str) -> Any:
    options = [arg for arg in typing.get_args(target) if arg is not type(None)]
    if value is None:
        if len(options) < len(typing.get_args(target)):
            return None
        raise ConversionError(f"null is not a valid {_name(target)}", path)
    if len(options) == 1:
        return _bind(options[0], value, path)
    for option in options:
        try:
            return _bind(option, value, path)
        except ConversionError:
            continue
    raise ConversionError(f"{type(value).__name__} matches no member of {target!r}", path)


def _bind_generic(origin: Any, args: tuple[Any, ...], value: Any, path: str) -> Any:
    if origin in _MAPPING_ORIGINS:
        if not isinstance(value, Mapping):
            raise ConversionError(f"expected an object, got {_kind(value)}", path)
        item_type = args[1] if len(args) == 2 else Any
        return {
            key: _bind(item_type, item, _child(path, key))
            for key, item in value.items()
        }

    if not isinstance(value, list):
        raise ConversionError(f"expected an array, got {_kind(value)}", path)

    if origin is tuple:
        if len(args) == 2 and args[1] is Ellipsis:
            return tuple(_bind_items(args[0], value, path))
        if args and len(args) != len(value):
            raise ConversionError(
                f"expected {len(args)} elements, got {len(value)}", path
            )
        return tuple(
            _bind(arg, item, _child(path, i))
            for i, (arg, item) in enumerate(zip(args, value))
        )

    item_type = args[0] if args else Any
    if origin in _SEQUENCE_ORIGINS:
        return _bind_items(item_type, value, path)
    if origin in _SET_ORIGINS:
        items = _bind_items(item_type, value, path)
        return frozenset(items) if origin is frozenset else set(items)

    raise ConversionError(f"unsupported container type {origin!r}", path)


def _bind_items(item_type: Any, value: list[Any], path: str) -> list[Any]:
    return [_bind(item_type, item, _child(path, i)) for i, item in enumerate(value)]


def _bind_dataclass(target: type, value: Any, path: str) -> Any:
    if not isinstance(value, Mapping):
        raise ConversionError(
            f"expected an object for {target.__name__}, got {_kind(value)}", path
        )
    hints = typing.get_type_hints(target)
    kwargs: dict[str, Any] = {}
    for f in dataclasses.fields(target):
        if not f.init or f.name not in value:
            continue
        field_type = hints.get(f.name, Any)
        kwargs[f.name] = _bind(field_type, value[f.name], _child(path, f.name))
    try:
        return target(**kwargs)
    except TypeError as exc:
        raise ConversionError(f"cannot build {target.__name__}: {exc}", path) from exc


def _bind_enum(target: type[enum.Enum], value: Any, path: str) -> enum.Enum:
    try:
        return target(value)
    except ValueError as exc:
        raise ConversionError(f"{value!r} is not a valid {target.__name__}", path) from exc


def _bind_scalar(target: type, value: Any, path: str) -> Any:
    # bool before int: bool subclasses int
    if target is bool:
        if isinstance(value, bool):
            return value
    elif target is int:
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        if isinstance(value, str) and value.isascii():
            try:
                return int(value)
            except ValueError:
                pass
    elif target is float:
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return float(value)
    elif target is str:
        if isinstance(value, str):
            return value
    elif issubclass(target, datetime):
        parsed = parse_datetime(value) if isinstance(value, str) else None
        if parsed is not None:
            return parsed
    elif issubclass(target, date):
        parsed_date = parse_date(value) if isinstance(value, str) else None
        if parsed_date is not None:
            return parsed_date
    elif issubclass(target, time):
        if isinstance(value, str):
            try:
                return time.fromisoformat(value)
            except ValueError:
                pass
    elif issubclass(target, Decimal):
        if isinstance(value, (int, float, str)) and not isinstance(value, bool):
            try:
                return Decimal(str(value))
            except InvalidOperation:
                pass
    elif issubclass(target, uuid.UUID):
        if isinstance(value, str):
            try:
                return uuid.UUID(value)
            except ValueError:
                pass
    elif issubclass(target, PurePath):
        if isinstance(value, str):
            return target(value)
    elif issubclass(target, bytes):
        if isinstance(value, str):
            try:
                return base64.b64decode(value, validate=True)
            except binascii.Error:
                pass
    elif isinstance(value, target):
        return value
    else:
        raise ConversionError(f"unsupported target type {target.__name__}", path)

    raise ConversionError(
        f"{_kind(value)} {value!r:.80} is not a valid {target.__name__}", path
    )


def _child(path: str, key: str | int) -> str:
    return f"{path}/{escape_segment(str(key))}"


def _kind(value: Any) -> str:
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


def _name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))
