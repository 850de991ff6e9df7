"""TreeConfig: immutable configuration for serialization and pointer writes.

TreeConfig is a frozen (immutable) dataclass.  It is passed explicitly to
every collaborator that needs it (ValueSerializer, ValueCoercer, JsonMapper);
there is no module-level mapper or config singleton.
"""

from __future__ import annotations

from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

__all__ = ["TreeConfig"]


@dataclass(frozen=True, slots=True)
class TreeConfig:
    """Immutable configuration for JSON tree serialization.

    Attributes:
        time_zone: IANA zone name.  Aware datetimes are converted to this zone
            before formatting.  Default ``"UTC"``.
        datetime_format: ``strftime`` pattern used for datetime values.
        date_format: ``strftime`` pattern used for date values.
        omit_none_fields: When True, ``None``-valued attributes of dataclasses
            and plain objects are left out of the serialized object.  Array
            elements and mapping values keep their nulls.  Default True.
        large_int_as_string: When True, integers nested in structured values
            whose magnitude exceeds ``2**53 - 1`` are written as strings so
            JavaScript consumers do not lose precision.  Default True.
        ignored_types: Types whose values are skipped when they appear as
            object properties.
        max_array_padding: Optional cap on the number of null placeholders a
            single intermediate creation may append.  None means unbounded.
        pointer_cache_size: Capacity of the JsonMapper parsed-pointer LRU
            cache.  0 disables caching.
    """

    time_zone: str = "UTC"
    datetime_format: str = "%Y-%m-%d %H:%M:%S"
    date_format: str = "%Y-%m-%d"
    omit_none_fields: bool = True
    large_int_as_string: bool = True
    ignored_types: tuple[type, ...] = ()
    max_array_padding: int | None = None
    pointer_cache_size: int = 256

    def __post_init__(self) -> None:
        if not self.time_zone or not self.time_zone.strip():
            msg = "time_zone must not be blank"
            raise ValueError(msg)
        try:
            ZoneInfo(self.time_zone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            msg = f"unknown time_zone: {self.time_zone!r}"
            raise ValueError(msg) from exc
        if not self.datetime_format:
            msg = "datetime_format must not be empty"
            raise ValueError(msg)
        if not self.date_format:
            msg = "date_format must not be empty"
            raise ValueError(msg)
        if not all(isinstance(t, type) for t in self.ignored_types):
            msg = f"ignored_types must contain only types, got {self.ignored_types!r}"
            raise ValueError(msg)
        if self.max_array_padding is not None and self.max_array_padding < 0:
            msg = f"max_array_padding must be >= 0, got {self.max_array_padding}"
            raise ValueError(msg)
        if self.pointer_cache_size < 0:
            msg = f"pointer_cache_size must be >= 0, got {self.pointer_cache_size}"
            raise ValueError(msg)

    @property
    def zone(self) -> ZoneInfo:
        """The ``ZoneInfo`` for ``time_zone``."""
        return ZoneInfo(self.time_zone)
