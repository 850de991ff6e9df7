"""Datetime formatting and lenient parsing for JSON string values.

Formatting follows the configured zone and patterns.  Parsing accepts the
shapes commonly found in JSON payloads, from full ISO 8601 down to a bare
year, and returns None instead of raising when nothing matches.
"""

from __future__ import annotations

from datetime import date, datetime

from json_pointer_tree.config import TreeConfig

__all__ = ["format_date", "format_datetime", "parse_date", "parse_datetime"]

# Tried in order after ISO 8601.
_FALLBACK_PATTERNS = ("%Y-%m-%d %H:%M:%S", "%Y-%m-%d", "%Y-%m", "%Y")


def format_datetime(value: datetime, config: TreeConfig) -> str:
    """Format ``value`` with ``config.datetime_format``.

    Aware datetimes are converted to ``config.time_zone`` first; naive
    datetimes are formatted as they are.
    """
    if value.tzinfo is not None:
        value = value.astimezone(config.zone)
    return value.strftime(config.datetime_format)


def format_date(value: date, config: TreeConfig) -> str:
    return value.strftime(config.date_format)


def parse_datetime(text: str | None) -> datetime | None:
    """Parse ``text`` leniently.

    Tries ISO 8601 (``datetime.fromisoformat``), then
    ``%Y-%m-%d %H:%M:%S``, ``%Y-%m-%d``, ``%Y-%m`` and ``%Y``.

    Returns:
        The parsed datetime, or None when no format matches.
    """
    if text is None:
        return None
    text = text.strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass
    for pattern in _FALLBACK_PATTERNS:
        try:
            return datetime.strptime(text, pattern)
        except ValueError:
            continue
    return None


def parse_date(text: str | None) -> date | None:
    parsed = parse_datetime(text)
    return parsed.date() if parsed is not None else None
