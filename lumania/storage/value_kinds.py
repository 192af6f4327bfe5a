"""Value kinds for typed store accessors and their coercion rules."""

from __future__ import annotations

from enum import Enum
from typing import Any

__all__ = ["ValueKind", "coerce", "sentinel"]


class ValueKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    LONG = "long"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    STRING_LIST = "string_list"


_SENTINELS = {
    ValueKind.STRING: None,
    ValueKind.INTEGER: 0,
    ValueKind.LONG: 0,
    ValueKind.DOUBLE: 0.0,
    ValueKind.BOOLEAN: False,
    ValueKind.STRING_LIST: None,
}


def sentinel(kind: ValueKind) -> Any:
    """Return the value a typed getter yields for a missing path."""
    return _SENTINELS[kind]


def _is_number(raw: Any) -> bool:
    # bool is an int subclass but is never treated as a number here
    return isinstance(raw, (int, float)) and not isinstance(raw, bool)


def _wrap(value: int, bits: int) -> int:
    mask = (1 << bits) - 1
    value &= mask
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


def _to_integral(raw: Any, bits: int) -> int:
    if not _is_number(raw):
        return 0
    if isinstance(raw, float):
        # Floats saturate at the range bounds; whole numbers wrap
        if raw != raw:
            return 0
        low, high = -(1 << (bits - 1)), (1 << (bits - 1)) - 1
        if raw >= high:
            return high
        if raw <= low:
            return low
        return int(raw)
    return _wrap(raw, bits)


def _scalar_text(raw: Any) -> str | None:
    if isinstance(raw, bool):
        return "true" if raw else "false"
    if isinstance(raw, (str, int, float)):
        return str(raw)
    return None


def coerce(kind: ValueKind, raw: Any) -> Any:
    """
    Coerce a raw stored value to *kind*.

    Coercion never raises. A value that does not fit the requested kind
    coerces to that kind's sentinel, except STRING_LIST, where a non-list
    value yields an empty list.

    Args:
        kind (ValueKind): Requested kind
        raw: Value as stored in the document (None means absent)

    Returns:
        The coerced value
    """
    if raw is None:
        return sentinel(kind)

    if kind is ValueKind.STRING:
        return _scalar_text(raw)
    if kind is ValueKind.INTEGER:
        return _to_integral(raw, 32)
    if kind is ValueKind.LONG:
        return _to_integral(raw, 64)
    if kind is ValueKind.DOUBLE:
        return float(raw) if _is_number(raw) else 0.0
    if kind is ValueKind.BOOLEAN:
        return raw if isinstance(raw, bool) else False
    if kind is ValueKind.STRING_LIST:
        if not isinstance(raw, list):
            return []
        texts = (_scalar_text(item) for item in raw)
        return [text for text in texts if text is not None]

    raise ValueError(f"Unsupported value kind: {kind}")
