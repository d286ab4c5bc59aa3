"""
Payload helpers.

A payload is a plain ``dict`` from string keys to one of a small closed set
of value shapes:

    int | str | datetime | list[int] | list[record]

where a record is itself a ``dict`` built from the same shapes (plus
``list[float]`` for reading values). Timestamps are always timezone-aware
``datetime`` objects. The readers below turn a missing key or a value of
the wrong shape into :class:`MalformedField` instead of letting a bad cast
surface later.
"""
from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Union

from .errors import MalformedField

Record  = Dict[str, Any]
Value   = Union[int, str, datetime, List[int], List[Record]]
Payload = Dict[str, Value]

_MISSING = object()


def now() -> datetime:
    return datetime.now(timezone.utc)


def check_time(value: Any, name: str) -> datetime:
    """Constructor-side validation for point-in-time fields."""
    if not isinstance(value, datetime):
        raise TypeError(f"{name} must be a datetime, got {type(value).__name__}")
    if value.utcoffset() is None:
        raise ValueError(f"{name} must be timezone-aware")
    return value


def _get(payload: Mapping[str, Any], key: str) -> Any:
    if not isinstance(payload, Mapping):
        raise MalformedField(key, f"container is {type(payload).__name__}, not a mapping")
    value = payload.get(key, _MISSING)
    if value is _MISSING:
        raise MalformedField(key, "missing")
    return value


def _is_int(value: Any) -> bool:
    # bool is an int subclass; never accept it as one
    return isinstance(value, int) and not isinstance(value, bool)


def _is_number(value: Any) -> bool:
    return _is_int(value) or isinstance(value, float)


def read_int(payload: Mapping[str, Any], key: str) -> int:
    value = _get(payload, key)
    if not _is_int(value):
        raise MalformedField(key, f"expected int, got {type(value).__name__}")
    return value


def read_str(payload: Mapping[str, Any], key: str) -> str:
    value = _get(payload, key)
    if not isinstance(value, str):
        raise MalformedField(key, f"expected str, got {type(value).__name__}")
    return value


def read_time(payload: Mapping[str, Any], key: str) -> datetime:
    value = _get(payload, key)
    if not isinstance(value, datetime):
        raise MalformedField(key, f"expected datetime, got {type(value).__name__}")
    if value.utcoffset() is None:
        raise MalformedField(key, "datetime has no timezone")
    return value


def read_int_list(payload: Mapping[str, Any], key: str) -> List[int]:
    value = _get(payload, key)
    if not isinstance(value, (list, tuple)):
        raise MalformedField(key, f"expected list of int, got {type(value).__name__}")
    for i, item in enumerate(value):
        if not _is_int(item):
            raise MalformedField(f"{key}[{i}]", f"expected int, got {type(item).__name__}")
    return list(value)


def read_float_list(payload: Mapping[str, Any], key: str) -> List[float]:
    value = _get(payload, key)
    if not isinstance(value, (list, tuple)):
        raise MalformedField(key, f"expected list of numbers, got {type(value).__name__}")
    numbers = []
    for i, item in enumerate(value):
        if not _is_number(item):
            raise MalformedField(f"{key}[{i}]", f"expected number, got {type(item).__name__}")
        try:
            numbers.append(float(item))
        except OverflowError:
            raise MalformedField(f"{key}[{i}]", "number out of range") from None
    return numbers


def read_records(payload: Mapping[str, Any], key: str) -> List[Record]:
    value = _get(payload, key)
    if not isinstance(value, (list, tuple)):
        raise MalformedField(key, f"expected list of records, got {type(value).__name__}")
    for i, item in enumerate(value):
        if not isinstance(item, Mapping):
            raise MalformedField(f"{key}[{i}]", f"expected record, got {type(item).__name__}")
    return [dict(item) for item in value]
