"""Implementations behind the built-in checks that are more than a one-liner."""

from __future__ import annotations

import array
import re
from collections.abc import Collection, Mapping
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any

from argcheck.errors import CorruptCheckError, type_not_supported
from argcheck.msg.prefab import index_bound
from argcheck.msg.summarize import array_length, is_array

SHORT_MAX = 2**15 - 1

_PLAIN_INT = re.compile(r"0|[1-9][0-9]*")
_BOOL_LITERALS = frozenset({"true", "false"})


def is_empty(arg: Any) -> bool:
    """None, or a string, collection, mapping or array of length zero."""
    if arg is None:
        return True
    if is_array(arg):
        return array_length(arg) == 0
    if isinstance(arg, (str, bytes, Collection)):
        return len(arg) == 0
    return False


def is_not_empty(arg: Any) -> bool:
    return not is_empty(arg)


def is_deep_not_none(arg: Any) -> bool:
    """Not None and, for collections, no None elements (mapping keys and values included)."""
    if arg is None:
        return False
    if isinstance(arg, Mapping):
        return all(k is not None and v is not None for k, v in arg.items())
    if isinstance(arg, (str, bytes)) or is_array(arg):
        return True
    if isinstance(arg, Collection):
        return all(e is not None for e in arg)
    return True


def is_deep_not_empty(arg: Any) -> bool:
    """Not empty and, recursively, no empty elements."""
    if arg is None:
        return False
    if isinstance(arg, (str, bytes)):
        return len(arg) > 0
    if is_array(arg):
        return array_length(arg) > 0
    if isinstance(arg, Mapping):
        return len(arg) > 0 and all(
            is_deep_not_empty(k) and is_deep_not_empty(v) for k, v in arg.items()
        )
    if isinstance(arg, Collection):
        return len(arg) > 0 and all(is_deep_not_empty(e) for e in arg)
    return True


def is_blank(arg: Any) -> bool:
    """None, or a string containing whitespace only."""
    if arg is None:
        return True
    return isinstance(arg, str) and not arg.strip()


def is_plain_int(arg: str) -> bool:
    """Digits only, no sign, no leading zeros."""
    return _PLAIN_INT.fullmatch(arg) is not None


def is_plain_short(arg: str) -> bool:
    return is_plain_int(arg) and len(arg) <= 5 and int(arg) <= SHORT_MAX


def is_array_or_array_type(arg: Any) -> bool:
    if isinstance(arg, type):
        return _is_array_type(arg)
    return is_array(arg)


def _is_array_type(cls: type) -> bool:
    if issubclass(cls, array.array):
        return True
    return hasattr(cls, "shape") and hasattr(cls, "dtype")


def is_parsable_as(arg: str, target: type) -> bool:
    """Whether *arg* can be converted to *target* without loss of meaning.

    Supported targets are ``int``, ``float``, ``Decimal``, ``bool`` (the
    literals ``true`` and ``false``, ignoring case) and enum classes (by
    member name).

    Raises:
        CorruptCheckError: For any other target type.
    """
    if target is bool:
        return arg.lower() in _BOOL_LITERALS
    if isinstance(target, type) and issubclass(target, Enum):
        return arg in target.__members__
    if target is int:
        try:
            int(arg)
        except ValueError:
            return False
        return True
    if target is float:
        try:
            float(arg)
        except ValueError:
            return False
        return True
    if target is Decimal:
        try:
            Decimal(arg)
        except InvalidOperation:
            return False
        return True
    if isinstance(target, type):
        raise type_not_supported(target)
    msg = f"parsable_as requires a type (was {type(target).__name__})"
    raise CorruptCheckError(msg)


def is_index_of(idx: int, obj: Any) -> bool:
    """``0 <= idx < len(obj)`` for a string, sequence or array.

    Raises:
        CorruptCheckError: If *obj* has none of these shapes.
    """
    bound = index_bound("index_of", obj)
    return 0 <= idx < bound


def is_index_inclusive_of(idx: int, obj: Any) -> bool:
    """``0 <= idx <= len(obj)``, e.g. for slice end points."""
    bound = index_bound("index_inclusive_of", obj)
    return 0 <= idx <= bound


def in_range(idx: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= idx < high


def between(idx: int, bounds: tuple[int, int]) -> bool:
    low, high = bounds
    return low <= idx <= high
