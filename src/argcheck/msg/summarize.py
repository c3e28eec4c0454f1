"""Bounded "short string" rendering of arbitrary values.

Failure messages must stay readable whatever the argument is, so every value
is squeezed into at most ``max_width`` characters:

- sequences and sets render as ``[a, b, c (+N)]``, mappings as
  ``{k: v, ... (+N)}``, recursing into their elements;
- at most ``max_elems`` elements (``max_entries`` mapping entries) are shown,
  the remainder is reported as ``(+N)``;
- the final string is cut down with ``...`` if it is still too wide.

Arrays are ``array.array`` instances and any object exposing a ``shape`` tuple
and a ``dtype`` (numpy-style n-dimensional arrays, matched by duck typing).
They are described as ``base[len][]...`` with one ``[]`` per extra dimension.

Nothing in this module raises for any input shape.
"""

from __future__ import annotations

import array
import logging
from collections.abc import Callable, Collection, Iterable, Mapping
from enum import Enum
from itertools import islice
from typing import Any

from argcheck.config.settings import get_settings

logger = logging.getLogger(__name__)

SEP = ", "
ELLIPSIS = "..."

# Shown for a container met again while it is being rendered, or nested
# deeper than MAX_DEPTH.
MAX_DEPTH = 32
CYCLE_SEQUENCE = "[...]"
CYCLE_MAPPING = "{...}"

# array.array typecodes grouped by the Python type of their elements.
_TYPECODE_NAMES: dict[str, str] = {
    **dict.fromkeys("bBhHiIlLqQ", "int"),
    **dict.fromkeys("fd", "float"),
    **dict.fromkeys("uw", "str"),
}


def max_string_width() -> int:
    """Configured display width for stringified values in messages."""
    return get_settings().message.max_string_width


# ---------------------------------------------------------------------------
# Arrays
# ---------------------------------------------------------------------------


def is_array(obj: Any) -> bool:
    """True for ``array.array`` and numpy-style arrays with at least one dimension."""
    if isinstance(obj, array.array):
        return True
    if isinstance(obj, type):
        return False
    shape = getattr(obj, "shape", None)
    return isinstance(shape, tuple) and len(shape) > 0 and hasattr(obj, "dtype")


def array_length(obj: Any) -> int:
    if isinstance(obj, array.array):
        return len(obj)
    return int(obj.shape[0])


def array_info(obj: Any) -> tuple[str, int]:
    """Return ``(base type name, number of dimensions)`` of an array."""
    if isinstance(obj, array.array):
        return _TYPECODE_NAMES.get(obj.typecode, obj.typecode), 1
    dtype = obj.dtype
    return str(getattr(dtype, "name", dtype)), len(obj.shape)


def describe_array(obj: Any) -> str:
    """``int[3]`` for a flat array, ``float64[2][]`` for a 2-D one, and so on."""
    base, dims = array_info(obj)
    return f"{base}[{array_length(obj)}]" + "[]" * (dims - 1)


# ---------------------------------------------------------------------------
# Names
# ---------------------------------------------------------------------------


def simple_class_name(obj: Any) -> str:
    """Unqualified name of *obj* if it is a class, else of its class."""
    cls = obj if isinstance(obj, type) else type(obj)
    return cls.__qualname__


def class_name(obj: Any) -> str:
    """Fully qualified name of *obj* if it is a class, else of its class.

    Builtins are shown without module prefix.
    """
    cls = obj if isinstance(obj, type) else type(obj)
    if cls.__module__ == "builtins":
        return cls.__qualname__
    return f"{cls.__module__}.{cls.__qualname__}"


def identify(obj: Any) -> str:
    """Identity-oriented label: enum member name, class name, or ``type@id``."""
    if obj is None:
        return "None"
    if isinstance(obj, Enum):
        return obj.name
    if isinstance(obj, type):
        return obj.__qualname__
    return f"{simple_class_name(obj)}@{id(obj):x}"


def describe(obj: Any) -> str:
    """Type-level description: ``list[3]``, ``dict[0]``, ``int[4][]``, ``type[str]``."""
    if obj is None:
        return "None"
    if isinstance(obj, type):
        return f"type[{obj.__qualname__}]"
    if is_array(obj):
        return describe_array(obj)
    if _is_container(obj):
        return f"{type(obj).__name__}[{len(obj)}]"
    return type(obj).__name__


# ---------------------------------------------------------------------------
# Short strings
# ---------------------------------------------------------------------------


def ellipsis(text: str, max_width: int) -> str:
    """Cut *text* to *max_width* characters, ending in ``...`` when cut."""
    if len(text) <= max_width:
        return text
    return text[: max(1, max_width - len(ELLIPSIS))] + ELLIPSIS


def to_short_string(
    obj: Any,
    max_width: int,
    max_elems: int | None = None,
    max_entries: int | None = None,
) -> str:
    """Render *obj* in at most *max_width* characters.

    Args:
        obj: Any value.
        max_width: Character budget for the complete result.
        max_elems: Elements shown per sequence or set. Defaults to
            ``ceil(max_width / 8)``.
        max_entries: Entries shown per mapping. Defaults to
            ``ceil(max_width / 16)``.
    """
    if max_elems is None:
        max_elems = _div_up(max_width, 8)
    if max_entries is None:
        max_entries = _div_up(max_width, 16)
    return _short(obj, max_width, max_elems, max_entries)


def to_str(val: Any, max_width: int | None = None) -> str:
    """Message-level rendering of an argument or object value.

    Containers are prefixed with their description
    (``list[3] of [1, 2, 3]``); blank strings are quoted so they stay visible.
    """
    width = max_string_width() if max_width is None else max_width
    if val is None:
        return "None"
    if isinstance(val, str):
        return f'"{ellipsis(val, width)}"' if not val.strip() else ellipsis(val, width)
    if is_array(val):
        if array_length(val) == 0:
            return describe_array(val)
        return f"{describe_array(val)} of {to_short_string(val, width)}"
    if _is_container(val):
        if len(val) == 0:
            return f"{type(val).__name__}[0]"
        return f"{type(val).__name__}[{len(val)}] of {to_short_string(val, width)}"
    return to_short_string(val, width)


def _short(
    obj: Any,
    width: int,
    elems: int,
    entries: int,
    active: frozenset[int] = frozenset(),
) -> str:
    """*active* holds the ids of the containers being rendered further up."""
    if obj is None:
        return "None"
    if type(obj) is str:
        return ellipsis(obj, width)
    if isinstance(obj, type):
        return ellipsis(obj.__qualname__, width)
    if not (is_array(obj) or _is_container(obj)):
        return ellipsis(safe_str(obj), width)
    if id(obj) in active or len(active) >= MAX_DEPTH:
        return CYCLE_MAPPING if isinstance(obj, Mapping) else CYCLE_SEQUENCE
    inner = active | {id(obj)}

    def render(o: Any) -> str:
        return _short(o, width, elems, entries, inner)

    if is_array(obj):
        text = _delimit(_implode(obj, render, elems), array_length(obj), elems, "[", "]")
    elif isinstance(obj, Mapping):
        text = _delimit(
            _implode(obj.items(), lambda e: f"{render(e[0])}: {render(e[1])}", entries),
            len(obj),
            entries,
            "{",
            "}",
        )
    else:
        text = _delimit(_implode(obj, render, elems), len(obj), elems, "[", "]")
    return ellipsis(text, width)


def _implode(items: Iterable[Any], render: Callable[[Any], str], limit: int) -> str:
    return SEP.join(render(o) for o in islice(items, limit))


def _delimit(imploded: str, size: int, limit: int, open_: str, close: str) -> str:
    if size == 0:
        return open_ + close
    if size <= limit:
        return f"{open_}{imploded}{close}"
    return f"{open_}{imploded} (+{size - limit}){close}"


def _is_container(obj: Any) -> bool:
    if not isinstance(obj, Collection) or isinstance(obj, (str, bytes, bytearray)):
        return False
    try:
        len(obj)
    except TypeError:  # 0-d arrays define __len__ but refuse it
        return False
    return True


def safe_str(obj: Any) -> str:
    try:
        return str(obj)
    except Exception:
        if isinstance(obj, int):
            # past sys.get_int_max_str_digits()
            return f"<int with {obj.bit_length()} bits>"
        logger.debug("str() failed for %s instance", type(obj).__name__, exc_info=True)
        return f"<{type(obj).__name__} instance>"


def _div_up(value: int, divide_by: int) -> int:
    return -(-value // divide_by)
