"""Exception types raised by argcheck itself.

Ordinary validation failures are raised through the caller's exception
factory (``ValueError`` by default). The types here signal that a check
was *misapplied*, not that the validated data is invalid.
"""

from __future__ import annotations


class CorruptCheckError(RuntimeError):
    """A check or message formatter met a value shape it cannot support."""


def type_not_supported(kind: type) -> CorruptCheckError:
    return CorruptCheckError(f"type not supported: {kind.__name__}")


def not_applicable(check: str, arg: object) -> CorruptCheckError:
    return CorruptCheckError(f"[{check}] check not applicable to {type(arg).__name__}")
