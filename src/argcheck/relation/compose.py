"""Seeds for building composed predicates.

``valid()`` is the identity element of AND chains and ``invalid()`` the
identity element of OR chains::

    test = invalid().or_(none).or_(has_substring, "foo")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from argcheck.relation.composable import (
    _UNSET,
    ComposableIntPredicate,
    ComposablePredicate,
)

_VALID: ComposablePredicate[Any] = ComposablePredicate(lambda _: True, name="valid")
_INVALID: ComposablePredicate[Any] = ComposablePredicate(lambda _: False, name="invalid")
_VALID_INT = ComposableIntPredicate(lambda _: True, name="valid_int")
_INVALID_INT = ComposableIntPredicate(lambda _: False, name="invalid_int")


def valid() -> ComposablePredicate[Any]:
    """A predicate that always holds."""
    return _VALID


def invalid() -> ComposablePredicate[Any]:
    """A predicate that never holds."""
    return _INVALID


def valid_int() -> ComposableIntPredicate:
    return _VALID_INT


def invalid_int() -> ComposableIntPredicate:
    return _INVALID_INT


def valid_when(value: Any) -> ComposablePredicate[Any]:
    """A predicate that holds only for values equal to *value*."""
    return ComposablePredicate(lambda x: x == value, name="valid_when")


def invalid_when(value: Any) -> ComposablePredicate[Any]:
    """A predicate that holds for every value not equal to *value*."""
    return ComposablePredicate(lambda x: x != value, name="invalid_when")


def valid_int_when(value: int) -> ComposableIntPredicate:
    return ComposableIntPredicate(lambda x: x == value, name="valid_int_when")


def invalid_int_when(value: int) -> ComposableIntPredicate:
    return ComposableIntPredicate(lambda x: x != value, name="invalid_int_when")


def valid_if(test: Callable[..., bool], obj: Any = _UNSET) -> ComposablePredicate[Any]:
    """Lift a plain test, or a relation bound to *obj*, into a composable predicate."""
    return invalid().or_(test) if obj is _UNSET else invalid().or_(test, obj)


def valid_int_if(test: Callable[..., bool], obj: Any = _UNSET) -> ComposableIntPredicate:
    return invalid_int().or_(test) if obj is _UNSET else invalid_int().or_(test, obj)
