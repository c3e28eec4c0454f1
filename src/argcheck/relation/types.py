"""Binary tests: relations between a subject and an object.

A relation wraps any two-argument callable. ``converse()`` swaps the roles of
subject and object, ``negate()`` flips the outcome; both return new relations
and leave the receiver untouched.

The integer-flavoured relations behave identically at runtime. They are kept as
separate types so that the check registry can attach integer-specific messages
and so the converse of an :class:`IntObjRelation` is an :class:`ObjIntRelation`
(and vice versa).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Generic, TypeVar

S = TypeVar("S")
O = TypeVar("O")  # noqa: E741


class _BaseRelation:
    def __init__(self, fn: Callable[[Any, Any], bool], name: str | None = None) -> None:
        if fn is None:
            msg = "relation must not be None"
            raise ValueError(msg)
        self._fn = fn
        self.__name__ = name or getattr(fn, "__name__", type(self).__name__)

    def exists(self, subject: Any, obj: Any) -> bool:
        """Whether *subject* has this relation to *obj*."""
        return self._fn(subject, obj)

    def __call__(self, subject: Any, obj: Any) -> bool:
        return self._fn(subject, obj)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__name__})"


class Relation(_BaseRelation, Generic[S, O]):
    """Relation between an arbitrary subject and an arbitrary object."""

    def converse(self) -> Relation[O, S]:
        fn = self._fn
        return Relation(lambda x, y: fn(y, x))

    def negate(self) -> Relation[S, O]:
        fn = self._fn
        return Relation(lambda x, y: not fn(x, y))


class IntRelation(_BaseRelation):
    """Relation between two integers."""

    def converse(self) -> IntRelation:
        fn = self._fn
        return IntRelation(lambda x, y: fn(y, x))

    def negate(self) -> IntRelation:
        fn = self._fn
        return IntRelation(lambda x, y: not fn(x, y))


class IntObjRelation(_BaseRelation, Generic[O]):
    """Relation between an integer subject and an arbitrary object."""

    def converse(self) -> ObjIntRelation[O]:
        fn = self._fn
        return ObjIntRelation(lambda x, y: fn(y, x))

    def negate(self) -> IntObjRelation[O]:
        fn = self._fn
        return IntObjRelation(lambda x, y: not fn(x, y))


class ObjIntRelation(_BaseRelation, Generic[S]):
    """Relation between an arbitrary subject and an integer object."""

    def converse(self) -> IntObjRelation[S]:
        fn = self._fn
        return IntObjRelation(lambda x, y: fn(y, x))

    def negate(self) -> ObjIntRelation[S]:
        fn = self._fn
        return ObjIntRelation(lambda x, y: not fn(x, y))


def relation(fn: Callable[[Any, Any], bool]) -> Relation[Any, Any]:
    """Decorator turning a two-argument function into a :class:`Relation`."""
    return Relation(fn)


def int_relation(fn: Callable[[int, int], bool]) -> IntRelation:
    return IntRelation(fn)


def int_obj_relation(fn: Callable[[int, Any], bool]) -> IntObjRelation[Any]:
    return IntObjRelation(fn)


def obj_int_relation(fn: Callable[[Any, int], bool]) -> ObjIntRelation[Any]:
    return ObjIntRelation(fn)
