"""Composable unary tests: the AND / OR / NOT algebra.

Every composition method returns a *new* predicate that closes over its
operands; nothing is ever mutated. The receiver is always evaluated first and
the second operand only when the outcome is still open (short circuit).

Typing is deliberately permissive: the second operand may be any callable,
whatever type it was written for. This lets a type-agnostic test such as
``not_none`` be chained with a ``str``-only relation such as
``has_substring``. A mismatch is not detected when composing; it surfaces as
the operand's own error (usually ``TypeError``) when the composed test is
evaluated, and is propagated unchanged.

Composed predicates are anonymous: they are never registered as checks, so a
failing composed test gets the generic default message, not the prefab message
of any of its operands.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from typing import Any, Generic, Self, TypeVar

from argcheck.relation.quantifier import Quantifier, quantify

T = TypeVar("T")

TEST = "test"
RELATION = "relation"
SUPPLIER = "supplier"
SUBJECTS_MUST_NOT_BE_NONE = "subjects must not be None"
AT_LEAST_ONE_SUBJECT_REQUIRED = "at least one subject required"

_UNSET: Any = object()


def _require(fn: Any, what: str) -> Callable[..., bool]:
    if fn is None:
        msg = f"{what} must not be None"
        raise ValueError(msg)
    if not callable(fn):
        msg = f"{what} must be callable (was {type(fn).__name__})"
        raise TypeError(msg)
    return fn


def _require_subjects(subjects: Iterable[Any] | None) -> tuple[Any, ...]:
    if subjects is None:
        raise ValueError(SUBJECTS_MUST_NOT_BE_NONE)
    frozen = tuple(subjects)
    if not frozen:
        raise ValueError(AT_LEAST_ONE_SUBJECT_REQUIRED)
    return frozen


class _Composable:
    """Shared algebra for :class:`ComposablePredicate` and :class:`ComposableIntPredicate`."""

    def __init__(self, fn: Callable[[Any], bool], name: str | None = None) -> None:
        self._fn = _require(fn, TEST)
        self.__name__ = name or getattr(fn, "__name__", type(self).__name__)

    # ------------------------------------------------------------------
    # Evaluation
    # ------------------------------------------------------------------

    def test(self, value: Any) -> bool:
        """Evaluate this predicate against *value*."""
        return self._fn(value)

    def __call__(self, value: Any) -> bool:
        return self._fn(value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__name__})"

    def _new(self, fn: Callable[[Any], bool]) -> Self:
        return type(self)(fn, name="<composed>")

    # ------------------------------------------------------------------
    # NOT
    # ------------------------------------------------------------------

    def negate(self) -> Self:
        me = self._fn
        return self._new(lambda x: not me(x))

    # ------------------------------------------------------------------
    # OR
    # ------------------------------------------------------------------

    def or_(self, test: Callable[..., bool], *objects: Any) -> Self:
        """Disjunction with a test on the same value.

        ``or_(test)`` holds if this predicate or *test* holds.
        ``or_(relation, obj)`` holds if this predicate holds or the value has
        *relation* to *obj*. With two or more objects the value needs to have
        the relation to at least one of them.
        """
        me = self._fn
        if not objects:
            other = _require(test, TEST)
            return self._new(lambda x: me(x) or other(x))
        rel = _require(test, RELATION)
        if len(objects) == 1:
            obj = objects[0]
            return self._new(lambda x: me(x) or rel(x, obj))
        return self._new(lambda x: me(x) or any(rel(x, o) for o in objects))

    or_else = or_

    def or_not(self, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        """Holds if this predicate holds or *test* (or *test* against *obj*) does not."""
        me = self._fn
        if obj is _UNSET:
            other = _require(test, TEST)
            return self._new(lambda x: me(x) or not other(x))
        rel = _require(test, RELATION)
        return self._new(lambda x: me(x) or not rel(x, obj))

    def or_all(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        """Holds if this predicate holds or every subject has *relation* to the value.

        Note the orientation: the elements of *subjects* are the relation's
        subjects and the tested value is its object.
        """
        return self._or_quantified(subjects, relation, Quantifier.ALL)

    def or_any(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        """Holds if this predicate holds or some subject has *relation* to the value."""
        return self._or_quantified(subjects, relation, Quantifier.ANY)

    def or_none(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        """Holds if this predicate holds or no subject has *relation* to the value."""
        return self._or_quantified(subjects, relation, Quantifier.NONE)

    def or_that(self, value: Any, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        """Disjunction with a test on an unrelated value.

        ``or_that(value, test)`` evaluates ``test(value)``;
        ``or_that(subject, relation, obj)`` evaluates ``relation(subject, obj)``.
        Neither looks at the value being tested.
        """
        me = self._fn
        other = self._detached(value, test, obj)
        return self._new(lambda x: me(x) or other())

    def or_not_that(self, value: Any, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        me = self._fn
        other = self._detached(value, test, obj)
        return self._new(lambda x: me(x) or not other())

    def or_eval(self, supplier: Callable[[], bool]) -> Self:
        """Holds if this predicate holds or *supplier* returns True (called lazily)."""
        me = self._fn
        fn = _require(supplier, SUPPLIER)
        return self._new(lambda x: me(x) or fn())

    # ------------------------------------------------------------------
    # AND
    # ------------------------------------------------------------------

    def and_(self, test: Callable[..., bool], *objects: Any) -> Self:
        """Conjunction with a test on the same value.

        With two or more objects the value must have *relation* to all of them.
        """
        me = self._fn
        if not objects:
            other = _require(test, TEST)
            return self._new(lambda x: me(x) and other(x))
        rel = _require(test, RELATION)
        if len(objects) == 1:
            obj = objects[0]
            return self._new(lambda x: me(x) and rel(x, obj))
        return self._new(lambda x: me(x) and all(rel(x, o) for o in objects))

    and_also = and_

    def and_not(self, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        me = self._fn
        if obj is _UNSET:
            other = _require(test, TEST)
            return self._new(lambda x: me(x) and not other(x))
        rel = _require(test, RELATION)
        return self._new(lambda x: me(x) and not rel(x, obj))

    def and_all(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        return self._and_quantified(subjects, relation, Quantifier.ALL)

    def and_any(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        return self._and_quantified(subjects, relation, Quantifier.ANY)

    def and_none(self, subjects: Collection[Any], relation: Callable[[Any, Any], bool]) -> Self:
        return self._and_quantified(subjects, relation, Quantifier.NONE)

    def and_that(self, value: Any, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        me = self._fn
        other = self._detached(value, test, obj)
        return self._new(lambda x: me(x) and other())

    def and_not_that(self, value: Any, test: Callable[..., bool], obj: Any = _UNSET) -> Self:
        me = self._fn
        other = self._detached(value, test, obj)
        return self._new(lambda x: me(x) and not other())

    def and_eval(self, supplier: Callable[[], bool]) -> Self:
        me = self._fn
        fn = _require(supplier, SUPPLIER)
        return self._new(lambda x: me(x) and fn())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _detached(value: Any, test: Callable[..., bool], obj: Any) -> Callable[[], bool]:
        if obj is _UNSET:
            fn = _require(test, TEST)
            return lambda: fn(value)
        rel = _require(test, RELATION)
        return lambda: rel(value, obj)

    @staticmethod
    def _subjects_relation(
        subjects: Collection[Any] | None,
        relation: Callable[[Any, Any], bool],
        quantifier: Quantifier,
    ) -> Callable[[Any], bool]:
        rel = _require(relation, RELATION)
        frozen = _require_subjects(subjects)

        def inverted(value: Any, subject: Any) -> bool:
            return rel(subject, value)

        return lambda x: quantify(x, inverted, quantifier, frozen)

    def _or_quantified(
        self,
        subjects: Collection[Any],
        relation: Callable[[Any, Any], bool],
        quantifier: Quantifier,
    ) -> Self:
        me = self._fn
        other = self._subjects_relation(subjects, relation, quantifier)
        return self._new(lambda x: me(x) or other(x))

    def _and_quantified(
        self,
        subjects: Collection[Any],
        relation: Callable[[Any, Any], bool],
        quantifier: Quantifier,
    ) -> Self:
        me = self._fn
        other = self._subjects_relation(subjects, relation, quantifier)
        return self._new(lambda x: me(x) and other(x))


class ComposablePredicate(_Composable, Generic[T]):
    """A predicate over values of any type, composable with any other test."""


class ComposableIntPredicate(_Composable):
    """A predicate over integers.

    Composition yields integer predicates, so integer checks can be chained
    without losing their integer flavour.
    """


def predicate(fn: Callable[[Any], bool]) -> ComposablePredicate[Any]:
    """Decorator turning a one-argument function into a :class:`ComposablePredicate`."""
    return ComposablePredicate(fn)


def int_predicate(fn: Callable[[int], bool]) -> ComposableIntPredicate:
    """Decorator turning a one-argument function into a :class:`ComposableIntPredicate`."""
    return ComposableIntPredicate(fn)
