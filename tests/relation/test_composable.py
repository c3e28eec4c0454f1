"""Tests for the AND / OR / NOT composition algebra."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from argcheck.relation import (
    ComposableIntPredicate,
    ComposablePredicate,
    int_predicate,
    invalid,
    predicate,
    relation,
    valid,
)
from tests.conftest import CallCounter

VALUES: list[Any] = [None, 0, 7, -3, "", "abc", [], [1, 2], {"a": 1}]


@predicate
def is_none(x: Any) -> bool:
    return x is None


@predicate
def falsy(x: Any) -> bool:
    return not x


@int_predicate
def is_even(x: int) -> bool:
    return x % 2 == 0


@relation
def has_substring(x: str, y: str) -> bool:
    return y in x


@relation
def greater(x: Any, y: Any) -> bool:
    return x > y


class TestIdentityLaws:
    @pytest.mark.parametrize("value", VALUES)
    def test_valid_is_and_identity(self, value: Any) -> None:
        assert valid().and_(falsy)(value) == falsy(value)

    @pytest.mark.parametrize("value", VALUES)
    def test_invalid_is_or_identity(self, value: Any) -> None:
        assert invalid().or_(falsy)(value) == falsy(value)

    @pytest.mark.parametrize("value", VALUES)
    def test_valid_absorbs_or(self, value: Any) -> None:
        assert valid().or_(falsy)(value) is True

    @pytest.mark.parametrize("value", VALUES)
    def test_invalid_absorbs_and(self, value: Any) -> None:
        assert invalid().and_(falsy)(value) is False


class TestExcludedMiddle:
    @pytest.mark.parametrize("value", VALUES)
    def test_or_not_self_always_holds(self, value: Any) -> None:
        assert falsy.or_not(falsy)(value) is True

    @pytest.mark.parametrize("value", VALUES)
    def test_and_not_self_never_holds(self, value: Any) -> None:
        assert falsy.and_not(falsy)(value) is False

    @pytest.mark.parametrize("value", VALUES)
    def test_negate(self, value: Any) -> None:
        assert falsy.negate()(value) is (not falsy(value))


class TestShortCircuit:
    def test_or_skips_second_operand(self, counter: Callable[[bool], CallCounter]) -> None:
        second = counter(False)
        assert valid().or_(second)("x")
        assert second.calls == 0

    def test_or_evaluates_second_when_open(self, counter: Callable[[bool], CallCounter]) -> None:
        second = counter(True)
        assert invalid().or_(second)("x")
        assert second.calls == 1

    def test_and_skips_second_operand(self, counter: Callable[[bool], CallCounter]) -> None:
        second = counter(True)
        assert not invalid().and_(second)("x")
        assert second.calls == 0

    def test_relation_operand_skipped(self, counter: Callable[[bool], CallCounter]) -> None:
        rel = counter(True)
        assert not invalid().and_(rel, "obj")("x")
        assert rel.calls == 0

    def test_eval_supplier_is_lazy(self, counter: Callable[[bool], CallCounter]) -> None:
        supplier = counter(True)
        test = invalid().or_eval(supplier)
        assert supplier.calls == 0
        assert test("x")
        assert supplier.calls == 1
        assert valid().or_eval(supplier)("x")
        assert supplier.calls == 1

    def test_quantified_operand_skipped(self, counter: Callable[[bool], CallCounter]) -> None:
        rel = counter(True)
        assert valid().or_all(["a", "b"], rel)("x")
        assert rel.calls == 0


class TestOr:
    def test_or_with_test(self) -> None:
        test = is_none.or_(falsy)
        assert test(None)
        assert test(0)
        assert not test(1)

    def test_or_else_alias(self) -> None:
        assert is_none.or_else(falsy)("")

    def test_or_with_relation(self) -> None:
        test = is_none.or_(has_substring, "foo")
        assert test(None)
        assert test("xfoox")
        assert not test("bar")

    def test_or_with_several_values_needs_any(self) -> None:
        test = invalid().or_(has_substring, "foo", "bar", "baz")
        assert test("xbarx")
        assert not test("qux")

    def test_or_not_with_relation(self) -> None:
        test = invalid().or_not(has_substring, "foo")
        assert test("bar")
        assert not test("foo")

    def test_or_that(self) -> None:
        assert invalid().or_that(None, is_none)("anything")
        assert not invalid().or_that(1, is_none)("anything")

    def test_or_that_relation(self) -> None:
        assert invalid().or_that("foobar", has_substring, "bar")(None)

    def test_or_not_that(self) -> None:
        assert invalid().or_not_that(1, is_none)("anything")
        assert not invalid().or_not_that("foo", has_substring, "o")(None)

    def test_or_eval(self) -> None:
        assert invalid().or_eval(lambda: True)(1)
        assert not invalid().or_eval(lambda: False)(1)


class TestAnd:
    def test_and_with_test(self) -> None:
        test = valid().and_(falsy).and_also(is_none)
        assert test(None)
        assert not test(0)

    def test_and_with_relation(self) -> None:
        assert valid().and_(greater, 5)(6)
        assert not valid().and_(greater, 5)(5)

    def test_and_with_several_values_needs_all(self) -> None:
        test = valid().and_(has_substring, "foo", "bar")
        assert test("foobar")
        assert not test("foo")

    def test_and_not(self) -> None:
        assert valid().and_not(is_none)(1)
        assert not valid().and_not(has_substring, "o")("foo")

    def test_and_that(self) -> None:
        assert valid().and_that("foo", has_substring, "f")(None)
        assert not valid().and_that(1, is_none)(None)

    def test_and_not_that(self) -> None:
        assert valid().and_not_that(1, is_none)(None)

    def test_and_eval(self) -> None:
        assert not valid().and_eval(lambda: False)(1)


class TestQuantifiedComposition:
    """The tested value is the relation's object, the elements are its subjects."""

    def test_or_all(self) -> None:
        test = invalid().or_all(["foo", "boo"], has_substring)
        assert test("oo")
        assert not test("f")

    def test_or_any(self) -> None:
        test = invalid().or_any(["foo", "bar"], has_substring)
        assert test("ar")
        assert not test("z")

    def test_or_none(self) -> None:
        test = invalid().or_none(["foo", "bar"], has_substring)
        assert test("z")
        assert not test("o")

    def test_and_variants(self) -> None:
        assert valid().and_all([1, 2], greater.converse())(3)
        assert valid().and_any([1, 5], greater)(3)
        assert valid().and_none([1, 2], greater)(3)

    def test_subjects_frozen_at_composition(self) -> None:
        subjects = ["foo"]
        test = invalid().or_all(subjects, has_substring)
        subjects.append("bar")
        assert test("o")

    @pytest.mark.parametrize("subjects", [None, [], ()])
    def test_missing_subjects_rejected(self, subjects: Any) -> None:
        with pytest.raises(ValueError):
            invalid().or_any(subjects, has_substring)
        with pytest.raises(ValueError):
            valid().and_all(subjects, has_substring)


class TestCompositionErrors:
    def test_none_test(self) -> None:
        with pytest.raises(ValueError, match="test must not be None"):
            valid().or_(None)  # type: ignore[arg-type]

    def test_none_relation(self) -> None:
        with pytest.raises(ValueError, match="relation must not be None"):
            valid().and_(None, 1)  # type: ignore[arg-type]

    def test_none_supplier(self) -> None:
        with pytest.raises(ValueError, match="supplier must not be None"):
            valid().or_eval(None)  # type: ignore[arg-type]

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError):
            valid().or_("not a test")  # type: ignore[arg-type]

    def test_none_predicate(self) -> None:
        with pytest.raises(ValueError):
            ComposablePredicate(None)  # type: ignore[arg-type]


class TestPermissiveTyping:
    def test_mismatch_accepted_at_composition(self) -> None:
        test = is_none.negate().and_(has_substring, "foo")
        assert test("foobar")
        assert not test(None)

    def test_mismatch_surfaces_at_evaluation(self) -> None:
        test = is_none.negate().and_(has_substring, "foo")
        with pytest.raises(TypeError):
            test(42)

    def test_int_test_on_string_fails_late(self) -> None:
        test = is_even.or_(has_substring, "a")
        with pytest.raises(TypeError):
            test("abc")


class TestImmutability:
    def test_operands_unchanged(self) -> None:
        before = [falsy(v) for v in VALUES]
        falsy.or_(is_none).and_not(is_none).negate()
        assert [falsy(v) for v in VALUES] == before

    def test_returns_new_instance(self) -> None:
        composed = falsy.or_(is_none)
        assert composed is not falsy
        assert composed.__name__ == "<composed>"


class TestIntPredicates:
    def test_composition_keeps_int_flavour(self) -> None:
        test = is_even.or_(greater, 100)
        assert isinstance(test, ComposableIntPredicate)
        assert test(4)
        assert test(101)
        assert not test(7)

    def test_test_method(self) -> None:
        assert is_even.test(2)
        assert not is_even.negate().test(2)
