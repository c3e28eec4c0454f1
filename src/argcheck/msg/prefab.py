"""Prefab messages: the default failure sentence of each built-in check.

Each formatter is a pure function of :class:`~argcheck.msg.args.MsgArgs` and
branches on ``negated`` so that ``is_not(check)`` failures read correctly.
Argument and object values are rendered through :func:`to_str`, never raw
``str()``, to keep messages bounded.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from argcheck.errors import not_applicable
from argcheck.msg.args import MsgArgs
from argcheck.msg.summarize import (
    array_length,
    class_name,
    describe,
    identify,
    is_array,
    simple_class_name,
    to_str,
)

WAS = " (was "


def _was(value: str) -> str:
    return f"{WAS}{value})"


def _must(x: MsgArgs, positive: str, negative: str, *, show_arg: bool = True) -> str:
    """``<name> must <positive> (was <arg>)`` or its negated counterpart."""
    text = f"{x.name} must {negative if x.negated else positive}"
    return text + _was(to_str(x.arg)) if show_arg else text


# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


def msg_none(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not be None"
    return f"{x.name} must be None" + _was(to_str(x.arg))


def msg_not_none(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must be None" + _was(to_str(x.arg))
    return f"{x.name} must not be None"


def msg_yes(x: MsgArgs) -> str:
    return _must(x, "be True", "not be True", show_arg=False)


def msg_no(x: MsgArgs) -> str:
    return _must(x, "be False", "not be False", show_arg=False)


def msg_empty(x: MsgArgs) -> str:
    return _must(x, "be None or empty", "not be None or empty")


def msg_not_empty(x: MsgArgs) -> str:
    return _must(x, "not be None or empty", "be None or empty")


def msg_deep_not_none(x: MsgArgs) -> str:
    return _must(x, "not be None or contain None values", "be None or contain None values")


def msg_deep_not_empty(x: MsgArgs) -> str:
    return _must(
        x,
        "not be empty or contain empty values",
        "be empty or contain empty values",
    )


def msg_blank(x: MsgArgs) -> str:
    return _must(x, "be None or blank", "not be None or blank")


def msg_plain_int(x: MsgArgs) -> str:
    return _must(
        x,
        "be a plain integer: no +/- sign, no leading zeros",
        "not be a plain integer",
    )


def msg_plain_short(x: MsgArgs) -> str:
    return _must(
        x,
        "be a plain 16-bit integer: no +/- sign, no leading zeros",
        "not be a plain 16-bit integer",
    )


def msg_array(x: MsgArgs) -> str:
    if isinstance(x.arg, type):
        if x.negated:
            return f"{x.name} must not be an array type" + _was(class_name(x.arg))
        return f"{x.name} must be an array type" + _was(class_name(x.arg))
    if x.negated:
        return f"{x.name} must not be an array" + _was(describe(x.arg))
    return f"{x.name} must be an array" + _was(to_str(x.arg))


# ---------------------------------------------------------------------------
# Integer predicates
# ---------------------------------------------------------------------------


def msg_even(x: MsgArgs) -> str:
    return _must(x, "be even", "not be even")


def msg_odd(x: MsgArgs) -> str:
    return _must(x, "be odd", "not be odd")


def msg_positive(x: MsgArgs) -> str:
    return _must(x, "be positive", "not be positive")


def msg_negative(x: MsgArgs) -> str:
    return _must(x, "be negative", "not be negative")


def msg_zero(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not be 0"
    return f"{x.name} must be 0" + _was(to_str(x.arg))


# ---------------------------------------------------------------------------
# Integer relations
# ---------------------------------------------------------------------------


def msg_eq(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not equal {to_str(x.obj)}"
    return f"{x.name} must equal {to_str(x.obj)}" + _was(to_str(x.arg))


def msg_ne(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must equal {to_str(x.obj)}" + _was(to_str(x.arg))
    return f"{x.name} must not equal {to_str(x.obj)}"


def _int_comparison(op: str) -> Any:
    def fmt(x: MsgArgs) -> str:
        negation = "not " if x.negated else ""
        return f"{x.name} must {negation}be {op} {to_str(x.obj)}" + _was(to_str(x.arg))

    fmt.__name__ = f"msg_{op}"
    return fmt


msg_gt = _int_comparison(">")
msg_gte = _int_comparison(">=")
msg_lt = _int_comparison("<")
msg_lte = _int_comparison("<=")


def msg_multiple_of(x: MsgArgs) -> str:
    verb = "not be" if x.negated else "be"
    return f"{x.name} must {verb} multiple of {to_str(x.obj)}" + _was(to_str(x.arg))


# ---------------------------------------------------------------------------
# Object-int relations (any subject, integer object)
# ---------------------------------------------------------------------------


def msg_eq_int(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not equal {to_str(x.obj)}"
    return f"{x.name} must equal {to_str(x.obj)}" + _was(to_str(x.arg))


def _obj_int_comparison(op: str) -> Any:
    def fmt(x: MsgArgs) -> str:
        negation = "not " if x.negated else ""
        return f"{x.name} must {negation}be {op} {to_str(x.obj)}" + _was(to_str(x.arg))

    fmt.__name__ = f"msg_obj_int_{op}"
    return fmt


msg_gt_int = _obj_int_comparison(">")
msg_gte_int = _obj_int_comparison(">=")
msg_lt_int = _obj_int_comparison("<")
msg_lte_int = _obj_int_comparison("<=")


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------


def _object_relation(positive: str, negative: str) -> Any:
    """Formatter for ``<name> must <verb> <obj> (was <arg>)`` messages."""

    def fmt(x: MsgArgs) -> str:
        verb = negative if x.negated else positive
        return f"{x.name} must {verb} {to_str(x.obj)}" + _was(to_str(x.arg))

    return fmt


msg_equal_to = _object_relation("equal", "not equal")
msg_greater_than = _object_relation("be >", "not be >")
msg_less_than = _object_relation("be <", "not be <")
msg_at_least = _object_relation("be >=", "not be >=")
msg_at_most = _object_relation("be <=", "not be <=")
msg_none_or = _object_relation("be None or", "not be None or")
msg_contains = _object_relation("contain", "not contain")
msg_in = _object_relation("be element of", "not be element of")
msg_key_in = _object_relation("be key in", "not be key in")
msg_value_in = _object_relation("be value in", "not be value in")
msg_contains_all = _object_relation("be superset of", "not be superset of")
msg_contained_in = _object_relation("be subset of", "not be subset of")
msg_has_substring = _object_relation("contain", "not contain")
msg_substring_of = _object_relation("be substring of", "not be substring of")
msg_starts_with = _object_relation("start with", "not start with")
msg_ends_with = _object_relation("end with", "not end with")
msg_matches = _object_relation("match", "not match")
msg_contains_match = _object_relation("contain pattern", "not contain pattern")
msg_equals_ic = _object_relation("be equal, ignoring case, to", "not be equal, ignoring case, to")
msg_starts_with_ic = _object_relation("start with, ignoring case,", "not start with, ignoring case,")
msg_ends_with_ic = _object_relation("end with, ignoring case,", "not end with, ignoring case,")
msg_has_substring_ic = _object_relation("contain, ignoring case,", "not contain, ignoring case,")


def _pattern_relation(positive: str, negative: str) -> Any:
    """Like :func:`_object_relation`, showing a compiled pattern by its source."""

    def fmt(x: MsgArgs) -> str:
        verb = negative if x.negated else positive
        source = getattr(x.obj, "pattern", x.obj)
        return f"{x.name} must {verb} {to_str(source)}" + _was(to_str(x.arg))

    return fmt


msg_has_pattern = _pattern_relation("match", "not match")
msg_contains_pattern = _pattern_relation("contain pattern", "not contain pattern")


def msg_same_as(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not be {identify(x.obj)}"
    return f"{x.name} must be {identify(x.obj)}" + _was(identify(x.arg))


def msg_instance_of(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not be instance of {class_name(x.obj)}" + _was(to_str(x.arg))
    return f"{x.name} must be instance of {class_name(x.obj)}" + _was(class_name(x.arg))


def msg_subtype_of(x: MsgArgs) -> str:
    verb = "not be" if x.negated else "be"
    return f"{x.name} must {verb} subtype of {class_name(x.obj)}" + _was(class_name(x.arg))


def msg_supertype_of(x: MsgArgs) -> str:
    verb = "not be" if x.negated else "be"
    return f"{x.name} must {verb} supertype of {class_name(x.obj)}" + _was(class_name(x.arg))


def msg_contains_key(x: MsgArgs) -> str:
    verb = "not contain" if x.negated else "contain"
    return f"{x.name} must {verb} key {to_str(x.obj)}"


def msg_contains_value(x: MsgArgs) -> str:
    verb = "not contain" if x.negated else "contain"
    return f"{x.name} must {verb} value {to_str(x.obj)}"


def msg_parsable_as(x: MsgArgs) -> str:
    if x.negated:
        return f"{x.name} must not be parsable into {simple_class_name(x.obj)}" + _was(
            to_str(x.arg)
        )
    return f"{x.name} cannot be parsed into {simple_class_name(x.obj)}" + _was(to_str(x.arg))


# ---------------------------------------------------------------------------
# Int-object relations
# ---------------------------------------------------------------------------


def index_bound(check: str, obj: Any) -> int:
    """Length against which an index is validated.

    Raises:
        CorruptCheckError: If *obj* is neither a string, a sequence nor an array.
    """
    if isinstance(obj, (str, Sequence)):
        return len(obj)
    if is_array(obj):
        return array_length(obj)
    raise not_applicable(check, obj)


def msg_index_of(x: MsgArgs) -> str:
    bound = index_bound("index_of", x.obj)
    if x.negated:
        return f"{x.name} must be < 0 or >= {bound}" + _was(to_str(x.arg))
    return f"{x.name} must be >= 0 and < {bound}" + _was(to_str(x.arg))


def msg_index_inclusive_of(x: MsgArgs) -> str:
    bound = index_bound("index_inclusive_of", x.obj)
    if x.negated:
        return f"{x.name} must be < 0 or > {bound}" + _was(to_str(x.arg))
    return f"{x.name} must be >= 0 and <= {bound}" + _was(to_str(x.arg))


def msg_in_range(x: MsgArgs) -> str:
    low, high = x.obj
    if x.negated:
        return f"{x.name} must be < {to_str(low)} or >= {to_str(high)}" + _was(to_str(x.arg))
    return f"{x.name} must be >= {to_str(low)} and < {to_str(high)}" + _was(to_str(x.arg))


def msg_between(x: MsgArgs) -> str:
    low, high = x.obj
    if x.negated:
        return f"{x.name} must be < {to_str(low)} or > {to_str(high)}" + _was(to_str(x.arg))
    return f"{x.name} must be >= {to_str(low)} and <= {to_str(high)}" + _was(to_str(x.arg))


# ---------------------------------------------------------------------------
# Defaults for unregistered (composed or user-written) tests
# ---------------------------------------------------------------------------


def default_predicate_message(tag: str | None, arg: Any) -> str:
    if tag is None:
        return f"invalid value: {to_str(arg)}"
    return f"invalid value for {tag}: {to_str(arg)}"


def default_relation_message(tag: str | None, arg: Any, obj: Any) -> str:
    if tag is None:
        return f"no such relation between {to_str(arg)} and {to_str(obj)}"
    return f"invalid value for {tag}: no such relation between {to_str(arg)} and {to_str(obj)}"
