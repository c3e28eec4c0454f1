"""Built-in checks.

Predicates are :class:`~argcheck.relation.ComposablePredicate` instances, so
they compose directly::

    from argcheck.checks.common import even, greater_than, none

    test = none.or_(even).or_(greater_than, 100)

Every check here is registered with a prefab message by
:mod:`argcheck.checks.defs`. Arguments of the wrong type are not guarded
against: ``has_substring(42, "4")`` raises ``TypeError`` like ``"4" in 42``.
"""

from __future__ import annotations

import re
from typing import Any

from argcheck.checks import impls
from argcheck.relation import (
    int_obj_relation,
    int_predicate,
    int_relation,
    obj_int_relation,
    predicate,
    relation,
)

# ---------------------------------------------------------------------------
# Predicates
# ---------------------------------------------------------------------------


@predicate
def none(arg: Any) -> bool:
    return arg is None


@predicate
def not_none(arg: Any) -> bool:
    return arg is not None


@predicate
def yes(arg: bool) -> bool:
    return arg is True


@predicate
def no(arg: bool) -> bool:
    return arg is False


empty = predicate(impls.is_empty)
not_empty = predicate(impls.is_not_empty)
deep_not_none = predicate(impls.is_deep_not_none)
deep_not_empty = predicate(impls.is_deep_not_empty)
blank = predicate(impls.is_blank)
plain_int = predicate(impls.is_plain_int)
plain_short = predicate(impls.is_plain_short)
array = predicate(impls.is_array_or_array_type)

# ---------------------------------------------------------------------------
# Integer predicates
# ---------------------------------------------------------------------------


@int_predicate
def even(arg: int) -> bool:
    return arg % 2 == 0


@int_predicate
def odd(arg: int) -> bool:
    return arg % 2 != 0


@int_predicate
def positive(arg: int) -> bool:
    return arg > 0


@int_predicate
def negative(arg: int) -> bool:
    return arg < 0


@int_predicate
def zero(arg: int) -> bool:
    return arg == 0


# ---------------------------------------------------------------------------
# Integer relations
# ---------------------------------------------------------------------------


@int_relation
def eq(x: int, y: int) -> bool:
    return x == y


@int_relation
def ne(x: int, y: int) -> bool:
    return x != y


@int_relation
def gt(x: int, y: int) -> bool:
    return x > y


@int_relation
def gte(x: int, y: int) -> bool:
    return x >= y


@int_relation
def lt(x: int, y: int) -> bool:
    return x < y


@int_relation
def lte(x: int, y: int) -> bool:
    return x <= y


@int_relation
def multiple_of(x: int, y: int) -> bool:
    return x % y == 0


# ---------------------------------------------------------------------------
# Relations
# ---------------------------------------------------------------------------


@relation
def equal_to(x: Any, y: Any) -> bool:
    return x == y


@relation
def greater_than(x: Any, y: Any) -> bool:
    return x > y


@relation
def less_than(x: Any, y: Any) -> bool:
    return x < y


@relation
def at_least(x: Any, y: Any) -> bool:
    return x >= y


@relation
def at_most(x: Any, y: Any) -> bool:
    return x <= y


@relation
def same_as(x: Any, y: Any) -> bool:
    return x is y


@relation
def none_or(x: Any, y: Any) -> bool:
    """The argument is None or equals the object."""
    return x is None or x == y


@relation
def instance_of(x: Any, y: type) -> bool:
    return isinstance(x, y)


@relation
def subtype_of(x: type, y: type) -> bool:
    return issubclass(x, y)


@relation
def supertype_of(x: type, y: type) -> bool:
    return issubclass(y, x)


@relation
def contains(x: Any, y: Any) -> bool:
    return y in x


@relation
def contains_key(x: Any, y: Any) -> bool:
    return y in x.keys()


@relation
def contains_value(x: Any, y: Any) -> bool:
    return y in x.values()


@relation
def in_(x: Any, y: Any) -> bool:
    return x in y


@relation
def key_in(x: Any, y: Any) -> bool:
    return x in y.keys()


@relation
def value_in(x: Any, y: Any) -> bool:
    return x in y.values()


@relation
def contains_all(x: Any, y: Any) -> bool:
    return all(e in x for e in y)


@relation
def contained_in(x: Any, y: Any) -> bool:
    return all(e in y for e in x)


@relation
def has_substring(x: str, y: str) -> bool:
    return y in x


@relation
def substring_of(x: str, y: str) -> bool:
    return x in y


@relation
def starts_with(x: str, y: str) -> bool:
    return x.startswith(y)


@relation
def ends_with(x: str, y: str) -> bool:
    return x.endswith(y)


@relation
def has_pattern(x: str, y: re.Pattern[str]) -> bool:
    """The whole argument matches the compiled pattern."""
    return y.fullmatch(x) is not None


@relation
def contains_pattern(x: str, y: re.Pattern[str]) -> bool:
    return y.search(x) is not None


@relation
def matches(x: str, y: str) -> bool:
    """Like :data:`has_pattern`, with the pattern given as a string."""
    return re.fullmatch(y, x) is not None


@relation
def contains_match(x: str, y: str) -> bool:
    return re.search(y, x) is not None


parsable_as = relation(impls.is_parsable_as)


@relation
def equals_ic(x: str, y: str) -> bool:
    return x.casefold() == y.casefold()


@relation
def starts_with_ic(x: str, y: str) -> bool:
    return x.casefold().startswith(y.casefold())


@relation
def ends_with_ic(x: str, y: str) -> bool:
    return x.casefold().endswith(y.casefold())


@relation
def has_substring_ic(x: str, y: str) -> bool:
    return y.casefold() in x.casefold()


# ---------------------------------------------------------------------------
# Int-object relations
# ---------------------------------------------------------------------------

index_of = int_obj_relation(impls.is_index_of)
index_inclusive_of = int_obj_relation(impls.is_index_inclusive_of)
in_range = int_obj_relation(impls.in_range)
between = int_obj_relation(impls.between)


@int_obj_relation
def in_ints(x: int, y: Any) -> bool:
    return any(x == i for i in y)


# ---------------------------------------------------------------------------
# Object-int relations
# ---------------------------------------------------------------------------


@obj_int_relation
def eq_int(x: Any, y: int) -> bool:
    return x == y


@obj_int_relation
def gt_int(x: Any, y: int) -> bool:
    return x > y


@obj_int_relation
def gte_int(x: Any, y: int) -> bool:
    return x >= y


@obj_int_relation
def lt_int(x: Any, y: int) -> bool:
    return x < y


@obj_int_relation
def lte_int(x: Any, y: int) -> bool:
    return x <= y
