"""Registration of the built-in checks with their names and prefab messages.

Runs once, when :mod:`argcheck.checks` is first imported.
"""

from __future__ import annotations

from argcheck.checks import common as c
from argcheck.msg import prefab as m
from argcheck.msg.registry import PrefabFormatter, register_check

BUILTIN_CHECKS: tuple[tuple[object, PrefabFormatter, str], ...] = (
    # predicates
    (c.none, m.msg_none, "none"),
    (c.not_none, m.msg_not_none, "not_none"),
    (c.yes, m.msg_yes, "yes"),
    (c.no, m.msg_no, "no"),
    (c.empty, m.msg_empty, "empty"),
    (c.not_empty, m.msg_not_empty, "not_empty"),
    (c.deep_not_none, m.msg_deep_not_none, "deep_not_none"),
    (c.deep_not_empty, m.msg_deep_not_empty, "deep_not_empty"),
    (c.blank, m.msg_blank, "blank"),
    (c.plain_int, m.msg_plain_int, "plain_int"),
    (c.plain_short, m.msg_plain_short, "plain_short"),
    (c.array, m.msg_array, "array"),
    # integer predicates
    (c.even, m.msg_even, "even"),
    (c.odd, m.msg_odd, "odd"),
    (c.positive, m.msg_positive, "positive"),
    (c.negative, m.msg_negative, "negative"),
    (c.zero, m.msg_zero, "zero"),
    # integer relations
    (c.eq, m.msg_eq, "eq"),
    (c.ne, m.msg_ne, "ne"),
    (c.gt, m.msg_gt, "gt"),
    (c.gte, m.msg_gte, "gte"),
    (c.lt, m.msg_lt, "lt"),
    (c.lte, m.msg_lte, "lte"),
    (c.multiple_of, m.msg_multiple_of, "multiple_of"),
    # relations
    (c.equal_to, m.msg_equal_to, "equal_to"),
    (c.greater_than, m.msg_greater_than, "greater_than"),
    (c.less_than, m.msg_less_than, "less_than"),
    (c.at_least, m.msg_at_least, "at_least"),
    (c.at_most, m.msg_at_most, "at_most"),
    (c.same_as, m.msg_same_as, "same_as"),
    (c.none_or, m.msg_none_or, "none_or"),
    (c.instance_of, m.msg_instance_of, "instance_of"),
    (c.subtype_of, m.msg_subtype_of, "subtype_of"),
    (c.supertype_of, m.msg_supertype_of, "supertype_of"),
    (c.contains, m.msg_contains, "contains"),
    (c.contains_key, m.msg_contains_key, "contains_key"),
    (c.contains_value, m.msg_contains_value, "contains_value"),
    (c.in_, m.msg_in, "in_"),
    (c.key_in, m.msg_key_in, "key_in"),
    (c.value_in, m.msg_value_in, "value_in"),
    (c.contains_all, m.msg_contains_all, "contains_all"),
    (c.contained_in, m.msg_contained_in, "contained_in"),
    (c.has_substring, m.msg_has_substring, "has_substring"),
    (c.substring_of, m.msg_substring_of, "substring_of"),
    (c.starts_with, m.msg_starts_with, "starts_with"),
    (c.ends_with, m.msg_ends_with, "ends_with"),
    (c.has_pattern, m.msg_has_pattern, "has_pattern"),
    (c.contains_pattern, m.msg_contains_pattern, "contains_pattern"),
    (c.matches, m.msg_matches, "matches"),
    (c.contains_match, m.msg_contains_match, "contains_match"),
    (c.parsable_as, m.msg_parsable_as, "parsable_as"),
    (c.equals_ic, m.msg_equals_ic, "equals_ic"),
    (c.starts_with_ic, m.msg_starts_with_ic, "starts_with_ic"),
    (c.ends_with_ic, m.msg_ends_with_ic, "ends_with_ic"),
    (c.has_substring_ic, m.msg_has_substring_ic, "has_substring_ic"),
    # int-object relations
    (c.index_of, m.msg_index_of, "index_of"),
    (c.index_inclusive_of, m.msg_index_inclusive_of, "index_inclusive_of"),
    (c.in_range, m.msg_in_range, "in_range"),
    (c.between, m.msg_between, "between"),
    (c.in_ints, m.msg_in, "in_ints"),
    # object-int relations
    (c.eq_int, m.msg_eq_int, "eq_int"),
    (c.gt_int, m.msg_gt_int, "gt_int"),
    (c.gte_int, m.msg_gte_int, "gte_int"),
    (c.lt_int, m.msg_lt_int, "lt_int"),
    (c.lte_int, m.msg_lte_int, "lte_int"),
)


def register_builtins() -> None:
    """Register every built-in check. A second call raises ValueError."""
    for check, formatter, name in BUILTIN_CHECKS:
        register_check(check, formatter, name, builtin=True)
