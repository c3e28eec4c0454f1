"""Tests for the ``${...}`` template formatter."""

from __future__ import annotations

import pytest

from argcheck.checks.common import even, has_substring
from argcheck.msg.args import MsgArgs
from argcheck.msg.formatter import (
    check_name,
    format_message,
    format_with_prefab_args,
    format_with_user_args,
)
from argcheck.relation import valid


def _args(**kwargs: object) -> MsgArgs:
    base: dict[str, object] = {"test": even, "tag": "count", "arg": 7}
    base.update(kwargs)
    return MsgArgs(**base)


class TestFormatWithUserArgs:
    def test_positional(self) -> None:
        assert format_with_user_args("${0} and ${1}", ["a", 2]) == "a and 2"

    def test_repeated_and_reordered(self) -> None:
        assert format_with_user_args("${1}${0}${1}", ["x", "y"]) == "yxy"

    def test_out_of_range_left_verbatim(self) -> None:
        assert format_with_user_args("value ${5}", ["a"]) == "value ${5}"

    def test_reserved_names_not_resolved(self) -> None:
        assert format_with_user_args("${tag} ${0}", ["a"]) == "${tag} a"

    def test_negative_index_left_verbatim(self) -> None:
        assert format_with_user_args("${-1}", ["a"]) == "${-1}"

    def test_none_argument(self) -> None:
        assert format_with_user_args("got ${0}", [None]) == "got None"


class TestFormatWithPrefabArgs:
    def test_all_reserved_names(self) -> None:
        msg = "${test} ${tag} ${arg} ${type} ${obj}"
        assert format_with_prefab_args(msg, _args()) == "even count 7 int None"

    def test_default_tag(self) -> None:
        assert format_with_prefab_args("${tag}!", _args(tag=None)) == "argument!"

    def test_declared_type_wins(self) -> None:
        assert format_with_prefab_args("${type}", _args(arg_type=bool)) == "bool"

    def test_type_of_none_argument(self) -> None:
        assert format_with_prefab_args("${type}", _args(arg=None)) == "None"

    def test_obj_of_relation(self) -> None:
        args = _args(test=has_substring, arg="abc", obj=["x", "y"])
        assert format_with_prefab_args("${test}: ${obj}", args) == "has_substring: [x, y]"

    def test_positional_not_resolved(self) -> None:
        assert format_with_prefab_args("${0}", _args()) == "${0}"

    def test_long_argument_bounded(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("ARGCHECK_MESSAGE__MAX_STRING_WIDTH", "8")
        assert format_with_prefab_args("${arg}", _args(arg="abcdefghij")) == "abcde..."

    def test_self_referencing_argument(self) -> None:
        items: list[object] = [1]
        items.append(items)
        assert format_with_prefab_args("${arg}", _args(arg=items)) == "[1, [...]]"

    def test_huge_int_positional_argument(self, int_digit_limit: int) -> None:
        huge = 10**5000
        text = format_with_user_args("got ${0}", [huge])
        assert text == f"got <int with {huge.bit_length()} bits>"


class TestFormatMessage:
    def test_mixed(self) -> None:
        msg = "${tag} must be ${0}, got ${arg}"
        assert format_message(msg, _args(), ["even"]) == "count must be even, got 7"

    def test_reserved_name_takes_precedence(self) -> None:
        assert format_message("${tag}", _args(), ["ignored"]) == "count"


class TestScanner:
    @pytest.mark.parametrize(
        "template",
        ["", "no placeholders here", "dollar $ and brace }", "{0} without dollar"],
    )
    def test_plain_text_round_trips(self, template: str) -> None:
        assert format_message(template, _args(), ["a"]) == template

    def test_unknown_token_left_verbatim(self) -> None:
        assert format_with_prefab_args("x ${foo} y", _args()) == "x ${foo} y"

    def test_empty_token(self) -> None:
        assert format_with_user_args("${}", ["a"]) == "${}"

    def test_unterminated_placeholder(self) -> None:
        assert format_with_user_args("abc ${0", ["a"]) == "abc ${0"

    def test_unterminated_after_resolved(self) -> None:
        assert format_with_user_args("${0} ${1", ["a", "b"]) == "a ${1"

    def test_adjacent_placeholders(self) -> None:
        assert format_with_user_args("${0}${1}", ["a", "b"]) == "ab"

    def test_text_around_placeholders(self) -> None:
        assert format_with_user_args("<${0}>", ["a"]) == "<a>"

    def test_nested_start_taken_literally(self) -> None:
        """The token runs to the first closing brace."""
        assert format_with_user_args("${${0}}", ["a"]) == "${${0}}"


class TestCheckName:
    def test_registered_name(self) -> None:
        assert check_name(even) == "even"

    def test_function_name(self) -> None:
        def positive_odd(x: int) -> bool:
            return x > 0 and x % 2 == 1

        assert check_name(positive_odd) == "positive_odd"

    def test_composed(self) -> None:
        assert check_name(valid().or_(even)) == "<composed>"

    def test_callable_instance(self) -> None:
        class Probe:
            def __call__(self, x: object) -> bool:
                return True

        assert check_name(Probe()) == "Probe"
