"""Tests for quantified relation evaluation."""

from __future__ import annotations

import pytest

from argcheck.relation import Quantifier, quantify


def _has_substring(x: str, y: str) -> bool:
    return y in x


class TestQuantifier:
    def test_aliases(self) -> None:
        assert Quantifier.all_of() is Quantifier.ALL
        assert Quantifier.any_of() is Quantifier.ANY
        assert Quantifier.none_of() is Quantifier.NONE

    def test_str_values(self) -> None:
        assert Quantifier("any") is Quantifier.ANY


class TestQuantify:
    @pytest.mark.parametrize(
        ("quantifier", "objects", "expected"),
        [
            (Quantifier.ALL, ("a", "b"), True),
            (Quantifier.ALL, ("a", "x"), False),
            (Quantifier.ANY, ("x", "c"), True),
            (Quantifier.ANY, ("x", "y"), False),
            (Quantifier.NONE, ("x", "y"), True),
            (Quantifier.NONE, ("x", "a"), False),
        ],
    )
    def test_modes(self, quantifier: Quantifier, objects: tuple[str, ...], expected: bool) -> None:
        assert quantify("abc", _has_substring, quantifier, objects) is expected

    def test_string_quantifier_coerced(self) -> None:
        assert quantify("abc", _has_substring, "none", ["z"]) is True

    @pytest.mark.parametrize("quantifier", list(Quantifier))
    def test_empty_objects_rejected(self, quantifier: Quantifier) -> None:
        """No vacuous truth: an empty candidate list is an error for every mode."""
        with pytest.raises(ValueError, match="at least one object required"):
            quantify("abc", _has_substring, quantifier, [])

    def test_unknown_quantifier(self) -> None:
        with pytest.raises(ValueError):
            quantify("abc", _has_substring, "most", ["a"])

    def test_accepts_generator(self) -> None:
        assert quantify("abc", _has_substring, Quantifier.ALL, (c for c in "ab"))

    def test_any_short_circuits(self) -> None:
        seen: list[str] = []

        def rel(x: str, y: str) -> bool:
            seen.append(y)
            return y in x

        assert quantify("abc", rel, Quantifier.ANY, ["a", "b", "c"])
        assert seen == ["a"]
