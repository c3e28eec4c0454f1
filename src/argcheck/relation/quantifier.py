"""Quantifiers for testing one subject against several candidate objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from enum import StrEnum
from typing import Any

ERR_NO_OBJECT = "at least one object required"


class Quantifier(StrEnum):
    """Evaluation mode of a relation across a non-empty collection of objects."""

    ALL = "all"
    ANY = "any"
    NONE = "none"

    @staticmethod
    def all_of() -> Quantifier:
        return Quantifier.ALL

    @staticmethod
    def any_of() -> Quantifier:
        return Quantifier.ANY

    @staticmethod
    def none_of() -> Quantifier:
        return Quantifier.NONE


def quantify(
    subject: Any,
    relation: Callable[[Any, Any], bool],
    quantifier: Quantifier | str,
    objects: Iterable[Any],
) -> bool:
    """Evaluate ``relation(subject, o)`` for the objects under *quantifier*.

    Raises:
        ValueError: If *objects* is empty (vacuous truth is never assumed) or
            *quantifier* is not a known quantifier.
    """
    mode = Quantifier(quantifier)
    candidates = tuple(objects)
    if not candidates:
        raise ValueError(ERR_NO_OBJECT)
    if mode is Quantifier.ALL:
        return all(relation(subject, o) for o in candidates)
    if mode is Quantifier.ANY:
        return any(relation(subject, o) for o in candidates)
    return not any(relation(subject, o) for o in candidates)
