"""Check registry: names and prefab message formatters keyed by check identity.

Built-in checks are registered by :mod:`argcheck.checks.defs` at import time.
Applications may register their own checks; built-in entries cannot be
replaced. Composed predicates are never registered, so they fall back to the
generic default messages.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, NamedTuple

from argcheck.msg.args import MsgArgs

logger = logging.getLogger(__name__)

PrefabFormatter = Callable[[MsgArgs], str]


class CheckDef(NamedTuple):
    name: str
    formatter: PrefabFormatter
    builtin: bool


# Keyed by id() so unhashable callables can be registered too; the check
# itself is kept in the value to pin its id for the life of the process.
CHECK_REGISTRY: dict[int, tuple[Any, CheckDef]] = {}


def register_check(
    check: Any,
    formatter: PrefabFormatter,
    name: str,
    *,
    builtin: bool = False,
) -> None:
    """Register *check* with a display *name* and a prefab message *formatter*.

    Raises:
        ValueError: If *name* is blank or *check* is already registered as a
            built-in check.
        TypeError: If *check* or *formatter* is not callable.
    """
    normalized = name.strip()
    if not normalized:
        msg = "Check name must not be empty"
        raise ValueError(msg)
    if not callable(check):
        msg = f"Check {normalized!r} must be callable"
        raise TypeError(msg)
    if not callable(formatter):
        msg = f"Message formatter for check {normalized!r} must be callable"
        raise TypeError(msg)

    existing = CHECK_REGISTRY.get(id(check))
    if existing is not None and existing[1].builtin:
        msg = f"Check {existing[1].name!r} is a built-in check and cannot be re-registered"
        raise ValueError(msg)

    CHECK_REGISTRY[id(check)] = (check, CheckDef(normalized, formatter, builtin))
    logger.debug("Registered check: %s", normalized)


def _lookup(check: Any) -> CheckDef | None:
    entry = CHECK_REGISTRY.get(id(check))
    if entry is None or entry[0] is not check:
        return None
    return entry[1]


def name_of(check: Any) -> str | None:
    """Registered name of *check*, or None for unregistered (e.g. composed) tests."""
    found = _lookup(check)
    return None if found is None else found.name


def get_formatter(check: Any) -> PrefabFormatter | None:
    """Prefab message formatter of *check*, or None if it has none."""
    found = _lookup(check)
    return None if found is None else found.formatter
