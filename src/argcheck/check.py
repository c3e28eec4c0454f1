"""Check builder: apply tests to a value and raise with a readable message.

Usage::

    from argcheck import Check
    from argcheck.checks.common import even, greater_than, not_none

    Check.that(count, "count").is_(not_none).is_(even.or_(greater_than, 100))

Message selection on failure, first match wins:

1. a custom ``message`` template; reserved names (``${tag}``, ``${arg}``, ...)
   are always resolved, positional ``${0}``... only if ``msg_args`` is given;
2. the prefab message of a registered check;
3. the generic default (``invalid value for count: 7``).
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Generic, NoReturn, Self, TypeVar

from pydantic import BaseModel

# Importing the package registers the built-in checks.
import argcheck.checks  # noqa: F401
from argcheck.msg.args import MsgArgs
from argcheck.msg.formatter import (
    check_name,
    format_message,
    format_with_prefab_args,
    format_with_user_args,
)
from argcheck.msg.prefab import default_predicate_message, default_relation_message
from argcheck.msg.registry import get_formatter
from argcheck.relation.composable import _UNSET

logger = logging.getLogger(__name__)

T = TypeVar("T")

ExceptionFactory = Callable[[str], BaseException]


class CheckResult(BaseModel):
    """Outcome of a non-raising check.

    Attributes:
        ok: Whether the value passed.
        check: Name of the applied test.
        message: The failure message; ``None`` when ``ok`` is True.
    """

    model_config = {"frozen": True}

    ok: bool
    check: str
    message: str | None = None


class ObjectCheck(Generic[T]):
    """Checks applied to one value. Obtain through :class:`Check`."""

    def __init__(self, value: T, tag: str | None, exc_factory: ExceptionFactory) -> None:
        self._value = value
        self._tag = tag
        self._exc_factory = exc_factory

    @property
    def value(self) -> T:
        return self._value

    def ok(self) -> T:
        """Return the validated value, typically at the end of a chain."""
        return self._value

    def is_(
        self,
        test: Callable[..., bool],
        obj: Any = _UNSET,
        *,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Self:
        """Raise if the value does not pass *test* (or *test* against *obj*).

        Returns:
            This instance, for chaining.
        """
        return self._enforce(test, obj, negated=False, message=message, msg_args=msg_args)

    def is_not(
        self,
        test: Callable[..., bool],
        obj: Any = _UNSET,
        *,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> Self:
        """Raise if the value passes *test*."""
        return self._enforce(test, obj, negated=True, message=message, msg_args=msg_args)

    def result(
        self,
        test: Callable[..., bool],
        obj: Any = _UNSET,
        *,
        negated: bool = False,
        message: str | None = None,
        msg_args: Sequence[Any] = (),
    ) -> CheckResult:
        """Evaluate *test* without raising."""
        name = check_name(test)
        if self._passes(test, obj, negated):
            return CheckResult(ok=True, check=name)
        text = self._message(test, obj, negated, message, msg_args)
        return CheckResult(ok=False, check=name, message=text)

    def _enforce(
        self,
        test: Callable[..., bool],
        obj: Any,
        *,
        negated: bool,
        message: str | None,
        msg_args: Sequence[Any],
    ) -> Self:
        if self._passes(test, obj, negated):
            return self
        text = self._message(test, obj, negated, message, msg_args)
        raise self._exc_factory(text)

    def _passes(self, test: Callable[..., bool], obj: Any, negated: bool) -> bool:
        if test is None:
            msg = "test must not be None"
            raise ValueError(msg)
        outcome = test(self._value) if obj is _UNSET else test(self._value, obj)
        return not outcome if negated else bool(outcome)

    def _message(
        self,
        test: Callable[..., bool],
        obj: Any,
        negated: bool,
        message: str | None,
        msg_args: Sequence[Any],
    ) -> str:
        args = MsgArgs(
            test=test,
            negated=negated,
            tag=self._tag,
            arg=self._value,
            obj=None if obj is _UNSET else obj,
        )
        if message is not None:
            if msg_args:
                text = format_message(message, args, msg_args)
            else:
                text = format_with_prefab_args(message, args)
        elif (formatter := get_formatter(test)) is not None:
            text = formatter(args)
        elif obj is _UNSET:
            text = default_predicate_message(self._tag, self._value)
        else:
            text = default_relation_message(self._tag, self._value, obj)
        logger.debug("Check failed: %s: %s", check_name(test), text)
        return text


class Check:
    """Entry points for building checks."""

    @staticmethod
    def that(value: T, tag: str | None = None) -> ObjectCheck[T]:
        """Check *value*, raising ``ValueError`` on failure."""
        return ObjectCheck(value, tag, ValueError)

    @staticmethod
    def on(exc_factory: ExceptionFactory, value: T, tag: str | None = None) -> ObjectCheck[T]:
        """Check *value*, raising ``exc_factory(message)`` on failure."""
        if not callable(exc_factory):
            msg = "exception factory must be callable"
            raise TypeError(msg)
        return ObjectCheck(value, tag, exc_factory)

    @staticmethod
    def fail(message: str, *msg_args: Any) -> NoReturn:
        """Raise ``ValueError`` with *message*, resolving ``${0}``, ``${1}``, ..."""
        raise ValueError(format_with_user_args(message, msg_args))
