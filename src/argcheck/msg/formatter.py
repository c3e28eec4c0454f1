"""Custom message templates.

A template may contain ``${...}`` placeholders. Reserved names resolve from
the failed check's :class:`~argcheck.msg.args.MsgArgs`:

==========  ==========================================================
``test``    registered name of the check (else its ``__name__``)
``arg``     short string of the validated value
``type``    simple name of the declared type (else described from the value)
``tag``     parameter name, ``"argument"`` if none was given
``obj``     short string of the relation's object
==========  ==========================================================

A non-negative integer ``N`` resolves to the N-th positional message argument.

INVARIANT: Formatting never raises. Unknown tokens, out-of-range indices and
an unterminated ``${`` are copied to the output verbatim.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any

from argcheck.msg.args import MsgArgs
from argcheck.msg.registry import name_of
from argcheck.msg.summarize import (
    describe,
    max_string_width,
    safe_str,
    simple_class_name,
    to_short_string,
)

logger = logging.getLogger(__name__)

ARG_START = "${"
ARG_END = "}"

Resolver = Callable[[str], str | None]


def check_name(test: Any) -> str:
    """Registered name of *test*, else its ``__name__``, else its type name."""
    name = name_of(test)
    if name is not None:
        return name
    return getattr(test, "__name__", None) or type(test).__name__


def _type_name(x: MsgArgs) -> str:
    if x.arg_type is not None:
        return simple_class_name(x.arg_type)
    return describe(x.arg)


PREFAB_LOOKUPS: dict[str, Callable[[MsgArgs], str]] = {
    "test": lambda x: check_name(x.test),
    "arg": lambda x: to_short_string(x.arg, max_string_width()),
    "type": _type_name,
    "tag": lambda x: x.name,
    "obj": lambda x: to_short_string(x.obj, max_string_width()),
}


def format_message(msg: str, args: MsgArgs, msg_args: Sequence[Any]) -> str:
    """Resolve reserved names and positional placeholders."""
    prefab = _prefab_resolver(args)
    user = _user_resolver(msg_args)

    def resolve(token: str) -> str | None:
        value = prefab(token)
        return value if value is not None else user(token)

    return _scan(msg, resolve)


def format_with_prefab_args(msg: str, args: MsgArgs) -> str:
    """Resolve reserved names only (``${test}``, ``${arg}``, ...)."""
    return _scan(msg, _prefab_resolver(args))


def format_with_user_args(msg: str, msg_args: Sequence[Any]) -> str:
    """Resolve positional placeholders only (``${0}``, ``${1}``, ...)."""
    return _scan(msg, _user_resolver(msg_args))


def _prefab_resolver(args: MsgArgs) -> Resolver:
    def resolve(token: str) -> str | None:
        fn = PREFAB_LOOKUPS.get(token)
        return None if fn is None else fn(args)

    return resolve


def _user_resolver(msg_args: Sequence[Any]) -> Resolver:
    def resolve(token: str) -> str | None:
        if not (token.isascii() and token.isdigit()):
            return None
        idx = int(token)
        if idx < len(msg_args):
            return safe_str(msg_args[idx])
        return None

    return resolve


def _scan(msg: str, resolve: Resolver) -> str:
    x = msg.find(ARG_START)
    if x == -1:
        return msg
    out: list[str] = []
    y = 0
    while True:
        out.append(msg[y:x])
        x += len(ARG_START)
        y = msg.find(ARG_END, x)
        if y == -1:
            out.append(ARG_START)
            out.append(msg[x:])
            return "".join(out)
        token = msg[x:y]
        value = resolve(token)
        if value is None:
            logger.debug("Unresolved message placeholder: %s", token)
            value = ARG_START + token + ARG_END
        out.append(value)
        y += len(ARG_END)
        x = msg.find(ARG_START, y)
        if x == -1:
            out.append(msg[y:])
            return "".join(out)
