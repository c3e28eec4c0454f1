"""MsgArgs: everything known about one failed check.

INVARIANT: Built once per failure, never mutated. Both the template formatter
and the prefab message catalog read from it.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from argcheck.config.settings import get_settings


class MsgArgs(BaseModel):
    """Message context of a failed check.

    Attributes:
        test: The predicate or relation that failed.
        negated: Whether the check was applied through ``is_not``.
        tag: Name of the validated parameter, if the caller gave one.
        arg: The validated value.
        arg_type: Declared type of the validated value, if known.
        obj: The relation's object; ``None`` for predicates.
    """

    model_config = {"frozen": True, "arbitrary_types_allowed": True}

    test: Any
    negated: bool = False
    tag: str | None = None
    arg: Any = None
    arg_type: Any = None
    obj: Any = None

    @property
    def name(self) -> str:
        """The tag, or the configured default (``"argument"``)."""
        return self.tag if self.tag is not None else get_settings().message.default_tag

    @property
    def effective_type(self) -> type | None:
        """Declared type, falling back to the runtime type of the argument."""
        if self.arg_type is not None:
            return self.arg_type
        if self.arg is not None:
            return type(self.arg)
        return None
