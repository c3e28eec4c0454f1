"""Message layer: failure context, templates, prefab messages and value summaries."""

from argcheck.msg.args import MsgArgs
from argcheck.msg.formatter import format_message, format_with_prefab_args, format_with_user_args
from argcheck.msg.registry import get_formatter, name_of, register_check
from argcheck.msg.summarize import describe, to_short_string, to_str

__all__ = [
    "MsgArgs",
    "describe",
    "format_message",
    "format_with_prefab_args",
    "format_with_user_args",
    "get_formatter",
    "name_of",
    "register_check",
    "to_short_string",
    "to_str",
]
