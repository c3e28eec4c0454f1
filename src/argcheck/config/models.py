"""Pydantic configuration models with code-baked defaults.

Only environment variables override these (see :mod:`argcheck.config.settings`).
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class MessageConfig(BaseModel):
    """Message rendering limits."""

    model_config = {"frozen": True}

    max_string_width: int = Field(default=65, ge=4)
    default_tag: str = "argument"
