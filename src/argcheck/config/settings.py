"""Unified settings: env vars and code defaults in one object.

Priority chain (highest to lowest):
  1. Init kwargs: explicit overrides (tests, embedding applications)
  2. Env vars: ``ARGCHECK_*`` prefix, ``__`` for nested sections
  3. Code defaults: baked into the section models
"""

from __future__ import annotations

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings

from argcheck.config.models import MessageConfig


class ArgcheckSettings(BaseSettings):
    """Frozen process-wide settings.

    Attributes:
        verbose: Enable DEBUG-level output for the ``argcheck`` logger.
        log_json: Render log lines as JSON instead of console output.
        message: Limits applied when rendering failure messages.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ARGCHECK_",
        "env_nested_delimiter": "__",
    }

    verbose: bool = False
    log_json: bool = False
    message: MessageConfig = Field(default_factory=MessageConfig)


@lru_cache(maxsize=1)
def get_settings() -> ArgcheckSettings:
    """Return the cached settings; call ``get_settings.cache_clear()`` to reload."""
    return ArgcheckSettings()
