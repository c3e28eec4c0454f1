"""Shared pytest fixtures and test helpers for argcheck tests."""

from __future__ import annotations

import sys
from collections.abc import Callable, Generator
from typing import Any

import pytest

from argcheck.config.settings import get_settings
from argcheck.msg.registry import CHECK_REGISTRY


@pytest.fixture(autouse=True)
def _fresh_settings() -> Generator[None]:
    """Drop cached settings so env-var changes made by a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def registry_snapshot() -> Generator[None]:
    """Undo any check registrations made during the test."""
    saved = dict(CHECK_REGISTRY)
    yield
    CHECK_REGISTRY.clear()
    CHECK_REGISTRY.update(saved)


@pytest.fixture
def int_digit_limit() -> Generator[int]:
    """Pin the interpreter's int-to-str digit limit to its default of 4300."""
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    yield 4300
    sys.set_int_max_str_digits(previous)


# ---------------------------------------------------------------------------
# Shared test helpers
# ---------------------------------------------------------------------------


class CallCounter:
    """A test that records how often it was evaluated."""

    def __init__(self, outcome: bool) -> None:
        self.outcome = outcome
        self.calls = 0

    def __call__(self, *args: Any) -> bool:
        self.calls += 1
        return self.outcome


@pytest.fixture
def counter() -> Callable[[bool], CallCounter]:
    return CallCounter
