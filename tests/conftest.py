"""Shared test fixtures for the scopekey test suite."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from scopekey.core.symbols import set_symbol_support
from tests.helpers import Child


@pytest.fixture(autouse=True)
def _reset_symbol_support(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Start every test with environment-driven symbol detection and no override."""
    monkeypatch.delenv("SCOPEKEY_SYMBOLS", raising=False)
    set_symbol_support(None)
    yield
    set_symbol_support(None)


@pytest.fixture
def no_symbols() -> None:
    """Disable symbol support for the duration of a test."""
    set_symbol_support(False)


@pytest.fixture
def child() -> Child:
    """Create an object with own, private and inherited properties."""
    return Child()
