"""Shared fixtures for compactnum tests."""

from __future__ import annotations

import pytest

from compactnum import clear_symbol_cache, store


@pytest.fixture(autouse=True)
def reset_store():
    """Restore the global store to its seeded default around each test."""
    store.reset()
    clear_symbol_cache()
    yield
    store.reset()
    clear_symbol_cache()
