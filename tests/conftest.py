"""Shared test fixtures and configuration."""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from searchmodel import adapters as adapters_module
from searchmodel.adapters.base.registry import AdapterRegistry


@pytest.fixture
def registry() -> AdapterRegistry:
    """A fresh registry per test."""
    return AdapterRegistry()


@pytest.fixture(autouse=True)
def _reset_process_registry() -> Iterator[None]:
    adapters_module.set_registry(None)
    yield
    adapters_module.set_registry(None)
