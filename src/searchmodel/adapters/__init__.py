"""Model adapter layer — Pluggable integrations with object mapping libraries.

An adapter supplies OxM-specific implementations of:
  - Records: fetching records from the database
  - Callbacks: model callbacks for automatic index updates
  - Importing: efficient bulk loading from the database

The functions below operate on a process-wide ``AdapterRegistry`` created on
first use. Hosts that prefer explicit wiring construct their own registry, or
install one with ``set_registry``.

Example:
    >>> from searchmodel import adapters
    >>> adapters.register(PeeweeAdapter, lambda klass: issubclass(klass, peewee.Model))
    >>> adapters.from_class(Article).adapter
    <class 'PeeweeAdapter'>
"""

from __future__ import annotations

import threading
from typing import Any

from searchmodel.adapters.base.adapter import ModelAdapter, ResolvedAdapter
from searchmodel.adapters.base.registry import AdapterRegistry, Condition
from searchmodel.config.settings import Settings
from searchmodel.observability.logging import setup_logging

_registry: AdapterRegistry | None = None
_registry_lock = threading.Lock()


def get_registry() -> AdapterRegistry:
    """Return the process-wide registry, creating it on first use.

    The registry is configured from ``Settings`` (SEARCHMODEL_REGISTRY__* env vars).
    Structured logging is set up as well when
    ``SEARCHMODEL_OBSERVABILITY__CONFIGURE_LOGGING`` is enabled.
    """
    global _registry
    if _registry is None:
        with _registry_lock:
            if _registry is None:
                settings = Settings()
                if settings.observability.configure_logging:
                    setup_logging(settings.observability)
                _registry = AdapterRegistry(settings=settings.registry)
    return _registry


def set_registry(registry: AdapterRegistry | None) -> None:
    """Install the process-wide registry (``None`` recreates it lazily)."""
    global _registry
    with _registry_lock:
        _registry = registry


def from_class(klass: type) -> ResolvedAdapter:
    """Return the adapter for a model class."""
    return get_registry().from_class(klass)


def adapters() -> dict[Any, Condition]:
    """Return the registered adapters in evaluation order."""
    return get_registry().adapters()


def register(name: Any, condition: Condition, priority: int | None = None) -> None:
    """Register an adapter for a condition."""
    get_registry().register(name, condition, priority)


def push_registration(name: Any, condition: Condition) -> None:
    """Register an adapter ahead of all default-priority registrations."""
    get_registry().push_registration(name, condition)


__all__ = [
    "AdapterRegistry",
    "ModelAdapter",
    "ResolvedAdapter",
    "adapters",
    "from_class",
    "get_registry",
    "push_registration",
    "register",
    "set_registry",
]
