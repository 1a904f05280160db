"""Adapter Registry — Ordered, overridable mapping from detection condition to adapter.

Registrations are grouped into integer priority buckets. Buckets are evaluated
from the highest priority down; within a bucket, insertion order is kept.
The first registration whose condition accepts a model class wins, and the
registry falls back to its default adapter when none does.

When the same adapter is registered in several buckets, the entry from the
higher-priority bucket decides both its position and its condition in the
effective ordering.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

import structlog

from searchmodel.adapters.base.adapter import ResolvedAdapter, describe, validate_adapter

if TYPE_CHECKING:
    from searchmodel.config.settings import RegistrySettings
    from searchmodel.models.registration import Registration

logger = logging.getLogger(__name__)

Condition = Callable[[type], Any]

DEFAULT_PRIORITY = 0
PUSH_PRIORITY = 9999


class AdapterRegistry:
    """Registry selecting a model adapter for a model class.

    Example:
        >>> registry = AdapterRegistry()
        >>> registry.register(PeeweeAdapter, lambda klass: issubclass(klass, peewee.Model))
        >>> registry.from_class(Article).adapter
        <class 'PeeweeAdapter'>

    Args:
        default: Adapter returned when no condition matches.
            Defaults to ``DefaultAdapter``.
        settings: Registry settings (push priority, contract validation).
    """

    def __init__(self, default: Any = None, settings: RegistrySettings | None = None) -> None:
        if default is None:
            from searchmodel.adapters.default.adapter import DefaultAdapter

            default = DefaultAdapter
        self._default = default
        self._default_priority = settings.default_priority if settings else DEFAULT_PRIORITY
        self._push_priority = settings.push_priority if settings else PUSH_PRIORITY
        self._validate = settings.validate_on_register if settings else True
        self._buckets: dict[int, dict[Any, Condition]] = {}
        self._lock = threading.RLock()

    @property
    def default(self) -> Any:
        """The fallback adapter."""
        return self._default

    @property
    def push_priority(self) -> int:
        return self._push_priority

    def register(self, name: Any, condition: Condition, priority: int | None = None) -> None:
        """Register an adapter for a condition.

        Registering the same adapter again in the same bucket replaces its
        condition and keeps its position in that bucket.

        Args:
            name: The adapter handle (usually a ``ModelAdapter`` subclass).
            condition: Callable receiving the model class; a truthy result
                selects this adapter.
            priority: Priority bucket, higher buckets are evaluated first.

        Raises:
            ConfigurationError: If contract validation is enabled and the
                adapter lacks ``Records``, ``Callbacks`` or ``Importing``.
        """
        if priority is None:
            priority = self._default_priority
        if self._validate:
            validate_adapter(name)

        with self._lock:
            bucket = self._buckets.setdefault(priority, {})
            if name in bucket:
                logger.warning("Overwriting adapter registration: %s (priority %d)", describe(name), priority)
            bucket[name] = condition
        logger.info("Registered adapter: %s (priority %d)", describe(name), priority)

    def push_registration(self, name: Any, condition: Condition) -> None:
        """Register an adapter on top of every default-priority registration."""
        self.register(name, condition, priority=self._push_priority)

    def effective_registrations(self) -> dict[Any, Condition]:
        """Return the registrations in evaluation order.

        Returns:
            Ordered mapping of adapter handle to condition.
        """
        return {name: condition for name, condition, _ in self._ordered()}

    def adapters(self) -> dict[Any, Condition]:
        """Alias of ``effective_registrations`` used for introspection."""
        return self.effective_registrations()

    def registrations(self) -> list[Registration]:
        """Return the effective registrations as models, in evaluation order."""
        from searchmodel.models.registration import Registration

        return [
            Registration(name=name, condition=condition, priority=priority)
            for name, condition, priority in self._ordered()
        ]

    @property
    def priorities(self) -> list[int]:
        """Registered priority buckets, highest first."""
        with self._lock:
            return sorted(self._buckets, reverse=True)

    def resolve(self, klass: type) -> Any:
        """Return the first adapter whose condition matches ``klass``.

        A condition that raises is treated as not matching. Falls back to
        the default adapter. ``model`` is bound in the structlog context
        while conditions run.
        """
        with structlog.contextvars.bound_contextvars(model=describe(klass)):
            for name, condition, _ in self._ordered():
                try:
                    matched = condition(klass)
                except Exception:
                    logger.warning("Adapter condition for %s failed", describe(name), exc_info=True)
                    continue
                if matched:
                    logger.debug("Resolved adapter %s", describe(name))
                    return name

            logger.debug("No adapter matched, using default %s", describe(self._default))
            return self._default

    def from_class(self, klass: type) -> ResolvedAdapter:
        """Return the (lazily resolved) adapter for a model class."""
        return ResolvedAdapter(klass, self)

    def _ordered(self) -> list[tuple[Any, Condition, int]]:
        # Snapshot under the lock; conditions run outside of it.
        with self._lock:
            seen: set[Any] = set()
            ordered: list[tuple[Any, Condition, int]] = []
            for priority in sorted(self._buckets, reverse=True):
                for name, condition in self._buckets[priority].items():
                    if name in seen:
                        continue
                    seen.add(name)
                    ordered.append((name, condition, priority))
            return ordered

    def __contains__(self, name: Any) -> bool:
        with self._lock:
            return any(name in bucket for bucket in self._buckets.values())

    def __len__(self) -> int:
        return len(self._ordered())

    def __repr__(self) -> str:
        return f"AdapterRegistry(adapters={len(self)}, default={describe(self._default)})"
