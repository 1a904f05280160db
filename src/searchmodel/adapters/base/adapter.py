"""Base model adapter — Contract for OxM integrations and per-class resolution.

An adapter bundles three sub-capabilities for one object mapping library:
  1. ``Records``   — fetching records from the database by identifier
  2. ``Callbacks`` — lifecycle hooks for automatic index updates
  3. ``Importing`` — efficient bulk loading for reindexing

Adapters are usually classes deriving from ``ModelAdapter``, but any object
(a module, for example) exposing the three names satisfies the contract.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, ClassVar

from searchmodel.adapters.base.exceptions import ConfigurationError

if TYPE_CHECKING:
    from searchmodel.adapters.base.registry import AdapterRegistry

RECORDS = "Records"
CALLBACKS = "Callbacks"
IMPORTING = "Importing"

CAPABILITIES: tuple[str, ...] = (RECORDS, CALLBACKS, IMPORTING)


def describe(handle: Any) -> str:
    """Human-readable name of an adapter handle (for logs and errors)."""
    module = getattr(handle, "__module__", None)
    name = getattr(handle, "__qualname__", None) or getattr(handle, "__name__", None)
    if name is None:
        return repr(handle)
    return f"{module}.{name}" if module and module != name else name


def missing_capabilities(handle: Any) -> list[str]:
    """Return the sub-capability names the handle does not expose."""
    return [name for name in CAPABILITIES if getattr(handle, name, None) is None]


def validate_adapter(handle: Any) -> None:
    """Check that a handle implements the adapter contract.

    Raises:
        ConfigurationError: If any of ``Records``, ``Callbacks`` or
            ``Importing`` is missing.
    """
    missing = missing_capabilities(handle)
    if missing:
        raise ConfigurationError(
            f"Adapter {describe(handle)} does not implement {', '.join(missing)}. "
            f"Required sub-capabilities: {list(CAPABILITIES)}"
        )


class ModelAdapter:
    """Base class for model adapters.

    Subclasses provide the three sub-capabilities as nested mixin classes::

        class PeeweeAdapter(ModelAdapter):
            class Records:
                def records(self):
                    return self.klass.select().where(self.klass.id.in_(self.ids))

            class Callbacks:
                ...

            class Importing:
                ...

    The class itself is the handle passed to ``AdapterRegistry.register``.
    """

    Records: ClassVar[type]
    Callbacks: ClassVar[type]
    Importing: ClassVar[type]


class ResolvedAdapter:
    """The adapter chosen for one model class.

    The handle is resolved against the registry on first access and memoized,
    so repeated capability lookups do not scan the registry again.

    Attributes:
        klass: The model class this adapter is bound to.
        registry: Registry used for resolution.
    """

    def __init__(self, klass: type, registry: AdapterRegistry) -> None:
        self.klass = klass
        self.registry = registry
        self._adapter: Any = None
        self._resolved = False

    @property
    def is_resolved(self) -> bool:
        return self._resolved

    @property
    def adapter(self) -> Any:
        """The resolved adapter handle."""
        return self.resolve()

    def resolve(self) -> Any:
        """Resolve (once) and return the adapter handle for ``klass``."""
        if not self._resolved:
            self._adapter = self.registry.resolve(self.klass)
            self._resolved = True
        return self._adapter

    def records_provider(self) -> Any:
        """Return the ``Records`` implementation of the resolved adapter."""
        return self._capability(RECORDS)

    def callback_provider(self) -> Any:
        """Return the ``Callbacks`` implementation of the resolved adapter."""
        return self._capability(CALLBACKS)

    def import_provider(self) -> Any:
        """Return the ``Importing`` implementation of the resolved adapter."""
        return self._capability(IMPORTING)

    def _capability(self, name: str) -> Any:
        adapter = self.resolve()
        provider = getattr(adapter, name, None)
        if provider is None:
            raise ConfigurationError(
                f"Adapter {describe(adapter)} resolved for {describe(self.klass)} "
                f"does not expose '{name}'"
            )
        return provider

    def __repr__(self) -> str:
        target = describe(self._adapter) if self._resolved else "<unresolved>"
        return f"ResolvedAdapter(klass={describe(self.klass)}, adapter={target})"
