"""searchmodel — Adapter selection between search indexing and object mapping libraries."""

__version__ = "0.1.0"

from searchmodel.adapters import (  # noqa: E402
    from_class,
    get_registry,
    push_registration,
    register,
    set_registry,
)
from searchmodel.adapters.base import (  # noqa: E402
    AdapterError,
    AdapterRegistry,
    ConfigurationError,
    ModelAdapter,
    ResolvedAdapter,
)
from searchmodel.adapters.default import DefaultAdapter  # noqa: E402

__all__ = [
    "AdapterError",
    "AdapterRegistry",
    "ConfigurationError",
    "DefaultAdapter",
    "ModelAdapter",
    "ResolvedAdapter",
    "__version__",
    "from_class",
    "get_registry",
    "push_registration",
    "register",
    "set_registry",
]
