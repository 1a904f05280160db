"""Base adapter interface — Adapter contract, per-class resolution and registry."""

from searchmodel.adapters.base.adapter import ModelAdapter, ResolvedAdapter, validate_adapter
from searchmodel.adapters.base.exceptions import AdapterError, ConfigurationError
from searchmodel.adapters.base.registry import DEFAULT_PRIORITY, PUSH_PRIORITY, AdapterRegistry

__all__ = [
    "DEFAULT_PRIORITY",
    "PUSH_PRIORITY",
    "AdapterError",
    "AdapterRegistry",
    "ConfigurationError",
    "ModelAdapter",
    "ResolvedAdapter",
    "validate_adapter",
]
