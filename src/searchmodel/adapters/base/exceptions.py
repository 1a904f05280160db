"""Adapter-specific exceptions."""


class AdapterError(Exception):
    """Base exception for adapter errors."""


class ConfigurationError(AdapterError, LookupError):
    """Raised when an adapter does not expose a required sub-capability."""
