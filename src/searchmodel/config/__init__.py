"""Configuration."""

from searchmodel.config.settings import ObservabilitySettings, RegistrySettings, Settings

__all__ = ["ObservabilitySettings", "RegistrySettings", "Settings"]
