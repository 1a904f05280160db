"""Application settings — Pydantic-based configuration with YAML and env var support.

Configuration is loaded from (in order of precedence):
  1. Environment variables (SEARCHMODEL_ prefix)
  2. YAML config file (if specified)
  3. Default values
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, ValidationInfo, field_validator
from pydantic_settings import BaseSettings


class RegistrySettings(BaseModel):
    """Adapter registry configuration."""

    default_priority: int = Field(default=0, description="Bucket used when register() gets no priority")
    push_priority: int = Field(default=9999, description="Bucket used by push_registration()")
    validate_on_register: bool = Field(
        default=True,
        description="Reject adapters lacking Records/Callbacks/Importing at registration time",
    )

    @field_validator("push_priority")
    @classmethod
    def _push_above_default(cls, v: int, info: ValidationInfo) -> int:
        default = info.data.get("default_priority", 0)
        if v <= default:
            raise ValueError(f"push_priority ({v}) must be greater than default_priority ({default})")
        return v


class ObservabilitySettings(BaseModel):
    """Observability configuration."""

    log_level: str = Field(default="info", description="Log level: debug, info, warning, error")
    log_format: str = Field(default="json", description="Log format: json, console")
    configure_logging: bool = Field(
        default=False,
        description="Install the structlog handler on the searchmodel logger when the process registry is created",
    )


class Settings(BaseSettings):
    """Root settings.

    Configuration is loaded from environment variables with the SEARCHMODEL_ prefix.
    Nested settings use double underscores: SEARCHMODEL_REGISTRY__PUSH_PRIORITY=5000

    Example:
        SEARCHMODEL_REGISTRY__VALIDATE_ON_REGISTER=false
        SEARCHMODEL_OBSERVABILITY__LOG_FORMAT=console
        SEARCHMODEL_OBSERVABILITY__CONFIGURE_LOGGING=true
    """

    model_config = {
        "env_prefix": "SEARCHMODEL_",
        "env_nested_delimiter": "__",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
    }

    registry: RegistrySettings = Field(default_factory=RegistrySettings)
    observability: ObservabilitySettings = Field(default_factory=ObservabilitySettings)

    @classmethod
    def from_yaml(cls, path: str | Path) -> Settings:
        """Load settings from a YAML configuration file.

        Args:
            path: Path to the YAML config file.

        Returns:
            Populated Settings instance.
        """
        import yaml  # type: ignore[import-untyped]

        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        return cls(**data)
