"""Registration model — Introspection view of one effective adapter registration."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Registration(BaseModel):
    """An adapter registration as seen by resolution."""

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    name: Any = Field(description="Adapter handle")
    condition: Callable[[type], Any] = Field(description="Detection condition evaluated against a model class")
    priority: int = Field(default=0, description="Priority bucket, higher buckets are evaluated first")

    @property
    def adapter_name(self) -> str:
        from searchmodel.adapters.base.adapter import describe

        return describe(self.name)

    def matches(self, klass: type) -> bool:
        """Whether this registration's condition accepts ``klass``."""
        return bool(self.condition(klass))
