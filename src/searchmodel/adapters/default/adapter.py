"""Default adapter — Fallback for model classes no registered adapter claims.

It assumes only a ``find(ids)`` class method on the model, installs no
lifecycle callbacks and does not support bulk importing.
"""

from __future__ import annotations

import logging
from typing import Any

from searchmodel.adapters.base.adapter import ModelAdapter

logger = logging.getLogger(__name__)


class DefaultAdapter(ModelAdapter):
    """Adapter for plain model classes."""

    class Records:
        """Fetch the records matching the search hits.

        Mixed into a result object providing ``klass`` and ``ids``.
        """

        klass: type
        ids: list[Any]

        def records(self) -> Any:
            return self.klass.find(self.ids)

    class Callbacks:
        """No automatic index updates."""

        @classmethod
        def install(cls, klass: type) -> None:
            logger.debug("Default adapter installs no callbacks on %s", klass.__name__)

    class Importing:
        def find_in_batches(self, **options: Any) -> Any:
            raise NotImplementedError("Method not implemented for default adapter")

        def transform(self) -> Any:
            raise NotImplementedError("Method not implemented for default adapter")
