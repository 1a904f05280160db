"""Tests for the module-level adapter functions and the process-wide registry."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest
import structlog

from searchmodel import adapters
from searchmodel.adapters.base.registry import AdapterRegistry
from searchmodel.adapters.default.adapter import DefaultAdapter
from searchmodel.observability.logging import HANDLER_NAME, PACKAGE_LOGGER
from tests.support import Article, DocumentAdapter, OverrideAdapter, SqlAdapter, always, is_sql


class TestProcessRegistry:
    def test_registry_created_lazily(self) -> None:
        registry = adapters.get_registry()
        assert isinstance(registry, AdapterRegistry)
        assert adapters.get_registry() is registry

    def test_set_registry(self, registry: AdapterRegistry) -> None:
        adapters.set_registry(registry)
        adapters.register(SqlAdapter, is_sql)
        assert registry.resolve(Article) is SqlAdapter

    def test_registry_reads_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHMODEL_REGISTRY__PUSH_PRIORITY", "500")
        assert adapters.get_registry().push_priority == 500


class TestModuleFunctions:
    def test_from_class_defaults(self) -> None:
        assert adapters.from_class(Article).adapter is DefaultAdapter

    def test_register_and_resolve(self) -> None:
        adapters.register(SqlAdapter, is_sql)
        assert adapters.adapters() == {SqlAdapter: is_sql}
        assert adapters.from_class(Article).adapter is SqlAdapter

    def test_push_registration(self) -> None:
        adapters.register(DocumentAdapter, always)
        adapters.push_registration(OverrideAdapter, always)
        adapters.register(SqlAdapter, always)

        assert list(adapters.adapters()) == [OverrideAdapter, DocumentAdapter, SqlAdapter]
        assert adapters.from_class(Article).adapter is OverrideAdapter

    def test_register_with_priority(self) -> None:
        adapters.register(SqlAdapter, always)
        adapters.register(DocumentAdapter, always, 1)
        assert adapters.from_class(Article).adapter is DocumentAdapter


class TestProcessRegistryLogging:
    @pytest.fixture(autouse=True)
    def _remove_handler(self) -> Iterator[None]:
        yield
        logger = logging.getLogger(PACKAGE_LOGGER)
        for handler in list(logger.handlers):
            if handler.get_name() == HANDLER_NAME:
                logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)
        structlog.reset_defaults()

    def test_logging_not_configured_by_default(self) -> None:
        adapters.get_registry()
        names = [h.get_name() for h in logging.getLogger(PACKAGE_LOGGER).handlers]
        assert HANDLER_NAME not in names

    def test_logging_configured_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SEARCHMODEL_OBSERVABILITY__CONFIGURE_LOGGING", "true")
        monkeypatch.setenv("SEARCHMODEL_OBSERVABILITY__LOG_LEVEL", "warning")

        adapters.get_registry()

        logger = logging.getLogger(PACKAGE_LOGGER)
        assert HANDLER_NAME in [h.get_name() for h in logger.handlers]
        assert logger.level == logging.WARNING
