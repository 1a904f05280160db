"""Fallback adapter used when no registered condition matches a model class."""

from searchmodel.adapters.default.adapter import DefaultAdapter

__all__ = ["DefaultAdapter"]
