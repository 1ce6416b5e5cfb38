"""Streaming plugin that repairs ragged pipe tables."""

from .plugin import TableRepairPlugin, create_plugin

__all__ = ["TableRepairPlugin", "create_plugin"]
