"""Logging adapter - lib_log_rich runtime setup for the CLI entry points.

Contents:
    * :func:`.setup.init_logging` - Idempotent logging initialization
    * :class:`.setup.LoggingConfigModel` - ``[lib_log_rich]`` section model
"""

from __future__ import annotations

from .setup import LoggingConfigModel, init_logging

__all__ = ["LoggingConfigModel", "init_logging"]
