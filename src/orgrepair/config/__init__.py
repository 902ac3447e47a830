"""Application configuration helpers."""

from __future__ import annotations

from .errors import ConfigurationError
from .logging import configure_logging
from .repair import RepairConfig, get_repair_config

__all__ = [
    "ConfigurationError",
    "RepairConfig",
    "configure_logging",
    "get_repair_config",
]
