"""
Adapter Configuration Module

Provides the YAML-backed settings used to build exchange adapters at startup.
"""

from .settings import (
    DEFAULT_CONFIG_PATH,
    AdapterSettings,
    AdaptersConfig,
    load_adapters_config,
)

__all__ = [
    "DEFAULT_CONFIG_PATH",
    "AdapterSettings",
    "AdaptersConfig",
    "load_adapters_config",
]
