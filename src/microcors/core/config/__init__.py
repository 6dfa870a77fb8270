"""
Configuration package - unified access point.

This package provides all configuration classes. Environment settings are
only read when ``get_config()`` is called.
"""

from microcors.core.config.cors_config import CorsConfig
from microcors.core.config.logging_config import LoggingConfig
from microcors.core.config.settings import Config, get_config

__all__ = [
    "Config",
    "CorsConfig",
    "LoggingConfig",
    "get_config",
]
