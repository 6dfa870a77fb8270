"""
Shared utilities for logging setup.
"""

from microcors.core.utils.logging import configure_logging

__all__ = [
    "configure_logging",
]
