"""Utility modules for the Content Benchmark Engine."""

from .config import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
