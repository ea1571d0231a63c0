"""Configuration module for runscript."""

from .settings import Settings, settings

__all__ = [
    "settings",
    "Settings",
]
