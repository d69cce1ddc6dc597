"""YAML-backed configuration for default modes and the umask override."""
from __future__ import annotations

from posix_mode.config.loader import (
    ConfigLoader,
    Configuration,
    ModeConfigError,
    ModeSettings,
)

__all__ = [
    "ConfigLoader",
    "Configuration",
    "ModeConfigError",
    "ModeSettings",
]
