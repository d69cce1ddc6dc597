"""Catalog of user-facing error message templates.

Example
-------
>>> ExceptionMessage.INVALID_CONFIGURATION_VALUE.get_message("0999x", "umask")
'Invalid value 0999x for configuration umask'
"""
from __future__ import annotations

from enum import Enum


class ExceptionMessage(str, Enum):
    """Message templates with positional ``{0}``, ``{1}`` placeholders."""

    INVALID_CONFIGURATION_VALUE = "Invalid value {0} for configuration {1}"
    INVALID_PERMISSION_BITS = "Invalid permission bits value {0}, expected 0-7"
    INVALID_DISPLAY_STRING = "Invalid permission string {0!r}, expected {1} characters of r/w/x/-"

    def get_message(self, *args: object) -> str:
        """Render the template with the given positional arguments."""
        return self.value.format(*args)
