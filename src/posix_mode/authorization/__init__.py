"""POSIX permission bits, access modes and umask handling.

Example
-------
::

    from posix_mode.authorization import Mode, PermissionBits

    mode = Mode(PermissionBits.ALL, PermissionBits.READ_EXECUTE, PermissionBits.READ_EXECUTE)
    assert mode.to_digital_form() == 0o755
    assert str(mode) == "rwxr-xr-x"
"""
from __future__ import annotations

from posix_mode.authorization.bits import PermissionBits
from posix_mode.authorization.mode import Mode
from posix_mode.authorization.umask import (
    InvalidUmaskConfiguration,
    UmaskSource,
    get_umask,
    parse_umask,
)

__all__ = [
    # Core types
    "Mode",
    "PermissionBits",
    # Umask
    "InvalidUmaskConfiguration",
    "UmaskSource",
    "get_umask",
    "parse_umask",
]
