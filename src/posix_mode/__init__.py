"""posix-mode: POSIX style file/directory access modes.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import posix_mode as pm
>>> mode = pm.Mode.default().apply_umask(pm.Mode.from_digital_form(0o022))
>>> str(mode)
'rwxr-xr-x'
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ---------------------------------------------------------------------------
# Authorization
# ---------------------------------------------------------------------------
from posix_mode.authorization.bits import PermissionBits
from posix_mode.authorization.mode import Mode
from posix_mode.authorization.umask import (
    InvalidUmaskConfiguration,
    UmaskSource,
    get_umask,
    parse_umask,
)

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------
from posix_mode.config.loader import (
    ConfigLoader,
    Configuration,
    ModeConfigError,
    ModeSettings,
)
from posix_mode.constants import (
    DEFAULT_FILE_SYSTEM_MODE,
    DEFAULT_FILE_SYSTEM_UMASK,
    SECURITY_AUTHORIZATION_PERMISSION_UMASK,
)
from posix_mode.messages import ExceptionMessage

__all__ = [
    "__version__",
    # Authorization
    "InvalidUmaskConfiguration",
    "Mode",
    "PermissionBits",
    "UmaskSource",
    "get_umask",
    "parse_umask",
    # Configuration
    "ConfigLoader",
    "Configuration",
    "ModeConfigError",
    "ModeSettings",
    "DEFAULT_FILE_SYSTEM_MODE",
    "DEFAULT_FILE_SYSTEM_UMASK",
    "SECURITY_AUTHORIZATION_PERMISSION_UMASK",
    "ExceptionMessage",
]
