"""Process-wide defaults for file-system modes.

These values are passed explicitly into the functions that need them;
nothing in the package reads them as ambient state other than as
keyword-argument defaults.
"""
from __future__ import annotations

#: Mode given to new files and directories before a umask is applied.
DEFAULT_FILE_SYSTEM_MODE: int = 0o777

#: Umask used when the configuration does not override it.
DEFAULT_FILE_SYSTEM_UMASK: int = 0o022

#: Configuration key holding the textual umask override.
SECURITY_AUTHORIZATION_PERMISSION_UMASK: str = (
    "posix_mode.security.authorization.permission.umask"
)
