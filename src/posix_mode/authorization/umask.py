"""Umask lookup and parsing.

The umask override is read as text from a configuration source under
:data:`~posix_mode.constants.SECURITY_AUTHORIZATION_PERMISSION_UMASK`.
Accepted text is at most four characters and must parse as a plain
base-10 integer; each character is then read as one octal digit, so
``"0022"`` becomes ``0o022``.

Digits ``8`` and ``9`` pass validation and are folded in as-is
(``"0099"`` yields ``9 * 8 + 9``), which the digital-form decoding then
masks down to nine bits.

Example
-------
::

    conf = Configuration()
    conf.set(SECURITY_AUTHORIZATION_PERMISSION_UMASK, "0027")
    umask = get_umask(conf)
    assert umask.to_digital_form() == 0o027
"""
from __future__ import annotations

import logging
import re
from typing import Protocol

from posix_mode.authorization.mode import Mode
from posix_mode.constants import (
    DEFAULT_FILE_SYSTEM_UMASK,
    SECURITY_AUTHORIZATION_PERMISSION_UMASK,
)
from posix_mode.messages import ExceptionMessage

logger = logging.getLogger(__name__)

_MAX_UMASK_LENGTH = 4
_INTEGER_PATTERN: re.Pattern[str] = re.compile(r"[+-]?[0-9]+")


class UmaskSource(Protocol):
    """Anything that can look up a textual setting by name."""

    def get(self, key: str) -> str | None: ...


class InvalidUmaskConfiguration(ValueError):
    """Raised when the configured umask text is too long or not an integer.

    Attributes
    ----------
    value:
        The offending configuration text.
    setting_name:
        The configuration key it was read from.
    """

    def __init__(self, value: str, setting_name: str) -> None:
        self.value = value
        self.setting_name = setting_name
        super().__init__(
            ExceptionMessage.INVALID_CONFIGURATION_VALUE.get_message(value, setting_name)
        )


def parse_umask(
    text: str,
    setting_name: str = SECURITY_AUTHORIZATION_PERMISSION_UMASK,
) -> Mode:
    """Validate and decode a textual umask such as ``"0022"``.

    Parameters
    ----------
    text:
        Raw configuration text.
    setting_name:
        Key reported in the error when ``text`` is rejected.

    Returns
    -------
    Mode

    Raises
    ------
    InvalidUmaskConfiguration
        If ``text`` is longer than four characters or is not an integer.
    """
    if len(text) > _MAX_UMASK_LENGTH or not _INTEGER_PATTERN.fullmatch(text):
        raise InvalidUmaskConfiguration(text, setting_name)

    umask = 0
    last_index = len(text) - 1
    for index, char in enumerate(text):
        umask += (ord(char) - ord("0")) << (3 * (last_index - index))
    return Mode.from_digital_form(umask)


def get_umask(
    source: UmaskSource | None,
    default_umask: int = DEFAULT_FILE_SYSTEM_UMASK,
) -> Mode:
    """Return the file/directory creation umask.

    Parameters
    ----------
    source:
        Configuration to read the override from, or ``None``.
    default_umask:
        Digital form used when ``source`` is ``None`` or has no override.

    Returns
    -------
    Mode

    Raises
    ------
    InvalidUmaskConfiguration
        If the configured override is malformed.
    """
    text = source.get(SECURITY_AUTHORIZATION_PERMISSION_UMASK) if source is not None else None
    if text is None:
        logger.debug("No umask configured; using default %04o", default_umask)
        return Mode.from_digital_form(default_umask)

    umask = parse_umask(text)
    logger.debug("Using configured umask %r (%s)", text, umask)
    return umask
