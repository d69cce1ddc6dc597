"""POSIX style file/directory access mode.

A :class:`Mode` is an immutable triple of :class:`PermissionBits` for the
owner, group and other classes.  It converts to and from the packed
"digital" form (``0o755``) and the display form (``"rwxr-xr-x"``), and
applies umasks.

Example
-------
>>> mode = Mode.from_digital_form(0o777)
>>> umask = Mode.from_digital_form(0o022)
>>> str(mode.apply_umask(umask))
'rwxr-xr-x'
>>> oct(mode.apply_umask(umask).to_digital_form())
'0o755'
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from posix_mode.authorization.bits import PermissionBits
from posix_mode.constants import DEFAULT_FILE_SYSTEM_MODE, DEFAULT_FILE_SYSTEM_UMASK
from posix_mode.messages import ExceptionMessage

if TYPE_CHECKING:
    from posix_mode.authorization.umask import UmaskSource

_OWNER_SHIFT = 6
_GROUP_SHIFT = 3
_TRIAD_MASK = 0o7
_DISPLAY_LENGTH = 9


@dataclass(frozen=True)
class Mode:
    """Immutable owner/group/other permission triple.

    Attributes
    ----------
    owner:
        Bits granted to the file owner.
    group:
        Bits granted to members of the owning group.
    other:
        Bits granted to everyone else.

    Two modes are equal when all three triads are equal, however each was
    built.  ``hash(mode)`` is its digital form.
    """

    owner: PermissionBits
    group: PermissionBits
    other: PermissionBits

    def __post_init__(self) -> None:
        for name in ("owner", "group", "other"):
            value = getattr(self, name)
            if not isinstance(value, PermissionBits):
                raise TypeError(
                    f"Mode.{name} must be PermissionBits; got {type(value).__name__}."
                )

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_digital_form(cls, mode: int) -> Mode:
        """Decode a packed octal mode such as ``0o644``.

        Only the low nine bits are read; anything above them is ignored.
        """
        return cls(
            cls.extract_owner_bits(mode),
            cls.extract_group_bits(mode),
            cls.extract_other_bits(mode),
        )

    @classmethod
    def from_mode(cls, mode: Mode) -> Mode:
        """Return a new mode equal to ``mode``."""
        return cls(mode.owner, mode.group, mode.other)

    @classmethod
    def from_display_string(cls, text: str) -> Mode:
        """Parse a nine character string such as ``"rw-r--r--"``.

        Raises
        ------
        ValueError
            If ``text`` is not three well-formed triads.
        """
        if len(text) != _DISPLAY_LENGTH:
            raise ValueError(
                ExceptionMessage.INVALID_DISPLAY_STRING.get_message(text, _DISPLAY_LENGTH)
            )
        return cls(
            PermissionBits.from_display_string(text[0:3]),
            PermissionBits.from_display_string(text[3:6]),
            PermissionBits.from_display_string(text[6:9]),
        )

    def copy(self) -> Mode:
        return Mode.from_mode(self)

    @staticmethod
    def extract_owner_bits(mode: int) -> PermissionBits:
        return PermissionBits.from_value((mode >> _OWNER_SHIFT) & _TRIAD_MASK)

    @staticmethod
    def extract_group_bits(mode: int) -> PermissionBits:
        return PermissionBits.from_value((mode >> _GROUP_SHIFT) & _TRIAD_MASK)

    @staticmethod
    def extract_other_bits(mode: int) -> PermissionBits:
        return PermissionBits.from_value(mode & _TRIAD_MASK)

    # ------------------------------------------------------------------
    # Factories
    # ------------------------------------------------------------------

    @classmethod
    def default(cls, digital_form: int = DEFAULT_FILE_SYSTEM_MODE) -> Mode:
        """Return the default mode for new files, ``0o777`` unless overridden."""
        return cls.from_digital_form(digital_form)

    @classmethod
    def no_access(cls) -> Mode:
        return cls(PermissionBits.NONE, PermissionBits.NONE, PermissionBits.NONE)

    @classmethod
    def full_access(cls) -> Mode:
        return cls(PermissionBits.ALL, PermissionBits.ALL, PermissionBits.ALL)

    # ------------------------------------------------------------------
    # Encoding
    # ------------------------------------------------------------------

    def to_digital_form(self) -> int:
        """Encode as a packed octal integer in ``0..0o777``."""
        return (
            (self.owner.value << _OWNER_SHIFT)
            | (self.group.value << _GROUP_SHIFT)
            | self.other.value
        )

    def to_display_string(self) -> str:
        """Return the ``ls -l`` style rendering, e.g. ``"rwxr-xr-x"``."""
        return (
            self.owner.to_display_string()
            + self.group.to_display_string()
            + self.other.to_display_string()
        )

    def __int__(self) -> int:
        return self.to_digital_form()

    def __hash__(self) -> int:
        return self.to_digital_form()

    def __str__(self) -> str:
        return self.to_display_string()

    # ------------------------------------------------------------------
    # Umask
    # ------------------------------------------------------------------

    def apply_umask(self, umask: Mode) -> Mode:
        """Return a new mode with every right granted by ``umask`` removed."""
        return Mode(
            self.owner & ~umask.owner,
            self.group & ~umask.group,
            self.other & ~umask.other,
        )

    def apply_umask_from_config(
        self,
        source: UmaskSource | None,
        default_umask: int = DEFAULT_FILE_SYSTEM_UMASK,
    ) -> Mode:
        """Apply the umask configured in ``source`` to this mode.

        Parameters
        ----------
        source:
            Configuration to read the umask override from.  ``None`` means
            ``default_umask`` is used.
        default_umask:
            Digital form used when no override is configured.

        Raises
        ------
        InvalidUmaskConfiguration
            If the configured umask text is malformed.
        """
        from posix_mode.authorization.umask import get_umask

        return self.apply_umask(get_umask(source, default_umask=default_umask))
