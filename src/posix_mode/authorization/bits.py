"""Permission lattice for a single POSIX permission class.

A PermissionBits value is the read/write/execute grant for one of owner,
group or other.  The eight members map one-to-one onto the 3-bit integers
``0..7`` read as ``read << 2 | write << 1 | execute``, so set operations
are plain bitwise operations on :attr:`PermissionBits.value`.

Example
-------
>>> PermissionBits.READ | PermissionBits.EXECUTE
<PermissionBits.READ_EXECUTE: 5>
>>> str(~PermissionBits.WRITE)
'r-x'
>>> PermissionBits.ALL.imply(PermissionBits.READ_WRITE)
True
"""
from __future__ import annotations

from enum import Enum

from posix_mode.messages import ExceptionMessage

_READ = 0b100
_WRITE = 0b010
_EXECUTE = 0b001
_MASK = 0b111

_SYMBOLS: tuple[tuple[str, int], ...] = (("r", _READ), ("w", _WRITE), ("x", _EXECUTE))


class PermissionBits(Enum):
    """Closed set of the eight read/write/execute combinations."""

    NONE = 0
    EXECUTE = _EXECUTE
    WRITE = _WRITE
    WRITE_EXECUTE = _WRITE | _EXECUTE
    READ = _READ
    READ_EXECUTE = _READ | _EXECUTE
    READ_WRITE = _READ | _WRITE
    ALL = _READ | _WRITE | _EXECUTE

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @classmethod
    def from_value(cls, value: int) -> PermissionBits:
        """Return the member whose 3-bit value is ``value``.

        Raises
        ------
        ValueError
            If ``value`` is outside ``0..7``.
        """
        if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _MASK:
            raise ValueError(ExceptionMessage.INVALID_PERMISSION_BITS.get_message(value))
        return _BY_VALUE[value]

    @classmethod
    def from_display_string(cls, text: str) -> PermissionBits:
        """Parse a 3-character triad such as ``"r-x"``.

        Each position must hold either its letter (``r``, ``w``, ``x``
        in that order) or ``-``.

        Raises
        ------
        ValueError
            If ``text`` is not a well-formed triad.
        """
        if len(text) != len(_SYMBOLS):
            raise ValueError(
                ExceptionMessage.INVALID_DISPLAY_STRING.get_message(text, len(_SYMBOLS))
            )
        value = 0
        for char, (letter, bit) in zip(text, _SYMBOLS):
            if char == letter:
                value |= bit
            elif char != "-":
                raise ValueError(
                    ExceptionMessage.INVALID_DISPLAY_STRING.get_message(text, len(_SYMBOLS))
                )
        return _BY_VALUE[value]

    # ------------------------------------------------------------------
    # Lattice operations
    # ------------------------------------------------------------------

    def imply(self, other: PermissionBits | None) -> bool:
        """Return True if these bits grant every right ``other`` grants.

        ``None`` never is implied.
        """
        if other is None:
            return False
        return (self.value & other.value) == other.value

    def and_(self, other: PermissionBits) -> PermissionBits:
        """Return the intersection of these bits and ``other``."""
        _require_bits(other)
        return _BY_VALUE[self.value & other.value]

    def or_(self, other: PermissionBits) -> PermissionBits:
        """Return the union of these bits and ``other``."""
        _require_bits(other)
        return _BY_VALUE[self.value | other.value]

    def not_(self) -> PermissionBits:
        """Return the complement of these bits."""
        return _BY_VALUE[_MASK & ~self.value]

    def __and__(self, other: PermissionBits) -> PermissionBits:
        return self.and_(other)

    def __or__(self, other: PermissionBits) -> PermissionBits:
        return self.or_(other)

    def __invert__(self) -> PermissionBits:
        return self.not_()

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def can_read(self) -> bool:
        return bool(self.value & _READ)

    @property
    def can_write(self) -> bool:
        return bool(self.value & _WRITE)

    @property
    def can_execute(self) -> bool:
        return bool(self.value & _EXECUTE)

    def to_display_string(self) -> str:
        """Return the ``rwx``-style rendering, e.g. ``"rw-"``."""
        return "".join(letter if self.value & bit else "-" for letter, bit in _SYMBOLS)

    def __str__(self) -> str:
        return self.to_display_string()


_BY_VALUE: dict[int, PermissionBits] = {member.value: member for member in PermissionBits}


def _require_bits(other: object) -> None:
    if not isinstance(other, PermissionBits):
        raise TypeError(
            f"Expected PermissionBits; got {type(other).__name__}."
        )
