"""Tests for Mode encoding, rendering, equality and umask application."""
from __future__ import annotations

import dataclasses

import pytest

from posix_mode.authorization.bits import PermissionBits
from posix_mode.authorization.mode import Mode


# ---------------------------------------------------------------------------
# Digital form
# ---------------------------------------------------------------------------


class TestModeDigitalForm:
    @pytest.mark.parametrize(
        "owner, group, other, expected",
        [
            (PermissionBits.ALL, PermissionBits.READ_EXECUTE, PermissionBits.READ_EXECUTE, 0o755),
            (PermissionBits.READ_WRITE, PermissionBits.READ, PermissionBits.READ, 0o644),
            (PermissionBits.NONE, PermissionBits.NONE, PermissionBits.NONE, 0o000),
        ],
    )
    def test_to_digital_form(
        self,
        owner: PermissionBits,
        group: PermissionBits,
        other: PermissionBits,
        expected: int,
    ) -> None:
        assert Mode(owner, group, other).to_digital_form() == expected

    def test_default_is_0777(self) -> None:
        assert Mode.default().to_digital_form() == 0o777

    def test_default_accepts_explicit_value(self) -> None:
        assert Mode.default(0o750).to_digital_form() == 0o750

    def test_from_digital_form_0777(self) -> None:
        mode = Mode.from_digital_form(0o777)
        assert mode.owner is PermissionBits.ALL
        assert mode.group is PermissionBits.ALL
        assert mode.other is PermissionBits.ALL

    def test_from_digital_form_0644(self) -> None:
        mode = Mode.from_digital_form(0o644)
        assert mode.owner is PermissionBits.READ_WRITE
        assert mode.group is PermissionBits.READ
        assert mode.other is PermissionBits.READ

    def test_from_digital_form_0755(self) -> None:
        mode = Mode.from_digital_form(0o755)
        assert mode.owner is PermissionBits.ALL
        assert mode.group is PermissionBits.READ_EXECUTE
        assert mode.other is PermissionBits.READ_EXECUTE

    def test_round_trip_all_values(self) -> None:
        for value in range(0o1000):
            assert Mode.from_digital_form(value).to_digital_form() == value

    def test_high_bits_ignored(self) -> None:
        assert Mode.from_digital_form(0o4755) == Mode.from_digital_form(0o755)
        assert Mode.from_digital_form(0o170644).to_digital_form() == 0o644

    def test_negative_input_masked(self) -> None:
        # -1 has every bit set
        assert Mode.from_digital_form(-1) == Mode.full_access()

    def test_extract_helpers(self) -> None:
        assert Mode.extract_owner_bits(0o640) is PermissionBits.READ_WRITE
        assert Mode.extract_group_bits(0o640) is PermissionBits.READ
        assert Mode.extract_other_bits(0o640) is PermissionBits.NONE

    def test_int_conversion(self) -> None:
        assert int(Mode.from_digital_form(0o711)) == 0o711


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------


class TestModeConstruction:
    def test_copy_is_equal_but_distinct(self) -> None:
        original = Mode.default()
        copied = Mode.from_mode(original)
        assert copied == original
        assert copied is not original
        assert copied.to_digital_form() == 0o777

    def test_copy_method(self) -> None:
        original = Mode.from_digital_form(0o640)
        assert original.copy() == original
        assert original.copy() is not original

    def test_immutable(self) -> None:
        mode = Mode.default()
        with pytest.raises(dataclasses.FrozenInstanceError):
            mode.owner = PermissionBits.NONE  # type: ignore[misc]

    @pytest.mark.parametrize("position", [0, 1, 2])
    def test_none_field_raises(self, position: int) -> None:
        args: list[object] = [PermissionBits.ALL, PermissionBits.ALL, PermissionBits.ALL]
        args[position] = None
        with pytest.raises(TypeError):
            Mode(*args)  # type: ignore[arg-type]

    def test_int_field_raises(self) -> None:
        with pytest.raises(TypeError):
            Mode(7, PermissionBits.ALL, PermissionBits.ALL)  # type: ignore[arg-type]

    def test_no_access(self) -> None:
        mode = Mode.no_access()
        assert mode.owner is PermissionBits.NONE
        assert mode.group is PermissionBits.NONE
        assert mode.other is PermissionBits.NONE
        assert mode.to_digital_form() == 0

    def test_full_access(self) -> None:
        assert Mode.full_access().to_digital_form() == 0o777

    def test_from_display_string(self) -> None:
        assert Mode.from_display_string("rwxr-x---") == Mode.from_digital_form(0o750)

    @pytest.mark.parametrize("text", ["rwx", "rwxr-xr-xr", "rwxr-xr-q"])
    def test_from_display_string_rejects_malformed(self, text: str) -> None:
        with pytest.raises(ValueError):
            Mode.from_display_string(text)


# ---------------------------------------------------------------------------
# Rendering and equality
# ---------------------------------------------------------------------------


class TestModeRendering:
    @pytest.mark.parametrize(
        "digital, display",
        [
            (0o777, "rwxrwxrwx"),
            (0o755, "rwxr-xr-x"),
            (0o640, "rw-r-----"),
            (0o600, "rw-------"),
            (0o000, "---------"),
        ],
    )
    def test_display_string(self, digital: int, display: str) -> None:
        mode = Mode.from_digital_form(digital)
        assert mode.to_display_string() == display
        assert str(mode) == display

    def test_display_string_round_trips(self) -> None:
        for value in range(0o1000):
            mode = Mode.from_digital_form(value)
            assert Mode.from_display_string(str(mode)) == mode


class TestModeEquality:
    def test_equal_by_value(self) -> None:
        assert Mode.from_digital_form(0o777) == Mode.default()
        assert Mode.from_digital_form(0o000) == Mode.no_access()

    def test_full_and_no_access_differ(self) -> None:
        assert Mode.full_access() != Mode.no_access()

    def test_not_equal_to_int(self) -> None:
        assert Mode.default() != 0o777

    def test_hash_matches_for_equal_modes(self) -> None:
        modes = {Mode.default(), Mode.full_access(), Mode.from_digital_form(0o777)}
        assert len(modes) == 1


# ---------------------------------------------------------------------------
# Umask application
# ---------------------------------------------------------------------------


class TestModeApplyUmask:
    def test_0022_on_default(self) -> None:
        mode = Mode.default().apply_umask(Mode.from_digital_form(0o022))
        assert mode.owner is PermissionBits.ALL
        assert mode.group is PermissionBits.READ_EXECUTE
        assert mode.other is PermissionBits.READ_EXECUTE
        assert mode == Mode.from_digital_form(0o755)

    def test_0077_on_0666(self) -> None:
        mode = Mode.from_digital_form(0o666).apply_umask(Mode.from_digital_form(0o077))
        assert mode.to_digital_form() == 0o600

    def test_returns_new_instance(self) -> None:
        mode = Mode.default()
        result = mode.apply_umask(Mode.no_access())
        assert result == mode
        assert mode.to_digital_form() == 0o777

    def test_full_umask_removes_everything(self) -> None:
        assert Mode.default().apply_umask(Mode.full_access()) == Mode.no_access()

    def test_matches_bitwise_definition(self) -> None:
        for umask in (0o000, 0o022, 0o027, 0o077, 0o777):
            for value in (0o777, 0o666, 0o750, 0o644):
                result = Mode.from_digital_form(value).apply_umask(Mode.from_digital_form(umask))
                assert result.to_digital_form() == value & ~umask & 0o777
