# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for day naming and validation.
"""

from pathlib import Path

import pytest

from aocw.layout import (
    DAYS,
    InvalidDayError,
    InvalidPartError,
    day_crate,
    day_directory,
    validate_day,
    validate_part,
    workspace_members,
)


class TestDayNames:
    @pytest.mark.parametrize("day, expected", [(1, "day01"), (9, "day09"), (10, "day10"), (25, "day25")])
    def test_zero_padded(self, day: int, expected: str) -> None:
        assert day_crate(day) == expected

    def test_day_directory(self, tmp_path: Path) -> None:
        assert day_directory(tmp_path, 3) == tmp_path / "day03"

    def test_twenty_five_days(self) -> None:
        assert DAYS == tuple(range(1, 26))


class TestValidation:
    @pytest.mark.parametrize("day", [0, 26, -1, True, "1", 1.0])
    def test_rejects_bad_days(self, day: object) -> None:
        with pytest.raises(InvalidDayError):
            validate_day(day)  # type: ignore[arg-type]

    @pytest.mark.parametrize("part", [0, 3, True, "1"])
    def test_rejects_bad_parts(self, part: object) -> None:
        with pytest.raises(InvalidPartError):
            validate_part(part)  # type: ignore[arg-type]

    def test_errors_are_value_errors(self) -> None:
        with pytest.raises(ValueError):
            validate_day(99)


class TestMembers:
    def test_member_order(self) -> None:
        members = workspace_members()

        assert members[:2] == ["runner", ".tmp*"]
        assert members[2:] == [f"day{day:02}" for day in range(1, 26)]
