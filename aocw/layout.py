# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Naming conventions shared by the scaffolder and the runner.

A day is an int from 1 to 25 and its crate is `dayNN`, zero padded. Each day
crate exposes `part1` and `part2`; the runner relies on nothing else.
"""

from pathlib import Path

FIRST_DAY = 1
LAST_DAY = 25
DAYS: tuple[int, ...] = tuple(range(FIRST_DAY, LAST_DAY + 1))
PARTS: tuple[int, ...] = (1, 2)

RUNNER_CRATE = "runner"
# Workspace member glob matching the runner's driver directories.
DRIVER_DIR_PREFIX = ".tmp"
DRIVER_MEMBER_GLOB = DRIVER_DIR_PREFIX + "*"

MANIFEST_FILE = "Cargo.toml"
IGNORE_FILE = ".gitignore"
SOURCE_DIR = "src"
LIBRARY_FILE = "lib.rs"
MAIN_FILE = "main.rs"
INPUT_FILE = "input.txt"


class InvalidDayError(ValueError):
    """Raised for a day outside 1..25."""


class InvalidPartError(ValueError):
    """Raised for a part other than 1 or 2."""


def validate_day(day: int) -> int:
    # bool is an int subclass; True must not mean day 1.
    if isinstance(day, bool) or not isinstance(day, int) or day not in DAYS:
        raise InvalidDayError(f"Day must be between {FIRST_DAY} and {LAST_DAY}, got {day!r}")
    return day


def validate_part(part: int) -> int:
    if isinstance(part, bool) or not isinstance(part, int) or part not in PARTS:
        raise InvalidPartError(f"Part must be 1 or 2, got {part!r}")
    return part


def day_crate(day: int) -> str:
    """Crate (and library) name for a day: 1 -> 'day01'."""
    return f"day{validate_day(day):02}"


def day_directory(workspace_root: Path, day: int) -> Path:
    return workspace_root / day_crate(day)


def workspace_members() -> list[str]:
    """Workspace members in manifest order: runner, driver glob, then every day."""
    return [RUNNER_CRATE, DRIVER_MEMBER_GLOB, *(day_crate(day) for day in DAYS)]
