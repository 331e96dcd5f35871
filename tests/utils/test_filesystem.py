# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Tests for filesystem and path helpers.
"""

import os
import stat
from pathlib import Path

import pytest

from aocw.scaffold.workspace import write_workspace_files
from aocw.utils.filesystem import atomic_write, remove_tree, safe_read
from aocw.utils.paths import ensure_directory, relative_posix


@pytest.fixture()
def umask_022():  # type: ignore[no-untyped-def]
    previous = os.umask(0o022)
    yield
    os.umask(previous)


class TestAtomicWrite:
    def test_writes_content(self, tmp_path: Path) -> None:
        target = tmp_path / "Cargo.toml"
        atomic_write(target, "[package]\n")

        assert target.read_text(encoding="utf-8") == "[package]\n"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        target = tmp_path / "day01" / "src" / "lib.rs"
        atomic_write(target, "pub fn part1() {}")

        assert target.is_file()

    def test_overwrites_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "input.txt"
        atomic_write(target, "first")
        atomic_write(target, "second")

        assert target.read_text(encoding="utf-8") == "second"

    def test_no_leftover_temp_files(self, tmp_path: Path) -> None:
        atomic_write(tmp_path / "clean.txt", "clean write")

        assert list(tmp_path.glob(".aocw_tmp_*")) == []

    def test_fails_when_parent_is_a_file(self, tmp_path: Path) -> None:
        blocker = tmp_path / "day01"
        blocker.write_text("not a directory", encoding="utf-8")

        with pytest.raises(OSError):
            atomic_write(blocker / "Cargo.toml", "[package]\n")


class TestSafeRead:
    def test_reads_existing_file(self, tmp_path: Path) -> None:
        target = tmp_path / "day01.txt"
        target.write_text("1\n2\n3\n", encoding="utf-8")

        assert safe_read(target) == "1\n2\n3\n"

    def test_raises_on_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            safe_read(tmp_path / "missing.txt")

    def test_raises_on_directory(self, tmp_path: Path) -> None:
        with pytest.raises(IsADirectoryError):
            safe_read(tmp_path)


class TestRemoveTree:
    def test_removes_nested_directory(self, tmp_path: Path) -> None:
        victim = tmp_path / ".tmpabc"
        (victim / "src").mkdir(parents=True)
        (victim / "src" / "main.rs").write_text("fn main() {}", encoding="utf-8")

        assert remove_tree(victim) is True
        assert not victim.exists()

    def test_missing_directory_is_not_an_error(self, tmp_path: Path) -> None:
        assert remove_tree(tmp_path / "gone") is False


class TestPaths:
    def test_ensure_directory_is_idempotent(self, tmp_path: Path) -> None:
        target = tmp_path / "a" / "b"

        assert ensure_directory(target) == target
        assert ensure_directory(target) == target
        assert target.is_dir()

    def test_relative_posix_sibling(self, tmp_path: Path) -> None:
        (tmp_path / "day01").mkdir()
        (tmp_path / ".tmpxyz").mkdir()

        assert relative_posix(tmp_path / "day01", tmp_path / ".tmpxyz") == "../day01"

    def test_relative_posix_nested(self, tmp_path: Path) -> None:
        (tmp_path / "day07").mkdir()
        (tmp_path / "drivers" / "one").mkdir(parents=True)

        assert relative_posix(tmp_path / "day07", tmp_path / "drivers" / "one") == "../../day07"


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
@pytest.mark.usefixtures("umask_022")
class TestAtomicWriteMode:
    def test_new_file_follows_umask(self, tmp_path: Path) -> None:
        target = tmp_path / "Cargo.toml"
        atomic_write(target, "[workspace]\n")

        assert stat.S_IMODE(target.stat().st_mode) == 0o644

    def test_existing_mode_is_kept(self, tmp_path: Path) -> None:
        target = tmp_path / "run.sh"
        target.write_text("old", encoding="utf-8")
        target.chmod(0o755)

        atomic_write(target, "new")

        assert stat.S_IMODE(target.stat().st_mode) == 0o755
        assert target.read_text(encoding="utf-8") == "new"

    def test_scaffolded_files_are_group_readable(self, tmp_path: Path) -> None:
        for relative in write_workspace_files(tmp_path):
            mode = stat.S_IMODE((tmp_path / relative).stat().st_mode)
            assert mode & stat.S_IRGRP, relative
