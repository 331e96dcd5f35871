# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""Tests for the interpreter gate and toolchain discovery used by `aocw info`."""

import platform
import sys

import pytest

from aocw.runtime import environment
from aocw.runtime.environment import check_minimum_python, get_system_info


class TestMinimumPython:
    def test_current_interpreter_passes(self) -> None:
        check_minimum_python()

    def test_old_interpreter_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(environment, "get_python_version", lambda: (3, 10, 12))

        with pytest.raises(RuntimeError, match="3.11"):
            check_minimum_python()


class TestSystemInfo:
    def test_reports_interpreter(self) -> None:
        info = get_system_info()

        assert info.python_version == platform.python_version()
        assert info.python_version.startswith(f"{sys.version_info.major}.")

    def test_finds_python_as_a_stand_in_tool(self) -> None:
        info = get_system_info(cargo=sys.executable, git=sys.executable)

        assert info.cargo_path is not None
        assert info.git_path is not None

    def test_missing_tool_is_none(self) -> None:
        info = get_system_info(cargo="aocw-no-such-cargo", git="aocw-no-such-git")

        assert info.cargo_path is None
        assert info.git_path is None
