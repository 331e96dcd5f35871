# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Shared pytest fixtures for aocw tests.

The RecordingExecutor stands in for cargo and git: it records every call
and answers from a per-subcommand queue, so runner and scaffolder tests
don't need a Rust toolchain. Tests that do exercise the real binaries skip
themselves when they aren't on PATH.
"""

import shutil
import textwrap
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Optional

import pytest

from aocw.toolchain.executor import CommandExecutor, ProcessResult


class RecordingExecutor(CommandExecutor):
    """
    Fake executor. Every call succeeds with empty output unless a response
    was queued for its subcommand (the first argument, e.g. "build").
    """

    def __init__(self, on_run: Optional[Callable[[Path, str, tuple[str, ...]], None]] = None) -> None:
        self.calls: list[tuple[Path, str, tuple[str, ...]]] = []
        self._queued: dict[str, list[tuple[int, str, str]]] = {}
        self._on_run = on_run

    def queue(self, subcommand: str, exit_code: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._queued.setdefault(subcommand, []).append((exit_code, stdout, stderr))

    @property
    def steps(self) -> list[str]:
        return [" ".join([program, *args[:1]]) for _, program, args in self.calls]

    def run(self, cwd: Path, program: str, args: Sequence[str]) -> ProcessResult:
        args = tuple(args)
        self.calls.append((cwd, program, args))
        if self._on_run is not None:
            self._on_run(cwd, program, args)

        subcommand = args[0] if args else ""
        pending = self._queued.get(subcommand)
        exit_code, stdout, stderr = pending.pop(0) if pending else (0, "", "")
        return ProcessResult(
            program=program,
            args=args,
            cwd=cwd,
            exit_code=exit_code,
            stdout=stdout,
            stderr=stderr,
        )


@pytest.fixture()
def recording_executor() -> RecordingExecutor:
    return RecordingExecutor()


@pytest.fixture()
def executor_factory() -> type[RecordingExecutor]:
    """For tests that need an on_run hook."""
    return RecordingExecutor


@pytest.fixture()
def git_identity(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Give git a committer identity and shield it from the user's global config."""
    if shutil.which("git") is None:
        pytest.skip("git is not installed")
    monkeypatch.setenv("GIT_CONFIG_GLOBAL", str(tmp_path / "empty_gitconfig"))
    monkeypatch.setenv("GIT_CONFIG_NOSYSTEM", "1")
    monkeypatch.setenv("GIT_AUTHOR_NAME", "aocw tests")
    monkeypatch.setenv("GIT_AUTHOR_EMAIL", "aocw@example.invalid")
    monkeypatch.setenv("GIT_COMMITTER_NAME", "aocw tests")
    monkeypatch.setenv("GIT_COMMITTER_EMAIL", "aocw@example.invalid")


@pytest.fixture()
def tmp_config_file(tmp_path: Path) -> Path:
    """A small valid config overriding a value in every section."""
    config_content = textwrap.dedent("""\
        global:
          config_version: "1.0.0"
          log_level: "debug"
        toolchain:
          cargo: "cargo"
          timeout_seconds: 120
        workspace:
          commit_message: "Initial commit: test workspace"
        runner:
          input_directory: "puzzle_inputs"
    """)
    config_file = tmp_path / "test_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def invalid_config_file(tmp_path: Path) -> Path:
    """Valid YAML that fails schema validation (unknown key, bad timeout)."""
    config_content = textwrap.dedent("""\
        toolchain:
          timeout_seconds: -5
          make: "make"
    """)
    config_file = tmp_path / "invalid_config.yaml"
    config_file.write_text(config_content, encoding="utf-8")
    return config_file


@pytest.fixture()
def broken_yaml_file(tmp_path: Path) -> Path:
    """A file that isn't valid YAML at all."""
    config_file = tmp_path / "broken.yaml"
    config_file.write_text("{{not: yaml: at: all:::", encoding="utf-8")
    return config_file
