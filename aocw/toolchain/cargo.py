# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Cargo invocations used by the runner.

Only four commands are ever issued: `check` and `test` scoped to one day
crate from the workspace root, and `build` / `run` inside the runner's
driver directory. There is no generic "run any cargo command"
helper.
"""

from pathlib import Path

from aocw.layout import day_crate
from aocw.toolchain.executor import CommandExecutor, ProcessResult

DEFAULT_CARGO = "cargo"


def cargo_check(
    executor: CommandExecutor,
    workspace_root: Path,
    day: int,
    cargo: str = DEFAULT_CARGO,
) -> ProcessResult:
    """`cargo check -p dayNN` from the workspace root."""
    return executor.run(workspace_root, cargo, ["check", "-p", day_crate(day)])


def cargo_test(
    executor: CommandExecutor,
    workspace_root: Path,
    day: int,
    cargo: str = DEFAULT_CARGO,
) -> ProcessResult:
    """`cargo test -p dayNN` from the workspace root."""
    return executor.run(workspace_root, cargo, ["test", "-p", day_crate(day)])


def cargo_build(executor: CommandExecutor, project_dir: Path, cargo: str = DEFAULT_CARGO) -> ProcessResult:
    return executor.run(project_dir, cargo, ["build"])


def cargo_run(executor: CommandExecutor, project_dir: Path, cargo: str = DEFAULT_CARGO) -> ProcessResult:
    return executor.run(project_dir, cargo, ["run"])
