# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Errors raised by the day runner.

BuildError and ResultParseError are kept apart so a caller can tell "the
crate didn't compile" from "it compiled, ran, and printed something that
isn't an answer". Both carry the captured process output.
"""

from aocw.toolchain.executor import ProcessResult


class RunnerError(Exception):
    """Base for day runner failures."""


class BuildError(RunnerError):
    """`cargo build` of the driver crate exited non-zero."""

    def __init__(self, crate: str, result: ProcessResult) -> None:
        super().__init__(
            f"Failed to build runner for {crate} (exit code {result.exit_code}):\n"
            f"{result.stderr.strip()}"
        )
        self.crate = crate
        self.result = result

    @property
    def stderr(self) -> str:
        return self.result.stderr


class ResultParseError(RunnerError):
    """The driver's stdout wasn't a non-negative integer."""

    def __init__(self, crate: str, part: int, result: ProcessResult) -> None:
        shown = result.stdout.strip() or "<empty>"
        message = f"Failed to parse result of {crate} part {part} as an integer: {shown!r}"
        if not result.success:
            message += f" (exit code {result.exit_code})"
        if result.stderr.strip():
            message += f"\n{result.stderr.strip()}"
        super().__init__(message)
        self.crate = crate
        self.part = part
        self.result = result

    @property
    def output(self) -> str:
        return self.result.stdout

    @property
    def stderr(self) -> str:
        return self.result.stderr

    @property
    def exit_code(self) -> int:
        return self.result.exit_code
