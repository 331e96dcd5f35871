# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Failures of external commands themselves, as opposed to commands that ran
and reported a non-zero exit. The latter come back as a ProcessResult and
the caller decides what a failure means.
"""


class ToolchainError(Exception):
    """Base for errors raised while running an external command."""


class CommandSpawnError(ToolchainError):
    """The program could not be started (not on PATH, not executable)."""

    def __init__(self, program: str, step: str, reason: str) -> None:
        super().__init__(f"{step}: cannot launch '{program}': {reason}")
        self.program = program
        self.step = step


class CommandTimeoutError(ToolchainError):
    """The program was killed after exceeding the configured timeout."""

    def __init__(self, program: str, step: str, timeout_seconds: float) -> None:
        super().__init__(f"{step}: '{program}' timed out after {timeout_seconds}s")
        self.program = program
        self.step = step
        self.timeout_seconds = timeout_seconds
