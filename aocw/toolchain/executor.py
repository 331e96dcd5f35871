# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The command executor: the only place aocw starts external processes.

Scaffolding and running both shell out (git for the former, cargo for the
latter). Both go through a CommandExecutor so tests can swap in a fake
that records calls and returns canned results instead of needing a Rust
toolchain on the machine.

SubprocessExecutor is the real thing. It runs the program directly (no
shell=True), captures stdout and stderr as text, and returns a
ProcessResult whatever the exit code is. Only failing to start the process,
or killing it on timeout, raises.
"""

import os
import subprocess
import time
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from aocw.logging.logger import get_logger
from aocw.toolchain.exceptions import CommandSpawnError, CommandTimeoutError

logger = get_logger(__name__)


@dataclass(frozen=True)
class ProcessResult:
    """What came back from one external command."""

    program: str
    args: tuple[str, ...]
    cwd: Path
    exit_code: int
    stdout: str
    stderr: str
    elapsed_seconds: float = 0.0

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def step(self) -> str:
        """Short label like 'cargo build' used in log records and error messages."""
        return describe_step(self.program, self.args)


def describe_step(program: str, args: Sequence[str]) -> str:
    return " ".join([program, *list(args)[:1]])


class CommandExecutor(ABC):
    """
    Contract for running an external program.

    run(cwd, program, args) -> ProcessResult

    Implementations block until the program exits. A non-zero exit is not an
    error at this level; it is reported through ProcessResult.exit_code.
    """

    @abstractmethod
    def run(self, cwd: Path, program: str, args: Sequence[str]) -> ProcessResult:
        ...


class SubprocessExecutor(CommandExecutor):
    """
    Runs commands with subprocess.run and captures their output.

    Args:
        timeout_seconds: Kill the process after this long. None waits forever.
        env_overrides: Extra environment variables layered over os.environ.
    """

    def __init__(
        self,
        timeout_seconds: Optional[float] = None,
        env_overrides: Optional[Mapping[str, str]] = None,
    ) -> None:
        self._timeout_seconds = timeout_seconds
        self._env_overrides = dict(env_overrides or {})

    def _build_env(self) -> dict[str, str]:
        env = dict(os.environ)
        env.update(self._env_overrides)
        return env

    def run(self, cwd: Path, program: str, args: Sequence[str]) -> ProcessResult:
        step = describe_step(program, args)
        argv = [program, *args]
        start = time.monotonic()

        try:
            completed = subprocess.run(
                argv,
                capture_output=True,
                text=True,
                errors="replace",
                timeout=self._timeout_seconds,
                cwd=str(cwd),
                env=self._build_env(),
            )
        except subprocess.TimeoutExpired as err:
            logger.warning(
                "Command timed out",
                extra={"step": step, "timeout_seconds": self._timeout_seconds, "cwd": str(cwd)},
            )
            raise CommandTimeoutError(program, step, self._timeout_seconds or 0.0) from err
        except (FileNotFoundError, PermissionError, NotADirectoryError) as err:
            logger.error(
                "Command could not be started",
                extra={"step": step, "cwd": str(cwd), "error": str(err)},
            )
            raise CommandSpawnError(program, step, str(err)) from err

        elapsed = time.monotonic() - start
        result = ProcessResult(
            program=program,
            args=tuple(args),
            cwd=cwd,
            exit_code=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
            elapsed_seconds=elapsed,
        )

        logger.debug(
            "Command finished",
            extra={
                "step": step,
                "argv": argv,
                "exit_code": result.exit_code,
                "elapsed_seconds": round(elapsed, 3),
                "cwd": str(cwd),
            },
        )
        return result
