# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
The day runner.

A Runner owns one driver directory for its whole life. The directory is
created inside the workspace with a `.tmp` prefix, which the workspace
manifest lists as a member glob, so cargo treats the driver as part of the
workspace and resolves `../dayNN` like any other path dependency.

Each run_day call rewrites three files in that directory:

    input.txt        the payload
    Cargo.toml       depends on dayNN only
    src/main.rs      prints dayNN::partP(include_str!("../input.txt"))

then runs `cargo build` and `cargo run` there and parses stdout. The
directory is removed by close(), or on leaving a `with Runner(...)` block.
Until the first run the directory holds an idle driver (no dependencies,
empty main) so the workspace stays loadable for `cargo check -p dayNN`.

A Runner is not thread-safe. Separate instances are, because each gets its
own directory.
"""

import tempfile
import weakref
from dataclasses import dataclass
from pathlib import Path
from types import TracebackType
from typing import Optional

from aocw.layout import (
    DRIVER_DIR_PREFIX,
    INPUT_FILE,
    MAIN_FILE,
    MANIFEST_FILE,
    SOURCE_DIR,
    day_crate,
    day_directory,
    validate_day,
    validate_part,
)
from aocw.logging.logger import get_logger
from aocw.runner.exceptions import BuildError, ResultParseError
from aocw.runner.templates import (
    driver_main,
    driver_manifest,
    driver_package_name,
    idle_driver_main,
    idle_driver_manifest,
)
from aocw.toolchain.cargo import DEFAULT_CARGO, cargo_build, cargo_check, cargo_run, cargo_test
from aocw.toolchain.executor import CommandExecutor, ProcessResult, SubprocessExecutor
from aocw.utils.filesystem import atomic_write, remove_tree
from aocw.utils.paths import relative_posix

logger = get_logger(__name__)


@dataclass(frozen=True)
class RunOutcome:
    """An answer together with the two process results that produced it."""

    day: int
    part: int
    answer: int
    build: ProcessResult
    run: ProcessResult


def parse_answer(crate: str, part: int, result: ProcessResult) -> int:
    """
    Read a non-negative integer from a run step's stdout.

    Surrounding whitespace is ignored. Anything else (empty output after a
    panic, a sign, a decimal point, extra text) raises ResultParseError;
    there is no fallback to 0.
    """
    text = result.stdout.strip()
    if not text or not (text.isascii() and text.isdigit()):
        raise ResultParseError(crate, part, result)
    return int(text)


class Runner:
    """
    Builds and runs one day's solution through a disposable driver crate.

    Args:
        workspace_root: Root of the Cargo workspace. Defaults to the current
                        directory at construction time.
        executor: Runs cargo. Defaults to a SubprocessExecutor with no timeout.
        driver_dir: Use this directory for the driver instead of creating a
                    fresh one. It is removed on close() either way.
        cargo: Cargo executable name or path.

    Usage:
        with Runner(workspace_root) as runner:
            answer = runner.run_day(1, 1, input_text)
    """

    def __init__(
        self,
        workspace_root: Optional[Path] = None,
        executor: Optional[CommandExecutor] = None,
        driver_dir: Optional[Path] = None,
        cargo: str = DEFAULT_CARGO,
    ) -> None:
        self._workspace_root = Path(workspace_root) if workspace_root is not None else Path.cwd()
        self._executor = executor or SubprocessExecutor()
        self._cargo = cargo

        if driver_dir is None:
            driver_dir = Path(tempfile.mkdtemp(prefix=DRIVER_DIR_PREFIX, dir=str(self._workspace_root)))
        else:
            driver_dir = Path(driver_dir)
            driver_dir.mkdir(parents=True, exist_ok=True)
        self._driver_dir: Optional[Path] = driver_dir
        # Removes the directory when the runner is garbage collected without close().
        self._finalizer = weakref.finalize(self, remove_tree, driver_dir)
        self._package = driver_package_name(driver_dir.name)
        self._write_idle_driver(driver_dir)

        logger.debug(
            "Runner created",
            extra={"workspace_root": str(self._workspace_root), "driver_dir": str(driver_dir)},
        )

    def _write_idle_driver(self, driver_dir: Path) -> None:
        atomic_write(driver_dir / MANIFEST_FILE, idle_driver_manifest(self._package))
        atomic_write(driver_dir / SOURCE_DIR / MAIN_FILE, idle_driver_main())

    @property
    def workspace_root(self) -> Path:
        return self._workspace_root

    @property
    def driver_dir(self) -> Path:
        if self._driver_dir is None:
            raise RuntimeError("Runner is closed")
        return self._driver_dir

    @property
    def package_name(self) -> str:
        return self._package

    @property
    def closed(self) -> bool:
        return self._driver_dir is None

    def check_day(self, day: int) -> str:
        """`cargo check -p dayNN`; returns stdout verbatim, whatever the exit code."""
        validate_day(day)
        return cargo_check(self._executor, self._workspace_root, day, self._cargo).stdout

    def test_day(self, day: int) -> str:
        """`cargo test -p dayNN`; returns stdout verbatim, whatever the exit code."""
        validate_day(day)
        return cargo_test(self._executor, self._workspace_root, day, self._cargo).stdout

    def prepare_driver(self, day: int, part: int, input_text: str) -> Path:
        """
        Write input.txt, Cargo.toml and src/main.rs for (day, part).

        Returns the driver directory. All three files are rewritten every time.
        """
        validate_day(day)
        validate_part(part)
        driver_dir = self.driver_dir

        atomic_write(driver_dir / INPUT_FILE, input_text)

        dependency_path = relative_posix(day_directory(self._workspace_root, day), driver_dir)
        atomic_write(driver_dir / MANIFEST_FILE, driver_manifest(day, dependency_path, self._package))

        atomic_write(driver_dir / SOURCE_DIR / MAIN_FILE, driver_main(day, part))
        return driver_dir

    def solve(self, day: int, part: int, input_text: str) -> RunOutcome:
        """
        Run dayNN::partP on input_text and return the answer with diagnostics.

        Raises:
            InvalidDayError / InvalidPartError: before anything is written.
            BuildError: `cargo build` exited non-zero; `cargo run` is skipped.
            ResultParseError: the program's stdout isn't a non-negative integer.
            ToolchainError: cargo could not be started or timed out.
            OSError: writing the driver files failed.
        """
        crate = day_crate(day)
        driver_dir = self.prepare_driver(day, part, input_text)

        build = cargo_build(self._executor, driver_dir, self._cargo)
        if not build.success:
            logger.debug(
                "Driver build failed",
                extra={"crate": crate, "exit_code": build.exit_code, "stderr": build.stderr},
            )
            raise BuildError(crate, build)

        run = cargo_run(self._executor, driver_dir, self._cargo)
        logger.debug(
            "Driver finished",
            extra={
                "crate": crate,
                "part": part,
                "exit_code": run.exit_code,
                "stdout": run.stdout.strip(),
                "stderr": run.stderr.strip(),
            },
        )

        answer = parse_answer(crate, part, run)
        return RunOutcome(day=day, part=part, answer=answer, build=build, run=run)

    def run_day(self, day: int, part: int, input_text: str) -> int:
        """Run dayNN::partP on input_text and return the integer it prints."""
        return self.solve(day, part, input_text).answer

    def close(self) -> None:
        """Remove the driver directory. Safe to call more than once."""
        if self._driver_dir is None:
            return
        driver_dir, self._driver_dir = self._driver_dir, None
        self._finalizer()
        logger.debug("Runner driver directory removed", extra={"driver_dir": str(driver_dir)})

    def __enter__(self) -> "Runner":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()
