# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Workspace scaffolder: the `aocw init` command.

Lays out a Cargo workspace with a runner stub and one library crate per
puzzle day, writes a .gitignore, then commits everything to a new git
repository:

    <root>/
      Cargo.toml            workspace manifest
      .gitignore
      runner/Cargo.toml
      runner/src/main.rs    stub with unresolved placeholders
      day01/Cargo.toml
      day01/src/lib.rs      part1/part2 returning 0, plus tests
      ...
      day25/

Every file is overwritten unconditionally, so running init twice over the
same directory is safe and ends in the same tree. A failed write aborts on
the spot with the OSError; files already written stay where they are. The
git step runs only after every file is in place, and a git failure does not
remove them.
"""

from pathlib import Path
from typing import NamedTuple, Optional

from aocw.config.schema import DEFAULT_COMMIT_MESSAGE
from aocw.layout import (
    DAYS,
    IGNORE_FILE,
    LIBRARY_FILE,
    MAIN_FILE,
    MANIFEST_FILE,
    RUNNER_CRATE,
    SOURCE_DIR,
    day_crate,
)
from aocw.logging.logger import get_logger
from aocw.scaffold import templates
from aocw.toolchain.executor import CommandExecutor, SubprocessExecutor
from aocw.utils.filesystem import atomic_write
from aocw.utils.paths import ensure_directory
from aocw.vcs.git import DEFAULT_GIT, bootstrap_repository

logger = get_logger(__name__)


class ScaffoldResult(NamedTuple):
    """Summary of one `aocw init` run."""

    root: Path
    files_written: list[str]
    committed: bool


def planned_files() -> dict[str, str]:
    """
    Every file of a fresh workspace, keyed by POSIX path relative to the root.

    Insertion order is the order files get written: workspace manifest,
    runner stub, days 1 through 25, then the ignore rules.
    """
    files: dict[str, str] = {
        MANIFEST_FILE: templates.workspace_manifest(),
        f"{RUNNER_CRATE}/{MANIFEST_FILE}": templates.runner_manifest(),
        f"{RUNNER_CRATE}/{SOURCE_DIR}/{MAIN_FILE}": templates.runner_main(),
    }
    for day in DAYS:
        crate = day_crate(day)
        files[f"{crate}/{MANIFEST_FILE}"] = templates.day_manifest(day)
        files[f"{crate}/{SOURCE_DIR}/{LIBRARY_FILE}"] = templates.day_library(day)
    files[IGNORE_FILE] = templates.gitignore()
    return files


def write_workspace_files(root: Path) -> list[str]:
    """
    Write all workspace files under root. Returns the relative paths written, sorted.

    Raises:
        OSError: On the first file that can't be written.
    """
    ensure_directory(root)

    written: list[str] = []
    for relative, content in planned_files().items():
        atomic_write(root / relative, content)
        written.append(relative)

    logger.debug("Workspace files written", extra={"root": str(root), "files": len(written)})
    return sorted(written)


def initialize_workspace(
    path: Path,
    executor: Optional[CommandExecutor] = None,
    commit_message: str = DEFAULT_COMMIT_MESSAGE,
    git: str = DEFAULT_GIT,
) -> ScaffoldResult:
    """
    Create (or refresh) a workspace at path and commit it.

    Args:
        path: Workspace root. Created if missing; existing contents are kept
              except for the files this function owns.
        executor: Runs git. Defaults to a SubprocessExecutor with no timeout.
        commit_message: Message of the bootstrap commit.
        git: Git executable name or path.

    Raises:
        OSError: Directory creation or a file write failed.
        GitError: git init, add or commit exited non-zero.
        CommandSpawnError: git could not be started.
    """
    executor = executor or SubprocessExecutor()
    root = Path(path)

    logger.info("Scaffolding workspace", extra={"root": str(root)})
    files_written = write_workspace_files(root)

    committed = bootstrap_repository(executor, root, commit_message, git)

    logger.info(
        "Workspace initialized",
        extra={"root": str(root), "files": len(files_written), "committed": committed},
    )
    return ScaffoldResult(root=root, files_written=files_written, committed=committed)
