# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Git bootstrap for a freshly scaffolded workspace.

Three commands, in order: `git init`, `git add .`, `git commit -m ...`.
Each one goes through the command executor and each one is checked: a
non-zero exit raises GitError naming the step that failed. Nothing done to
the working tree before the failure is undone.

Re-running the bootstrap on an already committed workspace is allowed.
`git init` is a no-op on an existing repo, `git add` stages nothing, and the
commit fails with "nothing to commit". That one case is recognised by
asking `git status --porcelain` whether the tree is clean.
"""

from pathlib import Path

from aocw.logging.logger import get_logger
from aocw.toolchain.exceptions import ToolchainError
from aocw.toolchain.executor import CommandExecutor, ProcessResult

logger = get_logger(__name__)

DEFAULT_GIT = "git"


class GitError(ToolchainError):
    """A git command ran but exited non-zero."""

    def __init__(self, step: str, result: ProcessResult) -> None:
        detail = result.stderr.strip() or result.stdout.strip() or f"exit code {result.exit_code}"
        super().__init__(f"git {step} failed: {detail}")
        self.step = step
        self.result = result


def _checked(step: str, result: ProcessResult) -> ProcessResult:
    if not result.success:
        raise GitError(step, result)
    return result


def git_init(executor: CommandExecutor, repo_dir: Path, git: str = DEFAULT_GIT) -> ProcessResult:
    return _checked("init", executor.run(repo_dir, git, ["init"]))


def git_add_all(executor: CommandExecutor, repo_dir: Path, git: str = DEFAULT_GIT) -> ProcessResult:
    return _checked("add", executor.run(repo_dir, git, ["add", "."]))


def git_commit(
    executor: CommandExecutor,
    repo_dir: Path,
    message: str,
    git: str = DEFAULT_GIT,
) -> ProcessResult:
    """Create one commit. Returns the raw result; the caller decides on failure."""
    return executor.run(repo_dir, git, ["commit", "-m", message])


def git_is_clean(executor: CommandExecutor, repo_dir: Path, git: str = DEFAULT_GIT) -> bool:
    """True when `git status --porcelain` reports no changes."""
    result = _checked("status", executor.run(repo_dir, git, ["status", "--porcelain"]))
    return result.stdout.strip() == ""


def bootstrap_repository(
    executor: CommandExecutor,
    repo_dir: Path,
    message: str,
    git: str = DEFAULT_GIT,
) -> bool:
    """
    Initialize a repository at repo_dir, stage everything and commit it.

    Returns:
        True if a commit was created, False if the tree was already committed.

    Raises:
        GitError: init, add or commit exited non-zero (commit only when the
                  tree still has changes afterwards).
        CommandSpawnError: git itself could not be started.
    """
    git_init(executor, repo_dir, git)
    git_add_all(executor, repo_dir, git)

    commit = git_commit(executor, repo_dir, message, git)
    if commit.success:
        logger.info("Created initial commit", extra={"repo": str(repo_dir), "commit_message": message})
        return True

    if git_is_clean(executor, repo_dir, git):
        logger.info("Nothing new to commit", extra={"repo": str(repo_dir)})
        return False

    raise GitError("commit", commit)
