# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Subcommand handlers for the aocw CLI.

Each handler takes the parsed argparse namespace and returns an exit code.
Failures are logged with their context and turned into one of the codes in
exit_codes; nothing here lets an exception escape to the interpreter.

No print() calls. Answers and captured tool output go through the
structured logger like everything else.
"""

import argparse
import logging
from pathlib import Path
from typing import Optional

from aocw.cli.exit_codes import CONFIG_ERROR, RUNTIME_ERROR, SUCCESS, USER_ERROR, VALIDATION_ERROR
from aocw.config.exceptions import ConfigError
from aocw.config.loader import load_config
from aocw.config.schema import AocwConfig
from aocw.layout import InvalidDayError, InvalidPartError, PARTS, day_crate, validate_day
from aocw.logging.logger import configure_logging, get_logger
from aocw.runtime.environment import check_minimum_python
from aocw.toolchain.exceptions import ToolchainError
from aocw.toolchain.executor import SubprocessExecutor


def _load_and_configure(
    args: argparse.Namespace,
    command_name: str,
) -> tuple[int, Optional[AocwConfig], logging.Logger]:
    """
    Shared setup: load the config (if any) and apply the log level.

    Returns (exit_code, config, logger). If exit_code is not SUCCESS the
    caller returns it immediately.
    """
    logger = get_logger(f"aocw.cli.{command_name}", log_level=args.log_level or "INFO")

    config = AocwConfig.default()
    if args.config is not None:
        try:
            config = load_config(Path(args.config))
        except ConfigError as err:
            logger.error(
                "Configuration error",
                extra={"command": command_name, "error": str(err)},
            )
            return CONFIG_ERROR, None, logger

    log_level = args.log_level or config.global_config.log_level
    log_file = Path(config.global_config.log_file) if config.global_config.log_file else None
    configure_logging(log_level, log_file)

    try:
        check_minimum_python()
    except RuntimeError as err:
        logger.error("Unsupported environment", extra={"error": str(err)})
        return RUNTIME_ERROR, None, logger

    return SUCCESS, config, logger


def _make_executor(config: AocwConfig) -> SubprocessExecutor:
    return SubprocessExecutor(
        timeout_seconds=config.toolchain.timeout_seconds,
        env_overrides=config.toolchain.env,
    )


def _resolve_workspace(args: argparse.Namespace, config: AocwConfig) -> Path:
    if args.workspace is not None:
        return Path(args.workspace)
    if config.runner.workspace_root is not None:
        return Path(config.runner.workspace_root)
    return Path.cwd()


def handle_init(args: argparse.Namespace) -> int:
    """Scaffold a workspace at args.path and commit it."""
    exit_code, config, logger = _load_and_configure(args, "init")
    if exit_code != SUCCESS:
        return exit_code

    from aocw.scaffold.workspace import initialize_workspace, planned_files

    root = Path(args.path)

    if args.dry_run:
        logger.info(
            "Dry run, would scaffold workspace",
            extra={"root": str(root), "files": sorted(planned_files())},
        )
        return SUCCESS

    try:
        result = initialize_workspace(
            root,
            executor=_make_executor(config),
            commit_message=config.workspace.commit_message,
            git=config.toolchain.git,
        )
    except OSError as err:
        logger.error("Cannot write workspace", extra={"root": str(root), "error": str(err)})
        return RUNTIME_ERROR
    except ToolchainError as err:
        logger.error("Git bootstrap failed", extra={"root": str(root), "error": str(err)})
        return RUNTIME_ERROR

    logger.info(
        "Successfully initialized Advent of Code workspace",
        extra={"root": str(result.root), "committed": result.committed},
    )
    return SUCCESS


def _default_input_path(workspace: Path, config: AocwConfig, day: int) -> Path:
    return workspace / config.runner.input_directory / f"{day_crate(day)}.txt"


def handle_run(args: argparse.Namespace) -> int:
    """Run one or both parts of a day on its input and log the answers."""
    exit_code, config, logger = _load_and_configure(args, "run")
    if exit_code != SUCCESS:
        return exit_code

    from aocw.runner.core import Runner
    from aocw.runner.exceptions import BuildError, ResultParseError
    from aocw.utils.filesystem import safe_read

    try:
        day = validate_day(args.day)
    except InvalidDayError as err:
        logger.error("Invalid day", extra={"error": str(err)})
        return USER_ERROR

    parts = [args.part] if args.part is not None else list(PARTS)
    workspace = _resolve_workspace(args, config)
    input_path = (
        Path(args.input_path) if args.input_path is not None
        else _default_input_path(workspace, config, day)
    )

    try:
        input_text = safe_read(input_path)
    except OSError as err:
        logger.error("Cannot read input", extra={"input": str(input_path), "error": str(err)})
        return USER_ERROR

    if args.dry_run:
        logger.info(
            "Dry run, would run solution",
            extra={"day": day, "parts": parts, "workspace": str(workspace), "input": str(input_path)},
        )
        return SUCCESS

    try:
        with Runner(
            workspace,
            executor=_make_executor(config),
            cargo=config.toolchain.cargo,
        ) as runner:
            for part in parts:
                outcome = runner.solve(day, part, input_text)
                logger.info(
                    "Answer",
                    extra={
                        "day": day,
                        "part": part,
                        "answer": outcome.answer,
                        "elapsed_seconds": round(outcome.run.elapsed_seconds, 3),
                    },
                )
    except InvalidPartError as err:
        logger.error("Invalid part", extra={"error": str(err)})
        return USER_ERROR
    except BuildError as err:
        logger.error(
            "Build failed",
            extra={"day": day, "exit_code": err.result.exit_code, "stderr": err.stderr},
        )
        return RUNTIME_ERROR
    except ResultParseError as err:
        logger.error(
            "Solution output is not an answer",
            extra={
                "day": day,
                "part": err.part,
                "stdout": err.output,
                "stderr": err.stderr,
                "exit_code": err.exit_code,
            },
        )
        return VALIDATION_ERROR
    except (ToolchainError, OSError) as err:
        logger.error("Run failed", extra={"day": day, "error": str(err)}, exc_info=True)
        return RUNTIME_ERROR

    return SUCCESS


def _run_cargo_step(args: argparse.Namespace, command_name: str) -> int:
    """Shared body of `check` and `test`: run the cargo step and log what it printed."""
    exit_code, config, logger = _load_and_configure(args, command_name)
    if exit_code != SUCCESS:
        return exit_code

    from aocw.toolchain.cargo import cargo_check, cargo_test

    try:
        day = validate_day(args.day)
    except InvalidDayError as err:
        logger.error("Invalid day", extra={"error": str(err)})
        return USER_ERROR

    workspace = _resolve_workspace(args, config)

    if args.dry_run:
        logger.info(
            f"Dry run, would run cargo {command_name}",
            extra={"day": day, "workspace": str(workspace)},
        )
        return SUCCESS

    step = cargo_check if command_name == "check" else cargo_test
    try:
        result = step(_make_executor(config), workspace, day, config.toolchain.cargo)
    except ToolchainError as err:
        logger.error(f"cargo {command_name} failed to run", extra={"day": day, "error": str(err)})
        return RUNTIME_ERROR

    logger.info(
        f"cargo {command_name} finished",
        extra={
            "day": day,
            "exit_code": result.exit_code,
            "stdout": result.stdout,
            "stderr": result.stderr,
        },
    )
    return SUCCESS if result.success else VALIDATION_ERROR


def handle_check(args: argparse.Namespace) -> int:
    """`cargo check -p dayNN` in the workspace."""
    return _run_cargo_step(args, "check")


def handle_test(args: argparse.Namespace) -> int:
    """`cargo test -p dayNN` in the workspace."""
    return _run_cargo_step(args, "test")


def handle_info(args: argparse.Namespace) -> int:
    """Display version, environment and toolchain information."""
    exit_code, config, logger = _load_and_configure(args, "info")
    if exit_code != SUCCESS:
        return exit_code

    from aocw import __version__
    from aocw.runtime.environment import get_system_info

    system_info = get_system_info(config.toolchain.cargo, config.toolchain.git)

    logger.info(
        "System information",
        extra={
            "aocw_version": __version__,
            "python_version": system_info.python_version,
            "platform": system_info.platform,
            "architecture": system_info.architecture,
            "cargo": system_info.cargo_path,
            "git": system_info.git_path,
            "config": args.config,
        },
    )
    return SUCCESS
