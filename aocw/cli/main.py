# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
CLI entrypoint for aocw.

Every operation is a subcommand of `aocw`:

    aocw init ./aoc2024
    aocw run 3 --part 1 --input inputs/day03.txt
    aocw run 3                      # both parts, input from inputs/day03.txt
    aocw check 3
    aocw test 3
    aocw info

Global options (--config, --log-level, --workspace, --dry-run) are shared by
all subcommands through an argparse parent parser.
"""

import argparse
import sys
from typing import Optional, Sequence

from aocw.cli.commands import handle_check, handle_info, handle_init, handle_run, handle_test
from aocw.cli.exit_codes import USER_ERROR


def _build_global_parser(suppress_defaults: bool = False) -> argparse.ArgumentParser:
    """
    Parent parser with the options every subcommand accepts.

    The options are accepted both before and after the subcommand. The copy
    attached to the subparsers uses SUPPRESS defaults, so an option given
    before the subcommand isn't reset by the subparser.
    """
    parent = argparse.ArgumentParser(add_help=False)
    unset = argparse.SUPPRESS if suppress_defaults else None
    parent.add_argument(
        "--config",
        type=str,
        default=unset,
        help="Path to YAML configuration file.",
    )
    parent.add_argument(
        "--log-level",
        type=str,
        default=unset,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging verbosity (overrides the config file; INFO by default).",
    )
    parent.add_argument(
        "--workspace",
        type=str,
        default=unset,
        help="Workspace root for run/check/test (default: current directory).",
    )
    parent.add_argument(
        "--dry-run",
        action="store_true",
        default=argparse.SUPPRESS if suppress_defaults else False,
        dest="dry_run",
        help="Log what would be done without writing files or running tools.",
    )
    return parent


def _add_day_argument(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("day", type=int, help="Puzzle day, 1-25.")


def _register_subcommands(
    subparsers: argparse._SubParsersAction,  # type: ignore[type-arg]
    parent: argparse.ArgumentParser,
) -> None:
    init_parser = subparsers.add_parser(
        "init", parents=[parent], help="Create a workspace of 25 day crates and commit it."
    )
    init_parser.add_argument("path", type=str, help="Directory to create the workspace in.")
    init_parser.set_defaults(func=handle_init)

    run_parser = subparsers.add_parser(
        "run", parents=[parent], help="Build and run a day's solution on an input file."
    )
    _add_day_argument(run_parser)
    run_parser.add_argument(
        "--part",
        type=int,
        choices=[1, 2],
        default=None,
        help="Which part to run (default: both).",
    )
    run_parser.add_argument(
        "--input",
        type=str,
        default=None,
        dest="input_path",
        help="Input file (default: <workspace>/inputs/dayNN.txt).",
    )
    run_parser.set_defaults(func=handle_run)

    check_parser = subparsers.add_parser(
        "check", parents=[parent], help="Run `cargo check` on one day crate."
    )
    _add_day_argument(check_parser)
    check_parser.set_defaults(func=handle_check)

    test_parser = subparsers.add_parser(
        "test", parents=[parent], help="Run `cargo test` on one day crate."
    )
    _add_day_argument(test_parser)
    test_parser.set_defaults(func=handle_test)

    info_parser = subparsers.add_parser(
        "info", parents=[parent], help="Display version, environment and toolchain info."
    )
    info_parser.set_defaults(func=handle_info)


def build_parser() -> argparse.ArgumentParser:
    root_parser = argparse.ArgumentParser(
        prog="aocw",
        description="aocw: scaffold and run Advent of Code Cargo workspaces.",
        parents=[_build_global_parser()],
    )
    subparsers = root_parser.add_subparsers(dest="command")
    _register_subcommands(subparsers, _build_global_parser(suppress_defaults=True))
    return root_parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    """
    Main CLI entrypoint, referenced by [project.scripts] in pyproject.toml.

    Parses the command line, calls the subcommand's handler and exits with
    its return code. No subcommand prints help and exits with USER_ERROR.
    """
    root_parser = build_parser()
    args = root_parser.parse_args(argv)

    if getattr(args, "func", None) is None:
        root_parser.print_help()
        sys.exit(USER_ERROR)

    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
