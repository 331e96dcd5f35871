# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Text of every file the scaffolder writes.

These are pure functions: no filesystem access, no globals that change.
Same arguments, same text, which is what makes `aocw init` safe to re-run
over an existing workspace.
"""

import textwrap

from aocw.layout import day_crate, validate_day, workspace_members

ANYHOW_VERSION = "1.0.75"
PUZZLE_YEAR = 2024
_MEMBERS_PER_LINE = 5


def workspace_manifest() -> str:
    """
    Top-level Cargo.toml.

    The member list is always runner, the driver glob, then day01..day25,
    five days per line.
    """
    members = workspace_members()
    head, days = members[:2], members[2:]

    lines = ["    " + ",".join(f'"{name}"' for name in head) + ","]
    for start in range(0, len(days), _MEMBERS_PER_LINE):
        chunk = ", ".join(f'"{name}"' for name in days[start:start + _MEMBERS_PER_LINE])
        is_last = start + _MEMBERS_PER_LINE >= len(days)
        lines.append("    " + chunk + ("" if is_last else ","))

    return (
        "[workspace]\n"
        "members = [\n"
        + "\n".join(lines)
        + "\n]\n"
        'resolver = "2"\n'
        "\n"
        "[workspace.dependencies]\n"
        f'anyhow = "{ANYHOW_VERSION}"\n'
    )


def runner_manifest() -> str:
    return textwrap.dedent("""\
        [package]
        name = "runner"
        version = "0.1.0"
        edition = "2021"

        [dependencies]
        anyhow.workspace = true
    """)


def runner_main() -> str:
    """
    Entry point of the runner stub crate.

    The placeholders (INPUT_PATH, TARGET_CRATE, partN, DAY, PART) are left
    unresolved on purpose; this crate does not compile until edited.
    """
    return textwrap.dedent("""\
        fn main() {
            let input = include_str!("INPUT_PATH");
            let result = TARGET_CRATE::partN(input);
            println!("Day {} Part {}: {}", DAY, PART, result);
        }
    """)


def day_manifest(day: int) -> str:
    name = day_crate(day)
    return textwrap.dedent(f"""\
        [package]
        name = "{name}"
        version = "0.1.0"
        edition = "2021"

        [dependencies]
        anyhow.workspace = true

        [lib]
        name = "{name}"
        path = "src/lib.rs"
    """)


def day_library(day: int) -> str:
    """src/lib.rs of a day crate: part1/part2 stubs returning 0, plus their tests."""
    validate_day(day)
    return textwrap.dedent(f"""\
        //! Solution for Advent of Code {PUZZLE_YEAR}, Day {day}

        pub fn part1(input: &str) -> usize {{
            // TODO: Implement part 1 solution
            0
        }}

        pub fn part2(input: &str) -> usize {{
            // TODO: Implement part 2 solution
            0
        }}

        #[cfg(test)]
        mod tests {{
            use super::*;

            #[test]
            fn test_part1() {{
                let input = "";
                assert_eq!(part1(input), 0);
            }}

            #[test]
            fn test_part2() {{
                let input = "";
                assert_eq!(part2(input), 0);
            }}
        }}
    """)


def gitignore() -> str:
    return textwrap.dedent("""\
        # Generated by Cargo
        /target/
        Cargo.lock

        # Editor specific files
        .idea/
        .vscode/
        *.swp
        *.swo

        # macOS specific files
        .DS_Store

        # Project specific
        /inputs/
        .tmp*
    """)
