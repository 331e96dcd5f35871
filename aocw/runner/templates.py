# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Source text of the driver crate the runner compiles for each run.

The driver depends on exactly one day crate and embeds the input with
include_str!, so the payload is baked in at compile time. That is why the
runner rewrites main.rs on every call even when only the input changed.
"""

import re
import textwrap

from aocw.layout import DRIVER_DIR_PREFIX, INPUT_FILE, day_crate, validate_part

DRIVER_PACKAGE = "aoc-runner"


def driver_manifest(day: int, dependency_path: str, package: str = DRIVER_PACKAGE) -> str:
    """
    Cargo.toml of the driver crate.

    Args:
        day: Day whose crate becomes the only dependency.
        dependency_path: Path from the driver directory to the day crate,
                         forward slashes, e.g. "../day01".
        package: Package name of the driver itself.
    """
    crate = day_crate(day)
    return textwrap.dedent(f"""\
        [package]
        name = "{package}"
        version = "0.1.0"
        edition = "2021"

        [dependencies]
        {crate} = {{ path = "{dependency_path}" }}
    """)


def driver_main(day: int, part: int) -> str:
    """src/main.rs: call dayNN::partP on the embedded input and print the bare number."""
    crate = day_crate(day)
    validate_part(part)
    return textwrap.dedent(f"""\
        fn main() {{
            let input = include_str!("../{INPUT_FILE}");
            let result = {crate}::part{part}(input);
            println!("{{}}", result);
        }}
    """)


def idle_driver_manifest(package: str = DRIVER_PACKAGE) -> str:
    """
    Cargo.toml for a driver that hasn't been pointed at a day yet.

    The driver directory matches the workspace's `.tmp*` member glob from the
    moment it exists, and cargo refuses to load a workspace whose member has
    no manifest. This keeps `cargo check -p dayNN` working in between runs.
    """
    return textwrap.dedent(f"""\
        [package]
        name = "{package}"
        version = "0.1.0"
        edition = "2021"

        [dependencies]
    """)


def idle_driver_main() -> str:
    return "fn main() {}\n"


def driver_package_name(driver_dir_name: str) -> str:
    """
    Package name for a driver living in a directory called driver_dir_name.

    Each driver directory is its own workspace member, and cargo rejects a
    workspace with two packages of the same name, so the directory suffix is
    folded into the name: ".tmpa1b2c3" -> "aoc-runner-a1b2c3".
    """
    suffix = driver_dir_name.removeprefix(DRIVER_DIR_PREFIX)
    suffix = re.sub(r"[^A-Za-z0-9_-]", "_", suffix).strip("_-").lower()
    return f"{DRIVER_PACKAGE}-{suffix}" if suffix else DRIVER_PACKAGE
