# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Day runner: builds a throwaway driver crate around one day's part1/part2,
runs it, and reads the answer off stdout.

  - templates: driver Cargo.toml and main.rs, as pure functions
  - core: the Runner that owns the driver directory
  - exceptions: build and result-format failures
"""
