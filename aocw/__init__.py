# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
aocw: scaffolding and day runner for Advent of Code Cargo workspaces.

Subsystems:
  - scaffold: writes the workspace (25 day crates + runner stub) and commits it
  - runner: compiles and runs one day's part against an input payload
  - toolchain: the command executor that every cargo call goes through
  - vcs: the git bootstrap used by scaffold
"""

__version__ = "0.1.0"
