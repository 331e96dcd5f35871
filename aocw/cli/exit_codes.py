# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Process exit codes of the `aocw` command.

  USER_ERROR        bad day/part, missing input file, no subcommand
  CONFIG_ERROR      config file missing, unreadable or invalid
  RUNTIME_ERROR     filesystem failure, git/cargo failure, build failure
  VALIDATION_ERROR  the solution ran but its output isn't an answer, or
                    check/test reported problems
"""

SUCCESS: int = 0
USER_ERROR: int = 1
CONFIG_ERROR: int = 2
RUNTIME_ERROR: int = 3
VALIDATION_ERROR: int = 4
