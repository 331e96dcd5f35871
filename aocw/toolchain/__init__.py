# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
External command execution for aocw.

  - executor: the CommandExecutor contract, ProcessResult, and the
    subprocess-backed implementation
  - cargo: check/test/build/run wrappers used by the runner
  - exceptions: spawn and timeout failures
"""
