# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Workspace scaffolding.

  - templates: text of every generated file, as pure functions
  - workspace: writes the files and runs the git bootstrap
"""
