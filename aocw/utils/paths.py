# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Path helpers.

Cargo path dependencies are written relative to the manifest that declares
them, with forward slashes on every platform.
"""

import os
from pathlib import Path, PurePath


def ensure_directory(path: Path) -> Path:
    """Create a directory (and parents) if it doesn't exist. Returns the path for chaining."""
    path.mkdir(parents=True, exist_ok=True)
    return path


def relative_posix(target: Path, start: Path) -> str:
    """
    Express `target` relative to `start` using forward slashes.

    Both paths are resolved first so symlinked temp directories (macOS
    /var -> /private/var) don't produce a path that climbs out of the wrong root.
    """
    relative = os.path.relpath(target.resolve(), start.resolve())
    return PurePath(relative).as_posix()
