# Author : Eshan Roy <eshanized@proton.me>
# SPDX-License-Identifier: MIT

"""
Filesystem helpers shared by the scaffolder and the runner.

Every generated file goes through atomic_write: the content lands in a temp
file next to the target and is renamed over it. A crash mid-write leaves the
old file (or no file) in place, never a truncated Cargo.toml.

The temp file is created 0600; before the rename it gets the mode of the file
it replaces, or 0666 minus the umask for a new file, as a plain open() would.
"""

import os
import shutil
import stat
import tempfile
from pathlib import Path


def _new_file_mode() -> int:
    # os.umask is the only way to read the umask; set it back straight away.
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def atomic_write(target_path: Path, content: str, encoding: str = "utf-8") -> None:
    """
    Write content to a file atomically, replacing whatever was there.

    Parent directories are created as needed. An existing file keeps its
    permission bits; a new one gets the umask-derived default.

    Raises:
        OSError: If the write or rename fails.
    """
    target_path.parent.mkdir(parents=True, exist_ok=True)

    # Same directory as the target so the rename stays on one filesystem.
    temp_fd = tempfile.NamedTemporaryFile(
        mode="w",
        encoding=encoding,
        dir=str(target_path.parent),
        prefix=".aocw_tmp_",
        suffix=".tmp",
        delete=False,
    )
    temp_path = Path(temp_fd.name)

    try:
        temp_fd.write(content)
        temp_fd.flush()
        temp_fd.close()
        if target_path.exists():
            mode = stat.S_IMODE(target_path.stat().st_mode)
        else:
            mode = _new_file_mode()
        os.chmod(temp_path, mode)
        temp_path.replace(target_path)
    except BaseException:
        temp_fd.close()
        if temp_path.exists():
            temp_path.unlink()
        raise


def safe_read(file_path: Path, encoding: str = "utf-8") -> str:
    """
    Read a text file, failing with a clear message when it isn't one.

    Raises:
        FileNotFoundError: If the path doesn't exist.
        IsADirectoryError: If the path is a directory.
    """
    if not file_path.exists():
        raise FileNotFoundError(f"File not found: {file_path}")
    if not file_path.is_file():
        raise IsADirectoryError(f"Expected a file, got a directory: {file_path}")
    return file_path.read_text(encoding=encoding)


def remove_tree(directory: Path) -> bool:
    """Delete a directory and everything under it. Returns False if it wasn't there."""
    if not directory.is_dir():
        return False
    shutil.rmtree(directory)
    return True
