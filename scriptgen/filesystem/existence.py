"""Existence checks over filesystem entries."""

from __future__ import annotations

import os
import stat
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from os import PathLike


def path_exists(path: str | PathLike[str]) -> bool:
    """Check whether anything (file or directory) exists at given path.

    Only an explicit `not found` from the operating system means absence,
    other stat failures (e.g permission denied on parent) are treated as existing entry.
    Empty path is reported as not found by the operating system.
    """
    try:
        os.stat(path)  # noqa: PTH116
    except FileNotFoundError:
        return False
    except (OSError, ValueError):
        return True
    return True


def file_exists(path: str | PathLike[str]) -> bool:
    """Check whether given path exists and is not an directory.

    Any stat failure is treated as missing file.
    """
    try:
        st = os.stat(path)  # noqa: PTH116
    except (OSError, ValueError):
        return False
    return not stat.S_ISDIR(st.st_mode)
