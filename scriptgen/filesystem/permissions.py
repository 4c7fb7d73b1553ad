"""System level I/O permissions.

(e.g Operating system permissions on filesystem)
Useful for making files referenced by startup command executable before invocation.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from scriptgen.consts import DEFAULT_SCRIPT_PERMISSIONS

from .existence import file_exists
from .paths import resolve_command_path

if TYPE_CHECKING:
    from os import PathLike


def add_permission(path: str | PathLike[str], permission: int) -> bool:
    """Set given permission bits on file (mode is replaced, not appended).

    :param path: Path to file, empty path is never treated as current directory
    :param permission: POSIX mode bits (e.g 0o755)
    :return: False if operating system refused to change mode (missing file, not enough privileges)
    """
    try:
        os.chmod(path, permission)  # noqa: PTH101
    except (OSError, ValueError):
        return False
    return True


def parse_command_and_add_execution_permission(
    command_string: str,
    source_path: str | PathLike[str],
) -> bool:
    """Check if the command is a file in app's source and add execution permission to it.

    :param command_string: Command token (e.g `run.sh`, `./bin/start`)
    :param source_path: Application source directory
    :return: True if referenced file exists and became executable
    :raises PathResolutionError: Joined path cannot be made absolute
    """
    absolute_filepath = resolve_command_path(command_string, source_path)
    if not file_exists(absolute_filepath):
        return False
    return add_permission(absolute_filepath, DEFAULT_SCRIPT_PERMISSIONS)
