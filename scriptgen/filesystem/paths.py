"""Absolute path resolution and validation."""

from __future__ import annotations

import os
from pathlib import Path
from typing import TYPE_CHECKING

from .errors import PathDoesNotExistError, PathResolutionError
from .existence import path_exists

if TYPE_CHECKING:
    from os import PathLike


def resolve_absolute_path(path: str | PathLike[str]) -> Path:
    """Make path absolute against current working directory and normalize it lexically.

    Symlinks are not followed.

    :param path: Relative or absolute path
    :raises PathResolutionError: Current working directory is unavailable or path is malformed
    """
    try:
        return Path(os.path.abspath(path))  # noqa: PTH100
    except (OSError, ValueError) as e:
        raise PathResolutionError(path=path, reason=str(e)) from e


def get_validated_full_path(path: str | PathLike[str]) -> Path:
    """Get the full path from a (possibly relative) path, and ensure the path exists.

    Existence is only guaranteed at the time of the call.

    :param path: Relative or absolute path
    :return: Absolute path
    :raises PathResolutionError: Path cannot be made absolute
    :raises PathDoesNotExistError: Resolved path does not exist
    """
    full_path = resolve_absolute_path(path)
    if not path_exists(full_path):
        raise PathDoesNotExistError(path=full_path)
    return full_path


def resolve_command_path(
    command_string: str,
    source_path: str | PathLike[str],
) -> Path:
    """Resolve command token as absolute path within source directory.

    Leading separator does not escape source directory (`/run.sh` in `/app` is `/app/run.sh`).

    :raises PathResolutionError: Joined path cannot be made absolute
    """
    return resolve_absolute_path(Path(source_path) / command_string.lstrip("/"))
