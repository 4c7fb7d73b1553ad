"""Errors collections that filesystem helpers may raise (user-facing ones)."""

from .path_does_not_exist import PathDoesNotExistError
from .path_resolution import PathResolutionError
from .script_write import ScriptWriteError

__all__ = [
    "PathDoesNotExistError",
    "PathResolutionError",
    "ScriptWriteError",
]
