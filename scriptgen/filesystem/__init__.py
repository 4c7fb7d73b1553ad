"""Filesystem helpers for startup tooling (existence checks, paths, scripts, permissions)."""

from .existence import file_exists, path_exists
from .paths import get_validated_full_path
from .permissions import add_permission, parse_command_and_add_execution_permission
from .scripts import write_script

__all__ = (
    "add_permission",
    "file_exists",
    "get_validated_full_path",
    "parse_command_and_add_execution_permission",
    "path_exists",
    "write_script",
)
