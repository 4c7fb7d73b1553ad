"""Startup script generator.

Provides filesystem helpers for startup tooling and CLI that emits startup scripts.
"""

from .filesystem import (
    add_permission,
    file_exists,
    get_validated_full_path,
    parse_command_and_add_execution_permission,
    path_exists,
    write_script,
)
from .startup import compose_startup_script

__all__ = [
    "add_permission",
    "compose_startup_script",
    "file_exists",
    "get_validated_full_path",
    "parse_command_and_add_execution_permission",
    "path_exists",
    "write_script",
]
