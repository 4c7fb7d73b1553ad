from __future__ import annotations

import shlex
from typing import TYPE_CHECKING

from scriptgen.consts import DEFAULT_SCRIPT_SHEBANG

from .errors import EmptyStartupCommandError

if TYPE_CHECKING:
    from pathlib import Path


def compose_startup_script(app_path: Path, startup_command: str) -> str:
    """Compose POSIX shell script that enters application directory and runs startup command.

    :raises EmptyStartupCommandError: Command is empty or whitespace only
    """
    command = startup_command.strip()
    if not command:
        raise EmptyStartupCommandError

    lines = (
        DEFAULT_SCRIPT_SHEBANG,
        "# Internally generated by scriptgen",
        "# Do not edit, regenerate instead",
        "",
        f"cd {shlex.quote(str(app_path))}",
        command,
    )
    return "\n".join(lines) + "\n"


def first_command_token(startup_command: str) -> str:
    """Get first shell word of command (e.g `./run.sh --port 80` -> `./run.sh`).

    Falls back to whitespace split when command has unbalanced quotes.
    """
    try:
        tokens = shlex.split(startup_command)
    except ValueError:
        tokens = startup_command.split()
    return tokens[0] if tokens else ""
