"""Writing executable scripts onto filesystem."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from scriptgen.consts import DEFAULT_SCRIPT_PERMISSIONS
from scriptgen.output import cli_message

from .errors import ScriptWriteError

if TYPE_CHECKING:
    from os import PathLike


def write_script(path: str | PathLike[str], content: str | bytes) -> None:
    """Write the entrypoint command to an executable file.

    File is created or truncated, then its mode is set to rwxr-xr-x
    regardless of process umask.

    :param path: Destination of script
    :param content: Script body, text is encoded as UTF-8
    :raises ScriptWriteError: Writing file or changing its mode failed
    """
    filepath = Path(path)
    cli_message("INFO", f"Writing output script to '{filepath}'")

    data = content.encode("utf-8") if isinstance(content, str) else content
    try:
        filepath.write_bytes(data)
        filepath.chmod(DEFAULT_SCRIPT_PERMISSIONS)
    except OSError as e:
        raise ScriptWriteError(path=filepath, reason=e.strerror or str(e)) from e
