from pathlib import Path

from scriptgen.exceptions import ScriptGenError


class PathDoesNotExistError(ScriptGenError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path)

    def __repr__(self) -> str:
        return f"""Path '{self.path}' does not exist.

Expected an existing file or directory at given location.
Check that application directory is mounted or path is typed correctly.

{self.generic_error_name}"""
