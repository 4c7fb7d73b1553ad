from pathlib import Path

from scriptgen.exceptions import ScriptGenError


class ScriptWriteError(ScriptGenError):
    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(path=path)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Failed to write output script to '{self.path}'!

Operating system reported: {self.reason}
Ensure that parent directory exists and is writable.

{self.generic_error_name}"""
