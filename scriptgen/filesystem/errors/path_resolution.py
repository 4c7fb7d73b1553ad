from os import PathLike

from scriptgen.exceptions import ScriptGenError


class PathResolutionError(ScriptGenError):
    def __init__(self, path: str | PathLike[str], reason: str) -> None:
        super().__init__(path=path)
        self.reason = reason

    def __repr__(self) -> str:
        return f"""Unable to resolve absolute path for '{self.path}'!

Resolving path against current working directory failed: {self.reason}

{self.generic_error_name}"""
