from pathlib import Path

from scriptgen.exceptions import ScriptGenError


class EmptyStartupCommandError(ScriptGenError):
    def __repr__(self) -> str:
        return f"""Startup command is empty!

Cannot compose startup script without an entrypoint command.
Pass command that starts application (e.g `--startup-command "./run.sh"`).

{self.generic_error_name}"""


class OutputOverwritesEntrypointError(ScriptGenError):
    def __init__(self, path: Path, entrypoint: str) -> None:
        super().__init__(path=path)
        self.entrypoint = entrypoint

    def __repr__(self) -> str:
        return f"""Output script '{self.path}' is the startup command entrypoint `{self.entrypoint}`!

Writing startup script there would replace application entrypoint with script that calls itself.
Pass different output location (e.g `--output startup.sh`).

{self.generic_error_name}"""
