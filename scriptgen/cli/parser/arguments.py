from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class CLIArguments:
    """Arguments from argument parser provided for whole script generation process."""

    app_path: Path
    output_filepath: Path
    startup_command: str | None

    version: bool

    verbose: bool
    cli_debug_user_friendly_errors: bool
