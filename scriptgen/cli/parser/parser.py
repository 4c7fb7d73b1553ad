from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from scriptgen.cli.parser.arguments import CLIArguments

if TYPE_CHECKING:
    from argparse import Namespace


def parse_cli_arguments(args: Namespace) -> CLIArguments:
    """Parse CLI arguments from argparse into custom DTO."""
    return CLIArguments(
        # Goals.
        version=bool(args.version),
        # Rest of these are mostly goal-specific
        app_path=Path(args.app_path),
        output_filepath=Path(args.output),
        startup_command=_process_startup_command(args),
        verbose=bool(args.verbose),
        cli_debug_user_friendly_errors=bool(args.cli_debug_user_friendly_errors),
    )


def _process_startup_command(args: Namespace) -> str | None:
    """Treat whitespace-only command as missing one."""
    if args.startup_command is None or not args.startup_command.strip():
        return None
    return str(args.startup_command)
