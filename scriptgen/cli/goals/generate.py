import sys
from pathlib import Path
from typing import NoReturn

from scriptgen.cli.parser.arguments import CLIArguments
from scriptgen.filesystem import (
    file_exists,
    get_validated_full_path,
    parse_command_and_add_execution_permission,
    write_script,
)
from scriptgen.filesystem.paths import resolve_absolute_path, resolve_command_path
from scriptgen.output import cli_fatal_abort, cli_message
from scriptgen.startup import compose_startup_script, first_command_token
from scriptgen.startup.errors import OutputOverwritesEntrypointError


def cli_perform_generate_goal(args: CLIArguments) -> NoReturn:
    """Perform generate goal that writes startup script for application directory."""
    if args.startup_command is None:
        return cli_fatal_abort(
            "Expected startup command to be given (`--startup-command`)!",
        )

    app_path = get_validated_full_path(args.app_path)
    cli_message(
        level="INFO",
        text=f"Using application directory `{app_path}`",
        verbose=args.verbose,
    )

    entrypoint = first_command_token(args.startup_command)
    _ensure_output_is_not_entrypoint(args.output_filepath, entrypoint, app_path)

    if parse_command_and_add_execution_permission(entrypoint, app_path):
        cli_message(
            level="INFO",
            text=f"Added execution permission to `{entrypoint}` within application directory",
            verbose=args.verbose,
        )
    else:
        cli_message(
            level="INFO",
            text=f"Startup command `{entrypoint}` does not reference file within application directory, left as is",
            verbose=args.verbose,
        )

    script = compose_startup_script(app_path, args.startup_command)
    write_script(args.output_filepath, script)
    return sys.exit(0)


def _ensure_output_is_not_entrypoint(
    output: Path,
    entrypoint: str,
    app_path: Path,
) -> None:
    """Refuse to write script over file that startup command itself runs.

    :raises OutputOverwritesEntrypointError: Output and entrypoint are same file
    """
    output_path = resolve_absolute_path(output)
    entrypoint_path = resolve_command_path(entrypoint, app_path)
    if not file_exists(entrypoint_path):
        return

    same_file = output_path == entrypoint_path or (
        file_exists(output_path) and output_path.samefile(entrypoint_path)
    )
    if same_file:
        raise OutputOverwritesEntrypointError(path=output_path, entrypoint=entrypoint)
