from __future__ import annotations

import sys
from pathlib import Path

from scriptgen.cli.errors import cli_scriptgen_error_handler
from scriptgen.cli.goals import perform_desired_toolchain_goal
from scriptgen.cli.parser.builder import build_cli_parser
from scriptgen.cli.parser.parser import parse_cli_arguments
from scriptgen.output import cli_message


def cli_entry_point(prog: str | None = None, argv: list[str] | None = None) -> None:
    """CLI main entry."""
    if prog is None:
        prog = Path(sys.argv[0]).name
        warn_on_improper_installation(prog)

    parser = build_cli_parser(prog)
    args = parse_cli_arguments(parser.parse_args(argv))
    wrapper = cli_scriptgen_error_handler(
        debug_user_friendly_errors=args.cli_debug_user_friendly_errors,
    )

    with wrapper:
        # Wrap goal into error handler as in unwraps errors into user-friendly ones (except internal ones as bugs)
        perform_desired_toolchain_goal(args)

    # This is unreachable but error wrapper must fail
    cli_message("ERROR", "Bug in an CLI: generator must perform at least one goal!")
    sys.exit(1)


def warn_on_improper_installation(prog: str) -> None:
    """Warn if user is calling CLI as Python module (`python -m scriptgen`) instead of `scriptgen` script."""
    if not prog.endswith(".py"):
        return
    cli_message(
        level="WARNING",
        text=f"Running with prog == '{prog}', consider installing package and calling `scriptgen`!",
        verbose=True,  # Arguments are not parsed yet, so verbosity is unknown.
    )


if __name__ == "__main__":
    cli_entry_point(prog=None)
