"""Goals for CLI (e.g generate script, show version) as different goals that output different result."""

import sys
from time import perf_counter_ns
from typing import NoReturn

from scriptgen.cli.goals.generate import cli_perform_generate_goal
from scriptgen.cli.goals.version import cli_perform_version_goal
from scriptgen.output import cli_message
from scriptgen.cli.parser.arguments import CLIArguments

NANOS_TO_SECONDS = 1_000_000_000


def perform_desired_toolchain_goal(args: CLIArguments) -> NoReturn:
    """Perform goal base on CLI arguments, by default fall into generate goal."""
    start = perf_counter_ns()
    try:
        if args.version:
            return cli_perform_version_goal(args)

        return cli_perform_generate_goal(args)
    except SystemExit as e:
        end = perf_counter_ns()
        time_taken = (end - start) / NANOS_TO_SECONDS
        cli_message(
            "INFO",
            f"Performing an goal took {time_taken:.2f} seconds!",
            verbose=args.verbose,
        )
        sys.exit(e.code)
