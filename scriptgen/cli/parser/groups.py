from argparse import ArgumentParser

from scriptgen.consts import DEFAULT_APP_PATH, DEFAULT_SCRIPT_OUTPUT


def add_input_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with application input options into given parser."""
    group = parser.add_argument_group("Input", "Application source and its entrypoint")

    group.add_argument(
        "--app-path",
        "-a",
        required=False,
        default=DEFAULT_APP_PATH,
        help=f"Application source directory, must exist (default: `{DEFAULT_APP_PATH}`)",
    )

    group.add_argument(
        "--startup-command",
        "-c",
        required=False,
        default=None,
        help="Command that starts application, if it references file inside application directory that file becomes executable",
    )


def add_output_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with output options into given parser."""
    group = parser.add_argument_group("Output", "Generated script")

    group.add_argument(
        "--output",
        "-o",
        required=False,
        default=DEFAULT_SCRIPT_OUTPUT,
        help=f"Path to write startup script to (default: `{DEFAULT_SCRIPT_OUTPUT}`)",
    )


def add_debug_group(parser: ArgumentParser) -> None:
    """Construct and inject argument group with debug options into given parser."""
    group = parser.add_argument_group("Debug", "Debugging of the generator itself")

    group.add_argument(
        "--verbose",
        "-v",
        required=False,
        action="store_true",
        help="If passed will enable INFO level logs from generator.",
    )

    group.add_argument(
        "--no-user-friendly-errors",
        dest="cli_debug_user_friendly_errors",
        required=False,
        action="store_false",
        help="If passed will re-raise internal errors with traceback instead of user-friendly message.",
    )
