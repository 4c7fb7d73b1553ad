from argparse import ArgumentParser

from scriptgen.cli.parser import groups


def build_cli_parser(prog: str) -> ArgumentParser:
    """Get argument parser instance to parse incoming arguments."""
    parser = ArgumentParser(
        description="Startup script generator - CLI for emitting executable startup scripts for applications",
        usage=f"{prog} [options] [-h]",
        add_help=True,
        allow_abbrev=False,
        prog=prog,
    )

    parser.add_argument(
        "--version",
        default=False,
        action="store_true",
        help="Show version info",
    )

    groups.add_input_group(parser)
    groups.add_output_group(parser)
    groups.add_debug_group(parser)
    return parser
