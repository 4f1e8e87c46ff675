"""
Tarjimly CLI.
"""

import argparse
import logging

from tarjimly.cli.commands import languages, parse
from tarjimly.cli.commands.common import fail
from tarjimly.config import load_settings
from tarjimly.log import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tarjimly",
        description="Split '<text> <from language> <to language>' into a translation request",
    )
    parser.add_argument("--languages", dest="languages_path", help="JSON file of code -> language name")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command")

    parse.add_subparser(subparsers)
    languages.add_subparser(subparsers)

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = load_settings()
    except ValueError as e:
        fail(str(e))
    setup_logging(logging.DEBUG if args.verbose else settings.log_level)
    args.settings = settings

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
