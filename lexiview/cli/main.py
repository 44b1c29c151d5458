"""Main CLI entry point for lexiview."""

import argparse
import logging
import sys

from lexiview import __version__
from lexiview.cli.commands import browse, define


def _add_lookup_options(parser: argparse.ArgumentParser) -> None:
    """Add the options shared by every lookup command."""
    parser.add_argument(
        "--languages",
        help="Comma-separated languages to show first, e.g. 'German,English'",
    )
    parser.add_argument(
        "--only-listed",
        action="store_true",
        help="Hide languages that are not named in --languages / the config",
    )
    parser.add_argument(
        "--config",
        help="Path to a JSON config file (default: ~/.lexiview/config.json)",
    )


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="lexiview",
        description="Look up words in an online dictionary and read them in the terminal",
        epilog="Use 'lexiview <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # lexiview define <word>
    define_parser = subparsers.add_parser(
        "define",
        help="Print the dictionary entry for a word",
        description="Look up a word once and print its entry grouped by language",
    )
    define_parser.add_argument("word", help="Word to look up")
    _add_lookup_options(define_parser)

    # lexiview browse [word]
    browse_parser = subparsers.add_parser(
        "browse",
        help="Browse entries interactively",
        description="Look up words and follow links, with back/forward history",
    )
    browse_parser.add_argument("word", nargs="?", help="Optional word to start with")
    _add_lookup_options(browse_parser)

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s:%(name)s: %(message)s",
    )

    # Dispatch to appropriate command
    if args.command == "define":
        return define.define_command(args)
    elif args.command == "browse":
        return browse.browse_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
