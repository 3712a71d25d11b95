"""Command-line interface for mediatitle.

This package provides the 'mediatitle' command-line tool with various subcommands:
    render: Render an ad-hoc title format with variables
    title: Render a media title with the configured or a named format
    validate: Check that a title format compiles
    inspect: Show the compiled structure of a title format
    formats: List named title formats with previews

Modules:
    commands/: Command implementations
    schemas.py: Pydantic models for --json output
    utils.py: CLI utility functions
"""

import argparse
import logging
import sys

from rich_argparse import RichHelpFormatter

from .. import __version__
from .utils import setup_logging
from .commands import (
    cmd_render,
    cmd_title,
    cmd_validate,
    cmd_inspect,
    cmd_formats,
)

__all__ = [
    "main",
    "cmd_render",
    "cmd_title",
    "cmd_validate",
    "cmd_inspect",
    "cmd_formats",
    "setup_logging",
]


class RichRawHelpFormatter(RichHelpFormatter, argparse.RawDescriptionHelpFormatter):
    """Combines Rich formatting with the ability to keep line breaks (Raw)."""

    pass


EPILOG = """examples:
  mediatitle render "{u([name])}" -V name=abc
  mediatitle title "Program name" -s 2 -e 5 -n "Episode name"
  mediatitle title "Program name" -s 2 -e 5 -f builtin_2
  mediatitle validate "{?([season])|S[season]|}"
"""


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""

    # Parent parser for shared options
    parent_parser = argparse.ArgumentParser(add_help=False)

    parent_parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parent_parser.add_argument(
        "-l",
        "--log-level",
        choices=["debug", "info", "warning", "error", "critical"],
        default=None,
        help="Set logging level (disabled by default)",
    )

    parser = argparse.ArgumentParser(
        prog="mediatitle",
        usage="mediatitle <command> [options]",
        description="mediatitle - Render media titles with title format strings",
        epilog=EPILOG,
        formatter_class=RichRawHelpFormatter,
        parents=[parent_parser],
    )

    # Subcommands
    subparsers = parser.add_subparsers(
        title="Commands",
        dest="command",
        metavar="",
    )

    # ──────────────────────────────
    # render
    # ──────────────────────────────
    render_parser = subparsers.add_parser(
        "render",
        help="Render a title format with variables",
        usage="mediatitle render <format> [-V name=value] [-S name=value] [options]",
        description=(
            "Compile a title format and render it. -V infers the value type "
            "(integer, decimal, true/false, otherwise string), -S always binds a string."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    render_parser.add_argument("format", help="Title format string")
    render_parser.add_argument(
        "-V",
        "--var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a variable, inferring its type",
    )
    render_parser.add_argument(
        "-S",
        "--string-var",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Bind a string variable",
    )
    render_parser.add_argument(
        "--show-vars",
        action="store_true",
        help="Show a table of the bound variables",
    )
    render_parser.add_argument("--json", action="store_true", help="Output as JSON")
    render_parser.set_defaults(func=cmd_render)

    # ──────────────────────────────
    # title
    # ──────────────────────────────
    title_parser = subparsers.add_parser(
        "title",
        help="Render a media title",
        usage="mediatitle title <program_name> [options]",
        description="Render the title of a program with the configured or a named format",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    title_parser.add_argument("program_name", help="Name of the program")
    title_parser.add_argument("-s", "--season", help="Season number or name")
    title_parser.add_argument("-e", "--episode", help="Episode number or name")
    title_parser.add_argument("-n", "--episode-name", help="Name of the episode")
    title_parser.add_argument(
        "--split",
        action="store_true",
        help="Write season and episode as separate parts",
    )
    title_parser.add_argument(
        "-f",
        "--format",
        dest="format_name",
        metavar="NAME",
        help="Name of the title format (default: from config)",
    )
    title_parser.add_argument("-c", "--config", help="Path to configuration file")
    title_parser.add_argument(
        "--no-sanitize",
        action="store_true",
        help="Keep characters that are not allowed in file names",
    )
    title_parser.add_argument("--json", action="store_true", help="Output as JSON")
    title_parser.set_defaults(func=cmd_title)

    # ──────────────────────────────
    # validate
    # ──────────────────────────────
    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that a title format compiles",
        usage="mediatitle validate <format> [options]",
        description="Compile a title format and report where it is invalid",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    validate_parser.add_argument("format", help="Title format string")
    validate_parser.add_argument("--json", action="store_true", help="Output as JSON")
    validate_parser.set_defaults(func=cmd_validate)

    # ──────────────────────────────
    # inspect
    # ──────────────────────────────
    inspect_parser = subparsers.add_parser(
        "inspect",
        help="Show the compiled structure of a title format",
        usage="mediatitle inspect <format> [options]",
        description="Compile a title format and display its tree",
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    inspect_parser.add_argument("format", help="Title format string")
    inspect_parser.add_argument(
        "--raw",
        action="store_true",
        help="Print the plain text dump instead of a tree",
    )
    inspect_parser.set_defaults(func=cmd_inspect)

    # ──────────────────────────────
    # formats
    # ──────────────────────────────
    formats_parser = subparsers.add_parser(
        "formats",
        help="List named title formats",
        usage="mediatitle formats [options]",
        description=(
            "List the built-in and custom title formats with previews. "
            "The preview mask selects the sample values: 1=program name, "
            "2=season, 4=episode, 8=episode name, 16=split (default: all)."
        ),
        parents=[parent_parser],
        formatter_class=RichHelpFormatter,
    )
    formats_parser.add_argument("-c", "--config", help="Path to configuration file")
    formats_parser.add_argument("--mask", type=int, metavar="N", help="Preview mask")
    formats_parser.add_argument("--json", action="store_true", help="Output as JSON")
    formats_parser.set_defaults(func=cmd_formats)

    return parser


def main() -> None:
    """Main CLI entry point."""
    parser = build_parser()

    # Parse args
    args = parser.parse_args()

    # Show help if no command is provided
    if not args.command:
        parser.print_help()
        sys.exit(1)

    # Logging setup
    if args.log_level:
        setup_logging(args.log_level)
    else:
        setup_logging("critical")

    # Execute command
    try:
        args.func(args)
    except KeyboardInterrupt:
        logging.info("\nOperation cancelled by user")
        sys.exit(130)
    except Exception as e:
        logging.error(f"Error: {e}", exc_info=args.log_level == "debug")
        sys.exit(1)


if __name__ == "__main__":
    main()
