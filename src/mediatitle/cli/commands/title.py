"""Title command - Render a media title with a named format."""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape

from ...config import Config, ConfigError
from ...formats import load_formats
from ...naming import media_title
from ...titleformat import EvaluationError
from ...translation import load_translation
from ..schemas import ErrorResponse, TitleSuccessResponse
from ..utils import ExitCode, json_output, quiet_for_json


def cmd_title(args: argparse.Namespace) -> None:
    """Render the title of a program, season and episode.

    The format is the one given with -f, or else the configured format.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (blank program name)
        20: Evaluation error
        30: Configuration error
    """
    use_json = getattr(args, "json", False)
    quiet_for_json(use_json)
    console = Console(quiet=use_json)

    try:
        config = Config(args.config, strict=args.config is not None)
    except ConfigError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_config", message=str(e)), ExitCode.CONFIG_ERROR)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.CONFIG_ERROR)

    formats = load_formats(config)
    named = formats.resolve(args.format_name or config.get_format_name())
    sanitize = config.get_sanitize() and not args.no_sanitize
    logging.info("Using title format %r", named.name)

    try:
        title = media_title(
            args.program_name,
            season=args.season,
            episode=args.episode,
            episode_name=args.episode_name,
            split=args.split,
            title_format=named,
            translation=load_translation(config),
            sanitize=sanitize,
        )
    except ValueError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=str(e)), ExitCode.INVALID_INPUT)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.INVALID_INPUT)
    except EvaluationError as e:
        if use_json:
            json_output(
                ErrorResponse(error="evaluation_error", message=str(e)), ExitCode.DATA_ERROR
            )
        console.print(f"[red]Evaluation error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.DATA_ERROR)

    if use_json:
        json_output(
            TitleSuccessResponse(title=title, format_name=named.name, sanitized=sanitize),
            ExitCode.SUCCESS,
        )

    console.print(title, markup=False, highlight=False, emoji=False, soft_wrap=True)
