"""Formats command - List the named title formats with previews."""

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...config import Config, ConfigError
from ...formats import load_formats
from ...naming import PreviewMask, preview
from ...titleformat import EvaluationError
from ...translation import load_translation
from ..schemas import ErrorResponse, FormatInfo, FormatsResponse
from ..utils import ExitCode, json_output, quiet_for_json


def cmd_formats(args: argparse.Namespace) -> None:
    """List built-in and custom formats, previewed with sample values.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid preview mask
        30: Configuration error
    """
    use_json = getattr(args, "json", False)
    quiet_for_json(use_json)
    console = Console(quiet=use_json)

    if args.mask is not None and not 0 <= args.mask <= PreviewMask.ALL:
        message = f"Preview mask must be between 0 and {int(PreviewMask.ALL)}"
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=message), ExitCode.INVALID_INPUT)
        console.print(f"[red]Error:[/red] {message}")
        sys.exit(ExitCode.INVALID_INPUT)
    mask = PreviewMask(args.mask) if args.mask is not None else PreviewMask.ALL

    try:
        config = Config(args.config, strict=args.config is not None)
    except ConfigError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_config", message=str(e)), ExitCode.CONFIG_ERROR)
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.CONFIG_ERROR)

    formats = load_formats(config)
    translation = load_translation(config)
    active = formats.resolve(config.get_format_name()).name

    infos = []
    for named in formats:
        info = FormatInfo(
            name=named.name, source=named.source, builtin=named.builtin, active=named.name == active
        )
        try:
            info.preview = preview(named, mask, translation)
        except EvaluationError as e:
            info.error = str(e)
        infos.append(info)

    if use_json:
        json_output(FormatsResponse(active=active, formats=infos), ExitCode.SUCCESS)

    table = Table(title="Title Formats")
    table.add_column("Name", style="cyan")
    table.add_column("Preview", style="magenta")
    table.add_column("Format", overflow="fold")
    for info in infos:
        name = f"[bold]{info.name}[/bold] *" if info.active else info.name
        shown = escape(info.preview) if info.error is None else f"[red]{escape(info.error)}[/red]"
        table.add_row(name, shown, escape(info.source))
    console.print(table)
    console.print("[dim]* active format[/dim]")
