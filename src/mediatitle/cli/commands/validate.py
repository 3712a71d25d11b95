"""Validate command - Check that a title format compiles."""

import argparse
import sys

from rich.console import Console

from ... import titleformat
from ...titleformat import ParseError
from ..schemas import ValidationFailedResponse, ValidationSuccessResponse
from ..utils import ExitCode, json_output, quiet_for_json


def _caret_line(position: int) -> str:
    return " " * position + "^"


def cmd_validate(args: argparse.Namespace) -> None:
    """Compile a format without evaluating it.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: The format is valid
        10: The format does not compile
    """
    use_json = getattr(args, "json", False)
    quiet_for_json(use_json)
    console = Console(quiet=use_json)

    try:
        compiled = titleformat.compile(args.format)
    except ParseError as e:
        if use_json:
            json_output(
                ValidationFailedResponse(format=args.format, message=str(e), position=e.position),
                ExitCode.INVALID_INPUT,
            )
        console.print("[red bold]✗ Invalid format[/red bold]")
        console.print(f"  {e}", markup=False)
        if e.position is not None:
            console.print(f"  {args.format}", markup=False, highlight=False, soft_wrap=True)
            console.print(f"  {_caret_line(e.position)}", style="red", markup=False)
        sys.exit(ExitCode.INVALID_INPUT)

    if use_json:
        json_output(
            ValidationSuccessResponse(
                format=args.format,
                parts=len(compiled.statement),
                normalized=compiled.to_string(),
            ),
            ExitCode.SUCCESS,
        )

    console.print("[green bold]✓ Valid format[/green bold]")
