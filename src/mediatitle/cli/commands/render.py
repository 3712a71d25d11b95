"""Render command - Evaluate an ad-hoc title format."""

import argparse
import logging
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ... import titleformat
from ...constants import TRANSLATION
from ...titleformat import EvaluationError, ParseError, Variable
from ...translation import load_translation
from ..schemas import ErrorResponse, RenderSuccessResponse
from ..utils import ExitCode, json_output, parse_assignments, quiet_for_json


def cmd_render(args: argparse.Namespace) -> None:
    """Compile a format and render it with the given variables.

    Args:
        args: Parsed command-line arguments

    Exit Codes:
        0: Success
        10: Invalid input (parse error, bad variable syntax)
        20: Evaluation error
    """
    use_json = getattr(args, "json", False)
    quiet_for_json(use_json)
    console = Console(quiet=use_json)

    try:
        variables = parse_assignments(args.var)
        variables.update(parse_assignments(args.string_var, infer=False))
    except ValueError as e:
        if use_json:
            json_output(ErrorResponse(error="invalid_input", message=str(e)), ExitCode.INVALID_INPUT)
        logging.error(str(e))
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.INVALID_INPUT)

    try:
        compiled = titleformat.compile(args.format)
    except ParseError as e:
        if use_json:
            json_output(
                ErrorResponse(error="parse_error", message=str(e), position=e.position),
                ExitCode.INVALID_INPUT,
            )
        console.print(f"[red]Parse error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.INVALID_INPUT)

    bound = {name: str(variable.to_token()) for name, variable in variables.items()}
    variables.setdefault(TRANSLATION, Variable.of_object(load_translation()))

    try:
        result = compiled.evaluate(variables)
    except EvaluationError as e:
        if use_json:
            json_output(
                ErrorResponse(error="evaluation_error", message=str(e)), ExitCode.DATA_ERROR
            )
        console.print(f"[red]Evaluation error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.DATA_ERROR)

    logging.info("Rendered %r", args.format)

    if use_json:
        json_output(
            RenderSuccessResponse(format=args.format, result=result, variables=bound),
            ExitCode.SUCCESS,
        )

    if getattr(args, "show_vars", False) and bound:
        table = Table(title="Variables")
        table.add_column("Name", style="cyan")
        table.add_column("Type", style="magenta")
        table.add_column("Value")
        for name, variable in sorted(variables.items()):
            if name in bound:
                table.add_row(name, variable.type.value, bound[name])
        console.print(table)

    console.print(result, markup=False, highlight=False, emoji=False, soft_wrap=True)
