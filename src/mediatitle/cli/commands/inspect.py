"""Inspect command - Display the compiled structure of a title format."""

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from ... import titleformat
from ...titleformat import ParseError, TokenType
from ..utils import ExitCode


def _label(node) -> str:
    node_type = getattr(node, "type", None)
    if node_type is TokenType.TEXT:
        return f"[green]text[/green] {escape(repr(node.text))}"
    if node_type is TokenType.VARIABLE:
        return f"[cyan]variable[/cyan] {escape(node.name)}"
    if node_type is TokenType.FUNCTION:
        return f"[magenta]function[/magenta] {escape(node.name)}"
    return f"[yellow]{node_type.value}[/yellow] {escape(node.to_string())}"


def _add_statement(tree: Tree, statement) -> None:
    for part in statement:
        _add_node(tree, part)


def _add_node(tree: Tree, node) -> None:
    branch = tree.add(_label(node))
    if getattr(node, "type", None) is not TokenType.FUNCTION:
        return
    for arg in node.args:
        _add_node(branch, arg)
    for label, statement in zip(("then", "else"), node.branches):
        _add_statement(branch.add(f"[dim]{label}[/dim]"), statement)


def cmd_inspect(args: argparse.Namespace) -> None:
    """Show the tree a format compiles to.

    Args:
        args: Parsed command-line arguments
    """
    console = Console()

    try:
        compiled = titleformat.compile(args.format)
    except ParseError as e:
        console.print(f"[red]Parse error:[/red] {escape(str(e))}")
        sys.exit(ExitCode.INVALID_INPUT)

    if args.raw:
        console.print(compiled.pformat(), markup=False, highlight=False, soft_wrap=True)
        return

    tree = Tree(f"[bold]format[/bold] {escape(repr(compiled.source))}")
    _add_statement(tree, compiled.statement)
    console.print(tree)
