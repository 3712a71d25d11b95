"""Title formatting sub-package.

This package implements the title format language used to name downloaded
media.  A format string mixes literal text, variable references and calls to
built-in functions:
    [program_name] - [episode_name]
    {u([program_name])}
    {?([season])|S{f('%02d', [season])}|}

Modules:
    statement.py: Top-level statement parsing
    string.py: Literal text and quoted strings
    variable.py: Variable references ([name])
    function.py: Function calls ({name(...)|then|else}) and argument literals
    base.py: Statement and CompiledFormat
    tokens.py: Typed tokens and literal values
    variables.py: Typed input variables
    registry.py: Built-in function declarations
    builtins.py: The default built-in functions
    evaluator.py: Per-evaluation state
    utils.py: Utility functions for parsing

Main functions:
    compile(format_string): Parse a format string into a CompiledFormat
    format(format_string, variables): Render variables using a format string
"""

import logging

from . import statement
from .base import CompiledFormat as CompiledFormat
from .base import Statement as Statement
from .builtins import DEFAULT_REGISTRY as DEFAULT_REGISTRY
from .errors import EvaluationError as EvaluationError
from .errors import ParseError as ParseError
from .errors import TitleformatError as TitleformatError
from .function import Function as Function
from .registry import BuiltinFunction as BuiltinFunction
from .registry import FunctionRegistry as FunctionRegistry
from .string import Text as Text
from .tokens import Token as Token
from .tokens import TokenType as TokenType
from .variable import VariableRef as VariableRef
from .variables import Variable as Variable
from .variables import Variables as Variables
from .variables import VariableType as VariableType

logger = logging.getLogger(__name__)


def compile(format_string, registry=None):
    """Compile a format string into a CompiledFormat object.

    Args:
        format_string: Title format string
        registry: FunctionRegistry to resolve function names against
            (defaults to the built-in functions)

    Returns:
        CompiledFormat that can be evaluated any number of times

    Raises:
        ParseError: If the string is not a valid title format
    """
    if not isinstance(format_string, str):
        raise TypeError(f"Format must be a string, not {type(format_string).__name__}")
    if registry is None:
        registry = DEFAULT_REGISTRY
    titleformat, dummy_length = statement.parse(format_string, 0, registry)
    logger.debug("Compiled title format %r into %d part(s)", format_string, len(titleformat))
    return CompiledFormat(format_string, titleformat)


def format(format_string, variables=None, **kwargs):
    """Render variables using a format string.

    Args:
        format_string: Title format string
        variables: Variables bag or mapping of names to plain values
        **kwargs: Additional variables

    Returns:
        Formatted string with the variables substituted
    """
    return compile(format_string).evaluate(variables, **kwargs)


__all__ = [
    "compile",
    "format",
    "CompiledFormat",
    "Statement",
    "Function",
    "Text",
    "VariableRef",
    "Token",
    "TokenType",
    "Variable",
    "Variables",
    "VariableType",
    "BuiltinFunction",
    "FunctionRegistry",
    "DEFAULT_REGISTRY",
    "TitleformatError",
    "ParseError",
    "EvaluationError",
]
