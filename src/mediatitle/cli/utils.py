"""Utility functions for CLI operations."""

import enum
import json
import logging
import sys
from typing import Any, Dict, List, NoReturn, Union

from pydantic import BaseModel

from ..titleformat import Variable


class ExitCode(enum.IntEnum):
    """Process exit codes shared by all commands."""

    SUCCESS = 0
    INVALID_INPUT = 10
    DATA_ERROR = 20
    CONFIG_ERROR = 30


def setup_logging(level: str) -> None:
    """Configure logging based on user-specified level.

    Args:
        level: Logging level (debug, info, warning, error, critical)
    """
    numeric_level = getattr(logging, level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {level}")

    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def quiet_for_json(use_json: bool) -> None:
    """In JSON mode, suppress INFO/DEBUG logs so stdout stays parseable."""
    if use_json and logging.getLogger().level < logging.WARNING:
        logging.getLogger().setLevel(logging.WARNING)


def json_output(data: Union[BaseModel, Dict[str, Any]], exit_code: ExitCode) -> NoReturn:
    """Print a JSON response and exit.

    Args:
        data: Pydantic response model or plain dict
        exit_code: Process exit code
    """
    if isinstance(data, BaseModel):
        print(data.model_dump_json(exclude_none=True, indent=2))
    else:
        print(json.dumps(data, indent=2))
    sys.exit(int(exit_code))


def infer_value(text: str) -> Any:
    """Convert a command-line value to an integer, decimal, boolean or string."""
    if text in ("true", "false"):
        return text == "true"
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return text


def parse_assignments(assignments: List[str], infer: bool = True) -> Dict[str, Variable]:
    """Parse name=value pairs given on the command line.

    Args:
        assignments: Strings of the form name=value
        infer: Infer the value type; otherwise every value is a string

    Raises:
        ValueError: If an assignment has no '=' or an empty name
    """
    variables = {}
    for assignment in assignments or []:
        name, sep, value = assignment.partition("=")
        name = name.strip()
        if not sep or not name:
            raise ValueError(f"Invalid variable assignment {assignment!r}, expected name=value")
        variables[name] = Variable.of(infer_value(value)) if infer else Variable.of_string(value)
    return variables
