"""CLI command implementations.

Each module in this package implements a specific mediatitle subcommand:
    render.py: Render an ad-hoc format with variables
    title.py: Render a media title with a named format
    validate.py: Check that a format compiles
    inspect.py: Show the compiled structure of a format
    formats.py: List named formats with previews
"""

from .render import cmd_render
from .title import cmd_title
from .validate import cmd_validate
from .inspect import cmd_inspect
from .formats import cmd_formats

__all__ = [
    "cmd_render",
    "cmd_title",
    "cmd_validate",
    "cmd_inspect",
    "cmd_formats",
]
