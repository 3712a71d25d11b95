from . import string, variable, function
from .base import Statement


def parse(format, pos, registry, in_function=False, depth=0):
    """Parse a titleformat statement.

    Return a tuple: (Statement, position where parsing stopped)

    The string should have the following format:
        [ text | variable | function ] *

    Inside a function branch the statement ends before an unescaped '|' or
    '}'; at the top level it runs to the end of the string.

    """
    char_map = {
        "[": variable.parse,
        "{": lambda format, pos: function.parse(format, pos, registry, depth),
    }
    parts = []
    i = pos
    while i < len(format):
        c = format[i]
        if in_function and c in "|}":
            break
        if c in char_map:
            obj, i = char_map[c](format, i)
        else:
            obj, i = string.parse_text(format, i, in_function)
        parts.append(obj)
    return Statement(parts), i
