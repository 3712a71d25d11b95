"""Scanning helpers shared by the titleformat parsers."""

from .errors import ParseError

ESCAPE = "\\"
DIGITS = "0123456789"

# Extra characters allowed in function names, so that built-ins can be named
# after the operator they implement ({+(a, b)}, {?=(a, b)}, {:tr(n)}).
OPERATOR_CHARS = "?!=<>+-*/%:"


def is_identifier_char(c, extended=False):
    return c.isalnum() or c == "_" or (extended and c in OPERATOR_CHARS)


def skip_whitespace(format, pos):
    """Return the position of the first non-whitespace character at or after pos."""
    while pos < len(format) and format[pos].isspace():
        pos += 1
    return pos


def read_identifier(format, pos, until, extended=False):
    """Read an identifier that is terminated by the `until` character.

    Whitespace around the identifier is skipped, but not inside it.

    Return a tuple: (identifier, position of the `until` character)
    """
    i = skip_whitespace(format, pos)
    start = i
    while i < len(format) and format[i] != until and not format[i].isspace():
        if not is_identifier_char(format[i], extended):
            raise ParseError("Invalid identifier character", i, format[i])
        i += 1
    name = format[start:i]

    i = skip_whitespace(format, i)
    if i >= len(format):
        raise ParseError(f"Missing closing {until!r}", i)
    if format[i] != until:
        raise ParseError("Invalid closing character", i, format[i])
    return name, i
