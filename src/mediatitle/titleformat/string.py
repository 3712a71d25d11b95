from .errors import ParseError
from .tokens import StringLiteral, TokenType
from .utils import ESCAPE

QUOTE = "'"

# Escapes that a quoted string keeps as written ('\n' stays a backslash and an n).
KEPT_ESCAPES = "nrtbfu"

STRUCTURAL_CHARS = "[]{}"
PART_SEPARATOR = "|"


def _escapable(in_function):
    return STRUCTURAL_CHARS + PART_SEPARATOR if in_function else STRUCTURAL_CHARS


def parse(format, pos):
    """Parse a quoted string literal.

    Return a tuple: (Token, position after the closing quote)

    The string should have the following format:
        "'" [any | "\\'" | "\\\\"]* "'"

    """
    assert format[pos] == QUOTE, "Missing starting quote"
    chars = []
    i = pos + 1
    while i < len(format):
        c = format[i]
        if c == QUOTE:
            return StringLiteral("".join(chars)), i + 1
        if c == ESCAPE:
            i += 1
            if i >= len(format):
                break
            c = format[i]
            if c in KEPT_ESCAPES:
                chars.append(ESCAPE)
        chars.append(c)
        i += 1
    raise ParseError("String has no closing quote", pos)


def parse_text(format, pos, in_function=False):
    """Parse a run of literal text.

    Return a tuple: (Text, position after the text)

    Text ends before a '[' or '{' and, inside a function branch, before a '|'
    or '}'.  A backslash escapes any of those characters and itself; any other
    backslash is kept.

    """
    stop_chars = "[{|}" if in_function else "[{"
    escapable = _escapable(in_function) + ESCAPE
    chars = []
    i = pos
    while i < len(format):
        c = format[i]
        if c == ESCAPE and i + 1 < len(format) and format[i + 1] in escapable:
            chars.append(format[i + 1])
            i += 2
            continue
        if c in stop_chars:
            break
        chars.append(c)
        i += 1
    return Text("".join(chars)), i


class Text:
    """A titleformat object holding literal text."""

    type = TokenType.TEXT

    __slots__ = ("text",)

    def __init__(self, text):
        self.text = text

    def evaluate(self, context):
        return StringLiteral(self.text)

    def __eq__(self, other):
        if not isinstance(other, Text):
            return NotImplemented
        return self.text == other.text

    def __hash__(self):
        return hash(self.text)

    def __repr__(self):
        return f"Text({self.text!r})"

    def to_string(self, in_function=False):
        escapable = _escapable(in_function) + ESCAPE
        return "".join(ESCAPE + c if c in escapable else c for c in self.text)
