"""Tokens are the typed values a title format is made of.

A compiled format is a tree of nodes whose leaves are tokens: the literal
arguments written in a format ('text', 42, 1.5, true) and every value that is
produced while the format is evaluated.  Variables are converted to literal
tokens when they are read, and built-in functions consume and return literal
tokens, so a token knows how to render itself as text and how it behaves in a
boolean context:

    empty string           -> False
    zero integer/decimal   -> False
    boolean                -> its own value
    none                   -> False
    anything else          -> True

Tokens are immutable.  The factory functions at the bottom of the module
build literal tokens from plain Python values, in the same way for every
caller, so that e.g. an integer token always holds an ``int`` and never a
``bool``.
"""

import enum
import functools
import math
import sys


class TokenType(enum.Enum):
    """The kind of a token or of a compiled node."""

    TEXT = "text"
    VARIABLE = "variable"
    FUNCTION = "function"
    LITERAL_STRING = "string"
    LITERAL_INTEGER = "integer"
    LITERAL_DECIMAL = "decimal"
    LITERAL_BOOLEAN = "boolean"
    LITERAL_NONE = "none"

    @property
    def is_literal(self):
        return self.name.startswith("LITERAL_")


def format_decimal(value: float) -> str:
    """Return the text form of a decimal value.

    Finite values use the shortest representation that reads back to the same
    double (``2.0``, ``0.1``, ``1e+16``).
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return repr(value)


def _quote(value: str) -> str:
    return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"


class Token:
    """An immutable (type, value) pair."""

    __slots__ = ("type", "value")

    def __init__(self, type, value=None):
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    @property
    def is_literal(self):
        return self.type.is_literal

    def __bool__(self):
        if self.type is TokenType.LITERAL_NONE:
            return False
        return bool(self.value)

    def __str__(self):
        if self.type is TokenType.LITERAL_NONE:
            return ""
        if self.type is TokenType.LITERAL_BOOLEAN:
            return "true" if self.value else "false"
        if self.type is TokenType.LITERAL_DECIMAL:
            return format_decimal(self.value)
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __hash__(self):
        return hash((self.type, self.value))

    def __repr__(self):
        return f"Token({self.type.name}, {self.value!r})"

    def evaluate(self, context):
        # Literals evaluate to themselves.
        return self

    def to_string(self, in_function=False):
        """Return format source that compiles back to this token."""
        if self.type is TokenType.LITERAL_STRING:
            return _quote(self.value)
        if self.type is TokenType.LITERAL_NONE:
            return ""
        return str(self)


def StringLiteral(value=""):
    """A factory function that returns a string literal token."""
    return Token(TokenType.LITERAL_STRING, str(value))


@functools.lru_cache(maxsize=None)
def _integer_bound(max_digits):
    return 10**max_digits


def check_integer_digits(value: int) -> int:
    """Return value unchanged if it can be rendered as text.

    Raise ValueError if it has more digits than the interpreter converts to
    a string (sys.get_int_max_str_digits()).
    """
    max_digits = sys.get_int_max_str_digits()
    if max_digits and abs(value) >= _integer_bound(max_digits):
        raise ValueError(f"Integer has more than {max_digits} digits")
    return value


def IntegerLiteral(value=0):
    """A factory function that returns an integer literal token."""
    if isinstance(value, bool):
        raise TypeError("Boolean values are not integers")
    return Token(TokenType.LITERAL_INTEGER, check_integer_digits(int(value)))


def DecimalLiteral(value=0.0):
    """A factory function that returns a decimal literal token."""
    if isinstance(value, bool):
        raise TypeError("Boolean values are not decimals")
    return Token(TokenType.LITERAL_DECIMAL, float(value))


def BooleanLiteral(value):
    """A factory function that returns a boolean literal token."""
    return TRUE if value else FALSE


TRUE = Token(TokenType.LITERAL_BOOLEAN, True)
FALSE = Token(TokenType.LITERAL_BOOLEAN, False)
NONE = Token(TokenType.LITERAL_NONE)
