from .errors import ParseError
from .tokens import TokenType
from . import utils


def parse(format, pos):
    """Parse a variable reference.

    Return a tuple: (VariableRef, position after the closing bracket)

    The string should have the following format:
        '[' whitespace* identifier whitespace* ']'

    """
    assert format[pos] == "[", "Missing starting square bracket"
    name, end = utils.read_identifier(format, pos + 1, "]")
    if not name:
        raise ParseError("Variable has no name", pos)
    return VariableRef(name), end + 1


class VariableRef:
    """A titleformat object that references a variable."""

    type = TokenType.VARIABLE

    __slots__ = ("name",)

    def __init__(self, name):
        self.name = name

    def evaluate(self, context):
        return context.variable(self.name)

    def __eq__(self, other):
        if not isinstance(other, VariableRef):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __repr__(self):
        return f"VariableRef({self.name!r})"

    def to_string(self, in_function=False):
        return "[" + self.name + "]"
