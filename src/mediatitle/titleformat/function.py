import re

from . import string, variable, utils
from .errors import ParseError
from .tokens import FALSE, TRUE, DecimalLiteral, IntegerLiteral, TokenType

_number = re.compile(r"[+-]?[0-9]+(\.[0-9]*)?([eE][+-]?[0-9]+)?")

# Maximum nesting of function calls, counting both arguments and branches.
MAX_DEPTH = 64

KEYWORDS = (
    ("true", TRUE),
    ("false", FALSE),
)


def parse(format, pos, registry, depth=0):
    """Parse a titleformat function call.

    Return a tuple: (Function, position after the closing brace)

    The string should have the following format:
        '{' name '(' [ argument [ ',' argument ]* ] ')' [ '|' statement '|' statement ] '}'

    The name is resolved against the registry here, and the number of
    arguments and branches is checked against the built-in's declaration, so
    a compiled call is always well formed.

    depth is the number of calls this one is nested in.

    """
    assert format[pos] == "{", "Missing starting curly bracket"
    depth += 1
    if depth > MAX_DEPTH:
        raise ParseError("Format is nested too deeply", pos)
    name, i = utils.read_identifier(format, pos + 1, "(", extended=True)
    if not name:
        raise ParseError("Function call has no name", pos)
    if name not in registry:
        raise ParseError(f"Unknown function {name!r}", pos)
    builtin = registry[name]

    args, i = parse_arguments(format, i, registry, depth)
    if not builtin.accepts(len(args)):
        raise ParseError(
            f"Function {name!r} takes {builtin.arity} argument(s), got {len(args)}",
            pos,
        )

    branches = ()
    i = utils.skip_whitespace(format, i)
    if builtin.branches and i < len(format) and format[i] == string.PART_SEPARATOR:
        branches, i = parse_branches(format, i, builtin.branches, registry, depth)

    i = utils.skip_whitespace(format, i)
    if i >= len(format):
        raise ParseError("Function call has no closing bracket", i)
    if format[i] != "}":
        raise ParseError("Function call has no closing bracket", i, format[i])
    return Function(name, builtin, args, branches), i + 1


def parse_arguments(format, pos, registry, depth=1):
    """Parse a parenthesized argument list.

    Return a tuple: (tuple of arguments, position after the closing bracket)
    """
    assert format[pos] == "(", "Missing starting bracket"
    args = []
    i = utils.skip_whitespace(format, pos + 1)
    if i < len(format) and format[i] == ")":
        return (), i + 1
    while True:
        arg, i = parse_argument(format, i, registry, depth)
        args.append(arg)
        i = utils.skip_whitespace(format, i)
        if i >= len(format):
            raise ParseError("Function arguments have no closing bracket", i)
        c = format[i]
        if c == ")":
            return tuple(args), i + 1
        if c != ",":
            raise ParseError("Invalid function argument separator or closing", i, c)
        i = utils.skip_whitespace(format, i + 1)


def parse_argument(format, pos, registry, depth=1):
    """Parse a single argument: a variable, a call, or a literal."""
    if pos >= len(format):
        raise ParseError("Function arguments have no closing bracket", pos)
    c = format[pos]
    if c == "[":
        return variable.parse(format, pos)
    if c == "{":
        return parse(format, pos, registry, depth)
    if c == string.QUOTE:
        return string.parse(format, pos)
    if c in ",)":
        raise ParseError("Empty function argument", pos, c)
    if c in "+-" or c in utils.DIGITS:
        return parse_number(format, pos)
    for keyword, token in KEYWORDS:
        if format.startswith(keyword, pos):
            return token, pos + len(keyword)
    raise ParseError("Invalid function argument", pos, c)


def parse_number(format, pos):
    """Parse an integer or decimal literal.

    Return a tuple: (Token, position after the number)

    The string should have the following format:
        [ '+' | '-' ] digit+ [ '.' digit* ] [ ( 'e' | 'E' ) [ '+' | '-' ] digit+ ]

    A fraction or an exponent makes the number a decimal.
    """
    match = _number.match(format, pos)
    if match is None:
        raise ParseError("Number has no digits", pos)
    text = match.group(0)
    if match.group(1) or match.group(2):
        return DecimalLiteral(float(text)), match.end()
    try:
        return IntegerLiteral(int(text)), match.end()
    except ValueError as exc:
        raise ParseError("Integer literal is too long", pos) from exc


def parse_branches(format, pos, count, registry, depth=1):
    """Parse the '|'-separated branches of a conditional call.

    Return a tuple: (tuple of Statements, position after the last branch)
    """
    # Local import to break the circle
    from . import statement

    branches = []
    i = pos
    for _ in range(count):
        if i >= len(format):
            raise ParseError("Function call has no closing bracket", i)
        if format[i] != string.PART_SEPARATOR:
            raise ParseError("Missing function call part separator", i, format[i])
        branch, i = statement.parse(format, i + 1, registry, in_function=True, depth=depth)
        branches.append(branch)
    return tuple(branches), i


class Function:
    """A titleformat object representing a call to a built-in function."""

    type = TokenType.FUNCTION

    __slots__ = ("name", "function", "args", "branches")

    def __init__(self, name, function, args=(), branches=()):
        self.name = name
        self.function = function
        self.args = tuple(args)
        self.branches = tuple(branches)

    def evaluate(self, context):
        result = self.function(context, self.args)
        if not self.branches:
            return result
        # Only the chosen branch is evaluated
        branch = self.branches[0] if result else self.branches[1]
        return branch.evaluate(context)

    def __eq__(self, other):
        if not isinstance(other, Function):
            return NotImplemented
        return (
            self.name == other.name
            and self.function is other.function
            and self.args == other.args
            and self.branches == other.branches
        )

    def __hash__(self):
        return hash((self.name, self.args, self.branches))

    def __repr__(self):
        if self.branches:
            return f"Function({self.name!r}, {list(self.args)!r}, branches={list(self.branches)!r})"
        return f"Function({self.name!r}, {list(self.args)!r})"

    def to_string(self, in_function=False):
        ret = "{" + self.name + "(" + ", ".join(arg.to_string() for arg in self.args) + ")"
        for branch in self.branches:
            ret += string.PART_SEPARATOR + branch.to_string(in_function=True)
        return ret + "}"
