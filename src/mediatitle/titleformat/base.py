from .evaluator import Evaluator
from .tokens import StringLiteral, TokenType
from .variables import Variables


class Statement(tuple):
    """An immutable sequence of titleformat parts (text, variables and calls)."""

    def __new__(cls, parts=()):
        return tuple.__new__(cls, parts)

    def render(self, context):
        # The string is joined only after every part evaluated successfully.
        return "".join([str(part.evaluate(context)) for part in self])

    def evaluate(self, context):
        return StringLiteral(self.render(context))

    def __repr__(self):
        return "Statement({})".format(", ".join(repr(part) for part in self))

    def to_string(self, in_function=False):
        return "".join(part.to_string(in_function) for part in self)

    def pformat(self):
        """Return an indented dump of the statement tree."""
        return "\n".join(_pformat_helper(self))


def _pformat_helper(node, tabs=0):
    tab_char = "    "
    lines = []
    if isinstance(node, Statement):
        lines.append(tab_char * tabs + "Statement([")
        for part in node:
            lines.extend(_pformat_helper(part, tabs + 1))
            lines[-1] += ","
        lines.append(tab_char * tabs + "])")
    elif getattr(node, "type", None) is TokenType.FUNCTION:
        lines.append(tab_char * tabs + f"Function({node.name!r}, [")
        for arg in node.args:
            lines.extend(_pformat_helper(arg, tabs + 1))
            lines[-1] += ","
        if node.branches:
            lines.append(tab_char * tabs + "], branches=[")
            for branch in node.branches:
                lines.extend(_pformat_helper(branch, tabs + 1))
                lines[-1] += ","
        lines.append(tab_char * tabs + "])")
    else:
        lines.append(tab_char * tabs + repr(node))
    return lines


class CompiledFormat:
    """A compiled title format.

    A compiled format is never modified after compilation, so a single
    instance can be evaluated any number of times, from any number of threads,
    with different variables.
    """

    __slots__ = ("_source", "_statement")

    def __init__(self, source, statement):
        object.__setattr__(self, "_source", source)
        object.__setattr__(self, "_statement", statement)

    def __setattr__(self, name, value):
        raise AttributeError("CompiledFormat is immutable")

    @property
    def source(self):
        """The format string this format was compiled from."""
        return self._source

    @property
    def statement(self):
        return self._statement

    def evaluate(self, variables=None, **kwargs) -> str:
        """Render the format with the given variables.

        Args:
            variables: A Variables bag or a mapping of names to plain values
            **kwargs: Additional variables

        Returns:
            The rendered string

        Raises:
            EvaluationError: If a function receives values it cannot handle
        """
        return Evaluator(Variables.of(variables, **kwargs)).render(self._statement)

    def to_string(self):
        return self._statement.to_string()

    def pformat(self):
        return self._statement.pformat()

    def __eq__(self, other):
        if not isinstance(other, CompiledFormat):
            return NotImplemented
        return self._statement == other._statement

    def __hash__(self):
        return hash(self._statement)

    def __repr__(self):
        return f"CompiledFormat({self._source!r})"
