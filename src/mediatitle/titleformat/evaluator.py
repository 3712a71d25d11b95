from .errors import EvaluationError
from .tokens import NONE


class Evaluator:
    """The working state of a single evaluation.

    Nodes call back into the evaluator to resolve variables and to evaluate
    their children, so evaluation is a plain recursive walk over the compiled
    tree.  The tree itself is never modified; everything that belongs to one
    evaluation lives here.
    """

    __slots__ = ("variables",)

    def __init__(self, variables):
        self.variables = variables

    def variable(self, name):
        """Return the literal token for a variable, or none if it is unbound."""
        variable = self.variables.get(name)
        if variable is None:
            return NONE
        try:
            return variable.to_token()
        except ValueError as exc:
            raise EvaluationError(f"Variable {name!r} cannot be used: {exc}") from exc

    def evaluate(self, node):
        return node.evaluate(self)

    def render(self, statement):
        return statement.render(self)
