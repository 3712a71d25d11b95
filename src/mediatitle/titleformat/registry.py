from collections.abc import Mapping
from types import MappingProxyType

VARIADIC = -1

# Number of branches of a conditional function ({?(a)|then|else}).
CONDITIONAL = 2


class BuiltinFunction:
    """A named built-in operation.

    Built-ins receive the evaluator and their *unevaluated* argument nodes, so
    each built-in decides which of its arguments get evaluated, and when.
    This is what lets ?o and ?a stop at the first argument that decides the
    result.

    Attributes:
        name: Name used in format strings
        callback: callable(context, args) returning a literal token
        arity: Exact number of arguments, or VARIADIC for any number
        branches: 0 for a plain function, CONDITIONAL for one that chooses
            between a then-branch and an else-branch
    """

    __slots__ = ("name", "callback", "arity", "branches")

    def __init__(self, name, callback, arity=0, branches=0):
        if branches not in (0, CONDITIONAL):
            raise ValueError(f"Invalid branch count for {name!r}: {branches}")
        if arity < 0 and arity != VARIADIC:
            raise ValueError(f"Invalid arity for {name!r}: {arity}")
        self.name = name
        self.callback = callback
        self.arity = arity
        self.branches = branches

    @property
    def is_variadic(self):
        return self.arity == VARIADIC

    @property
    def is_conditional(self):
        return self.branches > 0

    def accepts(self, count):
        """Test to see if the number of args is correct for the function."""
        return self.is_variadic or count == self.arity

    def __call__(self, context, args):
        return self.callback(context, args)

    def __repr__(self):
        arity = "variadic" if self.is_variadic else self.arity
        return f"BuiltinFunction({self.name!r}, arity={arity}, branches={self.branches})"


class FunctionRegistry(Mapping):
    """An immutable table of built-in functions, keyed by name.

    The compiler resolves function names against the registry it is given,
    so custom function sets can be built with ``extended``/``without``
    without touching the default table.
    """

    def __init__(self, functions=()):
        table = {}
        for function in functions:
            if function.name in table:
                raise ValueError(f"Duplicate function name: {function.name!r}")
            table[function.name] = function
        self._functions = MappingProxyType(table)

    def __getitem__(self, name):
        return self._functions[name]

    def __iter__(self):
        return iter(self._functions)

    def __len__(self):
        return len(self._functions)

    def extended(self, *functions):
        """Return a new registry with the given functions added or replaced."""
        table = dict(self._functions)
        for function in functions:
            table[function.name] = function
        return FunctionRegistry(table.values())

    def without(self, *names):
        """Return a new registry without the named functions."""
        return FunctionRegistry(f for name, f in self._functions.items() if name not in names)

    def __repr__(self):
        return "FunctionRegistry({})".format(", ".join(repr(name) for name in self))
