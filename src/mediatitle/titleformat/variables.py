"""Typed input values supplied when a compiled format is evaluated."""

import enum
from collections.abc import Mapping
from types import MappingProxyType

from .tokens import (
    NONE,
    BooleanLiteral,
    DecimalLiteral,
    IntegerLiteral,
    StringLiteral,
)


class VariableType(enum.Enum):
    STRING = "string"
    INTEGER = "integer"
    DECIMAL = "decimal"
    BOOLEAN = "boolean"
    OBJECT = "object"
    NONE = "none"


class Variable:
    """A named input value whose type is fixed when it is created.

    Use the ``of_*`` constructors, or ``Variable.of`` to infer the type from a
    plain Python value.
    """

    __slots__ = ("type", "value")

    def __init__(self, type: VariableType, value=None):
        object.__setattr__(self, "type", type)
        object.__setattr__(self, "value", value)

    def __setattr__(self, name, value):
        raise AttributeError("Variable is immutable")

    @classmethod
    def of_string(cls, value) -> "Variable":
        if value is None:
            raise TypeError("String variable cannot be None")
        return cls(VariableType.STRING, str(value))

    @classmethod
    def of_integer(cls, value) -> "Variable":
        if isinstance(value, bool) or not isinstance(value, int):
            raise TypeError(f"Not an integer: {value!r}")
        return cls(VariableType.INTEGER, value)

    @classmethod
    def of_decimal(cls, value) -> "Variable":
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise TypeError(f"Not a decimal: {value!r}")
        return cls(VariableType.DECIMAL, float(value))

    @classmethod
    def of_boolean(cls, value) -> "Variable":
        return cls(VariableType.BOOLEAN, bool(value))

    @classmethod
    def of_object(cls, value) -> "Variable":
        if value is None:
            raise TypeError("Object variable cannot be None")
        return cls(VariableType.OBJECT, value)

    @classmethod
    def none(cls) -> "Variable":
        return _NONE_VARIABLE

    @classmethod
    def of(cls, value) -> "Variable":
        """Create a variable, inferring its type from the value."""
        if isinstance(value, Variable):
            return value
        if value is None:
            return _NONE_VARIABLE
        # bool before int, since bool is an int subclass
        if isinstance(value, bool):
            return cls.of_boolean(value)
        if isinstance(value, int):
            return cls.of_integer(value)
        if isinstance(value, float):
            return cls.of_decimal(value)
        if isinstance(value, str):
            return cls.of_string(value)
        return cls.of_object(value)

    def to_token(self):
        """Convert to the literal token implied by the variable type."""
        if self.type is VariableType.STRING:
            return StringLiteral(self.value)
        if self.type is VariableType.INTEGER:
            return IntegerLiteral(self.value)
        if self.type is VariableType.DECIMAL:
            return DecimalLiteral(self.value)
        if self.type is VariableType.BOOLEAN:
            return BooleanLiteral(self.value)
        if self.type is VariableType.OBJECT:
            return StringLiteral(str(self.value))
        return NONE

    def __eq__(self, other):
        if not isinstance(other, Variable):
            return NotImplemented
        return self.type is other.type and self.value == other.value

    def __repr__(self):
        return f"Variable({self.type.name}, {self.value!r})"


_NONE_VARIABLE = Variable(VariableType.NONE)


class Variables(Mapping):
    """An immutable bag of named variables.

    Values may be ``Variable`` instances or plain Python values, which are
    converted with ``Variable.of``:

        >>> Variables({"season": 2}, program_name="Show")
        Variables(program_name='Show', season=2)
    """

    def __init__(self, variables=None, **kwargs):
        items = {}
        for source in (variables or {}, kwargs):
            for name, value in source.items():
                if not isinstance(name, str):
                    raise TypeError(f"Variable name must be a string: {name!r}")
                items[name] = Variable.of(value)
        self._variables = MappingProxyType(items)

    @classmethod
    def empty(cls) -> "Variables":
        return cls()

    @classmethod
    def of(cls, variables=None, **kwargs) -> "Variables":
        if isinstance(variables, Variables) and not kwargs:
            return variables
        return cls(variables, **kwargs)

    def updated(self, variables=None, **kwargs) -> "Variables":
        """Return a new bag with the given bindings added or replaced."""
        merged = dict(self._variables)
        merged.update(variables or {})
        merged.update(kwargs)
        return Variables(merged)

    def __getitem__(self, name):
        return self._variables[name]

    def __iter__(self):
        return iter(self._variables)

    def __len__(self):
        return len(self._variables)

    def lookup(self, name: str) -> Variable:
        """Return the named variable, or a none variable if it is not bound."""
        return self._variables.get(name, _NONE_VARIABLE)

    def __repr__(self):
        items = ", ".join(
            f"{name}={variable.value!r}" for name, variable in sorted(self._variables.items())
        )
        return f"Variables({items})"
