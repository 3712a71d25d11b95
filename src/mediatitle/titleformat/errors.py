"""Exceptions raised while compiling and evaluating title formats."""

from typing import Optional


class TitleformatError(Exception):
    """Base class for all title format errors."""


class ParseError(TitleformatError):
    """A format string does not follow the grammar.

    Raised by the compiler only; a format that compiled never raises this
    error when it is evaluated.

    Attributes:
        message: Description of the problem
        position: Offset into the format string, or None
        char: The offending character, or None at the end of the input
    """

    def __init__(
        self, message: str, position: Optional[int] = None, char: Optional[str] = None
    ):
        self.message = message
        self.position = position
        self.char = char
        super().__init__(self._describe())

    def _describe(self) -> str:
        ret = self.message
        if self.position is not None:
            ret += f" at position {self.position}"
        if self.char is not None:
            ret += f" (char={self.char!r})"
        return ret


class EvaluationError(TitleformatError):
    """A compiled format cannot be evaluated with the given variables."""
