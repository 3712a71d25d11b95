"""Built-in title format functions.

Every built-in is a callable(context, args) that receives the evaluator and
its argument nodes and returns a literal token.  Arguments are evaluated by
the built-in itself through ``context.evaluate``, which is how the variadic
?o and ?a skip the arguments they do not need.

    Conditions (usable as {name(...)|then|else}):
        ?(a)  ?!(a)  ?is(a)  ?ii(a)  ?id(a)  ?ib(a)
        ?o(a, ...)  ?a(a, ...)  ?=(a, b)  ?<(a, b)  ?>(a, b)

    Arithmetic:
        +(a, b)  -(a, b)  *(a, b)  /(a, b)  %(a, b)

    Strings:
        f(format, a, ...)  u(s)  l(s)  t(s)  tu(s)  tl(s)  r(s, find, replace)

    Translation:
        :tr(name, a, ...)

"""

import math
import operator
import re

from .. import utils
from ..constants import TRANSLATION
from .errors import EvaluationError
from .registry import CONDITIONAL, VARIADIC, BuiltinFunction, FunctionRegistry
from .tokens import (
    FALSE,
    TRUE,
    BooleanLiteral,
    DecimalLiteral,
    IntegerLiteral,
    StringLiteral,
    TokenType,
)
from .variables import VariableType


def _string(context, node, what="Argument"):
    """Evaluate a node that must produce a string; none counts as empty."""
    token = context.evaluate(node)
    if token.type is TokenType.LITERAL_STRING:
        return token.value
    if token.type is TokenType.LITERAL_NONE:
        return ""
    raise EvaluationError(f"{what} must be a string, got {token.type.value}")


# -------------------------------------------------------------------------------
# Conditions
# -------------------------------------------------------------------------------
def condition(predicate):
    """Build a one-argument condition from a predicate over a token."""

    def condition_function(context, args):
        (arg,) = args
        return BooleanLiteral(predicate(context.evaluate(arg)))

    return condition_function


def type_check(token_type):
    return condition(lambda token: token.type is token_type)


is_non_empty = condition(bool)
is_empty = condition(lambda token: not token)
is_string = type_check(TokenType.LITERAL_STRING)
is_integer = type_check(TokenType.LITERAL_INTEGER)
is_decimal = type_check(TokenType.LITERAL_DECIMAL)
is_boolean = type_check(TokenType.LITERAL_BOOLEAN)


def any_of(context, args):
    """True at the first truthy argument; later arguments are never evaluated."""
    for arg in args:
        if context.evaluate(arg):
            return TRUE
    return FALSE


def all_of(context, args):
    """False at the first falsy argument; later arguments are never evaluated."""
    for arg in args:
        if not context.evaluate(arg):
            return FALSE
    return TRUE


def comparison(compare):
    """Build a two-argument comparison.

    compare(a, b) is applied to the values of two literals of the same type.
    When either operand is none the result is true only if both are none.
    """

    def compare_function(context, args):
        a, b = [context.evaluate(arg) for arg in args]
        if a.type is TokenType.LITERAL_NONE or b.type is TokenType.LITERAL_NONE:
            return BooleanLiteral(a.type is b.type)
        if a.type is not b.type:
            raise EvaluationError(
                f"Cannot compare values of different types ({a.type.value} and {b.type.value})"
            )
        return BooleanLiteral(compare(a.value, b.value))

    return compare_function


equal = comparison(operator.eq)
less_than = comparison(operator.lt)
greater_than = comparison(operator.gt)


# -------------------------------------------------------------------------------
# Arithmetic
# -------------------------------------------------------------------------------
_NUMERIC = (TokenType.LITERAL_INTEGER, TokenType.LITERAL_DECIMAL)


def arithmetic(integer_op, decimal_op):
    """Build a two-argument math function.

    Two integers give an integer; if either operand is a decimal both are
    promoted and the result is a decimal.
    """

    def math_function(context, args):
        a, b = [context.evaluate(arg) for arg in args]
        if a.type not in _NUMERIC or b.type not in _NUMERIC:
            raise EvaluationError(
                f"Invalid type for math operation ({a.type.value} and {b.type.value})"
            )
        try:
            if a.type is b.type is TokenType.LITERAL_INTEGER:
                return IntegerLiteral(integer_op(a.value, b.value))
            return DecimalLiteral(decimal_op(float(a.value), float(b.value)))
        except ZeroDivisionError as exc:
            raise EvaluationError("Integer division by zero") from exc
        except ValueError as exc:
            raise EvaluationError(f"Integer result is too large: {exc}") from exc
        except ArithmeticError as exc:
            raise EvaluationError(f"Math operation failed: {exc}") from exc

    return math_function


def divide_integers(a, b):
    # Truncates toward zero.
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


def modulo_integers(a, b):
    # The remainder has the sign of the dividend.
    return a - b * divide_integers(a, b)


def divide_decimals(a, b):
    if b == 0.0:
        if a == 0.0 or math.isnan(a):
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def modulo_decimals(a, b):
    if b == 0.0 or math.isinf(a) or math.isnan(a) or math.isnan(b):
        return math.nan
    return math.fmod(a, b)


add = arithmetic(operator.add, operator.add)
subtract = arithmetic(operator.sub, operator.sub)
multiply = arithmetic(operator.mul, operator.mul)
divide = arithmetic(divide_integers, divide_decimals)
modulo = arithmetic(modulo_integers, modulo_decimals)


# -------------------------------------------------------------------------------
# Strings
# -------------------------------------------------------------------------------
def _format_value(token):
    if token.type in (TokenType.LITERAL_BOOLEAN, TokenType.LITERAL_NONE):
        return str(token)
    return token.value


MAX_FORMAT_WIDTH = 1024

# A literal percent sign, or the flags, width and precision of a conversion
_conversion = re.compile(r"%%|%(?:\([^)]*\))?[-#0 +]*(\*|\d+)?(?:\.(\*|\d+))?")


def _check_template(template):
    for match in _conversion.finditer(template):
        for size in match.groups():
            if size == "*":
                raise EvaluationError(f"Cannot format {template!r}: '*' sizes are not supported")
            if size and (len(size) > 6 or int(size) > MAX_FORMAT_WIDTH):
                raise EvaluationError(
                    f"Cannot format {template!r}: width or precision above {MAX_FORMAT_WIDTH}"
                )


def format_function(context, args):
    """f(format, a, ...): printf-style formatting of the remaining arguments.

    Widths and precisions are limited to MAX_FORMAT_WIDTH.
    """
    if not args:
        raise EvaluationError("Function 'f' requires a format string")
    template = _string(context, args[0], "Format string")
    _check_template(template)
    values = tuple(_format_value(context.evaluate(arg)) for arg in args[1:])
    try:
        return StringLiteral(template % values)
    except (TypeError, ValueError, KeyError, OverflowError) as exc:
        raise EvaluationError(f"Cannot format {template!r}: {exc}") from exc


def string_transform(transform):
    """Build a one-argument string function from a str -> str transform."""

    def transform_function(context, args):
        (arg,) = args
        return StringLiteral(transform(_string(context, arg)))

    return transform_function


upper = string_transform(str.upper)
lower = string_transform(str.lower)
title = string_transform(utils.title_case)
title_upper = string_transform(utils.title_upper_case)
title_lower = string_transform(utils.title_lower_case)


def replace(context, args):
    """r(s, find, replace): replace every occurrence, without patterns."""
    string, find, replacement = [_string(context, arg) for arg in args]
    return StringLiteral(string.replace(find, replacement))


# -------------------------------------------------------------------------------
# Translation
# -------------------------------------------------------------------------------
def _translator(context):
    variable = context.variables.get(TRANSLATION)
    if variable is None or variable.type is not VariableType.OBJECT:
        raise EvaluationError(f"Variable {TRANSLATION!r} is not a translation")
    translation = variable.value
    get_single = getattr(translation, "get_single", None)
    if callable(get_single):
        return get_single
    if callable(translation):
        return translation
    raise EvaluationError(f"Variable {TRANSLATION!r} is not a translation")


def translate(context, args):
    """:tr(name, a, ...): look up a translated string, passing it arguments."""
    get_single = _translator(context)
    if not args:
        raise EvaluationError("Function ':tr' requires a translation name")
    name = _string(context, args[0], "Translation name")
    params = [str(context.evaluate(arg)) for arg in args[1:]]
    # Any failure of the translation becomes an EvaluationError
    try:
        translated = get_single(name, *params)
    except Exception as exc:
        raise EvaluationError(f"Cannot translate {name!r}: {exc}") from exc
    if not isinstance(translated, str):
        raise EvaluationError(
            f"Cannot translate {name!r}: translation returned {type(translated).__name__}"
        )
    return StringLiteral(translated)


def default_functions():
    """Return the built-in functions, in the order they are documented."""
    return (
        BuiltinFunction("?", is_non_empty, 1, CONDITIONAL),
        BuiltinFunction("?!", is_empty, 1, CONDITIONAL),
        BuiltinFunction("?is", is_string, 1, CONDITIONAL),
        BuiltinFunction("?ii", is_integer, 1, CONDITIONAL),
        BuiltinFunction("?id", is_decimal, 1, CONDITIONAL),
        BuiltinFunction("?ib", is_boolean, 1, CONDITIONAL),
        BuiltinFunction("?o", any_of, VARIADIC, CONDITIONAL),
        BuiltinFunction("?a", all_of, VARIADIC, CONDITIONAL),
        BuiltinFunction("?=", equal, 2, CONDITIONAL),
        BuiltinFunction("?<", less_than, 2, CONDITIONAL),
        BuiltinFunction("?>", greater_than, 2, CONDITIONAL),
        BuiltinFunction("+", add, 2),
        BuiltinFunction("-", subtract, 2),
        BuiltinFunction("*", multiply, 2),
        BuiltinFunction("/", divide, 2),
        BuiltinFunction("%", modulo, 2),
        BuiltinFunction("f", format_function, VARIADIC),
        BuiltinFunction("u", upper, 1),
        BuiltinFunction("l", lower, 1),
        BuiltinFunction("t", title, 1),
        BuiltinFunction("tu", title_upper, 1),
        BuiltinFunction("tl", title_lower, 1),
        BuiltinFunction("r", replace, 3),
        BuiltinFunction(":tr", translate, VARIADIC),
    )


DEFAULT_REGISTRY = FunctionRegistry(default_functions())
