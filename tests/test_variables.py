"""Tests for tokens, variables and the variable bag."""

import pytest

from mediatitle.titleformat import Token, TokenType, Variable, Variables, VariableType
from mediatitle.titleformat.tokens import (
    FALSE,
    NONE,
    TRUE,
    BooleanLiteral,
    DecimalLiteral,
    IntegerLiteral,
    StringLiteral,
)


class TestTokens:
    """Test literal tokens."""

    def test_truthiness(self):
        assert not StringLiteral("")
        assert StringLiteral("0")
        assert not IntegerLiteral(0)
        assert IntegerLiteral(-1)
        assert not DecimalLiteral(0.0)
        assert DecimalLiteral(0.5)
        assert TRUE
        assert not FALSE
        assert not NONE

    def test_text_form(self):
        assert str(IntegerLiteral(42)) == "42"
        assert str(DecimalLiteral(1e16)) == "1e+16"
        assert str(DecimalLiteral(float("inf"))) == "Infinity"
        assert str(DecimalLiteral(float("-inf"))) == "-Infinity"
        assert str(DecimalLiteral(float("nan"))) == "NaN"
        assert str(TRUE) == "true"
        assert str(NONE) == ""

    def test_boolean_is_not_a_number(self):
        with pytest.raises(TypeError):
            IntegerLiteral(True)
        with pytest.raises(TypeError):
            DecimalLiteral(False)

    def test_boolean_literals_are_shared(self):
        assert BooleanLiteral(1) is TRUE
        assert BooleanLiteral("") is FALSE

    def test_immutable(self):
        token = StringLiteral("a")
        with pytest.raises(AttributeError):
            token.value = "b"

    def test_equality(self):
        assert StringLiteral("1") != IntegerLiteral(1)
        assert IntegerLiteral(1) == Token(TokenType.LITERAL_INTEGER, 1)
        assert len({StringLiteral("a"), StringLiteral("a")}) == 1

    def test_literal_types(self):
        assert TokenType.LITERAL_NONE.is_literal
        assert not TokenType.FUNCTION.is_literal


class TestVariable:
    """Test typed variables."""

    @pytest.mark.parametrize(
        "value,variable_type",
        [
            ("a", VariableType.STRING),
            (1, VariableType.INTEGER),
            (1.5, VariableType.DECIMAL),
            (True, VariableType.BOOLEAN),
            (None, VariableType.NONE),
            (object(), VariableType.OBJECT),
        ],
    )
    def test_type_inference(self, value, variable_type):
        assert Variable.of(value).type is variable_type

    def test_explicit_constructors(self):
        assert Variable.of_string(5).value == "5"
        assert Variable.of_decimal(2).value == 2.0
        assert Variable.of_boolean(0).value is False
        assert Variable.none().type is VariableType.NONE

    def test_invalid_values(self):
        with pytest.raises(TypeError):
            Variable.of_integer(True)
        with pytest.raises(TypeError):
            Variable.of_integer("1")
        with pytest.raises(TypeError):
            Variable.of_string(None)
        with pytest.raises(TypeError):
            Variable.of_object(None)

    def test_to_token(self):
        assert Variable.of("a").to_token() == StringLiteral("a")
        assert Variable.of(2).to_token() == IntegerLiteral(2)
        assert Variable.of(2.0).to_token() == DecimalLiteral(2.0)
        assert Variable.of(False).to_token() is FALSE
        assert Variable.of(None).to_token() is NONE
        assert Variable.of([1, 2]).to_token() == StringLiteral("[1, 2]")

    def test_immutable(self):
        variable = Variable.of(1)
        with pytest.raises(AttributeError):
            variable.value = 2

    def test_equality(self):
        assert Variable.of(1) == Variable.of_integer(1)
        assert Variable.of(1) != Variable.of_decimal(1)


class TestVariables:
    """Test the variable bag."""

    def test_mapping(self):
        variables = Variables({"a": 1}, b="x")
        assert set(variables) == {"a", "b"}
        assert len(variables) == 2
        assert variables["a"] == Variable.of_integer(1)
        assert "c" not in variables

    def test_lookup_unbound(self):
        assert Variables().lookup("missing").type is VariableType.NONE

    def test_names_must_be_strings(self):
        with pytest.raises(TypeError):
            Variables({1: "a"})

    def test_immutable(self):
        variables = Variables(a=1)
        with pytest.raises(TypeError):
            variables["a"] = 2

    def test_source_mapping_is_copied(self):
        source = {"a": 1}
        variables = Variables(source)
        source["a"] = 2
        assert variables["a"].value == 1

    def test_updated(self):
        variables = Variables(a=1)
        updated = variables.updated({"b": 2}, a="x")
        assert updated["a"].value == "x"
        assert updated["b"].value == 2
        assert variables["a"].value == 1
        assert "b" not in variables

    def test_of(self):
        variables = Variables(a=1)
        assert Variables.of(variables) is variables
        assert Variables.of(variables, b=2)["b"].value == 2
        assert len(Variables.of(None)) == 0
        assert len(Variables.empty()) == 0

    def test_repr(self):
        assert repr(Variables(b=2, a="x")) == "Variables(a='x', b=2)"
