"""Tests for the three validation passes, each run on its own."""

import pytest

from stackcalc.errors import BracketError, ExpressionError
from stackcalc.validate import (
    check_operator_adjacency,
    is_symbol,
    validate_brackets,
    validate_expression,
)


# --- Symbol classification ---

def test_plus_is_a_symbol():
    assert is_symbol("+")


@pytest.mark.parametrize("char", ["-", "*", "/", "(", ")", ".", "1", " "])
def test_other_operators_are_not_symbols(char):
    assert not is_symbol(char)


@pytest.mark.parametrize("char", ["$", "^", "<", "=", "~", "×"])
def test_other_symbol_categories(char):
    assert is_symbol(char)


# --- validate_expression ---

@pytest.mark.parametrize("expression", ["1+2*3", "(1+2)", "2", "-1", "*2", "1--2", "1**2"])
def test_structure_accepts(expression):
    validate_expression(expression)


@pytest.mark.parametrize("expression", [
    "",
    "+1+2",
    "1+2+",
    "1++2",
    "1-",
    "1*",
    "1/",
    "2^",
    "$3",
    "1+=2",
])
def test_structure_rejects(expression):
    with pytest.raises(ExpressionError):
        validate_expression(expression)


# --- validate_brackets ---

@pytest.mark.parametrize("expression", ["(1+2)*3", "((1+2)*3)", "1+2", "", "()"])
def test_brackets_accept(expression):
    validate_brackets(expression)


@pytest.mark.parametrize("expression", ["(1+2", "(1+2))", ")(1+2)", ")", "(()"])
def test_brackets_reject(expression):
    with pytest.raises(BracketError):
        validate_brackets(expression)


# --- check_operator_adjacency ---

@pytest.mark.parametrize("expression", ["1--2", "1+-2", "2*/3", "1++2", "1//2"])
def test_adjacency_rejects_literal_pairs(expression):
    with pytest.raises(ExpressionError):
        check_operator_adjacency(expression)


@pytest.mark.parametrize("expression", ["1- -2", "1-(-2)", "1+2", "", "-"])
def test_adjacency_only_sees_direct_neighbours(expression):
    check_operator_adjacency(expression)


def test_minus_pair_slips_past_structure_but_not_adjacency():
    validate_expression("1--2")
    validate_brackets("1--2")
    with pytest.raises(ExpressionError):
        check_operator_adjacency("1--2")
