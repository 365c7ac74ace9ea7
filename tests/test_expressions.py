import pytest

from stacklab.expressions import (
    infix_to_postfix,
    infix_to_prefix,
    is_palindrome,
    parentheses_balanced,
    precedence,
    reverse_string,
)
from stacklab.stack import StackFullError


@pytest.mark.parametrize(
    "op, expected",
    [("+", 1), ("-", 1), ("*", 2), ("/", 2), ("^", 3), ("(", 0), ("a", 0)],
)
def test_precedence(op, expected):
    assert precedence(op) == expected


def test_reverse_string_round_trip():
    text = "Hola mundo"
    assert reverse_string(reverse_string(text)) == text
    assert reverse_string(text)[0] == text[-1]


def test_reverse_empty():
    assert reverse_string("") == ""


def test_postfix_respects_precedence():
    assert infix_to_postfix("a+b*c") == "abc*+"


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(a+b)*c") == "ab+c*"


def test_prefix_with_parentheses():
    assert infix_to_prefix("(a+b)*c") == "*+abc"


@pytest.mark.parametrize("expression", ["a+b*c", "(a+b)*c", "x^y-z/2", "((p))"])
def test_postfix_keeps_operands_in_order(expression):
    operands = [c for c in expression if c.isalnum()]
    result = infix_to_postfix(expression)
    assert [c for c in result if c.isalnum()] == operands
    assert "(" not in result and ")" not in result


@pytest.mark.parametrize("expression", ["a+b*c", "(a-b)/(c+d)", "a^b"])
def test_conversions_preserve_symbol_count(expression):
    stripped = expression.replace("(", "").replace(")", "")
    assert sorted(infix_to_postfix(expression)) == sorted(stripped)
    assert sorted(infix_to_prefix(expression)) == sorted(stripped)


def test_single_operand_is_unchanged():
    assert infix_to_postfix("x") == "x"
    assert infix_to_prefix("x") == "x"


def test_unmatched_close_paren_is_ignored():
    assert infix_to_postfix("a)") == "a"


@pytest.mark.parametrize(
    "expression, expected",
    [
        ("(a+b)*(c-d)", True),
        ("((1+2)", False),
        ("(1+2))", False),
        (")(", False),
        ("", True),
        ("no parens", True),
    ],
)
def test_parentheses_balanced(expression, expected):
    assert parentheses_balanced(expression) is expected


def test_parentheses_overflow_raises():
    with pytest.raises(StackFullError):
        parentheses_balanced("(" * 101)


@pytest.mark.parametrize(
    "word, expected",
    [("reconocer", True), ("anilina", True), ("palabra", False), ("", True), ("Aa", False)],
)
def test_is_palindrome(word, expected):
    assert is_palindrome(word) is expected


def test_palindrome_of_word_joined_with_its_reverse():
    word = "stack"
    assert is_palindrome(word + reverse_string(word))