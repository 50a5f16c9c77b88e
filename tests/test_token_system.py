"""Tests for the tokenizer state machine and the alternation validator."""

import pytest

from core.errors import MalformedExpression, NumericOverflow
from core.token_system import (
    ExpressionValidator,
    Token,
    Tokenizer,
    TokenType,
    tokenize,
)


def _n(value):
    return Token.number(value)


def _op(symbol):
    return Token.operator(symbol)


# --- Token ---

def test_token_kinds():
    assert _n(5).type is TokenType.NUMBER
    assert _n(5).is_number and not _n(5).is_operator
    assert _op("*").type is TokenType.OPERATOR
    assert _op("*").is_operator


def test_token_equality_ignores_position():
    assert Token.number(5, 0) == Token.number(5, 7)
    assert Token.number(5) != Token.operator("+")


def test_token_is_immutable():
    tk = _n(1)
    with pytest.raises(AttributeError):
        tk.value = 2


def test_token_rejects_unknown_operator():
    with pytest.raises(ValueError):
        Token.operator("/")


# --- Scanning ---

def test_scan_simple_expression():
    assert Tokenizer.scan("5+3*2") == [_n(5), _op("+"), _n(3), _op("*"), _n(2)]


def test_scan_strips_all_whitespace():
    assert Tokenizer.scan(" 5 +\t3 *\n2 ") == Tokenizer.scan("5+3*2")


def test_whitespace_inside_digit_run_joins_digits():
    """Whitespace is removed before scanning, so "12 34" is one number."""
    assert Tokenizer.scan("12 34") == [_n(1234)]


def test_scan_leading_zeros():
    assert Tokenizer.scan("007") == [_n(7)]


def test_leading_minus_is_an_operator_token():
    assert Tokenizer.scan("-5") == [_op("-"), _n(5)]


def test_adjacent_operators_scan_separately():
    assert Tokenizer.scan("5+-3") == [_n(5), _op("+"), _op("-"), _n(3)]


def test_scan_records_original_positions():
    tokens = Tokenizer.scan(" 12 + 3")
    assert [tk.position for tk in tokens] == [1, 4, 6]


def test_scan_empty_input():
    assert Tokenizer.scan("") == []
    assert Tokenizer.scan("  \t ") == []


@pytest.mark.parametrize("expression, position", [
    ("5a", 1),
    (" 5 / 2", 3),
    ("(1+2)", 0),
    ("1.5*2", 1),
    ("²", 0),
])
def test_scan_rejects_unexpected_characters(expression, position):
    with pytest.raises(MalformedExpression) as excinfo:
        Tokenizer.scan(expression)
    assert excinfo.value.position == position
    assert excinfo.value.expression == expression


def test_scan_int64_max_fits():
    assert Tokenizer.scan("9223372036854775807") == [_n(9223372036854775807)]


def test_scan_digit_run_overflow():
    with pytest.raises(NumericOverflow) as excinfo:
        Tokenizer.scan("1 + 9223372036854775808")
    assert excinfo.value.position == 4


# --- Validation ---

def test_split_returns_numbers_and_operators():
    numbers, operators = ExpressionValidator.split(Tokenizer.scan("5+3*2"))
    assert numbers == [5, 3, 2]
    assert operators == ["+", "*"]
    assert len(numbers) == len(operators) + 1


def test_split_single_number():
    assert ExpressionValidator.split([_n(42)]) == ([42], [])


def test_split_empty():
    with pytest.raises(MalformedExpression, match="empty expression"):
        ExpressionValidator.split([])


def test_split_operators_only():
    with pytest.raises(MalformedExpression, match="no numbers"):
        ExpressionValidator.split(Tokenizer.scan("+-*"))


def test_split_leading_operator():
    with pytest.raises(MalformedExpression, match="starts with operator") as excinfo:
        ExpressionValidator.split(Tokenizer.scan("+5"))
    assert excinfo.value.position == 0


def test_split_consecutive_operators():
    with pytest.raises(MalformedExpression, match="follows another operator") as excinfo:
        ExpressionValidator.split(Tokenizer.scan("5 + * 3"))
    assert excinfo.value.position == 4


def test_split_trailing_operator():
    with pytest.raises(MalformedExpression, match="ends with operator"):
        ExpressionValidator.split(Tokenizer.scan("5+"))


def test_split_adjacent_numbers():
    with pytest.raises(MalformedExpression):
        ExpressionValidator.split([_n(1), _n(2)])


def test_is_valid():
    assert ExpressionValidator.is_valid(Tokenizer.scan("1-2*3"))
    assert not ExpressionValidator.is_valid(Tokenizer.scan("1-*3"))
    assert not ExpressionValidator.is_valid([])


def test_tokenize_guarantees_alternation():
    tokens = tokenize("10 - 3 - 2")
    assert [tk.is_number for tk in tokens] == [True, False, True, False, True]
    with pytest.raises(MalformedExpression):
        tokenize("5+-3")


def test_scan_very_long_digit_run_overflows():
    with pytest.raises(NumericOverflow) as excinfo:
        Tokenizer.scan("1" * 5000)
    assert excinfo.value.position == 0
    assert "(5000 digits)" in str(excinfo.value)


def test_scan_very_long_digit_run_after_leading_zeros_overflows():
    with pytest.raises(NumericOverflow) as excinfo:
        Tokenizer.scan("2+" + "0" * 100 + "9" * 5000)
    assert excinfo.value.position == 2


def test_scan_long_run_of_zeros_is_zero():
    assert Tokenizer.scan("0" * 5000) == [_n(0)]


def test_scan_leading_zeros_before_int64_max():
    assert Tokenizer.scan("000" + "9223372036854775807") == [_n(9223372036854775807)]
