import pytest

from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from contracts import (
    ADD,
    DIV,
    FACT,
    MUL,
    NEG,
    PERCENT,
    PLUS_MINUS,
    PLUS_MINUS_PREFIX,
    POS,
    POW,
    SUB,
    ExpressionSyntaxError,
    NumberToken,
    Paren,
)
from ports.tokenizer import Tokenizer


def _shape(tokens):
    return [t.text if isinstance(t, NumberToken) else t for t in tokens]


def test_implements_tokenizer_port():
    assert isinstance(RegexTokenizer(), Tokenizer)


def test_tokenizes_plus_minus_expression_with_positions():
    tokens = RegexTokenizer().tokenize("4 ± 1")

    assert _shape(tokens) == ["4", PLUS_MINUS, "1"]
    assert [t.position for t in tokens if isinstance(t, NumberToken)] == [0, 4]


def test_sign_is_prefix_at_start_and_after_operator():
    tokens = RegexTokenizer().tokenize("-2 - -3")

    assert _shape(tokens) == [NEG, "2", SUB, NEG, "3"]


def test_plus_minus_spellings():
    tokenizer = RegexTokenizer()

    assert _shape(tokenizer.tokenize("±3")) == [PLUS_MINUS_PREFIX, "3"]
    assert _shape(tokenizer.tokenize("2 +/- 1")) == ["2", PLUS_MINUS, "1"]
    assert _shape(tokenizer.tokenize("+2")) == [POS, "2"]


def test_sign_after_parenthesis():
    tokenizer = RegexTokenizer()

    assert _shape(tokenizer.tokenize("2*(-3)")) == ["2", MUL, Paren.OPEN, NEG, "3", Paren.CLOSE]
    assert _shape(tokenizer.tokenize("(1)-2")) == [Paren.OPEN, "1", Paren.CLOSE, SUB, "2"]


def test_postfix_operators():
    tokenizer = RegexTokenizer()

    assert _shape(tokenizer.tokenize("3!%")) == ["3", FACT, PERCENT]
    assert _shape(tokenizer.tokenize("3! - 1")) == ["3", FACT, SUB, "1"]


def test_alternative_infix_spellings():
    tokens = RegexTokenizer().tokenize("2**3×4÷5·6^7/8+9")

    assert _shape(tokens) == [
        "2", POW, "3", MUL, "4", DIV, "5", MUL, "6", POW, "7", DIV, "8", ADD, "9",
    ]


def test_decimal_literals():
    assert _shape(RegexTokenizer().tokenize(".5 + 2.25")) == [".5", ADD, "2.25"]


def test_unknown_character_raises_with_position():
    with pytest.raises(ExpressionSyntaxError) as exc_info:
        RegexTokenizer().tokenize("2 $ 3")

    assert exc_info.value.position == 2
