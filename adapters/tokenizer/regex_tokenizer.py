"""
Adapter: RegexTokenizer
Implementuje port Tokenizer.

Rozpoznawane symbole:
  liczby      — 3, 2.5, .5
  infix       — + - * / ^ ±, a także × ÷ · ** oraz +/- (= ±)
  prefix      — + - ± na początku, po operatorze lub po "("
  postfix     — ! %
  nawiasy     — ( )
"""
from __future__ import annotations

import re

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
    InfixOperator,
    NumberToken,
    Paren,
    PostfixOperator,
    PrefixOperator,
    Token,
)

_TOKEN_RE = re.compile(r"""
    (?P<number>\d+(?:\.\d*)?|\.\d+)
  | (?P<sign>\+/-|±|\+|-)
  | (?P<infix>\*\*|[*/^×÷·])
  | (?P<postfix>[!%])
  | (?P<paren>[()])
  | (?P<space>\s+)
""", re.VERBOSE)

# Znaki, które mogą być prefiksem albo infiksem (zależnie od kontekstu)
_SIGNS: dict[str, tuple[PrefixOperator, InfixOperator]] = {
    "+":   (POS, ADD),
    "-":   (NEG, SUB),
    "±":   (PLUS_MINUS_PREFIX, PLUS_MINUS),
    "+/-": (PLUS_MINUS_PREFIX, PLUS_MINUS),
}

_INFIX: dict[str, InfixOperator] = {
    "^": POW, "**": POW,
    "*": MUL, "×": MUL, "·": MUL,
    "/": DIV, "÷": DIV,
}

_POSTFIX: dict[str, PostfixOperator] = {"!": FACT, "%": PERCENT}


class RegexTokenizer:
    """Tokenizer oparty na jednym wyrażeniu regularnym."""

    def tokenize(self, text: str) -> list[Token]:
        tokens: list[Token] = []
        expect_operand = True
        pos = 0
        while pos < len(text):
            m = _TOKEN_RE.match(text, pos)
            if m is None:
                raise ExpressionSyntaxError(
                    f"Unexpected character {text[pos]!r} at position {pos}", position=pos
                )
            kind, lexeme = m.lastgroup, m.group()
            pos = m.end()

            if kind == "space":
                continue
            if kind == "number":
                tokens.append(NumberToken(text=lexeme, position=m.start()))
                expect_operand = False
            elif kind == "sign":
                prefix, infix = _SIGNS[lexeme]
                tokens.append(prefix if expect_operand else infix)
                expect_operand = True
            elif kind == "infix":
                tokens.append(_INFIX[lexeme])
                expect_operand = True
            elif kind == "postfix":
                tokens.append(_POSTFIX[lexeme])
                expect_operand = False
            else:
                paren = Paren(lexeme)
                tokens.append(paren)
                expect_operand = paren is Paren.OPEN
        return tokens
