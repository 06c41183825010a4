"""
Port: Tokenizer
Odpowiedzialność: zamiana tekstu wyrażenia na strumień tokenów.
"""
from typing import Protocol, runtime_checkable

from contracts import Token


@runtime_checkable
class Tokenizer(Protocol):
    def tokenize(self, text: str) -> list[Token]:
        """
        Splits an expression into NumberToken, operator and Paren tokens.

        "+", "-" and "±" are classified as prefix when they start the
        expression or follow an infix/prefix operator or "(";
        otherwise they are infix. "!" and "%" are always postfix.

        Raises ExpressionSyntaxError for characters that are not part of
        the expression language.
        """
        ...
