"""
Port: ExpressionEvaluator
Odpowiedzialność: kolejność obliczeń (shunting-yard) i składanie wyników Answer.
"""
from typing import Protocol, runtime_checkable

from contracts import EvalResult, Token


@runtime_checkable
class ExpressionEvaluator(Protocol):
    def to_rpn(self, tokens: list[Token]) -> list[Token]:
        """
        Reorders infix tokens into reverse Polish notation.
        Ordering decisions come only from Op.should_shunt; parentheses are consumed.
        Raises ExpressionSyntaxError for unbalanced parentheses.
        """
        ...

    def evaluate(self, tokens: list[Token]) -> EvalResult:
        """
        Evaluates a token stream to an Answer.
        Returns EvalResult with:
          - answer: SingleAnswer or flat MultipleAnswer
          - rpn: rendered RPN sequence
          - steps: list of human-readable computation steps
        Raises ExpressionSyntaxError when an operand is missing.
        Raises CalculationError from the number system unchanged.
        """
        ...
