"""
Adapter: ShuntingYardEvaluator
Implementuje port ExpressionEvaluator — algorytm shunting-yard + ewaluacja RPN.

O kolejności decyduje wyłącznie Op.should_shunt:
  prefix   — trafia na stos bez zdejmowania (nic po lewej nie czeka)
  postfix  — zdejmuje ze stosu to, co should_shunt każe, i trafia na wyjście
  infix    — zdejmuje ze stosu to, co should_shunt każe, i trafia na stos

Ewaluacja RPN składa wyniki przez Answer.combine / Answer.transform,
więc alternatywy (np. z "±") propagują się przez kolejne operatory.
"""
from __future__ import annotations

import logging
from typing import Union

from contracts import (
    Answer,
    BaseOperator,
    EvalResult,
    ExpressionSyntaxError,
    InfixOperator,
    NumberToken,
    Paren,
    PostfixOperator,
    PrefixOperator,
    Token,
    single,
)
from ports.number_system import NumberSystem

logger = logging.getLogger("plusminus.shunting_yard")


def render(answer: Answer, number_system: NumberSystem) -> str:
    """Wyświetla odpowiedź z wartościami sformatowanymi przez number_system."""
    return str(answer.transform(lambda v: single(number_system.format(v))))


class ShuntingYardEvaluator:
    """Ewaluator wyrażeń infiksowych oparty na shunting-yard."""

    def __init__(self, number_system: NumberSystem) -> None:
        self._numbers = number_system

    # -- ExpressionEvaluator protocol --------------------------------------

    def to_rpn(self, tokens: list[Token]) -> list[Token]:
        output: list[Token] = []
        pending: list[Union[BaseOperator, Paren]] = []

        for token in tokens:
            if isinstance(token, NumberToken):
                output.append(token)
            elif isinstance(token, PrefixOperator):
                pending.append(token)
            elif isinstance(token, (InfixOperator, PostfixOperator)):
                while (
                    pending
                    and pending[-1] is not Paren.OPEN
                    and token.should_shunt(pending[-1])
                ):
                    output.append(pending.pop())
                if isinstance(token, PostfixOperator):
                    output.append(token)
                else:
                    pending.append(token)
            elif token is Paren.OPEN:
                pending.append(token)
            elif token is Paren.CLOSE:
                while pending and pending[-1] is not Paren.OPEN:
                    output.append(pending.pop())
                if not pending:
                    raise ExpressionSyntaxError("Unmatched ')'")
                pending.pop()
            else:
                raise TypeError(f"Unknown token type: {type(token)}")

        while pending:
            top = pending.pop()
            if top is Paren.OPEN:
                raise ExpressionSyntaxError("Unmatched '('")
            output.append(top)
        return output

    def evaluate(self, tokens: list[Token]) -> EvalResult:
        rpn = self.to_rpn(tokens)
        logger.debug("RPN: %s", " ".join(str(t) for t in rpn))

        stack: list[Answer] = []
        steps: list[str] = []
        for token in rpn:
            if isinstance(token, NumberToken):
                stack.append(single(self._numbers.parse_literal(token.text)))
                continue

            if isinstance(token, InfixOperator):
                if len(stack) < 2:
                    raise ExpressionSyntaxError(f"Missing operand for '{token}'")
                right = stack.pop()
                left = stack.pop()
                result = left.combine(
                    right, lambda a, b, op=token.op: self._numbers.apply_infix(op, a, b)
                )
                steps.append(
                    f"{self._show(left)} {token} {self._show(right)} = {self._show(result)}"
                )
            else:
                if not stack:
                    raise ExpressionSyntaxError(f"Missing operand for '{token}'")
                operand = stack.pop()
                if isinstance(token, PrefixOperator):
                    result = operand.transform(
                        lambda a, op=token.op: self._numbers.apply_prefix(op, a)
                    )
                    steps.append(f"{token}{self._show(operand)} = {self._show(result)}")
                else:
                    result = operand.transform(
                        lambda a, op=token.op: self._numbers.apply_postfix(op, a)
                    )
                    steps.append(f"{self._show(operand)}{token} = {self._show(result)}")
            stack.append(result)

        if not stack:
            raise ExpressionSyntaxError("Empty expression")
        if len(stack) > 1:
            raise ExpressionSyntaxError("Missing operator between operands")

        answer = stack[0]
        return EvalResult(
            answer=answer,
            display=self._show(answer),
            rpn=[str(t) for t in rpn],
            steps=steps,
        )

    # -- Prywatne ----------------------------------------------------------

    def _show(self, answer: Answer) -> str:
        return render(answer, self._numbers)
