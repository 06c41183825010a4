"""
Port: NumberSystem
Odpowiedzialność: arytmetyka na wartościach liczbowych; rdzeń nie zagląda do ich wnętrza.
"""
from typing import Any, Protocol, runtime_checkable

from contracts import Answer, InfixOp, PostfixOp, PrefixOp


@runtime_checkable
class NumberSystem(Protocol):
    def parse_literal(self, text: str) -> Any:
        """
        Converts a numeric literal (e.g. "3", "2.5") to a value.
        Raises ExpressionSyntaxError if the literal is not a number.
        """
        ...

    def apply_infix(self, op: InfixOp, a: Any, b: Any) -> Answer:
        """
        Computes `a op b`. May return several alternatives (e.g. a ± b).
        Raises CalculationError when no value exists for the pair.
        """
        ...

    def apply_prefix(self, op: PrefixOp, a: Any) -> Answer:
        """Computes `op a`. Raises CalculationError on failure."""
        ...

    def apply_postfix(self, op: PostfixOp, a: Any) -> Answer:
        """Computes `a op`. Raises CalculationError on failure."""
        ...

    def format(self, value: Any) -> str:
        """Renders a single value for display (used inside Answer rendering)."""
        ...
