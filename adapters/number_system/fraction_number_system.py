"""
Adapter: FractionNumberSystem
Implementuje port NumberSystem — dokładna arytmetyka na Fraction.

Fractions zapewniają dokładną arytmetykę dla liczb całkowitych i ułamków
(unikamy błędów zmiennoprzecinkowych przy dzieleniu).

Operacje wielowartościowe:
  a ± b        → {a + b, a - b}
  ±a           → {a, -a}
  a ^ (p/q)    → {r, -r} dla parzystego q (oba pierwiastki rzeczywiste)

Pierwiastki niewymierne są przybliżane do settings.approx_digits cyfr znaczących.
"""
from __future__ import annotations

import math
from decimal import MAX_EMAX, MIN_EMIN, Decimal, localcontext
from fractions import Fraction
from typing import Callable

from config import Settings
from contracts import (
    Answer,
    CalculationError,
    ExpressionSyntaxError,
    InfixOp,
    PostfixOp,
    PrefixOp,
    answer_from_values,
    single,
)

# str(int) odmawia konwersji powyżej 4300 cyfr (sys.int_info.default_max_str_digits)
_MAX_EXACT_INT = 10 ** 4000


def _safe_div(a: Fraction, b: Fraction) -> Fraction:
    if b == 0:
        raise CalculationError(CalculationError.DIVISION_BY_ZERO, "Division by zero")
    return a / b


def _integer_root(n: int, degree: int) -> int | None:
    """Dokładny pierwiastek całkowity stopnia degree z n >= 0 albo None."""
    if n < 2:
        return n
    lo, hi = 1, 1 << ((n.bit_length() + degree - 1) // degree)
    while lo <= hi:
        mid = (lo + hi) // 2
        p = mid ** degree
        if p == n:
            return mid
        if p < n:
            lo = mid + 1
        else:
            hi = mid - 1
    return None


class FractionNumberSystem:
    """Arytmetyka Fraction z obsługą wyników wielowartościowych."""

    def __init__(self, settings: Settings | None = None) -> None:
        settings = settings or Settings()
        self._max_factorial = settings.max_factorial_operand
        self._max_exponent = settings.max_exponent
        self._approx_digits = settings.approx_digits

        self._infix: dict[InfixOp, Callable[[Fraction, Fraction], Answer]] = {
            InfixOp.POW:        self._pow,
            InfixOp.MUL:        lambda a, b: single(a * b),
            InfixOp.DIV:        lambda a, b: single(_safe_div(a, b)),
            InfixOp.ADD:        lambda a, b: single(a + b),
            InfixOp.SUB:        lambda a, b: single(a - b),
            InfixOp.PLUS_MINUS: lambda a, b: answer_from_values([a + b, a - b]),
        }
        self._prefix: dict[PrefixOp, Callable[[Fraction], Answer]] = {
            PrefixOp.NEG:        lambda a: single(-a),
            PrefixOp.POS:        lambda a: single(a),
            PrefixOp.PLUS_MINUS: lambda a: answer_from_values([a, -a]),
        }
        self._postfix: dict[PostfixOp, Callable[[Fraction], Answer]] = {
            PostfixOp.FACT:    self._factorial,
            PostfixOp.PERCENT: lambda a: single(a / 100),
        }

    # -- NumberSystem protocol ---------------------------------------------

    def parse_literal(self, text: str) -> Fraction:
        try:
            return Fraction(text)
        except ValueError as exc:
            raise ExpressionSyntaxError(f"Invalid number literal: {text!r}") from exc

    def apply_infix(self, op: InfixOp, a: Fraction, b: Fraction) -> Answer:
        return self._infix[op](a, b)

    def apply_prefix(self, op: PrefixOp, a: Fraction) -> Answer:
        return self._prefix[op](a)

    def apply_postfix(self, op: PostfixOp, a: Fraction) -> Answer:
        return self._postfix[op](a)

    def format(self, value: Fraction) -> str:
        """
        Liczby całkowite bez części ułamkowej, pozostałe jako dziesiętne
        z dokładnością settings.approx_digits cyfr znaczących.
        Bardzo duże liczby całkowite też w zapisie dziesiętnym (np. 1.00000000000E+10000).
        """
        if value.denominator == 1 and abs(value.numerator) < _MAX_EXACT_INT:
            return str(value.numerator)
        with localcontext() as ctx:
            ctx.prec = self._approx_digits
            ctx.Emax = MAX_EMAX
            ctx.Emin = MIN_EMIN
            return str(Decimal(value.numerator) / Decimal(value.denominator))

    # -- Prywatne ----------------------------------------------------------

    def _pow(self, base: Fraction, exp: Fraction) -> Answer:
        if abs(exp.numerator) > self._max_exponent:
            raise CalculationError(
                CalculationError.OVERFLOW,
                f"Exponent {exp} exceeds limit {self._max_exponent}",
            )
        if base == 0 and exp < 0:
            raise CalculationError(
                CalculationError.DIVISION_BY_ZERO, "Zero raised to a negative power"
            )
        if exp.denominator == 1:
            return single(base ** exp.numerator)

        value = self._root(base, exp.denominator) ** exp.numerator
        if exp.denominator % 2 == 0 and value != 0:
            return answer_from_values([value, -value])
        return single(value)

    def _root(self, base: Fraction, degree: int) -> Fraction:
        if base < 0:
            if degree % 2 == 0:
                raise CalculationError(
                    CalculationError.DOMAIN,
                    f"Even root of negative number {self.format(base)}",
                )
            return -self._root(-base, degree)

        num = _integer_root(base.numerator, degree)
        den = _integer_root(base.denominator, degree)
        if num is not None and den is not None:
            return Fraction(num, den)

        with localcontext() as ctx:
            ctx.prec = self._approx_digits
            approx = (Decimal(base.numerator) / Decimal(base.denominator)) ** (
                Decimal(1) / Decimal(degree)
            )
        return Fraction(approx)

    def _factorial(self, a: Fraction) -> Answer:
        if a.denominator != 1 or a < 0:
            raise CalculationError(
                CalculationError.DOMAIN,
                f"Factorial is defined for non-negative integers, got {self.format(a)}",
            )
        if a > self._max_factorial:
            raise CalculationError(
                CalculationError.OVERFLOW,
                f"Factorial operand {a} exceeds limit {self._max_factorial}",
            )
        return single(Fraction(math.factorial(a.numerator)))
