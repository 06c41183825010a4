#!/usr/bin/env python3
"""
plusminus.py — CLI narzędzie PlusMinus.

Oblicza wyrażenia, które mogą mieć kilka poprawnych wyników
(operator "±", pierwiastki parzystego stopnia).

Konfiguracja: zmienne środowiskowe z prefiksem PLUSMINUS_
lub plik .env (np. PLUSMINUS_MAX_FACTORIAL_OPERAND=500).

Podkomendy:
    eval  — oblicz wyrażenie
    ops   — pokaż tabelę operatorów

Użycie:
    python plusminus.py eval "(4 ± 1) * 2"
    python plusminus.py eval "16 ^ (1/2)" --rpn --steps
    python plusminus.py ops
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.table import Table

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.number_system.fraction_number_system import FractionNumberSystem
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from config import Settings
from contracts import ALL_OPS, CalculationError, ExpressionSyntaxError


# -- helpers ---------------------------------------------------------------

_CONSOLE: Console | None = None


def _console() -> Console:
    global _CONSOLE
    if _CONSOLE is None:
        _CONSOLE = Console(highlight=False)
    return _CONSOLE


def _safe_terminal_text(value: Any) -> str:
    s = str(value)
    encoding = sys.stdout.encoding or "utf-8"
    try:
        s.encode(encoding)
        return s
    except UnicodeEncodeError:
        return s.replace("±", "+/-").encode(encoding, errors="replace").decode(encoding)


def _print_kv_table(title: str, rows: list[tuple[str, Any]]) -> None:
    table = Table(title=title, box=box.ASCII, show_header=False, pad_edge=False)
    table.add_column("Key", no_wrap=True, style="bold cyan")
    table.add_column("Value")
    for key, value in rows:
        table.add_row(_safe_terminal_text(key), _safe_terminal_text(value))
    _console().print(table)


def _print_ops_table() -> None:
    table = Table(title=f"Operators [{len(ALL_OPS)}]", box=box.ASCII)
    table.add_column("Symbol", no_wrap=True, style="bold cyan")
    table.add_column("Name")
    table.add_column("Kind")
    table.add_column("Precedence", justify="right")
    table.add_column("Assoc")
    for op in ALL_OPS:
        table.add_row(
            _safe_terminal_text(op.symbol),
            op.op.value,
            op.kind.value,
            str(op.precedence()),
            "left" if op.is_left_associative() else "right",
        )
    _console().print(table)


# -- commands --------------------------------------------------------------

def _eval(args: argparse.Namespace, settings: Settings) -> int:
    numbers = FractionNumberSystem(settings)
    evaluator = ShuntingYardEvaluator(numbers)
    try:
        result = evaluator.evaluate(RegexTokenizer().tokenize(args.expression))
    except ExpressionSyntaxError as exc:
        print(f"Błąd składni: {exc}", file=sys.stderr)
        return 1
    except CalculationError as exc:
        print(f"Błąd obliczeń [{exc.code}]: {exc.message}", file=sys.stderr)
        return 1

    if not (args.rpn or args.steps):
        print(_safe_terminal_text(result.display))
        return 0

    rows: list[tuple[str, Any]] = [("answer", result.display)]
    if args.rpn:
        rows.append(("rpn", " ".join(result.rpn)))
    if args.steps:
        rows.extend((f"step {i}", step) for i, step in enumerate(result.steps, 1))
    _print_kv_table(args.expression, rows)
    return 0


def _ops(args: argparse.Namespace, settings: Settings) -> int:
    _print_ops_table()
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="plusminus",
        description="PlusMinus — wyrażenia z wieloma poprawnymi wynikami",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # eval
    p = sub.add_parser("eval", help="Oblicz wyrażenie")
    p.add_argument("expression", help='Wyrażenie, np. "(4 ± 1) * 2"')
    p.add_argument("--rpn", action="store_true", help="Pokaż notację RPN")
    p.add_argument("--steps", action="store_true", help="Pokaż kroki obliczeń")

    # ops
    sub.add_parser("ops", help="Pokaż tabelę operatorów")

    args = parser.parse_args()

    settings = Settings()
    logging.basicConfig(level=settings.log_level.upper())

    commands = {
        "eval": _eval,
        "ops":  _ops,
    }
    sys.exit(commands[args.command](args, settings))


if __name__ == "__main__":
    main()
