"""
dependencies.py — FastAPI Dependency Injection.
Każda zależność zwraca odpowiedni adapter przez Request.app.state.
"""
from __future__ import annotations

from fastapi import Request

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.number_system.fraction_number_system import FractionNumberSystem
from adapters.tokenizer.regex_tokenizer import RegexTokenizer


def get_number_system(request: Request) -> FractionNumberSystem:
    return request.app.state.number_system


def get_tokenizer(request: Request) -> RegexTokenizer:
    return request.app.state.tokenizer


def get_evaluator(request: Request) -> ShuntingYardEvaluator:
    return request.app.state.evaluator
