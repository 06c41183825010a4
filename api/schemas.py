"""
schemas.py — Request/Response modele FastAPI.
Oddzielone od contracts.py żeby API mogło ewoluować niezależnie.
"""
from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, Field


# ─────────────────────────── /evaluate ───────────────────────────

class EvaluateRequest(BaseModel):
    expression: str = Field(min_length=1)
    unwrap_single: bool = False  # wymaga dokładnie jednej odpowiedzi


class EvaluateResponse(BaseModel):
    expression: str
    answer: str                  # np. "{10, 6}"
    kind: Literal["single", "multiple"]
    values: list[str]
    rpn: list[str]
    steps: list[str]


# ─────────────────────────── /operators ──────────────────────────

class OperatorInfo(BaseModel):
    name: str
    kind: str
    symbol: str
    precedence: int
    associativity: Literal["left", "right"]


# ─────────────────────────── /health ─────────────────────────────

class HealthResponse(BaseModel):
    status: str
    version: str
