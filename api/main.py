"""
api/main.py — punkt wejścia FastAPI.

Lifespan:
  - Inicjalizuje adaptery (FractionNumberSystem, RegexTokenizer, ShuntingYardEvaluator)

Obsługa błędów na granicy żądania:
  ExpressionSyntaxError → 400
  CalculationError      → 422 (z polem "code", którego nie ma błąd walidacji schematu)
  AnswerContractError   → 500 (błąd programisty, logowany)
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.number_system.fraction_number_system import FractionNumberSystem
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from api.routers import evaluate, operators
from api.schemas import HealthResponse
from config import Settings
from contracts import AnswerContractError, CalculationError, ExpressionSyntaxError

logger = logging.getLogger("plusminus.api")


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings: Settings = app.state.settings

    # Adaptery bezstanowe — tworzone raz
    number_system = FractionNumberSystem(settings)
    app.state.number_system = number_system
    app.state.tokenizer = RegexTokenizer()
    app.state.evaluator = ShuntingYardEvaluator(number_system)

    logger.info("PlusMinus API ready.")
    yield
    logger.info("Shutting down.")


def create_app(settings: Settings | None = None) -> FastAPI:
    settings = settings or Settings()
    logging.basicConfig(level=settings.log_level.upper())

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # Routers
    app.include_router(evaluate.router)
    app.include_router(operators.router)

    # Health
    @app.get("/health", response_model=HealthResponse, tags=["health"])
    async def health():
        return HealthResponse(status="ok", version=settings.app_version)

    # Globalne handlery błędów
    @app.exception_handler(ExpressionSyntaxError)
    async def syntax_error_handler(request: Request, exc: ExpressionSyntaxError):
        return JSONResponse(
            status_code=400,
            content={"detail": str(exc), "position": exc.position},
        )

    @app.exception_handler(CalculationError)
    async def calculation_error_handler(request: Request, exc: CalculationError):
        """422 jak błąd walidacji schematu; odróżnia je pole `code` (schemat go nie ma)."""
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": exc.code},
        )

    @app.exception_handler(AnswerContractError)
    async def contract_error_handler(request: Request, exc: AnswerContractError):
        logger.error("Answer contract violation: %s", exc)
        return JSONResponse(status_code=500, content={"detail": str(exc)})

    return app


app = create_app()
