"""
Router: GET /operators
Tabela operatorów: symbol, rodzaj, priorytet, łączność.
"""
from fastapi import APIRouter

from api.schemas import OperatorInfo
from contracts import ALL_OPS

router = APIRouter(prefix="/operators", tags=["operators"])


@router.get("", response_model=list[OperatorInfo])
async def list_operators():
    return [
        OperatorInfo(
            name=op.op.value,
            kind=op.kind.value,
            symbol=op.symbol,
            precedence=op.precedence(),
            associativity="left" if op.is_left_associative() else "right",
        )
        for op in ALL_OPS
    ]
