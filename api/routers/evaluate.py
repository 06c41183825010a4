"""
Router: POST /evaluate
Tokenizacja → shunting-yard → Answer. Błędy obsługują globalne handlery w api/main.py.
Endpoint synchroniczny: obliczenia (silnie, duże potęgi) idą do threadpoola FastAPI.
"""
from fastapi import APIRouter, Depends

from adapters.evaluator.shunting_yard_evaluator import ShuntingYardEvaluator
from adapters.number_system.fraction_number_system import FractionNumberSystem
from adapters.tokenizer.regex_tokenizer import RegexTokenizer
from api.dependencies import get_evaluator, get_number_system, get_tokenizer
from api.schemas import EvaluateRequest, EvaluateResponse

router = APIRouter(prefix="/evaluate", tags=["evaluate"])


@router.post("", response_model=EvaluateResponse)
def evaluate(
    body: EvaluateRequest,
    tokenizer: RegexTokenizer = Depends(get_tokenizer),
    evaluator: ShuntingYardEvaluator = Depends(get_evaluator),
    numbers: FractionNumberSystem = Depends(get_number_system),
):
    result = evaluator.evaluate(tokenizer.tokenize(body.expression))
    if body.unwrap_single:
        values = [numbers.format(result.answer.unwrap_single())]
    else:
        values = [numbers.format(v) for v in result.answer.to_list()]

    return EvaluateResponse(
        expression=body.expression,
        answer=result.display,
        kind=result.answer.kind,
        values=values,
        rpn=result.rpn,
        steps=result.steps,
    )
