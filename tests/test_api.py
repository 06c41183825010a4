import inspect

from fastapi.testclient import TestClient

from api.main import create_app
from api.routers import evaluate as evaluate_route
from config import Settings


def _client(**overrides):
    return TestClient(create_app(Settings(**overrides)))


def test_evaluate_returns_all_alternatives():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "(4 ± 1) * 2"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["answer"] == "{10, 6}"
    assert body["kind"] == "multiple"
    assert body["values"] == ["10", "6"]
    assert body["rpn"] == ["4", "1", "±", "2", "*"]
    assert len(body["steps"]) == 2


def test_evaluate_single_with_unwrap():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "2 + 3", "unwrap_single": True})

    assert resp.status_code == 200
    assert resp.json()["values"] == ["5"]
    assert resp.json()["kind"] == "single"


def test_unwrap_of_multiple_answers_is_server_error():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "±1", "unwrap_single": True})

    assert resp.status_code == 500
    assert "multiple answers" in resp.json()["detail"]


def test_syntax_error_is_bad_request():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "2 $ 3"})

    assert resp.status_code == 400
    assert resp.json()["position"] == 2


def test_calculation_error_is_unprocessable():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "1 / 0"})

    assert resp.status_code == 422
    assert resp.json()["code"] == "DIVISION_BY_ZERO"


def test_factorial_limit_comes_from_settings():
    with _client(max_factorial_operand=5) as client:
        resp = client.post("/evaluate", json={"expression": "6!"})

    assert resp.status_code == 422
    assert resp.json()["code"] == "OVERFLOW"


def test_empty_expression_is_rejected_by_schema():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": ""})

    assert resp.status_code == 422
    assert "code" not in resp.json()
    assert isinstance(resp.json()["detail"], list)


def test_operators_table():
    with _client() as client:
        resp = client.get("/operators")

    assert resp.status_code == 200
    ops = resp.json()
    assert len(ops) == 11
    power = next(o for o in ops if o["name"] == "pow")
    assert power == {
        "name": "pow", "kind": "infix", "symbol": "^",
        "precedence": 4, "associativity": "right",
    }


def test_health():
    with _client() as client:
        resp = client.get("/health")

    assert resp.json() == {"status": "ok", "version": "0.1.0"}


def test_evaluate_endpoint_runs_in_threadpool():
    assert not inspect.iscoroutinefunction(evaluate_route.evaluate)


def test_huge_non_integer_is_rendered():
    with _client() as client:
        resp = client.post("/evaluate", json={"expression": "10 ^ 400 / 3"})

    assert resp.status_code == 200
    assert resp.json()["values"] == ["3.33333333333E+399"]
