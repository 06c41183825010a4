"""
contracts.py — Jedyne źródło prawdy dla typów danych PlusMinus.
Wszystkie moduły importują WYŁĄCZNIE stąd. Nie modyfikować bez versioning.

Zawiera dwa niezależne komponenty rdzenia:
  Answer — wynik obliczenia: jedna wartość albo kilka równoprawnych
           alternatyw (np. dla "±" lub pierwiastka parzystego stopnia)
  Op     — klasyfikacja operatorów (infix/prefix/postfix) z priorytetem,
           łącznością i symbolem; decyzja should_shunt dla shunting-yard
"""
from __future__ import annotations

from enum import Enum
from itertools import product
from typing import Annotated, Any, Callable, Generic, Iterable, Literal, NamedTuple, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

CONTRACTS_VERSION = "1.0.0"

N = TypeVar("N")


# ─────────────────────────── Errors ──────────────────────────────────────

class CalculationError(ArithmeticError):
    """Operacja liczbowa nie daje wartości (dzielenie przez zero, dziedzina)."""

    DIVISION_BY_ZERO = "DIVISION_BY_ZERO"
    DOMAIN = "DOMAIN"
    OVERFLOW = "OVERFLOW"

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message


class AnswerContractError(RuntimeError):
    """Naruszenie kontraktu przez wywołującego, np. unwrap_single na wielu wynikach."""


class ExpressionSyntaxError(ValueError):
    """Niepoprawne wyrażenie: nieznany znak, niesparowane nawiasy, brak operandu."""

    def __init__(self, message: str, position: int | None = None) -> None:
        super().__init__(message)
        self.position = position


# ─────────────────────────── Answer ──────────────────────────────────────

class BaseAnswer(BaseModel, Generic[N]):
    """
    Wspólne operacje dla SingleAnswer i MultipleAnswer.

    combine() wykonuje funkcję na każdej parze (wartość z self, wartość z other),
    transform() na każdej wartości z self. Wyniki cząstkowe są spłaszczane,
    więc odpowiedź nigdy nie zawiera zagnieżdżonych alternatyw.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_list(self) -> list[N]:
        raise NotImplementedError

    @property
    def is_single(self) -> bool:
        return False

    def combine(self, other: Answer, oper: Callable[[N, N], Answer]) -> Answer:
        """
        Applies oper to every pairing in row-major order (self outer, other inner).
        The first CalculationError raised by oper aborts the whole combination.
        """
        pairs = product(self.to_list(), other.to_list())
        return _flatten(oper(a, b) for a, b in pairs)

    def transform(self, oper: Callable[[N], Answer]) -> Answer:
        """Applies oper to every value; first failure aborts."""
        return _flatten(oper(a) for a in self.to_list())

    def unwrap_single(self) -> N:
        raise AnswerContractError(
            f"Attempted to unwrap multiple answers as one: {self}"
        )

    def join(self, other: Answer) -> MultipleAnswer:
        """Scala alternatywy obu odpowiedzi w jedną, bez deduplikacji."""
        return MultipleAnswer(values=tuple(self.to_list() + other.to_list()))


class SingleAnswer(BaseAnswer[N], Generic[N]):
    kind: Literal["single"] = "single"
    value: N

    def to_list(self) -> list[N]:
        return [self.value]

    @property
    def is_single(self) -> bool:
        return True

    def unwrap_single(self) -> N:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class MultipleAnswer(BaseAnswer[N], Generic[N]):
    # Zwykle >= 2 wartości; mniej jest tolerowane (zob. DESIGN.md)
    kind: Literal["multiple"] = "multiple"
    values: tuple[N, ...]

    def to_list(self) -> list[N]:
        return list(self.values)

    def __str__(self) -> str:
        return "{" + ", ".join(str(v) for v in self.values) + "}"


Answer = Annotated[Union[SingleAnswer, MultipleAnswer], Field(discriminator="kind")]

ANSWER_ADAPTER: TypeAdapter[Answer] = TypeAdapter(Answer)


def single(value: Any) -> SingleAnswer:
    return SingleAnswer(value=value)


def multiple(values: Iterable[Any]) -> MultipleAnswer:
    return MultipleAnswer(values=tuple(values))


def answer_from_values(values: Iterable[Any]) -> Answer:
    """Dokładnie jedna wartość → SingleAnswer, w przeciwnym razie MultipleAnswer."""
    values = tuple(values)
    if len(values) == 1:
        return SingleAnswer(value=values[0])
    return MultipleAnswer(values=values)


def _flatten(answers: Iterable[Answer]) -> Answer:
    return answer_from_values(v for answer in answers for v in answer.to_list())


# ─────────────────────────── Operators ───────────────────────────────────

class OpKind(str, Enum):
    INFIX = "infix"      # a ^ b, a * b, a ± b
    PREFIX = "prefix"    # -a, +a, ±a
    POSTFIX = "postfix"  # a!, a%


class InfixOp(str, Enum):
    POW = "pow"
    MUL = "mul"
    DIV = "div"
    ADD = "add"
    SUB = "sub"
    PLUS_MINUS = "plus_minus"


class PrefixOp(str, Enum):
    NEG = "neg"
    POS = "pos"
    PLUS_MINUS = "plus_minus"


class PostfixOp(str, Enum):
    FACT = "fact"
    PERCENT = "percent"


class OpTraits(NamedTuple):
    precedence: int
    left_associative: bool
    symbol: str


_OP_TABLES: dict[OpKind, dict[Any, OpTraits]] = {
    OpKind.INFIX: {
        InfixOp.POW:        OpTraits(4, False, "^"),
        InfixOp.MUL:        OpTraits(3, True, "*"),
        InfixOp.DIV:        OpTraits(3, True, "/"),
        InfixOp.ADD:        OpTraits(2, True, "+"),
        InfixOp.SUB:        OpTraits(2, True, "-"),
        InfixOp.PLUS_MINUS: OpTraits(2, True, "±"),
    },
    OpKind.PREFIX: {
        PrefixOp.NEG:        OpTraits(4, False, "-"),
        PrefixOp.POS:        OpTraits(4, False, "+"),
        PrefixOp.PLUS_MINUS: OpTraits(4, False, "±"),
    },
    OpKind.POSTFIX: {
        PostfixOp.FACT:    OpTraits(4, True, "!"),
        PostfixOp.PERCENT: OpTraits(4, True, "%"),
    },
}


def _check_tables_total() -> None:
    for kind, enum_cls in (
        (OpKind.INFIX, InfixOp),
        (OpKind.PREFIX, PrefixOp),
        (OpKind.POSTFIX, PostfixOp),
    ):
        missing = [m.value for m in enum_cls if m not in _OP_TABLES[kind]]
        if missing:
            raise RuntimeError(f"Operator table for {kind.value} is missing {missing}")


_check_tables_total()


class BaseOperator(BaseModel):
    """Bezstanowy operator; tożsamość wyznacza para (kind, op)."""

    model_config = ConfigDict(frozen=True)

    def traits(self) -> OpTraits:
        return _OP_TABLES[self.kind][self.op]  # type: ignore[attr-defined]

    def precedence(self) -> int:
        return self.traits().precedence

    def is_left_associative(self) -> bool:
        return self.traits().left_associative

    @property
    def symbol(self) -> str:
        return self.traits().symbol

    def should_shunt(self, other: Op) -> bool:
        """True if the pending operator `other` must be applied before this one."""
        return other.precedence() > self.precedence() or (
            other.precedence() == self.precedence() and other.is_left_associative()
        )

    def __str__(self) -> str:
        return self.symbol


class InfixOperator(BaseOperator):
    kind: Literal[OpKind.INFIX] = OpKind.INFIX
    op: InfixOp


class PrefixOperator(BaseOperator):
    kind: Literal[OpKind.PREFIX] = OpKind.PREFIX
    op: PrefixOp


class PostfixOperator(BaseOperator):
    kind: Literal[OpKind.POSTFIX] = OpKind.POSTFIX
    op: PostfixOp


Op = Annotated[
    Union[InfixOperator, PrefixOperator, PostfixOperator],
    Field(discriminator="kind"),
]

POW = InfixOperator(op=InfixOp.POW)
MUL = InfixOperator(op=InfixOp.MUL)
DIV = InfixOperator(op=InfixOp.DIV)
ADD = InfixOperator(op=InfixOp.ADD)
SUB = InfixOperator(op=InfixOp.SUB)
PLUS_MINUS = InfixOperator(op=InfixOp.PLUS_MINUS)
NEG = PrefixOperator(op=PrefixOp.NEG)
POS = PrefixOperator(op=PrefixOp.POS)
PLUS_MINUS_PREFIX = PrefixOperator(op=PrefixOp.PLUS_MINUS)
FACT = PostfixOperator(op=PostfixOp.FACT)
PERCENT = PostfixOperator(op=PostfixOp.PERCENT)

ALL_OPS: tuple[BaseOperator, ...] = (
    POW, MUL, DIV, ADD, SUB, PLUS_MINUS,
    NEG, POS, PLUS_MINUS_PREFIX,
    FACT, PERCENT,
)


class Paren(str, Enum):
    """Znacznik grupowania; bez priorytetu, tylko wyświetlanie."""

    OPEN = "("
    CLOSE = ")"

    def __str__(self) -> str:
        return self.value


# ─────────────────────────── Tokenizer ───────────────────────────────────

class NumberToken(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["number"] = "number"
    text: str
    position: int = 0

    def __str__(self) -> str:
        return self.text


Token = Union[NumberToken, InfixOperator, PrefixOperator, PostfixOperator, Paren]


# ─────────────────────────── Evaluator ───────────────────────────────────

class EvalResult(BaseModel):
    answer: Answer
    display: str = ""                               # np. "{10, 6}"
    rpn: list[str] = Field(default_factory=list)    # np. ["4", "1", "±", "2", "*"]
    steps: list[str] = Field(default_factory=list)  # czytelne kroki
