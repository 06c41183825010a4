import pytest
from pydantic import TypeAdapter

from contracts import (
    ADD,
    ALL_OPS,
    DIV,
    FACT,
    MUL,
    NEG,
    PERCENT,
    PLUS_MINUS,
    PLUS_MINUS_PREFIX,
    POS,
    POW,
    SUB,
    InfixOp,
    InfixOperator,
    Op,
    OpKind,
    Paren,
    PostfixOp,
    PrefixOp,
    PrefixOperator,
)


def test_all_ops_cover_every_variant():
    variants = {(op.kind, op.op) for op in ALL_OPS}

    expected = (
        {(OpKind.INFIX, m) for m in InfixOp}
        | {(OpKind.PREFIX, m) for m in PrefixOp}
        | {(OpKind.POSTFIX, m) for m in PostfixOp}
    )
    assert variants == expected


@pytest.mark.parametrize(
    "op,precedence",
    [
        (POW, 4), (MUL, 3), (DIV, 3), (ADD, 2), (SUB, 2), (PLUS_MINUS, 2),
        (NEG, 4), (POS, 4), (PLUS_MINUS_PREFIX, 4),
        (FACT, 4), (PERCENT, 4),
    ],
)
def test_precedence_table(op, precedence):
    assert op.precedence() == precedence


def test_associativity():
    assert POW.is_left_associative() is False
    assert all(op.is_left_associative() for op in (MUL, DIV, ADD, SUB, PLUS_MINUS))
    assert not any(op.is_left_associative() for op in (NEG, POS, PLUS_MINUS_PREFIX))
    assert FACT.is_left_associative() and PERCENT.is_left_associative()


def test_should_shunt_follows_precedence():
    assert ADD.should_shunt(MUL) is True
    assert MUL.should_shunt(ADD) is False
    assert ADD.should_shunt(NEG) is True


def test_should_shunt_equal_precedence_uses_associativity():
    assert MUL.should_shunt(MUL) is True
    assert SUB.should_shunt(ADD) is True
    assert PLUS_MINUS.should_shunt(SUB) is True
    assert POW.should_shunt(POW) is False
    assert POW.should_shunt(NEG) is False
    assert FACT.should_shunt(NEG) is False
    assert POW.should_shunt(FACT) is True


@pytest.mark.parametrize(
    "op,symbol",
    [
        (POW, "^"), (MUL, "*"), (DIV, "/"), (ADD, "+"), (SUB, "-"), (PLUS_MINUS, "±"),
        (NEG, "-"), (POS, "+"), (PLUS_MINUS_PREFIX, "±"),
        (FACT, "!"), (PERCENT, "%"),
    ],
)
def test_display_symbols(op, symbol):
    assert str(op) == symbol
    assert op.symbol == symbol


def test_paren_display():
    assert str(Paren.OPEN) == "("
    assert str(Paren.CLOSE) == ")"


def test_operator_identity_is_by_variant_tag():
    assert InfixOperator(op=InfixOp.ADD) == ADD
    assert hash(InfixOperator(op=InfixOp.ADD)) == hash(ADD)
    assert PLUS_MINUS != PLUS_MINUS_PREFIX
    assert SUB != NEG


def test_op_union_parses_by_kind():
    op = TypeAdapter(Op).validate_python({"kind": "prefix", "op": "neg"})

    assert isinstance(op, PrefixOperator)
    assert op.op == PrefixOp.NEG
    assert op.precedence() == 4
