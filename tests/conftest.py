import pathlib

import pytest

from data_model import (
    AccumulatorCondition,
    BoolCondition,
    BoolOp,
    Call,
    FactCondition,
    Production,
)

DATA_DIR = pathlib.Path(__file__).parent / "data"

INSERT = "clara.rules/insert!"


def insert_call(*constructors: str) -> Call:
    """(clara.rules/insert! (ns/->Type ?x) ...)"""
    return Call(INSERT, tuple(Call(c, ("?x",)) for c in constructors))


@pytest.fixture
def rule1():
    # Order -> Shipped
    return Production(
        name="shop.rules/rule1",
        lhs=[FactCondition("org.example.Order", fact_binding="?order")],
        rhs=insert_call("org.example/->Shipped"),
    )


@pytest.fixture
def rule2():
    # Order and Customer -> Invoice
    return Production(
        name="shop.rules/rule2",
        lhs=[
            FactCondition("org.example.Order"),
            FactCondition("org.example.Customer"),
        ],
        rhs=insert_call("org.example/->Invoice"),
        meta={"doc": "Faktura dla zamówienia klienta."},
    )


@pytest.fixture
def nested_rule():
    # (or Alert (not Silenced)) z akumulatorem obok
    return Production(
        name="ops.rules/page",
        lhs=[
            BoolCondition(BoolOp.OR, (
                FactCondition("ops.Alert"),
                BoolCondition(BoolOp.NOT, (FactCondition("ops.Silenced"),)),
            )),
            AccumulatorCondition("clara.rules.accumulators/count", FactCondition("ops.Alert"), "?n"),
        ],
        rhs=Call("clojure.core/when", (
            Call("clojure.core/>", ("?n", 3)),
            insert_call("ops/->Page"),
        )),
    )


@pytest.fixture
def shop_rules_path():
    return DATA_DIR / "shop_rules.json"
