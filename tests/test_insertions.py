from conftest import insert_call

from data_model import Call, FactCondition, Production
from logic_graph import get_insertions


def _production(rhs):
    return Production(name="r", lhs=[FactCondition("a.T")], rhs=rhs)


def test_no_rhs():
    assert get_insertions(_production(None)) == set()


def test_single_insertion(rule1):
    assert get_insertions(rule1) == {"org.example.Shipped"}


def test_namespace_dashes_become_underscores():
    rhs = insert_call("my-app.fact-types/->Order")
    assert get_insertions(_production(rhs)) == {"my_app.fact_types.Order"}


def test_nested_and_duplicate_insertions():
    rhs = Call("clojure.core/do", (
        insert_call("a/->X", "a/->Y"),
        Call("clojure.core/when", (True, insert_call("a/->X"))),
    ))
    assert get_insertions(_production(rhs)) == {"a.X", "a.Y"}


def test_non_constructor_arguments_are_ignored():
    rhs = Call("clara.rules/insert!", (
        Call("a/make-order", ("?x",)),
        "?existing",
        Call("map->Order", ()),
    ))
    assert get_insertions(_production(rhs)) == set()


def test_other_callees_are_ignored():
    rhs = Call("clara.rules/retract!", (Call("a/->X", ()),))
    assert get_insertions(_production(rhs)) == set()


def test_custom_insert_ops():
    rhs = Call("clara.rules/insert-unconditional!", (Call("a/->X", ()),))
    production = _production(rhs)
    assert get_insertions(production) == set()
    assert get_insertions(production, {"clara.rules/insert-unconditional!"}) == {"a.X"}
