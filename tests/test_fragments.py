import pytest

from data_model import (
    AccumulatorCondition,
    BoolCondition,
    Edge,
    EdgeKind,
    FactCondition,
    NodeKind,
    Production,
)
from logic_graph import (
    IndexedCondition,
    UnknownConditionError,
    condition_graph,
    production_graph,
    production_hash,
    production_id,
)


class Bogus:
    pass


def test_fact_condition_fragment():
    cond = FactCondition("org.example.Order")
    graph = condition_graph(IndexedCondition(0, cond), "shop.rules/r", "h")

    assert graph.nodes["0-h"].kind is NodeKind.FACT_CONDITION
    assert graph.nodes["0-h"].value == cond
    assert graph.nodes["0-h"].display_name == "shop.rules/r"

    fact = graph.nodes["FT-org.example.Order"]
    assert fact.kind is NodeKind.FACT
    assert fact.value == "org.example.Order"
    assert fact.display_name == "org.example/->Order"

    assert graph.edges == {("FT-org.example.Order", "0-h"): Edge(EdgeKind.USED_IN)}


def test_accumulator_fragment_has_no_edges():
    cond = AccumulatorCondition("count", FactCondition("a.X"))
    graph = condition_graph(IndexedCondition(4, cond), "r", "h")
    assert list(graph.nodes) == ["4-h"]
    assert graph.nodes["4-h"].kind is NodeKind.ACCUMULATOR_CONDITION
    assert graph.nodes["4-h"].display_name is None
    assert graph.edges == {}


def test_unknown_condition_fails_loudly():
    with pytest.raises(UnknownConditionError, match="Bogus"):
        condition_graph(IndexedCondition(0, Bogus()), "r", "h")


def test_unknown_condition_in_production():
    production = Production(name="r", lhs=[Bogus()])
    with pytest.raises(TypeError):
        production_graph(production)


def test_rule1_scenario(rule1):
    graph = production_graph(rule1)
    h = production_hash(rule1)
    p = production_id(rule1)
    cond = f"0-{h}"

    assert set(graph.nodes) == {p, cond, "FT-org.example.Order", "FT-org.example.Shipped"}
    assert graph.node_kind("FT-org.example.Order") is NodeKind.FACT
    assert graph.node_kind("FT-org.example.Shipped") is NodeKind.FACT
    assert graph.node_kind(cond) is NodeKind.FACT_CONDITION
    assert graph.node_kind(p) is NodeKind.PRODUCTION

    assert graph.edges == {
        ("FT-org.example.Order", cond): Edge(EdgeKind.USED_IN),
        (cond, p): Edge(EdgeKind.THEN),
        (p, "FT-org.example.Shipped"): Edge(EdgeKind.INSERTS),
    }
    assert graph.dangling_edges() == []


def test_production_node(rule2):
    graph = production_graph(rule2)
    node = graph.nodes[production_id(rule2)]
    assert node.value is rule2
    assert node.value.meta == {"doc": "Faktura dla zamówienia klienta."}
    assert node.display_name == "shop.rules/rule2"


def test_nested_production(nested_rule):
    graph = production_graph(nested_rule)
    h = production_hash(nested_rule)
    p = production_id(nested_rule)

    kinds = {i: graph.node_kind(f"{i}-{h}") for i in range(6)}
    assert kinds == {
        0: NodeKind.AND,
        1: NodeKind.OR,
        2: NodeKind.FACT_CONDITION,
        3: NodeKind.NOT,
        4: NodeKind.FACT_CONDITION,
        5: NodeKind.ACCUMULATOR_CONDITION,
    }
    component_of = {k for k, e in graph.edges.items() if e.kind is EdgeKind.COMPONENT_OF}
    assert component_of == {
        (f"1-{h}", f"0-{h}"),
        (f"5-{h}", f"0-{h}"),
        (f"2-{h}", f"1-{h}"),
        (f"3-{h}", f"1-{h}"),
        (f"4-{h}", f"3-{h}"),
    }
    assert graph.edge_kind((f"0-{h}", p)) is EdgeKind.THEN
    assert graph.edge_kind((p, "FT-ops.Page")) is EdgeKind.INSERTS
    # źródło akumulatora nie jest modelowane
    assert graph.edge_kind(("FT-ops.Alert", f"2-{h}")) is EdgeKind.USED_IN
    assert len(graph.edges) == 9
    assert graph.dangling_edges() == []


def test_shared_fact_within_production_accumulates():
    cond = FactCondition("a.T")
    graph = production_graph(Production(name="twice", lhs=[cond, cond]))
    entry = graph.nodes["FT-a.T"]
    assert isinstance(entry, list)
    assert len(entry) == 2
    assert entry[0] == entry[1]


def test_plain_string_operator_is_accepted():
    cond = BoolCondition("or", (FactCondition("a.X"), FactCondition("a.Y")))
    graph = condition_graph(IndexedCondition(0, cond, (1, 2)), "r", "h")
    assert graph.nodes["0-h"].kind is NodeKind.OR
    assert set(graph.edges) == {("1-h", "0-h"), ("2-h", "0-h")}


def test_unknown_operator_string_fails_loudly():
    with pytest.raises(ValueError, match="xor"):
        condition_graph(IndexedCondition(0, BoolCondition("xor", ())), "r", "h")
