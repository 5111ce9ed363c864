import json
from unittest.mock import MagicMock

import pytest

from data_model import AccumulatorCondition, BoolCondition, BoolOp, Call, FactCondition
from logic_graph import (
    DbRuleSource,
    JsonRuleSource,
    RuleSourceError,
    build_graph,
    load_productions_from_db,
    load_productions_json,
    productions_from_document,
)


def _mock_conn(rows):
    conn = MagicMock()
    cur = conn.cursor.return_value.__enter__.return_value
    cur.fetchall.return_value = rows
    return conn, cur


def test_load_json(shop_rules_path):
    productions = load_productions_json(shop_rules_path)
    assert [p.name for p in productions] == [
        "shop.rules/ship-orders",
        "shop.rules/notify-customer",
        "shop.rules/count-emails",
    ]

    ship = productions[0]
    assert ship.lhs == [
        FactCondition("shop.facts.Order", ("(= status :paid)",), "?order"),
    ]
    assert ship.rhs == Call("clara.rules/insert!", (Call("shop.facts/->Shipped", ("?order",)),))
    assert ship.meta == {"doc": "Opłacone zamówienia są wysyłane."}

    notify = productions[1]
    assert notify.lhs[1] == BoolCondition(BoolOp.NOT, (FactCondition("shop.facts.OptOut"),))
    assert notify.meta == {}

    count = productions[2]
    assert count.lhs == AccumulatorCondition(
        "clara.rules.accumulators/count",
        FactCondition("shop.notify_facts.Email"),
        "?n",
    )
    assert count.rhs is None


def test_schema_violations_are_reported():
    doc = {"productions": [{"lhs": {"type": "fact"}}]}
    with pytest.raises(RuleSourceError) as excinfo:
        productions_from_document(doc)
    assert excinfo.value.errors
    assert any("name" in e for e in excinfo.value.errors)


def test_unknown_condition_type_is_rejected():
    doc = {"productions": [{"name": "r", "lhs": {"type": "xor", "children": []}}]}
    with pytest.raises(RuleSourceError):
        productions_from_document(doc)


def test_invalid_json_file(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(RuleSourceError) as excinfo:
        load_productions_json(path)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


def test_missing_file_is_fatal_for_build(tmp_path):
    with pytest.raises(RuleSourceError):
        build_graph([JsonRuleSource(tmp_path / "missing.json")])


def test_json_rule_source_builds_graph(shop_rules_path):
    graph = build_graph([JsonRuleSource(shop_rules_path)])
    assert len(graph.nodes) == 13
    assert len(graph.edges) == 11
    # Shipped: wstawiany przez ship-orders i czytany przez notify-customer
    assert len(graph.nodes["FT-shop.facts.Shipped"]) == 2
    assert "FT-shop.notify_facts.Email" in graph.nodes
    assert graph.dangling_edges() == []


def test_load_from_db_decodes_json_columns():
    lhs = [{"type": "fact", "fact_type": "a.Order"}]
    rhs = {"call": "clara.rules/insert!", "args": [{"call": "a/->Shipped"}]}
    conn, cur = _mock_conn([
        ("a.rules/one", json.dumps(lhs), json.dumps(rhs), None),
        ("a.rules/two", lhs, None, {"salience": 5}),
    ])

    productions = load_productions_from_db(conn)

    sql, params = cur.execute.call_args.args
    assert "FROM production" in sql
    assert "ORDER BY id" in sql
    assert params == []
    assert [p.name for p in productions] == ["a.rules/one", "a.rules/two"]
    assert productions[0].rhs == Call("clara.rules/insert!", (Call("a/->Shipped"),))
    assert productions[1].rhs is None
    assert productions[1].meta == {"salience": 5}


def test_load_from_db_namespace_filter():
    conn, cur = _mock_conn([])
    assert load_productions_from_db(conn, table="rules", namespace="shop.rules") == []
    sql, params = cur.execute.call_args.args
    assert "FROM rules WHERE split_part(name, '/', 1) = %s" in sql
    assert params == ["shop.rules"]


def test_load_from_db_namespace_is_not_a_pattern():
    conn, cur = _mock_conn([])
    load_productions_from_db(conn, namespace="shop_rules")
    sql, params = cur.execute.call_args.args
    assert "LIKE" not in sql
    assert params == ["shop_rules"]


def test_db_source_errors_are_wrapped():
    conn = MagicMock()
    conn.cursor.side_effect = RuntimeError("connection closed")
    with pytest.raises(RuleSourceError, match="connection closed"):
        build_graph([DbRuleSource(conn)])
