"""
logic_graph/serialize.py — zamiana grafu na strukturę gotową do json.dumps.

  nodes: {id: {"type", "value", "symbol"}}   (lista dla wpisów zakumulowanych,
                                               None dla brakującego węzła)
  edges: [{"from", "to", "type", "value"?}]  (krotki nie mogą być kluczami JSON)

Warunki i produkcje kodowane są tak samo jak w pliku produkcji.
"""

from __future__ import annotations

from typing import Any

from data_model import (
    AccumulatorCondition,
    BoolCondition,
    Call,
    Edge,
    FactCondition,
    Graph,
    Node,
    Production,
    entry_bodies,
    is_condition,
)

from .ids import FactValueFn, fact_value


def condition_to_dict(condition, value_fn: FactValueFn = fact_value) -> dict[str, Any]:
    match condition:
        case FactCondition(fact_type=fact_type, constraints=constraints, fact_binding=binding):
            d: dict[str, Any] = {"type": "fact", "fact_type": value_fn(fact_type)}
            if constraints:
                d["constraints"] = list(constraints)
            if binding is not None:
                d["fact_binding"] = binding
            return d
        case AccumulatorCondition(accumulator=acc, source=source, result_binding=binding):
            d = {"type": "accumulator", "accumulator": acc}
            if source is not None:
                d["from"] = condition_to_dict(source, value_fn)
            if binding is not None:
                d["result_binding"] = binding
            return d
        case BoolCondition(op=op, children=children):
            return {"type": str(op), "children": [condition_to_dict(c, value_fn) for c in children]}
        case _:
            raise TypeError(f"Nieznany rodzaj warunku: {condition!r}")


def expr_to_dict(expr: Any) -> Any:
    if isinstance(expr, Call):
        d: dict[str, Any] = {"call": expr.fn}
        if expr.args:
            d["args"] = [expr_to_dict(a) for a in expr.args]
        return d
    return expr


def production_to_dict(production: Production, value_fn: FactValueFn = fact_value) -> dict[str, Any]:
    lhs = production.lhs
    d: dict[str, Any] = {
        "name": production.name,
        "lhs": (
            condition_to_dict(lhs, value_fn) if is_condition(lhs)
            else [condition_to_dict(c, value_fn) for c in lhs]  # type: ignore[union-attr]
        ),
    }
    if production.rhs is not None:
        d["rhs"] = expr_to_dict(production.rhs)
    if production.meta:
        d["meta"] = dict(production.meta)
    return d


def _value_to_json(value: Any, value_fn: FactValueFn) -> Any:
    if isinstance(value, Production):
        return production_to_dict(value, value_fn)
    if is_condition(value):
        return condition_to_dict(value, value_fn)
    return value


def _node_to_dict(node: Node, value_fn: FactValueFn) -> dict[str, Any]:
    d: dict[str, Any] = {"type": str(node.kind), "value": _value_to_json(node.value, value_fn)}
    if node.display_name is not None:
        d["symbol"] = node.display_name
    return d


def _edge_to_dict(src: str, dst: str, edge: Edge, value_fn: FactValueFn) -> dict[str, Any]:
    d: dict[str, Any] = {"from": src, "to": dst, "type": str(edge.kind)}
    if edge.value is not None:
        d["value"] = _value_to_json(edge.value, value_fn)
    return d


def graph_to_dict(graph: Graph, value_fn: FactValueFn = fact_value) -> dict[str, Any]:
    """Zwraca graf jako słownik zgodny z JSON (value_fn jak przy budowie grafu)."""
    nodes: dict[str, Any] = {}
    for node_id, entry in graph.nodes.items():
        if entry is None:
            nodes[node_id] = None
        elif isinstance(entry, list):
            nodes[node_id] = [None if n is None else _node_to_dict(n, value_fn) for n in entry]
        else:
            nodes[node_id] = _node_to_dict(entry, value_fn)

    edges: list[dict[str, Any]] = [
        _edge_to_dict(src, dst, edge, value_fn)
        for (src, dst), entry in graph.edges.items()
        for edge in entry_bodies(entry)
    ]
    return {"nodes": nodes, "edges": edges}
