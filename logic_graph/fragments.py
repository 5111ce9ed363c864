"""
logic_graph/fragments.py — budowa fragmentów grafu dla warunków i produkcji.

Dla każdego warunku (dyspozycja po wariancie):
  fakt         → węzeł fact-condition + węzeł fact + krawędź used-in (fact → warunek)
  akumulator   → węzeł accumulator-condition (bez warunku źródłowego)
  and/or/not   → węzeł kombinatora + krawędzie component-of (dziecko → kombinator)

Dla produkcji:
  węzeł production, krawędź then (korzeń LHS → produkcja),
  węzły fact i krawędzie inserts dla typów wstawianych przez RHS,
  scalone z fragmentami wszystkich warunków.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from data_model import (
    AccumulatorCondition,
    BoolCondition,
    Edge,
    EdgeKind,
    FactCondition,
    Graph,
    Node,
    NodeKind,
    Production,
)

from .errors import UnknownConditionError
from .flatten import IndexedCondition, indexed_condition_seq
from .ids import (
    FactValueFn,
    condition_id,
    fact_id,
    fact_symbol,
    fact_value,
    production_hash,
    production_id,
)
from .insertions import INSERT_OPS, get_insertions
from .merge import MergePolicy, merge_graphs

logger = logging.getLogger(__name__)


def _fact_node(fact_type, value_fn: FactValueFn) -> Node:
    return Node(
        id=fact_id(fact_type, value_fn),
        kind=NodeKind.FACT,
        value=value_fn(fact_type),
        display_name=fact_symbol(fact_type, value_fn),
    )


def condition_graph(
    item: IndexedCondition,
    production_name: str,
    prod_hash: str,
    value_fn: FactValueFn = fact_value,
) -> Graph:
    """Tworzy fragment grafu dla jednego warunku."""
    cond_id = condition_id(item.position, prod_hash)

    match item.condition:
        case FactCondition(fact_type=fact_type) as condition:
            fact = _fact_node(fact_type, value_fn)
            return Graph(
                nodes={
                    cond_id: Node(cond_id, NodeKind.FACT_CONDITION, condition, production_name),
                    fact.id: fact,
                },
                edges={(fact.id, cond_id): Edge(EdgeKind.USED_IN)},
            )

        case AccumulatorCondition() as condition:
            # TODO: dołączyć warunek źródłowy akumulatora (condition.source) jako dziecko.
            return Graph(
                nodes={cond_id: Node(cond_id, NodeKind.ACCUMULATOR_CONDITION, condition)},
            )

        case BoolCondition(op=op) as condition:
            return Graph(
                nodes={cond_id: Node(cond_id, NodeKind(op), condition, production_name)},
                edges={
                    (condition_id(child, prod_hash), cond_id): Edge(EdgeKind.COMPONENT_OF)
                    for child in item.child_positions
                },
            )

        case other:
            raise UnknownConditionError(
                f"Brak obsługi warunku rodzaju {type(other).__name__}: {other!r}"
            )


def production_graph(
    production: Production,
    value_fn: FactValueFn = fact_value,
    insert_ops: Iterable[str] = INSERT_OPS,
    policy: MergePolicy = MergePolicy.ACCUMULATE,
) -> Graph:
    """Tworzy graf logiki dla jednej produkcji."""
    prod_hash = production_hash(production)
    prod_node_id = production_id(production)
    conditions = indexed_condition_seq(production)
    insertions = sorted(get_insertions(production, insert_ops))

    nodes = {
        prod_node_id: Node(prod_node_id, NodeKind.PRODUCTION, production, production.name),
    }
    # Krawędź do pierwszego warunku w sekwencji: pojedynczego warunku lub wyrażenia-rodzica.
    edges = {
        (condition_id(conditions[0].position, prod_hash), prod_node_id): Edge(EdgeKind.THEN),
    }

    for insertion in insertions:
        fact = _fact_node(insertion, value_fn)
        nodes[fact.id] = fact
        edges[(prod_node_id, fact.id)] = Edge(EdgeKind.INSERTS)

    fragments = [
        condition_graph(item, production.name, prod_hash, value_fn)
        for item in conditions
    ]
    logger.debug(
        "Produkcja %s: %d warunków, %d wstawień",
        production.name, len(conditions), len(insertions),
    )
    return merge_graphs(Graph(nodes=nodes, edges=edges), *fragments, policy=policy)
