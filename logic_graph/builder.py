"""
logic_graph/builder.py — graf logiki dla całego zbioru źródeł reguł.

build_graph(sources) = scalenie grafów wszystkich produkcji, w kolejności produkcji.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from data_model import Graph, RuleSourceInput

from .fragments import production_graph
from .ids import FactValueFn, fact_value
from .insertions import INSERT_OPS
from .merge import MergePolicy, merge_graphs
from .sources import get_productions

logger = logging.getLogger(__name__)


def build_graph(
    sources: Iterable[RuleSourceInput],
    *,
    value_fn: FactValueFn = fact_value,
    insert_ops: Iterable[str] = INSERT_OPS,
    policy: MergePolicy = MergePolicy.ACCUMULATE,
) -> Graph:
    """
    Zwraca graf relacji między regułami, warunkami, faktami i wstawieniami.

    Args:
        sources:    źródła reguł (kolekcje produkcji lub obiekty RuleSource)
        value_fn:   funkcja nazwy typu faktu (domyślnie fact_value)
        insert_ops: kwalifikowane nazwy operacji wstawiania faktu
        policy:     polityka scalania przy kolizji kluczy

    Raises:
        RuleSourceError gdy któreś źródło nie daje się wczytać (brak częściowego grafu).
    """
    insert_ops = frozenset(insert_ops)
    productions = get_productions(sources)

    graph = merge_graphs(
        *(production_graph(p, value_fn, insert_ops, policy) for p in productions),
        policy=policy,
    )
    logger.debug(
        "Graf logiki: %d produkcji, %d węzłów, %d krawędzi",
        len(productions), len(graph.nodes), len(graph.edges),
    )
    return graph
