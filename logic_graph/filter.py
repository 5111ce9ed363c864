"""
logic_graph/filter.py — podgraf połączony z faktami pasującymi do predykatu.

Dla każdego węzła typu fact, którego wartość spełnia predykat, liczone są
ancestors_of i descendants_of; wszystkie podgrafy są scalane (merge_graphs).
Brak dopasowań → pusty graf.
"""

from __future__ import annotations

import re
from collections.abc import Callable

from data_model import Graph, NodeKind, entry_bodies

from .merge import MergePolicy, merge_graphs
from .traversal import ancestors_of, descendants_of


def _is_matching_fact(entry, predicate: Callable[[str], bool]) -> bool:
    return any(
        node.kind == NodeKind.FACT and predicate(node.value)
        for node in entry_bodies(entry)
    )


def filter_by_fact(
    graph: Graph,
    predicate: Callable[[str], bool],
    policy: MergePolicy = MergePolicy.ACCUMULATE,
) -> Graph:
    """Zwraca podgraf połączony z faktami, których nazwa typu spełnia predykat."""
    subgraphs: list[Graph] = []
    for node_id, entry in graph.nodes.items():
        if _is_matching_fact(entry, predicate):
            subgraphs.append(ancestors_of(graph, node_id))
            subgraphs.append(descendants_of(graph, node_id))

    return merge_graphs(Graph.empty(), *subgraphs, policy=policy)


def filter_facts(
    graph: Graph,
    facts_regex: str | re.Pattern[str],
    policy: MergePolicy = MergePolicy.ACCUMULATE,
) -> Graph:
    """
    Wariant filter_by_fact z wyrażeniem regularnym dopasowywanym przez re.search,
    np. filter_facts(graph, r"Order$").
    """
    pattern = re.compile(facts_regex) if isinstance(facts_regex, str) else facts_regex
    return filter_by_fact(graph, lambda value: pattern.search(value) is not None, policy)
