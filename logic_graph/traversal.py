"""
logic_graph/traversal.py — przechodzenie grafu w przód i wstecz.

walk_graph() to jeden sparametryzowany algorytm z listą roboczą:
  FORWARD  — krawędzie, których źródłem jest bieżący węzeł → idź do celu
  BACKWARD — krawędzie, których celem jest bieżący węzeł   → idź do źródła

Odwiedzona krawędź nie jest odwiedzana ponownie, więc przejście kończy się
także dla grafów z cyklami i pętlami własnymi.
"""

from __future__ import annotations

import logging
from collections import deque
from enum import StrEnum

from data_model import EdgeKey, Graph

logger = logging.getLogger(__name__)


class Direction(StrEnum):
    FORWARD  = "forward"
    BACKWARD = "backward"


def _edge_index(graph: Graph, direction: Direction) -> dict[str, list[EdgeKey]]:
    """Węzeł → krawędzie wychodzące z niego w danym kierunku (kolejność grafu)."""
    index: dict[str, list[EdgeKey]] = {}
    for key in graph.edges:
        src, dst = key
        anchor = src if direction is Direction.FORWARD else dst
        index.setdefault(anchor, []).append(key)
    return index


def walk_graph(graph: Graph, node_id: str, direction: Direction) -> Graph:
    """
    Zwraca podgraf osiągalny z node_id w danym kierunku.

    Wynik zawiera węzeł startowy, każdy węzeł napotkany jako koniec krawędzi
    i każdą odwiedzoną krawędź (dokładnie raz). Węzeł startowy spoza grafu
    daje wpis {node_id: None} i brak krawędzi.
    """
    index = _edge_index(graph, direction)
    follow = 1 if direction is Direction.FORWARD else 0

    result = Graph(nodes={node_id: graph.nodes.get(node_id)})
    visited: set[EdgeKey] = set()
    worklist: deque[EdgeKey] = deque(index.get(node_id, ()))

    while worklist:
        edge_key = worklist.popleft()
        if edge_key in visited:
            continue
        visited.add(edge_key)

        next_node_id = edge_key[follow]
        result.edges[edge_key] = graph.edges[edge_key]
        if next_node_id not in result.nodes:
            result.nodes[next_node_id] = graph.nodes.get(next_node_id)
        worklist.extend(index.get(next_node_id, ()))

    logger.debug(
        "walk %s z %s: %d węzłów, %d krawędzi",
        direction, node_id, len(result.nodes), len(result.edges),
    )
    return result


def ancestors_of(graph: Graph, node_id: str) -> Graph:
    """Podgraf, który przechodnio prowadzi do węzła node_id."""
    return walk_graph(graph, node_id, Direction.BACKWARD)


def descendants_of(graph: Graph, node_id: str) -> Graph:
    """Podgraf przechodnio osiągalny z węzła node_id."""
    return walk_graph(graph, node_id, Direction.FORWARD)
