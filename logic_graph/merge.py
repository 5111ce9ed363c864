"""
logic_graph/merge.py — scalanie grafów (fragmentów) klucz po kluczu.

Klucz obecny w jednym operandzie przechodzi bez zmian. Przy kolizji
kluczy decyduje polityka:

  ACCUMULATE   — wpis staje się listą, nowe ciała dopisywane są na końcu
                 (trzecia kolizja daje listę 3-elementową itd.)
  DEDUPLICATE  — ciała równe już obecnym są pomijane; jedyne ciało
                 zostaje pojedynczą wartością

Wpis None (brakujący węzeł startowy przejścia) traktowany jest jak każde
inne ciało: None + None daje [None, None] (ACCUMULATE) lub None (DEDUPLICATE).
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from data_model import Graph


class MergePolicy(StrEnum):
    ACCUMULATE  = "accumulate"
    DEDUPLICATE = "deduplicate"


def _entry_list(entry: Any) -> list[Any]:
    return list(entry) if isinstance(entry, list) else [entry]


def _combine(existing: Any, new: Any, policy: MergePolicy) -> Any:
    bodies = _entry_list(existing)
    for body in _entry_list(new):
        if policy is MergePolicy.DEDUPLICATE and body in bodies:
            continue
        bodies.append(body)

    if policy is MergePolicy.DEDUPLICATE and len(bodies) == 1:
        return bodies[0]
    return bodies


def _merge_into[K](target: dict[K, Any], source: dict[K, Any], policy: MergePolicy) -> None:
    for key, value in source.items():
        if key in target:
            target[key] = _combine(target[key], value, policy)
        else:
            target[key] = value


def merge_graphs(*graphs: Graph, policy: MergePolicy = MergePolicy.ACCUMULATE) -> Graph:
    """Scala grafy od lewej do prawej; zwraca nowy graf (operandy nie są modyfikowane)."""
    result = Graph.empty()
    for graph in graphs:
        _merge_into(result.nodes, graph.nodes, policy)
        _merge_into(result.edges, graph.edges, policy)
    return result
