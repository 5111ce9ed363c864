"""
Struktury danych grafu logiki: węzły, krawędzie, graf.

Graf:
  nodes: id -> NodeEntry
  edges: (from_id, to_id) -> EdgeEntry

Wpis (entry) to pojedyncze ciało, lista ciał (po scalaniu z akumulacją
przy kolizji kluczy) albo None (węzeł startowy spoza grafu).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

# ---------------------------------------------------------------------------
# Enumeracje
# ---------------------------------------------------------------------------

class NodeKind(StrEnum):
    """Rodzaj węzła. Pełny zbiór — łącznie z production i accumulator-condition."""
    FACT                  = "fact"
    FACT_CONDITION        = "fact-condition"
    AND                   = "and"
    OR                    = "or"
    NOT                   = "not"
    ACCUMULATOR_CONDITION = "accumulator-condition"
    PRODUCTION            = "production"
    RHS                   = "rhs"


class EdgeKind(StrEnum):
    """
    Rodzaj krawędzi.
    - COMPONENT_OF: warunek-dziecko → kombinator logiczny
    - INSERTS:      produkcja → typ wstawianego faktu
    - THEN:         korzeń LHS → produkcja
    - USED_IN:      typ faktu → warunek, który go dopasowuje
    """
    COMPONENT_OF = "component-of"
    INSERTS      = "inserts"
    THEN         = "then"
    USED_IN      = "used-in"


# ---------------------------------------------------------------------------
# Node / Edge
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Node:
    id: str
    kind: NodeKind
    value: Any
    display_name: str | None = None


@dataclass(slots=True)
class Edge:
    kind: EdgeKind
    value: Any = None


type EdgeKey = tuple[str, str]
type NodeEntry = Node | list[Node | None] | None
type EdgeEntry = Edge | list[Edge]


def entry_bodies[T](entry: T | list[T] | None) -> list[T]:
    """Zwraca istniejące ciała wpisu jako listę (brakujące, czyli None, są pomijane)."""
    if entry is None:
        return []
    if isinstance(entry, list):
        return [body for body in entry if body is not None]
    return [entry]


# ---------------------------------------------------------------------------
# Graph
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Graph:
    """Graf lub fragment grafu. Po zbudowaniu nie jest modyfikowany."""
    nodes: dict[str, NodeEntry] = field(default_factory=dict)
    edges: dict[EdgeKey, EdgeEntry] = field(default_factory=dict)

    @classmethod
    def empty(cls) -> Graph:
        return cls()

    def is_empty(self) -> bool:
        return not self.nodes and not self.edges

    def node_kind(self, node_id: str) -> NodeKind | None:
        """Rodzaj węzła (pierwszego ciała wpisu) lub None gdy brak."""
        bodies = entry_bodies(self.nodes.get(node_id))
        return bodies[0].kind if bodies else None

    def edge_kind(self, key: EdgeKey) -> EdgeKind | None:
        bodies = entry_bodies(self.edges.get(key))
        return bodies[0].kind if bodies else None

    def dangling_edges(self) -> list[EdgeKey]:
        """Krawędzie, których końce nie wskazują istniejących węzłów."""
        return [
            (src, dst) for src, dst in self.edges
            if src not in self.nodes or dst not in self.nodes
        ]
