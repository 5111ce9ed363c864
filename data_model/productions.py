"""
Struktury danych dla produkcji (reguł silnika forward-chaining).

Produkcja: nazwa + LHS (jeden warunek lub lista warunków, niejawnie AND)
           + opcjonalne RHS (drzewo wyrażeń akcji) + opcjonalne metadane.

Wyrażenia RHS:
  Call(fn, args)  — wywołanie, fn to kwalifikowany symbol "ns/nazwa"
  skalar          — str | int | float | bool | None
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from .conditions import Condition

# ---------------------------------------------------------------------------
# Wyrażenia RHS
# ---------------------------------------------------------------------------

type Scalar = str | int | float | bool | None


@dataclass(frozen=True, slots=True)
class Call:
    """Wywołanie funkcji w wyrażeniu RHS: (fn arg1 arg2 ...)."""
    fn: str
    args: tuple[Expr, ...] = ()

    @property
    def namespace(self) -> str | None:
        """Część przed '/' lub None dla symbolu niekwalifikowanego."""
        ns, sep, _ = self.fn.rpartition("/")
        return ns if sep else None

    @property
    def name(self) -> str:
        """Część po '/' (cała nazwa dla symbolu niekwalifikowanego)."""
        return self.fn.rpartition("/")[2]

    def __str__(self) -> str:
        inner = " ".join([self.fn, *(str(a) for a in self.args)])
        return f"({inner})"


type Expr = Call | Scalar


def walk_calls(expr: Expr) -> Iterator[Call]:
    """Przechodzi drzewo wyrażeń pre-order i zwraca wszystkie wywołania."""
    stack: list[Expr] = [expr]
    while stack:
        current = stack.pop()
        if isinstance(current, Call):
            yield current
            stack.extend(reversed(current.args))


# ---------------------------------------------------------------------------
# Production
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Production:
    """
    Definicja reguły.

    - name: nazwa / symbol reguły, np. "my.rules/ship-orders"
    - lhs:  warunek lub lista warunków (niejawnie połączonych przez AND)
    - rhs:  opcjonalne drzewo wyrażeń wykonywanych po odpaleniu reguły
    - meta: opcjonalne metadane (docstring, salience, źródło...)
    """
    name: str
    lhs: Condition | Sequence[Condition]
    rhs: Expr = None
    meta: Mapping[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# RuleSource
# ---------------------------------------------------------------------------

@runtime_checkable
class RuleSource(Protocol):
    """Źródło reguł ładujące produkcje na żądanie (plik, baza danych...)."""

    def load_productions(self) -> Sequence[Production]: ...


type RuleSourceInput = RuleSource | Sequence[Production]
