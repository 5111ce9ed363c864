"""
Struktury danych dla warunków (conditions) lewej strony produkcji (LHS).

Warunek to zamknięta suma wariantów:
  FactCondition         — dopasowanie faktu danego typu (liść)
  AccumulatorCondition  — akumulator nad faktami (liść)
  BoolCondition         — kombinator logiczny and / or / not nad dziećmi

Kodowanie JSON (plik produkcji):
  {"type": "fact", "fact_type": "...", "constraints": [...], "fact_binding": "?x"}
  {"type": "accumulator", "accumulator": "...", "from": {...}, "result_binding": "?r"}
  {"type": "and" | "or" | "not", "children": [...]}
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any


# ---------------------------------------------------------------------------
# Enumeracje
# ---------------------------------------------------------------------------

class BoolOp(StrEnum):
    """Operator kombinatora logicznego."""
    AND = "and"
    OR  = "or"
    NOT = "not"


class ConditionType(StrEnum):
    """Znacznik rodzaju warunku — klucz dyspozycji w budowniczym fragmentów."""
    FACT        = "fact"
    ACCUMULATOR = "accumulator"
    AND         = "and"
    OR          = "or"
    NOT         = "not"


# ---------------------------------------------------------------------------
# Warianty
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class FactCondition:
    """
    Dopasowanie faktu: ?binding <- FactType [constraints...].

    - fact_type:    referencja typu faktu (klasa lub w pełni kwalifikowana nazwa)
    - constraints:  ograniczenia na polach faktu, w postaci tekstowej
    - fact_binding: opcjonalna zmienna wiązana z dopasowanym faktem
    """
    fact_type: Any
    constraints: tuple[str, ...] = ()
    fact_binding: str | None = None


@dataclass(frozen=True, slots=True)
class AccumulatorCondition:
    """
    Akumulator: ?result <- (acc) :from [FactType ...].

    Warunek źródłowy (source) jest przechowywany, ale nie jest rozwijany w grafie.
    """
    accumulator: str
    source: FactCondition | None = None
    result_binding: str | None = None


@dataclass(frozen=True, slots=True)
class BoolCondition:
    """Kombinator logiczny: [op child1 child2 ...]."""
    op: BoolOp
    children: tuple[Condition, ...] = field(default_factory=tuple)


type Condition = FactCondition | AccumulatorCondition | BoolCondition


# ---------------------------------------------------------------------------
# Pomocnicze
# ---------------------------------------------------------------------------

OPERATORS: frozenset[ConditionType] = frozenset(
    {ConditionType.AND, ConditionType.OR, ConditionType.NOT}
)


def condition_type(condition: Condition) -> ConditionType:
    """Zwraca znacznik rodzaju warunku. Nieznany wariant → TypeError."""
    match condition:
        case FactCondition():
            return ConditionType.FACT
        case AccumulatorCondition():
            return ConditionType.ACCUMULATOR
        case BoolCondition(op=op):
            return ConditionType(op)
        case _:
            raise TypeError(f"Nieznany rodzaj warunku: {condition!r}")


def is_condition(obj: Any) -> bool:
    return isinstance(obj, (FactCondition, AccumulatorCondition, BoolCondition))
