"""
logic_graph/flatten.py — spłaszczanie drzewa warunków produkcji.

Korzeń drzewa:
  - LHS z jednym warunkiem → ten warunek
  - w przeciwnym razie     → syntetyczny AND z warunkami najwyższego poziomu

Kolejność: pre-order (węzeł, potem rekurencyjnie jego dzieci).
Węzłem wewnętrznym jest wyłącznie kombinator and / or / not.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from data_model import (
    OPERATORS,
    BoolCondition,
    BoolOp,
    Condition,
    Production,
    condition_type,
    is_condition,
)


@dataclass(frozen=True, slots=True)
class IndexedCondition:
    """
    Warunek wraz z pozycją w sekwencji pre-order.

    - position:        0-based indeks w condition_seq
    - condition:       sam warunek
    - child_positions: pozycje dzieci (puste dla liści)
    """
    position: int
    condition: Condition
    child_positions: tuple[int, ...] = ()


def condition_root(production: Production) -> Condition:
    """Korzeń drzewa warunków; dla wielu warunków dokłada niejawny AND."""
    lhs = production.lhs
    if is_condition(lhs):
        return lhs  # type: ignore[return-value]

    conditions: Sequence[Condition] = list(lhs)  # type: ignore[arg-type]
    if len(conditions) == 1:
        return conditions[0]
    return BoolCondition(BoolOp.AND, tuple(conditions))


def _children(condition: Condition) -> tuple[Condition, ...]:
    # Nieznane warianty traktowane są jak liście; odrzuca je dopiero budowniczy fragmentów.
    if is_condition(condition) and condition_type(condition) in OPERATORS:
        return condition.children  # type: ignore[union-attr]
    return ()


def indexed_condition_seq(production: Production) -> list[IndexedCondition]:
    """
    Sekwencja pre-order warunków z pozycjami dzieci.

    Pozycje pozwalają odróżnić strukturalnie identyczne warunki
    w obrębie jednej produkcji.
    """
    result: list[IndexedCondition] = []

    def visit(condition: Condition) -> int:
        position = len(result)
        result.append(IndexedCondition(position, condition))
        child_positions = tuple(visit(child) for child in _children(condition))
        if child_positions:
            result[position] = IndexedCondition(position, condition, child_positions)
        return position

    visit(condition_root(production))
    return result


def condition_seq(production: Production) -> list[Condition]:
    """Zwraca warunki produkcji w kolejności pre-order (łącznie z kombinatorami)."""
    return [item.condition for item in indexed_condition_seq(production)]
