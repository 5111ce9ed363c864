"""
logic_graph/insertions.py — wykrywanie typów faktów wstawianych przez RHS.

Skan syntaktyczny: rozpoznaje tylko kształt

    (clara.rules/insert! (ns/->TypeName ...) ...)

Wstawienia wykonane inaczej są niewidoczne dla analizy.
"""

from __future__ import annotations

from collections.abc import Iterable

from data_model import Call, Production, walk_calls

# Operacje "wstaw nowy fakt" silnika reguł
INSERT_OPS: frozenset[str] = frozenset({"clara.rules/insert!"})

# Prefiks nazwy konstruktora rekordu
CONSTRUCTOR_PREFIX = "->"


def _constructed_type(call: Call) -> str | None:
    """Nazwa typu tworzonego przez wywołanie konstruktora lub None."""
    if not call.name.startswith(CONSTRUCTOR_PREFIX):
        return None
    namespace = (call.namespace or "").replace("-", "_")
    return f"{namespace}.{call.name[len(CONSTRUCTOR_PREFIX):]}"


def get_insertions(
    production: Production,
    insert_ops: Iterable[str] = INSERT_OPS,
) -> set[str]:
    """Zwraca zbiór w pełni kwalifikowanych nazw typów wstawianych przez produkcję."""
    if production.rhs is None:
        return set()

    ops = frozenset(insert_ops)
    insertions: set[str] = set()

    for expression in walk_calls(production.rhs):
        if expression.fn not in ops:
            continue
        for arg in expression.args:
            if not isinstance(arg, Call):
                continue
            fact_type = _constructed_type(arg)
            if fact_type is not None:
                insertions.add(fact_type)

    return insertions
