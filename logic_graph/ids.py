"""
logic_graph/ids.py — identyfikatory węzłów grafu.

  warunek:   "{pozycja}-{hash(produkcji)}"   (zasięg: produkcja)
  fakt:      "FT-{nazwa typu}"               (zasięg: globalny)
  produkcja: "P-{hash(produkcji)}"

Hash produkcji jest deterministycznym skrótem strukturalnym (blake2b)
jej nazwy, LHS i RHS — stabilnym w obrębie jednego przebiegu.
"""

from __future__ import annotations

import hashlib
from collections.abc import Callable
from typing import Any

from data_model import Production

type FactValueFn = Callable[[Any], str]


def production_hash(production: Production) -> str:
    """Skrót strukturalny produkcji (16 znaków hex); metadane nie wchodzą do skrótu."""
    lhs = production.lhs
    if isinstance(lhs, list):
        lhs = tuple(lhs)
    canonical = repr((production.name, lhs, production.rhs))
    return hashlib.blake2b(canonical.encode("utf-8"), digest_size=8).hexdigest()


def condition_id(position: int, prod_hash: str) -> str:
    return f"{position}-{prod_hash}"


def production_id(production: Production) -> str:
    return f"P-{production_hash(production)}"


def fact_value(fact_type: Any) -> str:
    """W pełni kwalifikowana nazwa typu faktu: klasa → module.qualname, reszta → str()."""
    if isinstance(fact_type, type):
        return f"{fact_type.__module__}.{fact_type.__qualname__}"
    return str(fact_type)


def fact_id(fact_type: Any, value_fn: FactValueFn = fact_value) -> str:
    return f"FT-{value_fn(fact_type)}"


def fact_symbol(fact_type: Any, value_fn: FactValueFn = fact_value) -> str:
    """
    Symbol konstruktora typu faktu, np.::

        "my_app.facts.Order"  →  "my-app.facts/->Order"
    """
    parts = value_fn(fact_type).replace("_", "-").split(".")
    return ".".join(parts[:-1]) + "/->" + parts[-1]
