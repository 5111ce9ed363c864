"""
logic_graph/sources.py — adapter źródeł reguł na jednolitą sekwencję produkcji.

Źródło to albo gotowa kolekcja produkcji, albo obiekt RuleSource
z metodą load_productions(). Błąd źródła przerywa całą budowę grafu.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from data_model import Production, RuleSource, RuleSourceInput

from .errors import RuleSourceError

logger = logging.getLogger(__name__)


def get_productions(sources: Iterable[RuleSourceInput]) -> list[Production]:
    """
    Zwraca konkatenację produkcji ze wszystkich źródeł, w kolejności źródeł.

    Raises:
        RuleSourceError gdy ładowanie któregokolwiek źródła się nie powiedzie
        (oryginalny wyjątek jest dostępny jako __cause__).
    """
    productions: list[Production] = []

    for source in sources:
        if isinstance(source, RuleSource):
            try:
                loaded = list(source.load_productions())
            except RuleSourceError:
                raise
            except Exception as exc:
                raise RuleSourceError(
                    f"Nie można wczytać produkcji ze źródła {source!r}: {exc}",
                    source=source,
                ) from exc
        else:
            loaded = list(source)

        logger.debug("Źródło %r: %d produkcji", source, len(loaded))
        productions.extend(loaded)

    return productions
