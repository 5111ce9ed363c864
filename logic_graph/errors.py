"""logic_graph/errors.py — wyjątki budowy i odpytywania grafu logiki."""

from __future__ import annotations


class LogicGraphError(Exception):
    """Bazowy wyjątek pakietu logic_graph."""


class RuleSourceError(LogicGraphError):
    """
    Nie udało się wczytać produkcji ze źródła reguł.

    - source: źródło, które zawiodło (do komunikatu)
    - errors: opcjonalna lista szczegółowych komunikatów (np. naruszenia schematu JSON)
    """

    def __init__(self, message: str, source: object = None, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.source = source
        self.errors: list[str] = errors or []


class UnknownConditionError(TypeError):
    """Warunek nieznanego rodzaju dotarł do budowniczego fragmentów."""
