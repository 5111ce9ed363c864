"""
Konfiguracja źródła reguł w PostgreSQL (zmienne środowiskowe).

  PGHOST, PGPORT, PGDATABASE, PGUSER, PGPASSWORD — połączenie psycopg2
  RULEGRAPH_TABLE      — tabela produkcji (domyślnie: production)
  RULEGRAPH_NAMESPACE  — domyślny filtr przestrzeni nazw reguł (brak = wszystkie)
"""

from __future__ import annotations

import os

import psycopg2
import psycopg2.extensions

DEFAULT_TABLE = "production"


def default_table() -> str:
    return os.getenv("RULEGRAPH_TABLE") or DEFAULT_TABLE


def default_namespace() -> str | None:
    return os.getenv("RULEGRAPH_NAMESPACE") or None


def get_connection() -> psycopg2.extensions.connection:
    """Otwiera połączenie z bazą reguł; zamknięcie należy do wywołującego."""
    return psycopg2.connect(
        host     = os.getenv("PGHOST",     "localhost"),
        port     = int(os.getenv("PGPORT", "5432")),
        dbname   = os.getenv("PGDATABASE", "rulegraph"),
        user     = os.getenv("PGUSER",     "rulegraph"),
        password = os.getenv("PGPASSWORD", "rulegraph"),
    )
