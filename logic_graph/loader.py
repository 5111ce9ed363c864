"""
logic_graph/loader.py — ładowanie produkcji z pliku JSON i z bazy danych.

Publiczne API:
  load_productions_json(path)                    -> list[Production]
  load_productions_from_db(conn, table, namespace) -> list[Production]
  productions_from_document(doc, source)         -> list[Production]
  JsonRuleSource(path)                           RuleSource nad plikiem JSON
  DbRuleSource(conn, table, namespace)           RuleSource nad tabelą PostgreSQL
"""

from __future__ import annotations

import json
import pathlib
from typing import Any, Optional

import jsonschema

from data_model import (
    AccumulatorCondition,
    BoolCondition,
    BoolOp,
    Call,
    Condition,
    Expr,
    FactCondition,
    Production,
)

from .errors import RuleSourceError
from .schema import PRODUCTION_FILE_SCHEMA

_VALIDATOR = jsonschema.Draft202012Validator(PRODUCTION_FILE_SCHEMA)


# ---------------------------------------------------------------------------
# Dekodowanie słowników JSON
# ---------------------------------------------------------------------------

def _condition_from_dict(d: dict) -> Condition:
    match d["type"]:
        case "fact":
            return FactCondition(
                fact_type=str(d["fact_type"]),
                constraints=tuple(str(c) for c in d.get("constraints", [])),
                fact_binding=d.get("fact_binding"),
            )
        case "accumulator":
            source = d.get("from")
            return AccumulatorCondition(
                accumulator=str(d["accumulator"]),
                source=_condition_from_dict(source) if source else None,  # type: ignore[arg-type]
                result_binding=d.get("result_binding"),
            )
        case op:
            return BoolCondition(
                op=BoolOp(op),
                children=tuple(_condition_from_dict(c) for c in d.get("children", [])),
            )


def _expr_from_dict(raw: Any) -> Expr:
    if isinstance(raw, dict):
        return Call(
            fn=str(raw["call"]),
            args=tuple(_expr_from_dict(a) for a in raw.get("args", [])),
        )
    return raw


def _production_from_dict(d: dict) -> Production:
    lhs_raw = d["lhs"]
    if isinstance(lhs_raw, list):
        lhs: Condition | list[Condition] = [_condition_from_dict(c) for c in lhs_raw]
    else:
        lhs = _condition_from_dict(lhs_raw)

    return Production(
        name=str(d["name"]),
        lhs=lhs,
        rhs=_expr_from_dict(d.get("rhs")),
        meta=dict(d.get("meta") or {}),
    )


def _schema_errors(doc: Any) -> list[str]:
    errors: list[str] = []
    for e in sorted(_VALIDATOR.iter_errors(doc), key=lambda e: list(e.absolute_path)):
        path = (
            "/" + "/".join(str(p) for p in e.absolute_path)
            if e.absolute_path
            else "/"
        )
        errors.append(f"{path}: {e.message}")
    return errors


def productions_from_document(doc: Any, source: object = None) -> list[Production]:
    """
    Waliduje dokument {"productions": [...]} schematem JSON i dekoduje produkcje.

    Raises:
        RuleSourceError z listą naruszeń schematu w .errors.
    """
    errors = _schema_errors(doc)
    if errors:
        raise RuleSourceError(
            f"Dokument produkcji niezgodny ze schematem ({len(errors)} błąd(ów)).",
            source=source,
            errors=errors,
        )
    return [_production_from_dict(p) for p in doc["productions"]]


# ---------------------------------------------------------------------------
# Produkcje z pliku JSON
# ---------------------------------------------------------------------------

def load_productions_json(path: pathlib.Path) -> list[Production]:
    """
    Wczytuje produkcje z pliku JSON.

    Oczekiwany format::

        {
            "productions": [
                {
                    "name": "shop.rules/ship-orders",
                    "lhs":  [{"type": "fact", "fact_type": "shop.facts.Order",
                              "fact_binding": "?order"}],
                    "rhs":  {"call": "clara.rules/insert!",
                             "args": [{"call": "shop.facts/->Shipped", "args": ["?order"]}]}
                }
            ]
        }

    Raises:
        RuleSourceError gdy plik nie istnieje, nie jest poprawnym JSON
        lub narusza schemat.
    """
    path = pathlib.Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise RuleSourceError(f"Nie można wczytać pliku produkcji {path}: {exc}", source=path) from exc

    return productions_from_document(raw, source=path)


class JsonRuleSource:
    """RuleSource ładujący produkcje z pliku JSON przy każdym wywołaniu."""

    def __init__(self, path: pathlib.Path | str) -> None:
        self.path = pathlib.Path(path)

    def load_productions(self) -> list[Production]:
        return load_productions_json(self.path)

    def __repr__(self) -> str:
        return f"JsonRuleSource({str(self.path)!r})"


# ---------------------------------------------------------------------------
# Produkcje z bazy
# ---------------------------------------------------------------------------

def _json_column(raw: Any) -> Any:
    if isinstance(raw, str):
        return json.loads(raw)
    return raw


def load_productions_from_db(
    conn,
    table:     str = "production",
    namespace: Optional[str] = None,
) -> list[Production]:
    """
    Ładuje produkcje z tabeli (kolumny: name, lhs, rhs, meta — JSON/JSONB).

    Args:
        conn:      otwarte połączenie psycopg2
        table:     nazwa tabeli
        namespace: opcjonalny filtr po przestrzeni nazw reguły ("ns/...")

    Returns:
        Lista obiektów Production w kolejności kolumny id.
    """
    wheres: list[str] = []
    params: list      = []

    if namespace:
        wheres.append("split_part(name, '/', 1) = %s")
        params.append(namespace)

    where = ("WHERE " + " AND ".join(wheres)) if wheres else ""
    sql   = f"SELECT name, lhs, rhs, meta FROM {table} {where} ORDER BY id"

    with conn.cursor() as cur:
        cur.execute(sql, params)
        rows = cur.fetchall()

    doc: dict[str, list] = {"productions": []}
    for name, lhs_raw, rhs_raw, meta_raw in rows:
        item: dict[str, Any] = {"name": name, "lhs": _json_column(lhs_raw)}
        rhs = _json_column(rhs_raw)
        if rhs is not None:
            item["rhs"] = rhs
        meta = _json_column(meta_raw)
        if meta:
            item["meta"] = meta
        doc["productions"].append(item)

    return productions_from_document(doc, source=table)


class DbRuleSource:
    """RuleSource ładujący produkcje z tabeli PostgreSQL."""

    def __init__(self, conn, table: str = "production", namespace: Optional[str] = None) -> None:
        self.conn      = conn
        self.table     = table
        self.namespace = namespace

    def load_productions(self) -> list[Production]:
        return load_productions_from_db(self.conn, self.table, self.namespace)

    def __repr__(self) -> str:
        return f"DbRuleSource(table={self.table!r}, namespace={self.namespace!r})"
