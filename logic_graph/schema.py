"""
logic_graph/schema.py — schemat JSON pliku produkcji (Draft 2020-12).

Dokument:
  {"productions": [{"name": ..., "lhs": Condition | [Condition], "rhs": Expr, "meta": {...}}]}
"""

from __future__ import annotations

from typing import Any

PRODUCTION_FILE_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "rulegraph_productions_v1",
    "type": "object",
    "required": ["productions"],
    "properties": {
        "productions": {
            "type": "array",
            "items": {"$ref": "#/$defs/Production"},
        },
    },
    "$defs": {
        "Production": {
            "type": "object",
            "required": ["name", "lhs"],
            "additionalProperties": False,
            "properties": {
                "name": {"type": "string", "minLength": 1},
                "lhs": {
                    "oneOf": [
                        {"$ref": "#/$defs/Condition"},
                        {"type": "array", "items": {"$ref": "#/$defs/Condition"}},
                    ],
                },
                "rhs": {"$ref": "#/$defs/Expr"},
                "meta": {"type": "object"},
            },
        },
        "FactCondition": {
            "type": "object",
            "required": ["type", "fact_type"],
            "additionalProperties": False,
            "properties": {
                "type": {"const": "fact"},
                "fact_type": {"type": "string", "minLength": 1},
                "constraints": {"type": "array", "items": {"type": "string"}},
                "fact_binding": {"type": ["string", "null"]},
            },
        },
        "AccumulatorCondition": {
            "type": "object",
            "required": ["type", "accumulator"],
            "additionalProperties": False,
            "properties": {
                "type": {"const": "accumulator"},
                "accumulator": {"type": "string", "minLength": 1},
                "from": {"$ref": "#/$defs/FactCondition"},
                "result_binding": {"type": ["string", "null"]},
            },
        },
        "BoolCondition": {
            "type": "object",
            "required": ["type", "children"],
            "additionalProperties": False,
            "properties": {
                "type": {"enum": ["and", "or", "not"]},
                "children": {"type": "array", "items": {"$ref": "#/$defs/Condition"}},
            },
        },
        "Condition": {
            "oneOf": [
                {"$ref": "#/$defs/FactCondition"},
                {"$ref": "#/$defs/AccumulatorCondition"},
                {"$ref": "#/$defs/BoolCondition"},
            ],
        },
        "Call": {
            "type": "object",
            "required": ["call"],
            "additionalProperties": False,
            "properties": {
                "call": {"type": "string", "minLength": 1},
                "args": {"type": "array", "items": {"$ref": "#/$defs/Expr"}},
            },
        },
        "Expr": {
            "anyOf": [
                {"$ref": "#/$defs/Call"},
                {"type": ["string", "number", "boolean", "null"]},
            ],
        },
    },
}
