"""
data_model — struktury danych modelu rulegraph.

Użycie:
  from data_model import Production, FactCondition, Graph, NodeKind, ...

Moduły:
  conditions  — FactCondition, AccumulatorCondition, BoolCondition, BoolOp,
                ConditionType, condition_type
  productions — Production, Call, RuleSource, walk_calls
  graph       — Node, Edge, Graph, NodeKind, EdgeKind, entry_bodies
"""

from .conditions import (
    BoolOp,
    ConditionType,
    FactCondition,
    AccumulatorCondition,
    BoolCondition,
    Condition,
    OPERATORS,
    condition_type,
    is_condition,
)
from .productions import (
    Call,
    Expr,
    Production,
    RuleSource,
    RuleSourceInput,
    walk_calls,
)
from .graph import (
    NodeKind,
    EdgeKind,
    Node,
    Edge,
    EdgeKey,
    NodeEntry,
    EdgeEntry,
    Graph,
    entry_bodies,
)

__all__ = [
    # conditions
    "BoolOp",
    "ConditionType",
    "FactCondition",
    "AccumulatorCondition",
    "BoolCondition",
    "Condition",
    "OPERATORS",
    "condition_type",
    "is_condition",
    # productions
    "Call",
    "Expr",
    "Production",
    "RuleSource",
    "RuleSourceInput",
    "walk_calls",
    # graph
    "NodeKind",
    "EdgeKind",
    "Node",
    "Edge",
    "EdgeKey",
    "NodeEntry",
    "EdgeEntry",
    "Graph",
    "entry_bodies",
]
