"""
logic_graph — graf zależności produkcji, warunków i faktów oraz zapytania o osiągalność.

Publiczne API:
  build_graph(sources)                  → Graph  (źródła → produkcje → fragmenty → scalenie)
  ancestors_of(graph, node_id)          → Graph  (przejście wstecz)
  descendants_of(graph, node_id)        → Graph  (przejście w przód)
  filter_by_fact(graph, predicate)      → Graph  (podgraf faktów spełniających predykat)
  filter_facts(graph, regex)            → Graph  (jw., predykat = re.search)
  get_productions(sources)              → list[Production]
  merge_graphs(*graphs, policy)         → Graph
  graph_to_dict(graph)                  → dict   (do json.dumps)
  load_productions_json(path), JsonRuleSource, DbRuleSource — źródła reguł
"""

from .errors import LogicGraphError, RuleSourceError, UnknownConditionError
from .sources import get_productions
from .flatten import IndexedCondition, condition_root, condition_seq, indexed_condition_seq
from .ids import condition_id, fact_id, fact_symbol, fact_value, production_hash, production_id
from .insertions import INSERT_OPS, get_insertions
from .fragments import condition_graph, production_graph
from .merge import MergePolicy, merge_graphs
from .builder import build_graph
from .traversal import Direction, ancestors_of, descendants_of, walk_graph
from .filter import filter_by_fact, filter_facts
from .loader import (
    DbRuleSource,
    JsonRuleSource,
    load_productions_from_db,
    load_productions_json,
    productions_from_document,
)
from .serialize import graph_to_dict

__all__ = [
    "LogicGraphError",
    "RuleSourceError",
    "UnknownConditionError",
    "get_productions",
    "IndexedCondition",
    "condition_root",
    "condition_seq",
    "indexed_condition_seq",
    "condition_id",
    "fact_id",
    "fact_symbol",
    "fact_value",
    "production_hash",
    "production_id",
    "INSERT_OPS",
    "get_insertions",
    "condition_graph",
    "production_graph",
    "MergePolicy",
    "merge_graphs",
    "build_graph",
    "Direction",
    "ancestors_of",
    "descendants_of",
    "walk_graph",
    "filter_by_fact",
    "filter_facts",
    "DbRuleSource",
    "JsonRuleSource",
    "load_productions_from_db",
    "load_productions_json",
    "productions_from_document",
    "graph_to_dict",
]
