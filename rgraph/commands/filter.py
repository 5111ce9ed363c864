"""Komenda: rgraph filter — podgraf połączony z faktami pasującymi do wyrażenia regularnego."""

from __future__ import annotations

import argparse
import re

from rich.console import Console

from rgraph.commands.graph import add_source_arguments, build_from_args, emit

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    from logic_graph import MergePolicy, filter_facts

    try:
        pattern = re.compile(args.facts)
    except re.error as e:
        console.print(f"[red]Nieprawidłowe wyrażenie --facts:[/red] {e}")
        raise SystemExit(1)

    graph  = build_from_args(args)
    result = filter_facts(graph, pattern, MergePolicy(args.merge_policy))
    emit(result, args, f"Fakty ~ /{args.facts}/")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "filter",
        help="Podgraf połączony z faktami pasującymi do wyrażenia regularnego.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Dla każdego faktu, którego nazwa typu pasuje do --facts (re.search),
zwraca wszystkie węzły i krawędzie prowadzące do niego i z niego osiągalne.

Przykłady:
  rgraph filter reguly.json --facts Order
  rgraph filter reguly.json --facts "^shop\\.facts\\." --json-output
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--facts", "-f",
        required=True,
        metavar="REGEX",
        help="Wyrażenie regularne dopasowywane do nazw typów faktów.",
    )
    p.set_defaults(func=run)
