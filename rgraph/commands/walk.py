"""Komenda: rgraph walk — przodkowie lub potomkowie wskazanego węzła grafu."""

from __future__ import annotations

import argparse

from rich.console import Console

from rgraph.commands.graph import add_source_arguments, build_from_args, emit

console = Console(width=200)


def run(args: argparse.Namespace) -> None:
    from logic_graph import ancestors_of, descendants_of

    graph = build_from_args(args)
    if args.node not in graph.nodes and not args.json_output:
        console.print(f"[yellow]Węzeł {args.node} nie występuje w grafie.[/yellow]")

    if args.direction == "ancestors":
        result = ancestors_of(graph, args.node)
    else:
        result = descendants_of(graph, args.node)

    emit(result, args, f"{args.direction}: {args.node}")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "walk",
        help="Podgraf przodków lub potomków węzła grafu logiki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Przechodzi graf od wskazanego węzła:
  ancestors    — wstecz, po krawędziach wchodzących
  descendants  — w przód, po krawędziach wychodzących

Przykłady:
  rgraph walk reguly.json --node FT-shop.facts.Order
  rgraph walk reguly.json --node FT-shop.facts.Shipped --direction ancestors
        """,
    )
    add_source_arguments(p)
    p.add_argument(
        "--node",
        required=True,
        metavar="ID",
        help="Identyfikator węzła startowego (np. FT-..., P-...).",
    )
    p.add_argument(
        "--direction", "-d",
        choices=["ancestors", "descendants"],
        default="descendants",
        help="Kierunek przejścia (domyślnie: descendants).",
    )
    p.set_defaults(func=run)
