"""Komenda: rgraph graph — buduje graf logiki z plików produkcji (i opcjonalnie bazy)."""

from __future__ import annotations

import argparse
import json
import sys

from rich import box
from rich.console import Console
from rich.table import Table

from data_model import Graph, NodeKind, Production, entry_bodies

console = Console(width=200)

KIND_STYLE: dict[str, str] = {
    NodeKind.FACT:                  "bold cyan",
    NodeKind.FACT_CONDITION:        "green",
    NodeKind.ACCUMULATOR_CONDITION: "green",
    NodeKind.AND:                   "yellow",
    NodeKind.OR:                    "yellow",
    NodeKind.NOT:                   "yellow",
    NodeKind.PRODUCTION:            "bold magenta",
}


# ---------------------------------------------------------------------------
# Wspólne: źródła, graf, wyjście
# ---------------------------------------------------------------------------

def build_from_args(args: argparse.Namespace) -> Graph:
    """Buduje graf ze źródeł podanych w argumentach (pliki JSON + opcjonalnie baza)."""
    from logic_graph import JsonRuleSource, DbRuleSource, MergePolicy, RuleSourceError, build_graph

    sources: list = [JsonRuleSource(path) for path in args.files]

    conn = None
    if args.db:
        from rgraph._db import get_connection
        try:
            conn = get_connection()
        except Exception as e:
            console.print(f"[red]Błąd połączenia z bazą:[/red] {e}")
            raise SystemExit(1)
        sources.append(DbRuleSource(conn, table=args.table, namespace=args.namespace))

    if not sources:
        console.print("[red]Brak źródeł reguł:[/red] podaj plik(i) produkcji lub --db.")
        raise SystemExit(1)

    try:
        return build_graph(sources, policy=MergePolicy(args.merge_policy))
    except RuleSourceError as e:
        console.print(f"[red]Błąd wczytywania reguł:[/red] {e}")
        for detail in e.errors:
            console.print(f"  [yellow]·[/yellow] {detail}")
        raise SystemExit(1)
    finally:
        if conn is not None:
            conn.close()


def _fmt_value(value, limit: int = 80) -> str:
    text = value.name if isinstance(value, Production) else str(value)
    if len(text) > limit:
        return text[:limit] + "…"
    return text


def show_graph(graph: Graph, title: str) -> None:
    """Wyświetla węzły i krawędzie grafu jako tabele rich."""
    if graph.is_empty():
        console.print(f"\n[yellow]{title}: pusty graf.[/yellow]")
        return

    nodes = Table(title=title, box=box.SIMPLE_HEAD, header_style="bold white")
    nodes.add_column("ID", style="dim", no_wrap=True)
    nodes.add_column("RODZAJ", no_wrap=True)
    nodes.add_column("SYMBOL", no_wrap=True)
    nodes.add_column("WARTOŚĆ")
    nodes.add_column("×", justify="right")

    for node_id, entry in graph.nodes.items():
        bodies = entry_bodies(entry)
        if not bodies:
            nodes.add_row(node_id, "[red](brak)[/red]", "", "", "0")
            continue
        node  = bodies[0]
        style = KIND_STYLE.get(node.kind, "white")
        nodes.add_row(
            node_id,
            f"[{style}]{node.kind}[/{style}]",
            node.display_name or "",
            _fmt_value(node.value),
            str(len(bodies)),
        )
    console.print(nodes)

    edges = Table(box=box.SIMPLE_HEAD, header_style="bold white")
    edges.add_column("Z", style="cyan", no_wrap=True)
    edges.add_column("DO", style="cyan", no_wrap=True)
    edges.add_column("RODZAJ", no_wrap=True)
    for (src, dst), entry in graph.edges.items():
        kinds = ", ".join(sorted({str(e.kind) for e in entry_bodies(entry)}))
        edges.add_row(src, dst, kinds)
    console.print(edges)
    console.print(f"  [dim]{len(graph.nodes)} węzłów, {len(graph.edges)} krawędzi[/dim]")


def write_json(graph: Graph) -> None:
    from logic_graph import graph_to_dict

    output = json.dumps(graph_to_dict(graph), ensure_ascii=False, indent=2, default=str)
    sys.stdout.write(output + "\n")


def emit(graph: Graph, args: argparse.Namespace, title: str) -> None:
    if args.json_output:
        write_json(graph)
    else:
        show_graph(graph, title)


def add_source_arguments(p: argparse.ArgumentParser) -> None:
    """Argumenty źródeł reguł i wyjścia wspólne dla komend grafu."""
    from rgraph._db import default_namespace, default_table

    p.add_argument(
        "files",
        nargs="*",
        metavar="PLIK",
        help="Pliki JSON z produkcjami ({\"productions\": [...]}).",
    )
    p.add_argument(
        "--db",
        action="store_true",
        help="Dołącz produkcje z bazy (PGHOST/PGPORT/PGDATABASE/PGUSER/PGPASSWORD).",
    )
    p.add_argument(
        "--table",
        default=default_table(),
        metavar="TABELA",
        help="Tabela produkcji w bazie (domyślnie: $RULEGRAPH_TABLE lub production).",
    )
    p.add_argument(
        "--namespace", "-n",
        default=default_namespace(),
        metavar="NS",
        help="Filtruj produkcje z bazy po przestrzeni nazw (domyślnie: $RULEGRAPH_NAMESPACE).",
    )
    p.add_argument(
        "--merge-policy",
        choices=["accumulate", "deduplicate"],
        default="accumulate",
        help="Polityka scalania przy kolizji kluczy (domyślnie: accumulate).",
    )
    p.add_argument(
        "--json-output",
        action="store_true",
        help="Wypisz graf jako JSON na stdout.",
    )


# ---------------------------------------------------------------------------
# Komenda
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    graph = build_from_args(args)
    emit(graph, args, "Graf logiki")


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "graph",
        help="Buduje graf logiki: reguły, warunki, fakty i wstawienia.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Buduje graf relacji między produkcjami, ich warunkami i faktami,
które czytają (used-in) i wstawiają (inserts).

Przykłady:
  rgraph graph reguly.json
  rgraph graph reguly.json inne.json --json-output
  rgraph graph --db --namespace shop.rules
        """,
    )
    add_source_arguments(p)
    p.set_defaults(func=run)
