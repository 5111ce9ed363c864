"""
rgraph — narzędzie CLI dla rulegraph.

Użycie:
  rgraph <komenda> [opcje]

Komendy:
  graph    Buduje graf logiki (produkcje, warunki, fakty, wstawienia).
  filter   Podgraf połączony z faktami pasującymi do wyrażenia regularnego.
  walk     Przodkowie lub potomkowie wskazanego węzła.
"""

from __future__ import annotations

import argparse
import logging
import os
import sys

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby polskie znaki
# w tekstach pomocy argparse były wypisywane poprawnie.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rgraph.commands import graph as cmd_graph
from rgraph.commands import filter as cmd_filter
from rgraph.commands import walk as cmd_walk


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rgraph",
        description="rulegraph — graf zależności reguł, warunków i faktów.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="rgraph 0.1.0"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Logowanie na poziomie DEBUG (domyślnie: $RULEGRAPH_LOG_LEVEL lub WARNING).",
    )

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )
    subparsers.required = True

    cmd_graph.add_parser(subparsers)
    cmd_filter.add_parser(subparsers)
    cmd_walk.add_parser(subparsers)

    return parser


def resolve_log_level(verbose: bool) -> int:
    """Poziom logowania: DEBUG dla --verbose, inaczej $RULEGRAPH_LOG_LEVEL (domyślnie WARNING)."""
    if verbose:
        return logging.DEBUG
    name = os.getenv("RULEGRAPH_LOG_LEVEL", "WARNING").strip().upper()
    levels = logging.getLevelNamesMapping()
    if name not in levels:
        Console(stderr=True).print(
            f"[red]Nieznany poziom logowania RULEGRAPH_LOG_LEVEL={escape(name)!r}.[/red] "
            f"Dozwolone: {', '.join(sorted(levels, key=levels.__getitem__))}."
        )
        raise SystemExit(1)
    return levels[name]


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=resolve_log_level(verbose),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False)],
    )


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
