"""Komenda: mdbook-merjong supports — czy preprocesor obsługuje dany renderer."""

from __future__ import annotations

import argparse

from preprocessor import Merjong


def run(args: argparse.Namespace) -> None:
    supported = Merjong().supports_renderer(args.renderer)
    raise SystemExit(0 if supported else 1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "supports",
        help="Sprawdza, czy renderer jest obsługiwany (kod wyjścia 0 = tak).",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Wywoływane przez mdbook przed buildem. Preprocesor obsługuje każdy renderer:
bloki merjong stają się elementami <pre>, które renderer HTML przepuszcza dalej.

Przykład:
  mdbook-merjong supports html
        """,
    )
    p.add_argument(
        "renderer",
        metavar="RENDERER",
        help="Nazwa renderera (np. html).",
    )
    p.set_defaults(func=run)
