"""Komenda domyślna: mdbook-merjong (bez podkomendy) — przetwarza książkę z stdin."""

from __future__ import annotations

import argparse
import logging
import sys

from preprocessor import Merjong
from protocol import parse_input, write_output

log = logging.getLogger(__name__)


def run(args: argparse.Namespace) -> None:
    ctx, book = parse_input(sys.stdin)
    log.debug("Renderer: %s, root: %s", ctx.renderer, ctx.root)

    processed = Merjong().run(ctx, book)
    write_output(processed, sys.stdout)
