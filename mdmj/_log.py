"""Logowanie CLI — rich na stderr (stdout należy do protokołu JSON)."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_LEVELS = {
    "trace": logging.DEBUG,
    "debug": logging.DEBUG,
    "info":  logging.INFO,
    "warn":  logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "off":   logging.CRITICAL + 1,
}


def parse_level(name: str) -> int:
    """Nazwa poziomu (bez względu na wielkość liter) → poziom logging; nieznana → INFO."""
    return _LEVELS.get(name.strip().lower(), logging.INFO)


def setup_logging(level_name: str = "info") -> None:
    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=True,
    )
    logging.basicConfig(
        level=parse_level(level_name),
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )
