"""
mdbook-merjong — preprocesor mdbook dla bloków ```merjong.

Użycie:
  mdbook-merjong                      (wywoływane przez mdbook: [context, book] na stdin)
  mdbook-merjong <komenda> [opcje]

Komendy:
  supports   Sprawdza, czy renderer jest obsługiwany (zawsze tak).
  install    Dodaje preprocesor do book.toml i kopiuje pliki JS.

Zmienne środowiskowe:
  MDBOOK_MERJONG_LOG     poziom logowania (trace/debug/info/warn/error/off; domyślnie info)
  MERJONG_JS_URL         adres merjong.min.js dla `install`
  MERJONG_HTTP_TIMEOUT   limit czasu pobierania w sekundach (domyślnie 30)
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows: terminal może używać cp1252 — wymuszamy UTF-8, żeby JSON z polskimi
# znakami i komunikaty trafiały do hosta bez strat. Wejście protokołu jest
# czytane binarnie (parse_input), więc stdin nie wymaga przestawienia.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from mdmj._config import Settings
from mdmj._log import setup_logging
from mdmj.commands import install as cmd_install
from mdmj.commands import preprocess as cmd_preprocess
from mdmj.commands import supports as cmd_supports
from preprocessor.errors import MerjongError, iter_causes

__version__ = "0.1.0"

log = logging.getLogger("mdbook_merjong")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mdbook-merjong",
        description="Preprocesor mdbook zamieniający bloki ```merjong na <pre class=\"merjong\">.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"mdbook-merjong {__version__}"
    )
    parser.set_defaults(func=cmd_preprocess.run)

    subparsers = parser.add_subparsers(
        title="komendy",
        metavar="<komenda>",
        dest="command",
    )

    cmd_supports.add_parser(subparsers)
    cmd_install.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    # domyślny poziom do czasu wczytania ustawień — błąd konfiguracji też trafia do logu
    setup_logging()
    try:
        settings = Settings.from_env()
        setup_logging(settings.log_level)
        args.func(args)
    except MerjongError as error:
        _fatal("Błąd krytyczny", error)
    except Exception as error:
        _fatal(f"Nieoczekiwany błąd ({type(error).__name__})", error)


def _fatal(headline: str, error: BaseException) -> None:
    """Loguje błąd z całym łańcuchem przyczyn i kończy z kodem 1."""
    log.error("%s: %s", headline, error)
    for cause in iter_causes(error):
        log.error("  - %s", cause)
    raise SystemExit(1)


if __name__ == "__main__":
    main()
