"""Komenda: mdbook-merjong install — rejestruje preprocesor w book.toml i kopiuje skrypty JS."""

from __future__ import annotations

import argparse
import logging
import pathlib
from typing import Any

import requests
import tomlkit
from tomlkit.exceptions import TOMLKitError

from mdmj._config import Settings
from preprocessor import InstallError, TAG

log = logging.getLogger(__name__)

ASSETS_DIR = pathlib.Path(__file__).resolve().parent.parent / "assets"

COMMAND     = "mdbook-merjong"
LIBRARY_JS  = "merjong.min.js"
INIT_JS     = "merjong-init.js"
MERJONG_JS_FILES = (LIBRARY_JS, INIT_JS)

_EXAMPLE_BLOCK = """```merjong
111m
```"""


# ---------------------------------------------------------------------------
# Edycja book.toml
# ---------------------------------------------------------------------------

def _ensure_table(parent: Any, key: str, *, super_table: bool = False) -> Any | None:
    """Zwraca tabelę `parent[key]`, tworząc ją gdy brak; None gdy klucz ma inny typ."""
    if key not in parent:
        parent[key] = tomlkit.table(is_super_table=super_table)
    item = parent[key]
    return item if isinstance(item, dict) else None


def ensure_preprocessor(doc: tomlkit.TOMLDocument) -> bool:
    """Ustawia [preprocessor.merjong] command = "mdbook-merjong". False gdy struktura nietypowa."""
    preprocessor = _ensure_table(doc, "preprocessor", super_table=True)
    if preprocessor is None:
        return False
    entry = _ensure_table(preprocessor, TAG)
    if entry is None:
        return False
    if entry.get("command") != COMMAND:
        entry["command"] = COMMAND
    return True


def additional_js(doc: tomlkit.TOMLDocument) -> list | None:
    """Tablica output.html.additional-js (tworzona gdy brak); None gdy struktura nietypowa."""
    output = _ensure_table(doc, "output", super_table=True)
    if output is None:
        return None
    html = _ensure_table(output, "html")
    if html is None:
        return None
    if "additional-js" not in html:
        html["additional-js"] = tomlkit.array()
    files = html["additional-js"]
    return files if isinstance(files, list) else None


# ---------------------------------------------------------------------------
# Pliki JS
# ---------------------------------------------------------------------------

def _read_asset(name: str, js_source: pathlib.Path | None, settings: Settings, js_url: str | None) -> bytes:
    if name == INIT_JS:
        return (ASSETS_DIR / INIT_JS).read_bytes()

    if js_source is not None:
        try:
            return js_source.read_bytes()
        except OSError as exc:
            raise InstallError(f"nie można odczytać pliku '{js_source}'") from exc

    url = js_url or settings.js_url
    log.info("Pobieranie '%s' z %s", name, url)
    try:
        resp = requests.get(url, timeout=settings.http_timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise InstallError(f"nie można pobrać '{url}'") from exc
    return resp.content


def _write_file(path: pathlib.Path, content: bytes) -> None:
    try:
        path.write_bytes(content)
    except OSError as exc:
        raise InstallError(f"nie można zapisać pliku '{path}'") from exc


# ---------------------------------------------------------------------------
# Instalacja
# ---------------------------------------------------------------------------

def install(
    proj_dir: pathlib.Path,
    js_source: pathlib.Path | None = None,
    js_url: str | None = None,
    settings: Settings | None = None,
) -> None:
    """
    Rejestruje preprocesor w `proj_dir/book.toml` i zapisuje pliki JS obok niego.

    Raises:
        InstallError: brak/nieczytelny book.toml, niepoprawny TOML, błąd pobrania lub zapisu.
    """
    settings = settings or Settings.from_env()
    config = proj_dir / "book.toml"

    log.info("Wczytywanie pliku konfiguracji '%s'", config)
    try:
        toml = config.read_text(encoding="utf-8")
    except OSError as exc:
        raise InstallError(f"nie można odczytać pliku konfiguracji '{config}'") from exc
    try:
        doc = tomlkit.parse(toml)
    except TOMLKitError as exc:
        raise InstallError("konfiguracja nie jest poprawnym TOML") from exc

    if not ensure_preprocessor(doc):
        log.warning("Nietypowa konfiguracja, pomijam aktualizację 'preprocessor.%s'", TAG)

    files = additional_js(doc)
    for name in MERJONG_JS_FILES:
        if files is not None:
            if name not in files:
                log.info("Dodawanie '%s' do 'additional-js'", name)
                files.append(name)
        else:
            log.warning("Nietypowa konfiguracja, pomijam aktualizację 'additional-js'")

        filepath = proj_dir / name
        content = _read_asset(name, js_source, settings, js_url)
        log.info("Kopiowanie '%s' do '%s'", name, filepath)
        _write_file(filepath, content)

    new_toml = tomlkit.dumps(doc)
    if new_toml != toml:
        log.info("Zapisywanie zmienionej konfiguracji do '%s'", config)
        try:
            config.write_text(new_toml, encoding="utf-8")
        except OSError as exc:
            raise InstallError(f"nie można zapisać konfiguracji '{config}'") from exc
    else:
        log.info("Konfiguracja '%s' jest aktualna", config)

    log.info("mdbook-merjong zainstalowany. Możesz go używać w swojej książce.")
    log.info("Dodaj blok kodu, np.:\n%s", _EXAMPLE_BLOCK)


def run(args: argparse.Namespace) -> None:
    install(
        pathlib.Path(args.dir),
        js_source=args.js_source,
        js_url=args.js_url,
    )


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "install",
        help="Dodaje preprocesor do book.toml i kopiuje pliki JS do katalogu książki.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Aktualizuje book.toml w katalogu książki:
  - [preprocessor.merjong] command = "mdbook-merjong"
  - output.html.additional-js += merjong.min.js, merjong-init.js

i zapisuje oba skrypty obok book.toml. merjong-init.js jest częścią pakietu;
merjong.min.js jest kopiowany z --js-source albo pobierany z --js-url
(domyślnie: zmienna MERJONG_JS_URL lub CDN jsdelivr).

Przykłady:
  mdbook-merjong install
  mdbook-merjong install docs/book
  mdbook-merjong install --js-source vendor/merjong.min.js
        """,
    )
    p.add_argument(
        "dir",
        metavar="DIR",
        nargs="?",
        default=".",
        help="Katalog książki z plikiem book.toml (domyślnie: bieżący).",
    )
    p.add_argument(
        "--js-source",
        metavar="FILE",
        type=pathlib.Path,
        default=None,
        help="Lokalna kopia merjong.min.js (zamiast pobierania).",
    )
    p.add_argument(
        "--js-url",
        metavar="URL",
        default=None,
        help="Adres, z którego pobrać merjong.min.js.",
    )
    p.set_defaults(func=run)
