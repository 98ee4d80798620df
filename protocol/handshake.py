"""
protocol/handshake.py — wymiana danych z hostem przez stdin/stdout.

Host wysyła jedną wartość JSON: [context, book]. Preprocesor odsyła jedną
wartość JSON: przetworzoną książkę. Niezgodność wersji hosta to tylko
ostrzeżenie w logu.

Kluczowe funkcje publiczne:
  parse_input(stream)        -> (PreprocessorContext, Book)
  write_output(book, stream) -> None
"""

from __future__ import annotations

import json
import logging
from typing import IO

from data_model.book import Book, PreprocessorContext
from preprocessor.errors import ProtocolError
from validator import InputValidator

from .codec import book_from_json, book_to_json, context_from_json

log = logging.getLogger(__name__)

# Wersja hosta, względem której budowano format wejścia/wyjścia.
MDBOOK_VERSION = "0.4.40"


def parse_input(
    stream: IO[str] | IO[bytes],
    expected_version: str = MDBOOK_VERSION,
) -> tuple[PreprocessorContext, Book]:
    """
    Czyta [context, book] ze strumienia.

    Host zawsze wysyła UTF-8: strumień tekstowy z warstwą binarną (sys.stdin)
    czytamy przez `.buffer`, niezależnie od kodowania ustawionego w locale.

    Raises:
        ProtocolError: wejście nie jest poprawnym JSON lub nie pasuje do schematu.
    """
    source = getattr(stream, "buffer", stream)
    try:
        payload = json.load(source)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise ProtocolError("nie udało się sparsować wejścia (JSON)") from exc

    report = InputValidator(expected_version).validate(payload)
    for warning in report.warnings:
        log.warning("Ostrzeżenie: %s", warning.message)

    if not report.is_valid:
        first = report.errors[0]
        more = f" (+{len(report.errors) - 1} kolejnych)" if len(report.errors) > 1 else ""
        raise ProtocolError(f"nieprawidłowe wejście preprocesora: {first}{more}", report=report)

    return context_from_json(payload[0]), book_from_json(payload[1])


def write_output(book: Book, stream: IO[str]) -> None:
    """
    Zapisuje książkę jako jedną wartość JSON.

    Raises:
        ProtocolError: serializacja lub zapis się nie powiodły.
    """
    try:
        json.dump(book_to_json(book), stream, ensure_ascii=False)
        stream.flush()
    except (TypeError, ValueError, OSError) as exc:
        raise ProtocolError("nie udało się zapisać przetworzonej książki") from exc
