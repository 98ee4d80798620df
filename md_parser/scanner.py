"""
md_parser/scanner.py — wyszukiwanie otagowanych bloków i ich treści.

Automat dwustanowy: poza blokiem / w bloku (z akumulatorem zakresów).
Treść bloku nie jest kopiowana fragment po fragmencie — sąsiadujące
fragmenty scalamy w jeden zakres [pierwszy.start, ostatni.end), a tniemy
oryginalny tekst dopiero na płotku zamykającym. Przerwa między fragmentami
(prefiks `> ` cytatu, wcięcie listy lub płotka) zaczyna nowy zakres.

Kluczowe funkcje publiczne:
  scan(text, tag) -> list[ExtractionRecord]
  count_tagged_openings(text, tag) -> int
  normalize_payload(raw) -> str
"""

from __future__ import annotations

from data_model.spans import (
    ByteRange,
    EventKind,
    ExtractionList,
    ExtractionRecord,
)
from md_parser.events import iter_events


def scan(text: str, tag: str) -> ExtractionList:
    """
    Zwraca rekordy ekstrakcji dla bloków z info stringiem równym `tag`.

    Nigdy nie rzuca wyjątków: niezamknięty blok (na końcu tekstu albo przy końcu
    cytatu / elementu listy) jest pomijany,
    blok bez treści daje rekord z pustym payloadem.
    """
    records: ExtractionList = []

    inside = False
    block_start = 0
    code_spans: list[ByteRange] = []

    for event in iter_events(text):
        if event.kind is EventKind.OPEN:
            # OPEN w trakcie bloku: lekser porzucił poprzedni (koniec kontenera)
            inside = event.tag == tag
            block_start = event.span.start
            code_spans = []
            continue

        if not inside:
            continue

        if event.kind is EventKind.TEXT:
            if code_spans and code_spans[-1].end == event.span.start:
                code_spans[-1] = code_spans[-1].union(event.span)
            else:
                code_spans.append(event.span)
            continue

        if event.kind is EventKind.CLOSE:
            raw = "".join(span.slice(text) for span in code_spans)
            records.append(ExtractionRecord(
                source_range=ByteRange(block_start, event.span.end),
                payload=normalize_payload(raw),
            ))
            inside = False
            code_spans = []

    return records


def count_tagged_openings(text: str, tag: str) -> int:
    """Liczba płotków otwierających z info stringiem `tag` (także niezamkniętych)."""
    return sum(
        1 for e in iter_events(text)
        if e.kind is EventKind.OPEN and e.tag == tag
    )


def normalize_payload(raw: str) -> str:
    """CRLF → LF, bez końcowych białych znaków."""
    return raw.replace("\r\n", "\n").rstrip()
