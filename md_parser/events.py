"""
md_parser/events.py — strumieniowy lekser płotków kodu (fenced code blocks).

Architektura:
  text → _iter_lines() → (start, content_end, line_end) dla każdej linii
  → zdjęcie prefiksów kontenerów (cytaty `>`, elementy list)
  → automat {poza blokiem, w bloku} → StructuralEvent (OPEN | TEXT | CLOSE)

Reguły (CommonMark, w zakresie potrzebnym do wykrycia bloków):
  - płotek otwierający: do 3 spacji wcięcia + ≥3 backticki lub tyldy + info string
  - info string płotka z backticków nie może zawierać backticka
  - płotek zamykający: ten sam znak, długość ≥ otwierającej, do 3 spacji
    wcięcia, dalej tylko białe znaki
  - każda linia treści to osobne zdarzenie TEXT (zakres z końcem linii,
    bez prefiksów kontenerów i wcięcia płotka)
  - wcięcia i płotki liczone są względem treści kontenera: po `> ` w cytacie,
    po szerokości znacznika w elemencie listy (`- `, `1. `)
  - niezamknięty płotek nie emituje CLOSE; dotyczy to też płotka, którego
    kontener skończył się przed płotkiem zamykającym

Lekser nigdy nie rzuca wyjątków — dowolny tekst daje poprawny strumień zdarzeń.
Wewnątrz otwartego płotka nie pojawia się OPEN: kolejne OPEN oznacza, że
poprzedni blok został porzucony.

Kluczowe funkcje publiczne:
  iter_events(text) -> Iterator[StructuralEvent]
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterator

from data_model.spans import ByteRange, EventKind, StructuralEvent

# ---------------------------------------------------------------------------
# Wzorce (dopasowywane od pozycji za prefiksami kontenerów)
# ---------------------------------------------------------------------------

# Linia: treść bez terminatora + terminator (\r\n, \r, \n) lub koniec tekstu.
_LINE_RE = re.compile(r"([^\r\n]*)(\r\n|\r|\n|$)")

_OPEN_FENCE_RE  = re.compile(r"(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
_CLOSE_FENCE_RE = re.compile(r"(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})[ \t]*$")

_QUOTE_RE     = re.compile(r" {0,3}> ?")
_LIST_ITEM_RE = re.compile(r"(?P<indent> {0,3})(?P<marker>[-+*]|\d{1,9}[.)])(?P<gap> *)")


@dataclass(slots=True)
class _OpenFence:
    char: str
    length: int
    indent: int


@dataclass(slots=True)
class _Container:
    quote: bool
    width: int = 0      # wcięcie treści elementu listy; 0 dla cytatu


# ---------------------------------------------------------------------------
# Publiczne API
# ---------------------------------------------------------------------------

def iter_events(text: str) -> Iterator[StructuralEvent]:
    """
    Emituje zdarzenia strukturalne dla bloków kodu w `text`, w kolejności dokumentu.

    Zakresy są offsetami w `text`:
      OPEN  — od pierwszego znaku płotka do końca linii otwierającej (bez terminatora)
      TEXT  — linia treści bez prefiksów kontenerów i wcięcia płotka, z terminatorem
      CLOSE — od pierwszego do ostatniego znaku płotka zamykającego
    """
    fence: _OpenFence | None = None
    containers: list[_Container] = []

    for start, content_end, line_end in _iter_lines(text):
        line = text[start:content_end]

        pos = 0
        matched = 0
        for container in containers:
            nxt = _continuation(line, pos, container)
            if nxt is None:
                break
            pos = nxt
            matched += 1
        if matched < len(containers):
            del containers[matched:]
            fence = None

        if fence is None:
            pos = _open_containers(line, pos, containers)
            m = _OPEN_FENCE_RE.match(line, pos)
            if m is None:
                continue
            marker = m["fence"]
            info = m["info"]
            if marker[0] == "`" and "`" in info:
                continue  # to inline code, nie płotek
            fence = _OpenFence(char=marker[0], length=len(marker), indent=len(m["indent"]))
            yield StructuralEvent(
                EventKind.OPEN,
                ByteRange(start + m.start("fence"), content_end),
                info.strip(),
            )
            continue

        m = _closing_fence(line, pos, fence)
        if m is not None:
            yield StructuralEvent(
                EventKind.CLOSE,
                ByteRange(start + m.start("fence"), start + m.end("fence")),
            )
            fence = None
            continue

        skip = _leading_spaces(line, pos, fence.indent)
        yield StructuralEvent(EventKind.TEXT, ByteRange(start + pos + skip, line_end))


# ---------------------------------------------------------------------------
# Wewnętrzna implementacja
# ---------------------------------------------------------------------------

def _iter_lines(text: str) -> Iterator[tuple[int, int, int]]:
    """Zwraca (start, koniec_treści, koniec_linii) dla kolejnych linii."""
    pos = 0
    n = len(text)
    while pos < n:
        m = _LINE_RE.match(text, pos)
        yield pos, m.end(1), m.end()
        pos = m.end()


def _continuation(line: str, pos: int, container: _Container) -> int | None:
    """Pozycja za prefiksem kontenera w tej linii albo None, gdy kontener się kończy."""
    if container.quote:
        m = _QUOTE_RE.match(line, pos)
        return m.end() if m else None

    spaces = _leading_spaces(line, pos, container.width)
    if spaces == container.width or not line[pos:].strip():
        # pusta linia nie zamyka elementu listy
        return pos + spaces
    return None


def _open_containers(line: str, pos: int, containers: list[_Container]) -> int:
    """Otwiera nowe cytaty i elementy list na początku linii; zwraca pozycję treści."""
    while True:
        m = _QUOTE_RE.match(line, pos)
        if m is not None:
            containers.append(_Container(quote=True))
            pos = m.end()
            continue

        m = _LIST_ITEM_RE.match(line, pos)
        if m is None or not (m["gap"] or m.end() == len(line)):
            return pos
        gap = len(m["gap"])
        if m.end() == len(line) or gap > 4:
            # pusty element albo treść będąca blokiem wciętym: znacznik + 1 spacja
            gap = 1
        width = len(m["indent"]) + len(m["marker"]) + gap
        containers.append(_Container(quote=False, width=width))
        pos = min(pos + width, len(line))


def _closing_fence(line: str, pos: int, fence: _OpenFence) -> re.Match[str] | None:
    """Dopasowanie płotka zamykającego `fence` albo None."""
    m = _CLOSE_FENCE_RE.match(line, pos)
    if m is None:
        return None
    marker = m["fence"]
    if marker[0] != fence.char or len(marker) < fence.length:
        return None
    return m


def _leading_spaces(line: str, pos: int, limit: int) -> int:
    """Liczba spacji od `pos` do zdjęcia z linii (najwyżej `limit`)."""
    count = 0
    while count < limit and pos + count < len(line) and line[pos + count] == " ":
        count += 1
    return count
