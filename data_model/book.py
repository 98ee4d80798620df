"""
data_model/book.py — model książki przekazywanej przez hosta (mdbook).

Book jest drzewem: lista `sections` zawiera rozdziały (Chapter), separatory
(Separator) i tytuły części (PartTitle). Rozdziały zagnieżdżają się przez
`sub_items`. Treścią dysponują wyłącznie rozdziały (liście w sensie
transformacji: każdy Chapter ma własny `content`).

Pola, których nie znamy, trafiają do `extra` i wracają do hosta bez zmian.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator


# ---------------------------------------------------------------------------
# Elementy książki
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Chapter:
    """
    Rozdział książki.

    - name:         tytuł rozdziału
    - content:      surowy markdown (modyfikowany w miejscu przez walker)
    - number:       numeracja sekcji, np. [1, 2] → "1.2." (None dla prefiksów/sufiksów)
    - sub_items:    elementy zagnieżdżone
    - path:         ścieżka pliku wyjściowego (None dla rozdziałów szkicowych)
    - source_path:  ścieżka pliku źródłowego
    - parent_names: tytuły rozdziałów nadrzędnych
    - extra:        nieznane pola z wejścia, przenoszone bez zmian
    """
    name: str
    content: str
    number: list[int] | None = None
    sub_items: list[BookItem] = field(default_factory=list)
    path: str | None = None
    source_path: str | None = None
    parent_names: list[str] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class Separator:
    pass


@dataclass(slots=True)
class PartTitle:
    title: str


type BookItem = Chapter | Separator | PartTitle


# ---------------------------------------------------------------------------
# Książka
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class Book:
    sections: list[BookItem] = field(default_factory=list)
    extra: dict[str, Any] = field(default_factory=dict)

    def iter_chapters(self) -> Iterator[Chapter]:
        """Rozdziały w kolejności przejścia walkera (dzieci przed rodzicem)."""
        yield from _iter_chapters(self.sections)

    def for_each_mut(self, func: Callable[[BookItem], None]) -> None:
        """Wywołuje `func` dla każdego elementu, w głąb, dzieci przed rodzicem."""
        _for_each(self.sections, func)


def _iter_chapters(items: list[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield from _iter_chapters(item.sub_items)
            yield item


def _for_each(items: list[BookItem], func: Callable[[BookItem], None]) -> None:
    for item in items:
        if isinstance(item, Chapter):
            _for_each(item.sub_items, func)
        func(item)


# ---------------------------------------------------------------------------
# Kontekst preprocesora
# ---------------------------------------------------------------------------

@dataclass(slots=True)
class PreprocessorContext:
    """
    Kontekst wywołania od hosta (pierwszy element tablicy wejściowej).

    - root:           katalog główny książki
    - config:         sparsowany book.toml
    - renderer:       nazwa renderera, dla którego działa build
    - mdbook_version: wersja hosta (porównywana z MDBOOK_VERSION)
    """
    root: str
    config: dict[str, Any]
    renderer: str
    mdbook_version: str
    extra: dict[str, Any] = field(default_factory=dict)
