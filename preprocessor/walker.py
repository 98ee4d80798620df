"""
preprocessor/walker.py — transformacja wszystkich rozdziałów książki.

Przejście w głąb (dzieci przed rodzicem). Pierwszy błąd przerywa przejście
i jest zwracany wywołującemu jako ChapterError; rozdziały już przetworzone
zachowują nową treść (host i tak traktuje każdy błąd jako fatalny).

Kluczowe funkcje publiczne:
  preprocess(content) -> str
  walk(book, transform=preprocess) -> Book
"""

from __future__ import annotations

import logging
from typing import Callable

from data_model.book import Book, BookItem, Chapter
from md_parser.scanner import count_tagged_openings, scan
from preprocessor.errors import ChapterError
from preprocessor.render import TAG, to_replacements
from preprocessor.splicer import splice

log = logging.getLogger(__name__)

type Transform = Callable[[str], str]


def preprocess(content: str) -> str:
    """scan → render → splice dla treści jednego rozdziału."""
    records = scan(content, TAG)
    if log.isEnabledFor(logging.DEBUG):
        opened = count_tagged_openings(content, TAG)
        if opened != len(records):
            log.debug("Pominięto %d niezamknięty(ch) blok(ów) '%s'", opened - len(records), TAG)
    if not records:
        return content
    return splice(content, to_replacements(records))


def walk(book: Book, transform: Transform = preprocess) -> Book:
    """
    Podmienia treść każdego rozdziału na `transform(content)`.

    Raises:
        ChapterError: transformacja rozdziału rzuciła wyjątek (w `__cause__`).
    """
    def visit(item: BookItem) -> None:
        if not isinstance(item, Chapter):
            return
        try:
            new_content = transform(item.content)
        except Exception as exc:
            raise ChapterError(item.name) from exc
        if new_content != item.content:
            log.debug("Podmieniono bloki merjong w rozdziale '%s'", item.name)
        item.content = new_content

    # Wyjątek z visit() przerywa for_each_mut — kolejne rozdziały nie są ruszane.
    book.for_each_mut(visit)
    return book
