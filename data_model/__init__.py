"""
data_model — struktury danych preprocesora mdbook-merjong.

Użycie:
  from data_model import Book, Chapter, ExtractionRecord, ByteRange, ...

Moduły:
  book  — Book, Chapter, Separator, PartTitle, BookItem, PreprocessorContext
  spans — ByteRange, EventKind, StructuralEvent, ExtractionRecord,
          ReplacementRecord

Mapowanie na JSON hosta (mdbook):
  [context, book]          → (PreprocessorContext, Book)
  {"Chapter": {...}}       → Chapter
  "Separator"              → Separator
  {"PartTitle": "..."}     → PartTitle
"""

from .book import (
    Book,
    BookItem,
    Chapter,
    PartTitle,
    PreprocessorContext,
    Separator,
)
from .spans import (
    ByteRange,
    EventKind,
    ExtractionList,
    ExtractionRecord,
    ReplacementRecord,
    StructuralEvent,
)

__all__ = [
    # book
    "Book",
    "BookItem",
    "Chapter",
    "PartTitle",
    "PreprocessorContext",
    "Separator",
    # spans
    "ByteRange",
    "EventKind",
    "ExtractionList",
    "ExtractionRecord",
    "ReplacementRecord",
    "StructuralEvent",
]
