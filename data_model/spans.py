"""
data_model/spans.py — zakresy tekstu i rekordy ekstrakcji bloków merjong.

ByteRange to półotwarty przedział [start, end) offsetów w jednym `str`.
Wszystkie rekordy wskazują na oryginalny tekst rozdziału; dopiero splicer
materializuje zmiany.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


@dataclass(frozen=True, slots=True)
class ByteRange:
    start: int
    end: int     # wyłącznie (half-open)

    def union(self, other: ByteRange) -> ByteRange:
        """Zakres od początku `self` do końca `other` (fragmenty idą w kolejności)."""
        return ByteRange(self.start, other.end)

    def overlaps(self, other: ByteRange) -> bool:
        return self.start < other.end and other.start < self.end

    def slice(self, text: str) -> str:
        return text[self.start:self.end]


class EventKind(StrEnum):
    """Rodzaje zdarzeń strukturalnych emitowanych przez lekser płotków."""

    OPEN  = "open"
    TEXT  = "text"
    CLOSE = "close"


@dataclass(frozen=True, slots=True)
class StructuralEvent:
    kind: EventKind
    span: ByteRange
    tag: str = ""        # info string płotka; tylko dla OPEN


@dataclass(frozen=True, slots=True)
class ExtractionRecord:
    """
    Jeden otagowany blok znaleziony w dokumencie.

    - source_range: od pierwszego znaku płotka otwierającego do ostatniego
                    znaku płotka zamykającego (włącznie)
    - payload:      treść bloku po normalizacji (\\r\\n → \\n, bez końcowych białych znaków)
    """

    source_range: ByteRange
    payload: str


@dataclass(frozen=True, slots=True)
class ReplacementRecord:
    source_range: ByteRange
    payload: str
    rendered_text: str

    @classmethod
    def from_extraction(cls, record: ExtractionRecord, rendered_text: str) -> ReplacementRecord:
        return cls(record.source_range, record.payload, rendered_text)


# Rekordy w kolejności dokumentu.
type ExtractionList = list[ExtractionRecord]
