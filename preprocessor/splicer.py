"""
preprocessor/splicer.py — podmiana zakresów tekstu na wyrenderowane bloki.

Zmiany są stosowane od końca dokumentu: podmiana późniejszego zakresu nie
przesuwa offsetów żadnego wcześniejszego zakresu.

Kluczowe funkcje publiczne:
  splice(text, replacements) -> str
"""

from __future__ import annotations

from data_model.spans import ReplacementRecord


def splice(text: str, replacements: list[ReplacementRecord]) -> str:
    """
    Zwraca `text` z każdym `source_range` zastąpionym przez `rendered_text`.

    Zakresy muszą być rozłączne; kolejność na wejściu jest dowolna.
    Tekst poza zakresami pozostaje bez zmian.
    """
    out = text
    for rep in sorted(replacements, key=lambda r: r.source_range.start, reverse=True):
        rng = rep.source_range
        out = out[:rng.start] + rep.rendered_text + out[rng.end:]
    return out
