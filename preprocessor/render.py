"""preprocessor/render.py — tag bloków i opakowanie payloadu w znacznik HTML."""

from __future__ import annotations

from data_model.spans import ExtractionRecord, ReplacementRecord

# Jedyny info string przechwytywany przez preprocesor.
TAG = "merjong"

_PRE_TEMPLATE = '<pre class="{cls}">{payload}</pre>'


def render_payload(payload: str) -> str:
    # Bez escapowania: renderer po stronie przeglądarki czyta tekst dosłownie.
    return _PRE_TEMPLATE.format(cls=TAG, payload=payload)


def to_replacements(records: list[ExtractionRecord]) -> list[ReplacementRecord]:
    return [ReplacementRecord.from_extraction(r, render_payload(r.payload)) for r in records]
