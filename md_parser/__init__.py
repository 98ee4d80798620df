"""
md_parser — strumieniowe skanowanie markdownu w poszukiwaniu bloków kodu.

Publiczne API:
  iter_events(text)        → Iterator[StructuralEvent]
  scan(text, tag)          → list[ExtractionRecord]
  normalize_payload(raw)   → str
  count_tagged_openings(text, tag) → int
"""

from .events  import iter_events
from .scanner import count_tagged_openings, normalize_payload, scan

__all__ = [
    "count_tagged_openings",
    "iter_events",
    "normalize_payload",
    "scan",
]
