"""
protocol — protokół preprocesora mdbook (JSON przez stdin/stdout).

Publiczne API:
  parse_input(stream)        → (PreprocessorContext, Book)
  write_output(book, stream) → None
  book_from_json(raw)        → Book
  book_to_json(book)         → dict
  MDBOOK_VERSION             wersja hosta, pod którą budowano format
"""

from .codec     import book_from_json, book_to_json, context_from_json
from .handshake import MDBOOK_VERSION, parse_input, write_output

__all__ = [
    "MDBOOK_VERSION",
    "book_from_json",
    "book_to_json",
    "context_from_json",
    "parse_input",
    "write_output",
]
