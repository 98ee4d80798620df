"""
preprocessor — transformacja książki: bloki ```merjong → <pre class="merjong">.

Publiczne API:
  Merjong                      obiekt preprocesora (name, run, supports_renderer)
  walk(book, transform)        → Book  (pierwszy błąd przerywa przejście)
  preprocess(content)          → str   (scan → render → splice)
  splice(text, replacements)   → str
  render_payload(payload)      → str
  TAG                          info string przechwytywanych bloków
  MerjongError, ChapterError, ProtocolError, InstallError, ConfigError
"""

from .errors   import ChapterError, ConfigError, InstallError, MerjongError, ProtocolError
from .merjong  import Merjong
from .render   import TAG, render_payload, to_replacements
from .splicer  import splice
from .walker   import preprocess, walk

__all__ = [
    "ChapterError",
    "ConfigError",
    "InstallError",
    "Merjong",
    "MerjongError",
    "ProtocolError",
    "TAG",
    "preprocess",
    "render_payload",
    "splice",
    "to_replacements",
    "walk",
]
