"""preprocessor/merjong.py — obiekt preprocesora wywoływany przez CLI."""

from __future__ import annotations

from data_model.book import Book, PreprocessorContext
from preprocessor.render import TAG
from preprocessor.walker import preprocess, walk


class Merjong:
    """Preprocesor zamieniający bloki ```merjong na <pre class="merjong">."""

    @property
    def name(self) -> str:
        return TAG

    def run(self, ctx: PreprocessorContext, book: Book) -> Book:
        # Kontekst nie wpływa na transformację; tag jest stały.
        return walk(book, preprocess)

    def supports_renderer(self, renderer: str) -> bool:
        return True
