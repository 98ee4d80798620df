"""
protocol/codec.py — konwersja JSON hosta ↔ data_model.

Format książki (mdbook)::

    {
        "sections": [
            {"Chapter": {"name": "Rozdział 1", "content": "...", "number": [1],
                         "sub_items": [...], "path": "ch1.md",
                         "source_path": "ch1.md", "parent_names": []}},
            "Separator",
            {"PartTitle": "Część II"}
        ],
        "__non_exhaustive": null
    }

Dekodowanie zakłada wejście po walidacji (validator.InputValidator).
Nieznane pola trafiają do `extra` i są emitowane z powrotem bez zmian.
"""

from __future__ import annotations

from typing import Any

from data_model.book import (
    Book,
    BookItem,
    Chapter,
    PartTitle,
    PreprocessorContext,
    Separator,
)

_CHAPTER_FIELDS = ("name", "content", "number", "sub_items", "path", "source_path", "parent_names")
_CONTEXT_FIELDS = ("root", "config", "renderer", "mdbook_version")


# ---------------------------------------------------------------------------
# JSON → model
# ---------------------------------------------------------------------------

def context_from_json(raw: dict[str, Any]) -> PreprocessorContext:
    return PreprocessorContext(
        root=raw["root"],
        config=raw["config"],
        renderer=raw["renderer"],
        mdbook_version=raw["mdbook_version"],
        extra={k: v for k, v in raw.items() if k not in _CONTEXT_FIELDS},
    )


def book_from_json(raw: dict[str, Any]) -> Book:
    return Book(
        sections=[item_from_json(i) for i in raw["sections"]],
        extra={k: v for k, v in raw.items() if k != "sections"},
    )


def item_from_json(raw: Any) -> BookItem:
    if raw == "Separator":
        return Separator()
    if "PartTitle" in raw:
        return PartTitle(raw["PartTitle"])
    return _chapter_from_json(raw["Chapter"])


def _chapter_from_json(raw: dict[str, Any]) -> Chapter:
    return Chapter(
        name=raw["name"],
        content=raw["content"],
        number=raw.get("number"),
        sub_items=[item_from_json(i) for i in raw.get("sub_items", [])],
        path=raw.get("path"),
        source_path=raw.get("source_path"),
        parent_names=list(raw.get("parent_names", [])),
        extra={k: v for k, v in raw.items() if k not in _CHAPTER_FIELDS},
    )


# ---------------------------------------------------------------------------
# model → JSON
# ---------------------------------------------------------------------------

def book_to_json(book: Book) -> dict[str, Any]:
    out: dict[str, Any] = {"sections": [item_to_json(i) for i in book.sections]}
    out.update(book.extra)
    out.setdefault("__non_exhaustive", None)
    return out


def item_to_json(item: BookItem) -> Any:
    if isinstance(item, Separator):
        return "Separator"
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return {"Chapter": _chapter_to_json(item)}


def _chapter_to_json(ch: Chapter) -> dict[str, Any]:
    out: dict[str, Any] = {
        "name":         ch.name,
        "content":      ch.content,
        "number":       ch.number,
        "sub_items":    [item_to_json(i) for i in ch.sub_items],
        "path":         ch.path,
        "source_path":  ch.source_path,
        "parent_names": ch.parent_names,
    }
    out.update(ch.extra)
    return out
