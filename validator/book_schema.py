"""
validator/book_schema.py — JSON Schema wejścia preprocesora: [context, book].

Schemat opisuje tylko pola, z których korzystamy; nieznane pola są dozwolone
(host może dodawać nowe, a my przenosimy je bez zmian).
"""

from __future__ import annotations

from typing import Any

INPUT_SCHEMA: dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "mdbook preprocessor input",
    "type": "array",
    "prefixItems": [
        {"$ref": "#/$defs/Context"},
        {"$ref": "#/$defs/Book"},
    ],
    "minItems": 2,
    "maxItems": 2,
    "$defs": {
        "Context": {
            "type": "object",
            "required": ["root", "config", "renderer", "mdbook_version"],
            "properties": {
                "root":           {"type": "string"},
                "config":         {"type": "object"},
                "renderer":       {"type": "string"},
                "mdbook_version": {"type": "string"},
            },
        },
        "Book": {
            "type": "object",
            "required": ["sections"],
            "properties": {
                "sections": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/BookItem"},
                },
            },
        },
        "BookItem": {
            "oneOf": [
                {"const": "Separator"},
                {
                    "type": "object",
                    "required": ["PartTitle"],
                    "additionalProperties": False,
                    "properties": {"PartTitle": {"type": "string"}},
                },
                {
                    "type": "object",
                    "required": ["Chapter"],
                    "additionalProperties": False,
                    "properties": {"Chapter": {"$ref": "#/$defs/Chapter"}},
                },
            ],
        },
        "Chapter": {
            "type": "object",
            "required": ["name", "content", "sub_items"],
            "properties": {
                "name":    {"type": "string"},
                "content": {"type": "string"},
                "number": {
                    "type": ["array", "null"],
                    "items": {"type": "integer", "minimum": 0},
                },
                "sub_items": {
                    "type": "array",
                    "items": {"$ref": "#/$defs/BookItem"},
                },
                "path":         {"type": ["string", "null"]},
                "source_path":  {"type": ["string", "null"]},
                "parent_names": {"type": "array", "items": {"type": "string"}},
            },
        },
    },
}
