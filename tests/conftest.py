"""Wspólne fixtures: minimalne wejście hosta [context, book]."""

import json

import pytest

from protocol import MDBOOK_VERSION


def chapter_json(name, content, sub_items=None, number=None):
    return {
        "Chapter": {
            "name": name,
            "content": content,
            "number": number,
            "sub_items": sub_items or [],
            "path": f"{name.lower().replace(' ', '_')}.md",
            "source_path": f"{name.lower().replace(' ', '_')}.md",
            "parent_names": [],
        }
    }


def context_json(version=MDBOOK_VERSION):
    return {
        "root": "/tmp/book",
        "config": {"book": {"title": "Test"}, "preprocessor": {"merjong": {}}},
        "renderer": "html",
        "mdbook_version": version,
    }


@pytest.fixture
def host_input():
    """Dwa rozdziały; tylko pierwszy zawiera blok merjong."""
    book = {
        "sections": [
            chapter_json("Chapter 1", "# Chapter 1\n\n```merjong\n234m-234m\n```\n", number=[1]),
            "Separator",
            {"PartTitle": "Part II"},
            chapter_json("Chapter 2", "# Chapter 2\n\n```rust\nfn main() {}\n```\n", number=[2]),
        ],
        "__non_exhaustive": None,
    }
    return [context_json(), book]


@pytest.fixture
def host_input_text(host_input):
    return json.dumps(host_input)
