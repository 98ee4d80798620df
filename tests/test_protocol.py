"""Tests for the host handshake (protocol/) and input validation (validator/)."""

import io
import json
import logging

import pytest

from conftest import chapter_json, context_json
from data_model import Chapter, PartTitle, Separator
from preprocessor import ProtocolError
from protocol import MDBOOK_VERSION, book_to_json, parse_input, write_output
from validator import ErrorCode, InputValidator


# ---------------------------------------------------------------------------
# parse_input
# ---------------------------------------------------------------------------

class TestParseInput:

    def test_decodes_context_and_book(self, host_input_text):
        ctx, book = parse_input(io.StringIO(host_input_text))
        assert ctx.renderer == "html"
        assert ctx.mdbook_version == MDBOOK_VERSION
        assert isinstance(book.sections[0], Chapter)
        assert isinstance(book.sections[1], Separator)
        assert book.sections[2] == PartTitle("Part II")
        assert book.sections[0].number == [1]

    def test_invalid_json_is_fatal(self):
        with pytest.raises(ProtocolError) as excinfo:
            parse_input(io.StringIO("{not json"))
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_binary_stream_is_decoded_as_utf8(self, host_input):
        host_input[1]["sections"][0]["Chapter"]["content"] = "ż"
        raw = json.dumps(host_input, ensure_ascii=False).encode("utf-8")
        _, book = parse_input(io.BytesIO(raw))
        assert book.sections[0].content == "ż"

    def test_invalid_utf8_is_fatal(self):
        with pytest.raises(ProtocolError) as excinfo:
            parse_input(io.BytesIO(b'["\xc5"]'))
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)

    def test_not_a_pair_is_fatal(self):
        with pytest.raises(ProtocolError) as excinfo:
            parse_input(io.StringIO(json.dumps({"sections": []})))
        assert excinfo.value.report.errors[0].code == ErrorCode.NOT_A_PAIR

    def test_chapter_without_content_is_fatal(self, host_input):
        del host_input[1]["sections"][0]["Chapter"]["content"]
        with pytest.raises(ProtocolError) as excinfo:
            parse_input(io.StringIO(json.dumps(host_input)))
        assert excinfo.value.report.errors[0].code == ErrorCode.SCHEMA_VIOLATION

    def test_version_mismatch_is_only_a_warning(self, host_input, caplog):
        host_input[0] = context_json(version="0.0.1")
        with caplog.at_level(logging.WARNING):
            ctx, book = parse_input(io.StringIO(json.dumps(host_input)))
        assert ctx.mdbook_version == "0.0.1"
        assert any("0.0.1" in r.getMessage() for r in caplog.records)


# ---------------------------------------------------------------------------
# write_output
# ---------------------------------------------------------------------------

class TestWriteOutput:

    def test_round_trip_keeps_unknown_fields(self, host_input):
        host_input[1]["sections"][0]["Chapter"]["extra_field"] = {"x": 1}
        host_input[0]["preprocessor"] = "merjong"
        _, book = parse_input(io.StringIO(json.dumps(host_input)))

        out = io.StringIO()
        write_output(book, out)
        assert json.loads(out.getvalue()) == host_input[1]

    def test_output_shape(self):
        from data_model import Book
        book = Book(sections=[Chapter(name="A", content="x"), Separator(), PartTitle("P")])
        raw = book_to_json(book)
        assert raw["__non_exhaustive"] is None
        assert raw["sections"][1] == "Separator"
        assert raw["sections"][2] == {"PartTitle": "P"}
        assert raw["sections"][0]["Chapter"]["sub_items"] == []


# ---------------------------------------------------------------------------
# InputValidator
# ---------------------------------------------------------------------------

class TestInputValidator:

    def test_valid_input(self, host_input):
        report = InputValidator(MDBOOK_VERSION).validate(host_input)
        assert report.is_valid
        assert report.errors == []
        assert report.warnings == []

    def test_nested_items_are_validated(self, host_input):
        host_input[1]["sections"][0] = chapter_json("A", "x", sub_items=[{"Bogus": 1}])
        report = InputValidator(MDBOOK_VERSION).validate(host_input)
        assert not report.is_valid
        assert report.errors[0].path.startswith("/1/sections/0")

    def test_missing_context_field(self, host_input):
        del host_input[0]["renderer"]
        report = InputValidator(MDBOOK_VERSION).validate(host_input)
        assert not report.is_valid
        assert report.errors[0].path == "/0"

    def test_version_mismatch_is_reported_as_warning(self, host_input):
        host_input[0] = context_json(version="0.0.1")
        report = InputValidator(MDBOOK_VERSION).validate(host_input)
        assert report.is_valid
        (warning,) = report.warnings
        assert warning.code == ErrorCode.VERSION_MISMATCH
        assert warning.details == {"expected": MDBOOK_VERSION, "actual": "0.0.1"}
