"""Tests for tagged-block extraction (md_parser/scanner.py)."""

import pytest

from data_model import ByteRange, ExtractionRecord
from md_parser import count_tagged_openings, normalize_payload, scan
from preprocessor import TAG, preprocess


# ---------------------------------------------------------------------------
# End-to-end scenarios
# ---------------------------------------------------------------------------

class TestScanScenarios:

    def test_single_block(self):
        text = "```merjong\n234m-234m\n```"
        assert scan(text, TAG) == [
            ExtractionRecord(source_range=ByteRange(0, len(text)), payload="234m-234m"),
        ]

    def test_unterminated_block_yields_nothing(self):
        assert scan("```merjong\nfoo", TAG) == []

    def test_empty_block_yields_empty_payload(self):
        records = scan("```merjong\n```", TAG)
        assert len(records) == 1
        assert records[0].payload == ""
        assert records[0].source_range == ByteRange(0, 14)

    def test_no_blocks(self):
        assert scan("# Title\n\nplain text\n", TAG) == []


# ---------------------------------------------------------------------------
# Payload extraction
# ---------------------------------------------------------------------------

class TestPayload:

    def test_multi_line_payload_spans_all_fragments(self):
        text = "```merjong\n123m\n456p\n\n789s\n```\n"
        (record,) = scan(text, TAG)
        assert record.payload == "123m\n456p\n\n789s"

    def test_crlf_is_normalized(self):
        text = "```merjong\r\n123m\r\n456p\r\n```\r\n"
        (record,) = scan(text, TAG)
        assert record.payload == "123m\n456p"

    def test_trailing_whitespace_is_stripped(self):
        (record,) = scan("```merjong\n123m   \n\n\n```", TAG)
        assert record.payload == "123m"

    def test_leading_whitespace_is_kept(self):
        (record,) = scan("```merjong\n\n  123m\n```", TAG)
        assert record.payload == "\n  123m"

    @pytest.mark.parametrize("raw,expected", [
        ("a\r\nb\r\n", "a\nb"),
        ("a \t\n", "a"),
        ("", ""),
        ("\n\n", ""),
    ])
    def test_normalize_payload(self, raw, expected):
        assert normalize_payload(raw) == expected


# ---------------------------------------------------------------------------
# Block selection and ranges
# ---------------------------------------------------------------------------

class TestBlockSelection:

    def test_other_tags_are_ignored(self):
        text = "```rust\nfn main() {}\n```\n\n```merjong\n1m\n```\n"
        (record,) = scan(text, TAG)
        assert record.payload == "1m"
        assert record.source_range.slice(text) == "```merjong\n1m\n```"

    def test_tag_must_match_whole_info_string(self):
        assert scan("```merjong extra\n1m\n```", TAG) == []

    def test_tagged_fence_inside_other_block_is_content(self):
        text = "````markdown\n```merjong\n1m\n```\n````\n"
        assert scan(text, TAG) == []

    def test_nested_open_inside_target_block_is_content(self):
        text = "~~~merjong\n```merjong\n1m\n~~~"
        (record,) = scan(text, TAG)
        assert record.payload == "```merjong\n1m"

    def test_multiple_blocks_in_order_without_overlap(self):
        text = "intro\n```merjong\n1m\n```\nmiddle\n```merjong\n2p\n```\nend\n"
        records = scan(text, TAG)
        assert [r.payload for r in records] == ["1m", "2p"]
        first, second = records
        assert first.source_range.end <= second.source_range.start
        assert not first.source_range.overlaps(second.source_range)

    def test_range_starts_at_fence_not_indent(self):
        text = "  ```merjong\n  1m\n  ```\n"
        (record,) = scan(text, TAG)
        assert record.source_range == ByteRange(2, len(text) - 1)
        assert record.payload == "1m"

    def test_unterminated_block_after_complete_one(self):
        text = "```merjong\n1m\n```\n\n```merjong\n2p\n"
        records = scan(text, TAG)
        assert [r.payload for r in records] == ["1m"]
        assert count_tagged_openings(text, TAG) == 2


# ---------------------------------------------------------------------------
# Blocks inside block quotes and list items
# ---------------------------------------------------------------------------

class TestContainers:

    def test_list_item_block_is_replaced(self):
        text = "1. Hand:\n\n    ```merjong\n    123m\n    ```\n"
        (record,) = scan(text, TAG)
        assert record.payload == "123m"
        assert preprocess(text) == '1. Hand:\n\n    <pre class="merjong">123m</pre>\n'

    def test_block_quote_block_is_replaced(self):
        text = "> ```merjong\n> 123m\n> ```\n"
        (record,) = scan(text, TAG)
        assert record.payload == "123m"
        assert preprocess(text) == '> <pre class="merjong">123m</pre>\n'

    def test_quote_prefixes_are_not_part_of_payload(self):
        (record,) = scan("> ```merjong\n> 123m\n> 456p\n> ```\n", TAG)
        assert record.payload == "123m\n456p"

    def test_fence_indent_is_removed_from_every_line(self):
        (record,) = scan("  ```merjong\n  1m\n  2p\n  ```\n", TAG)
        assert record.payload == "1m\n2p"

    def test_block_cut_off_by_end_of_quote_is_dropped(self):
        text = "> ```merjong\n> 1m\n\n```rust\nx\n```\n"
        assert scan(text, TAG) == []
        assert preprocess(text) == text

    def test_block_after_cut_off_block_is_found(self):
        text = "> ```merjong\n> 1m\n\n```merjong\n2p\n```\n"
        (record,) = scan(text, TAG)
        assert record.payload == "2p"
        assert record.source_range.slice(text) == "```merjong\n2p\n```"
