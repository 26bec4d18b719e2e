"""Tests for tag and legacy-code detection."""

import pytest

from markup_bridge.core.scanner import (
    TAG_BOUNDARY_PATTERN,
    TAG_PRESENCE_PATTERN,
    compile_legacy_pattern,
    has_legacy_codes,
    has_markup_tags,
    split_segments,
)


class TestHasMarkupTags:
    """Tests for has_markup_tags."""

    @pytest.mark.parametrize(
        "text",
        [
            "<red>hi",
            "</bold>",
            "<RED>loud</RED>",
            "<#fcfcfc>hex",
            "<#fff>short hex",
            "</#fcfcfc>",
            "<color:#ff0000>x",
            "<click=run>x",
            "<gradient:#fff:#000>fade",
            "text before <dark_blue> and after",
        ],
    )
    def test_detects_tags(self, text: str):
        """Test that tag shapes are recognized."""
        assert has_markup_tags(text) is True

    @pytest.mark.parametrize(
        "text",
        [
            "",
            "no tags here",
            "a < b > c",
            "<1abc>",
            "<#12>",
            "<#1234567>",
            "&cHello",
            "<>",
        ],
    )
    def test_rejects_non_tags(self, text: str):
        """Test that angle brackets that are not tags are ignored."""
        assert has_markup_tags(text) is False

    def test_scanning_is_repeatable(self):
        """Test that the predicate gives the same answer twice."""
        text = "<bold>x</bold> &cy"
        assert has_markup_tags(text) == has_markup_tags(text)

    def test_presence_pattern_stops_at_first_close(self):
        """Test the coarse pattern takes the shortest attribute payload."""
        match = TAG_PRESENCE_PATTERN.search("<hover:a>b>")
        assert match.group(0) == "<hover:a>"

    def test_boundary_pattern_keeps_structured_payload(self):
        """Test the splitting pattern keeps a multi-argument tag whole."""
        match = TAG_BOUNDARY_PATTERN.search("x<gradient:#fff:#000>y")
        assert match.group(0) == "<gradient:#fff:#000>"


class TestHasLegacyCodes:
    """Tests for has_legacy_codes."""

    @pytest.mark.parametrize(
        "text",
        [
            "&cred",
            "&Cred",
            "&0black",
            "&lbold",
            "&Kmagic",
            "&rreset",
            "&x",
            "&#fcfcfcWorld",
            "&x&0&8&4&c&f&bHi",
        ],
    )
    def test_detects_codes(self, text: str):
        """Test every legacy code family is recognized."""
        assert has_legacy_codes(text) is True

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "a & b", "&g", "&#zzzzzz", "AT&T", "trailing &"],
    )
    def test_rejects_non_codes(self, text: str):
        """Test that a lone prefix character is not a code."""
        assert has_legacy_codes(text) is False

    def test_custom_prefix_character(self):
        """Test a pattern compiled for another prefix character."""
        pattern = compile_legacy_pattern("$")

        assert has_legacy_codes("$cred", pattern) is True
        assert has_legacy_codes("&cred", pattern) is False

    def test_custom_prefix_repeated_hex(self):
        """Test the repeated hex form uses the custom prefix throughout."""
        pattern = compile_legacy_pattern("$")
        assert pattern.fullmatch("$x$0$8$4$c$f$b") is not None


class TestSplitSegments:
    """Tests for split_segments."""

    def test_alternating_spans(self):
        """Test tags and text alternate with correct offsets."""
        segments = list(split_segments("<bold>hi</bold> there"))

        assert [(s.text, s.start, s.end, s.is_tag) for s in segments] == [
            ("<bold>", 0, 6, True),
            ("hi", 6, 8, False),
            ("</bold>", 8, 15, True),
            (" there", 15, 21, False),
        ]

    def test_spans_cover_input(self):
        """Test the spans reassemble to the original text."""
        text = "a<red>b</red><bold>c &ld</bold>e"
        segments = list(split_segments(text))

        assert "".join(s.text for s in segments) == text
        for previous, current in zip(segments, segments[1:]):
            assert previous.end == current.start

    def test_adjacent_tags_have_no_empty_text(self):
        """Test no empty plain span is produced between adjacent tags."""
        segments = list(split_segments("<red><bold>x"))

        assert [s.text for s in segments] == ["<red>", "<bold>", "x"]

    def test_plain_text_is_one_segment(self):
        """Test text without tags is a single plain span."""
        segments = list(split_segments("just &ctext"))

        assert len(segments) == 1
        assert segments[0].is_tag is False

    def test_empty_text(self):
        """Test empty input yields nothing."""
        assert list(split_segments("")) == []
