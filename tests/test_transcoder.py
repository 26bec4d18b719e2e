"""Tests for segment transcoding and splitting."""

import pytest

from markup_bridge.core.engines import Engines
from markup_bridge.core.scanner import TAG_BOUNDARY_PATTERN
from markup_bridge.core.transcoder import (
    convert_legacy_within_markup,
    transcode_segment,
)


class TestTranscodeSegment:
    """Tests for transcode_segment."""

    def test_empty(self, engines: Engines):
        """Test empty input stays empty."""
        assert transcode_segment("", engines) == ""

    @pytest.mark.parametrize(
        "segment",
        ["plain text", "escaped \\< stays", "AT&T", "path\\to\\file"],
    )
    def test_no_codes_is_noop(self, engines: Engines, segment: str):
        """Test segments without legacy codes are returned untouched."""
        assert transcode_segment(segment, engines) is segment

    def test_named_color(self, engines: Engines):
        """Test a palette code becomes a color tag."""
        assert transcode_segment(" &cworld", engines) == " <red>world</red>"

    def test_hex_color(self, engines: Engines):
        """Test a hex code becomes a hex tag."""
        assert transcode_segment("&#fcfcfcWorld", engines) == "<#fcfcfc>World</#fcfcfc>"

    def test_result_is_unescaped(self, engines: Engines):
        """Test serializer escaping is removed from the result."""
        assert transcode_segment("&ca<b & c", engines) == "<red>a<b & c</red>"

    def test_uses_global_engines_by_default(self):
        """Test the engine bundle argument is optional."""
        assert transcode_segment("&lx") == "<bold>x</bold>"


class TestConvertLegacyWithinMarkup:
    """Tests for convert_legacy_within_markup."""

    def test_mixed_input(self, engines: Engines):
        """Test existing tags pass through and legacy text is converted."""
        result = convert_legacy_within_markup("<bold><red>hi</red></bold> &cworld", engines)

        assert result == "<bold><red>hi</red></bold> <red>world</red>"

    def test_legacy_between_tags(self, engines: Engines):
        """Test a segment enclosed by tags is converted in place."""
        result = convert_legacy_within_markup("<bold>&chi</bold>", engines)

        assert result == "<bold><red>hi</red></bold>"

    def test_tag_arguments_untouched(self, engines: Engines):
        """Test legacy-looking text inside a tag argument is kept."""
        text = "<hover:show_text:'&cx'>&ahi</hover>"
        result = convert_legacy_within_markup(text, engines)

        assert result == "<hover:show_text:'&cx'><green>hi</green></hover>"

    def test_tags_preserved_in_order(self, engines: Engines):
        """Test every input tag appears verbatim and in order in the output."""
        text = "&aa<gradient:#fff:#000>&lb</gradient> <#abc>c&rd</#abc> &9e"
        result = convert_legacy_within_markup(text, engines)

        position = 0
        for tag in TAG_BOUNDARY_PATTERN.findall(text):
            found = result.find(tag, position)
            assert found != -1, tag
            position = found + len(tag)

    def test_no_tags(self, engines: Engines):
        """Test text without tags is transcoded as one segment."""
        assert convert_legacy_within_markup("&cred", engines) == "<red>red</red>"
