"""Tests for markup escaping."""

import pytest

from markup_bridge.formatting.escape import escape, unescape


class TestUnescape:
    """Tests for unescape."""

    def test_no_backslash_returns_same_object(self):
        """Test the fast path returns the input unchanged."""
        text = "<red>nothing escaped</red>"
        assert unescape(text) is text

    def test_unescapes_control_characters(self):
        """Test each of the four control characters is restored."""
        assert unescape("\\<red\\>") == "<red>"
        assert unescape("\\\\") == "\\"
        assert unescape("a\\&b") == "a&b"

    def test_keeps_unrecognized_escapes(self):
        """Test backslashes before other characters stay."""
        assert unescape("path\\to\\file") == "path\\to\\file"

    def test_keeps_trailing_backslash(self):
        """Test a backslash at the end of input stays."""
        assert unescape("abc\\") == "abc\\"

    def test_escaped_backslash_before_bracket(self):
        """Test an escaped backslash does not also escape the next character."""
        assert unescape("\\\\\\<") == "\\<"


class TestEscape:
    """Tests for escape."""

    def test_escapes_control_characters(self):
        """Test all four characters get a backslash."""
        assert escape("a<b>&c\\") == "a\\<b\\>\\&c\\\\"

    def test_plain_text_unchanged(self):
        """Test text without control characters is untouched."""
        assert escape("hello") == "hello"

    @pytest.mark.parametrize(
        "text",
        ["", "plain", "<red>", "a & b", "C:\\temp\\new", "\\<", "<<>>&&\\\\"],
    )
    def test_unescape_inverts_escape(self, text: str):
        """Test unescape(escape(s)) == s."""
        assert unescape(escape(text)) == text
