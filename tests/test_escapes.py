"""
Tests for escaping and unescaping of rule names and values.
"""

import pytest

from psr.escapes import escape, unescape


class TestUnescape:
    """Tests for unescape."""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("\\n", "\n"),
            ("\\r", "\r"),
            ("\\t", "\t"),
            ("\\\\", "\\"),
            ("\\v", "v"),
            ("\\[x\\]", "[x]"),
            ("a\\ b", "a b"),
        ],
    )
    def test_escape_sequences(self, raw, expected):
        assert unescape(raw) == expected

    def test_trims_spaces_and_tabs_only(self):
        assert unescape(" \t   \t\t b  \t\t  \t") == "b"
        assert unescape("\x0bx ") == "\x0bx"

    def test_trims_before_resolving_escapes(self):
        assert unescape("x\\ ") == "x"
        assert unescape("\\ x") == " x"

    def test_trailing_backslash_is_dropped(self):
        assert unescape("abc\\") == "abc"

    def test_mixed(self):
        raw = "\\n\\r\\t\\\\\\ \\n\\r\\t\\\\\\x"
        assert unescape(raw) == "\n\r\t\\ \n\r\t\\x"


class TestEscape:
    """Tests for escape."""

    def test_control_characters(self):
        assert escape("\n\r\t\\") == "\\n\\r\\t\\\\"

    def test_backslash_escaped_once(self):
        assert escape("\\n") == "\\\\n"

    def test_plain_text_untouched(self):
        assert escape("[^a] * # b") == "[^a] * # b"

    def test_inverse_of_unescape(self):
        text = "a\\b\nc\td\re\\\\"
        assert unescape(escape(text)) == text
