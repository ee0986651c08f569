"""Tests for escape_html() and escape_url()."""

from hivemark.utils.text import escape_html, escape_url


class TestEscapeHtml:
    """Entity escaping of literal text."""

    def test_empty(self) -> None:
        assert escape_html("") == ""

    def test_all_special_characters(self) -> None:
        assert escape_html("&<>'\"") == "&amp;&lt;&gt;&#39;&quot;"

    def test_ampersand_is_escaped_once(self) -> None:
        assert escape_html("&amp;") == "&amp;amp;"

    def test_slash_is_untouched(self) -> None:
        assert escape_html("a/b") == "a/b"

    def test_plain_text_unchanged(self) -> None:
        assert escape_html("hello world") == "hello world"


class TestEscapeUrl:
    """Autolink escaping adds the slash entity."""

    def test_slashes(self) -> None:
        assert escape_url("http://a/b") == "http:&#47;&#47;a&#47;b"

    def test_html_characters_too(self) -> None:
        assert escape_url("http://a?b=1&c='x'") == "http:&#47;&#47;a?b=1&amp;c=&#39;x&#39;"

    def test_empty(self) -> None:
        assert escape_url("") == ""
