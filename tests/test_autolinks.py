"""Tests for autolink trimming and rendering."""

from __future__ import annotations

import pytest

from hivemark import RenderConfig, render, render_config_context, trim_autolink


def _link(url: str) -> str:
    escaped = url.replace("/", "&#47;")
    return f'<a href="{escaped}">{escaped}</a>'


class TestTrimAutolink:
    """trim_autolink() in isolation."""

    def test_clean_url_is_untouched(self) -> None:
        assert trim_autolink("http://abc/d") == ("http://abc/d", "")

    def test_trailing_punctuation_in_order(self) -> None:
        assert trim_autolink("http://abc.,!") == ("http://abc", ".,!")

    def test_balanced_parens_are_kept(self) -> None:
        assert trim_autolink("http://ab(c)") == ("http://ab(c)", "")

    def test_unbalanced_trailing_parens_are_split(self) -> None:
        assert trim_autolink("http://ab(c))))") == ("http://ab(c)", ")))")

    def test_no_open_paren(self) -> None:
        assert trim_autolink("http://abc)))") == ("http://abc", ")))")

    def test_punctuation_before_paren_stays(self) -> None:
        # Punctuation is only stripped before the paren pass
        assert trim_autolink("http://a.)") == ("http://a.", ")")

    def test_punctuation_after_paren(self) -> None:
        assert trim_autolink("http://a).") == ("http://a", ").")

    def test_inner_punctuation_is_kept(self) -> None:
        assert trim_autolink("http://a.b?c=d&e") == ("http://a.b?c=d&e", "")

    def test_url_plus_trailing_is_token(self) -> None:
        token = "http://x(y)z)),.'"
        url, trailing = trim_autolink(token)
        assert url + trailing == token


class TestRenderAutolinks:
    """Autolinks inside rendered posts."""

    def test_link_in_sentence(self) -> None:
        assert render("see http://a.b/c now") == f"see {_link('http://a.b/c')} now"

    def test_sentence_final_period(self) -> None:
        assert render("go to https://x.y.") == f"go to {_link('https://x.y')}."

    def test_link_stops_at_newline(self) -> None:
        assert render("http://a\nb") == f"{_link('http://a')}<br>b"

    def test_ampersand_in_href_is_escaped(self) -> None:
        assert render("http://a?b&c") == '<a href="http:&#47;&#47;a?b&amp;c">http:&#47;&#47;a?b&amp;c</a>'

    def test_scheme_without_host_is_literal(self) -> None:
        assert render("http://") == "http://"
        assert render("http://.") == "http://."

    def test_other_schemes_are_literal(self) -> None:
        assert render("ftp://a") == "ftp://a"

    def test_scheme_is_case_sensitive(self) -> None:
        assert render("HTTP://a") == "HTTP://a"

    def test_markup_inside_url_is_not_parsed(self) -> None:
        assert render("http://a/*b*") == _link("http://a/*b*")

    def test_link_inside_emphasis_stops_at_closer(self) -> None:
        assert render("*http://a*") == f"<em>{_link('http://a')}</em>"

    def test_link_inside_quote(self) -> None:
        assert render(">http://a") == f'<span class="q">&gt;{_link("http://a")}</span>'

    def test_link_stops_at_spoiler(self) -> None:
        assert render("http://a$$b$$") == f'{_link("http://a")}<span class="s">b</span>'

    def test_slash_outside_links_is_plain(self) -> None:
        assert render("a/b") == "a/b"


class TestAutolinkConfig:
    """Scheme configuration."""

    def test_disabled(self) -> None:
        with render_config_context(RenderConfig(autolinks_enabled=False)):
            assert render("http://a") == "http://a"

    @pytest.mark.parametrize("source", ["ftp://a", "http://a"])
    def test_custom_schemes(self, source: str) -> None:
        config = RenderConfig(autolink_schemes=("ftp://", "http://"))
        with render_config_context(config):
            assert render(source) == _link(source)

    def test_https_only(self) -> None:
        with render_config_context(RenderConfig(autolink_schemes=("https://",))):
            assert render("http://a") == "http://a"
