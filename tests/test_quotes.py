"""Tests for quote-links and line-initial quotes."""

from __future__ import annotations

import pytest

from hivemark import render


def _ql(num: str) -> str:
    return f'<a class="ql" href="#{num}">&gt;&gt;{num}</a>'


class TestQuoteLinks:
    """``>>N`` anywhere in the text."""

    def test_single_digit(self) -> None:
        assert render(">>1") == _ql("1")

    def test_many_digits(self) -> None:
        assert render(">>1234567890123") == _ql("1234567890123")

    def test_midline(self) -> None:
        assert render("see >>42 above") == f"see {_ql('42')} above"

    def test_after_word(self) -> None:
        assert render("a>>1") == f"a{_ql('1')}"

    def test_trailing_letters_are_text(self) -> None:
        assert render(">>1a") == f"{_ql('1')}a"

    def test_several(self) -> None:
        assert render(">>1 >>2") == f"{_ql('1')} {_ql('2')}"

    def test_without_digits_midline(self) -> None:
        assert render("a >>b") == "a &gt;&gt;b"

    def test_non_ascii_digits_are_text(self) -> None:
        assert render("a >>٣") == "a &gt;&gt;٣"


class TestQuotes:
    """``>`` at the start of a line."""

    def test_quote(self) -> None:
        assert render(">quote") == '<span class="q">&gt;quote</span>'

    def test_single_gt(self) -> None:
        assert render(">") == '<span class="q">&gt;</span>'

    def test_quote_without_digits(self) -> None:
        assert render(">1") == '<span class="q">&gt;1</span>'

    def test_double_gt_without_digits_is_quote(self) -> None:
        assert render(">>b") == '<span class="q">&gt;&gt;b</span>'

    def test_quote_ends_at_newline(self) -> None:
        assert render(">a\nb") == '<span class="q">&gt;a</span><br>b'

    def test_consecutive_quote_lines(self) -> None:
        assert render(">a\n>b") == (
            '<span class="q">&gt;a</span><br><span class="q">&gt;b</span>'
        )

    def test_indented_gt_is_literal(self) -> None:
        assert render(" >a") == " &gt;a"

    def test_midline_is_literal(self) -> None:
        assert render("text >notquote") == "text &gt;notquote"

    def test_quotelink_nested_in_quote(self) -> None:
        assert render(">>>1") == f'<span class="q">&gt;{_ql("1")}</span>'

    def test_quote_content_escaped(self) -> None:
        assert render(">'<&\"") == '<span class="q">&gt;&#39;&lt;&amp;&quot;</span>'

    def test_quote_encloses_spoiler(self) -> None:
        assert render(">a $$b$$ c") == (
            '<span class="q">&gt;a <span class="s">b</span> c</span>'
        )

    def test_quote_encloses_multiline_spoiler(self) -> None:
        assert render(">a $$b\nc$$ d\ne") == (
            '<span class="q">&gt;a <span class="s">b<br>c</span> d</span><br>e'
        )

    def test_quote_ending_in_unterminated_spoiler(self) -> None:
        assert render(">a $$b\nc") == (
            '<span class="q">&gt;a <span class="s">b<br>c</span></span>'
        )

    def test_quote_after_spoiler_line(self) -> None:
        assert render("$$a$$\n>b") == (
            '<span class="s">a</span><br><span class="q">&gt;b</span>'
        )

    def test_quote_inside_spoiler_on_own_line(self) -> None:
        assert render("$$\n>a\n$$") == '<span class="s"><span class="q">&gt;a</span></span>'

    @pytest.mark.parametrize("source", ["$$>a$$", "*>a*"])
    def test_gt_after_delimiter_is_not_line_initial(self, source: str) -> None:
        assert '<span class="q">' not in render(source)
