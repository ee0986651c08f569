"""Tests for input normalization."""

from __future__ import annotations

import pytest

from hivemark import RenderConfig, normalize, render_config_context


class TestNormalize:
    """Tab expansion and control-character stripping."""

    def test_empty(self) -> None:
        assert normalize("") == ""

    def test_tab_becomes_two_spaces(self) -> None:
        assert normalize("a\tb\t") == "a  b  "

    @pytest.mark.parametrize("code", [*range(0, 9), *range(11, 32), 127])
    def test_control_char_is_deleted(self, code: int) -> None:
        assert normalize(f"a{chr(code)}b") == "ab"

    def test_newline_is_kept(self) -> None:
        assert normalize("a\nb\n") == "a\nb\n"

    def test_carriage_return_is_deleted(self) -> None:
        assert normalize("a\r\nb") == "a\nb"

    def test_non_ascii_passes_through(self) -> None:
        assert normalize("café ∑ 日本 ") == "café ∑ 日本 "

    def test_explicit_tab_width(self) -> None:
        assert normalize("\t", tab_width=4) == "    "
        assert normalize("\t", tab_width=0) == ""

    def test_tab_width_from_context(self) -> None:
        with render_config_context(RenderConfig(tab_width=3)):
            assert normalize("\t") == "   "
        assert normalize("\t") == "  "
