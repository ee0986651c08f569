"""Error-path and malformed input tests.

Tests that exercise error handling, edge cases, and graceful degradation
for malformed post markup. These complement the happy-path tests in
test_api.py.
"""

import pytest

from hivemark import HtmlRenderer, Markup, render, render_many
from hivemark.errors import ConfigError, HivemarkError

# =========================================================================
# ConfigError construction and formatting
# =========================================================================


class TestConfigErrorFormatting:
    """Verify ConfigError produces well-formatted messages."""

    def test_message(self) -> None:
        err = ConfigError("tab_width", "must be >= 0, got -1")
        assert str(err) == "Config field 'tab_width': must be >= 0, got -1"
        assert err.field == "tab_width"

    def test_is_hivemark_error(self) -> None:
        assert isinstance(ConfigError("x", "y"), HivemarkError)

    def test_catchable_as_base(self) -> None:
        from hivemark import RenderConfig

        with pytest.raises(HivemarkError):
            RenderConfig(max_linebreaks=-1)


# =========================================================================
# Non-string input
# =========================================================================


class TestNonStringInput:
    """render() accepts only str."""

    @pytest.mark.parametrize("value", [None, b">>1", 42, [">>1"]])
    def test_render_rejects(self, value: object) -> None:
        with pytest.raises(TypeError, match="expects str"):
            render(value)  # type: ignore[arg-type]

    def test_markup_rejects(self) -> None:
        with pytest.raises(TypeError):
            Markup()(b"bytes")  # type: ignore[arg-type]

    def test_renderer_rejects(self) -> None:
        with pytest.raises(TypeError):
            HtmlRenderer().render(None)  # type: ignore[arg-type]

    def test_render_many_rejects_bad_item(self) -> None:
        with pytest.raises(TypeError):
            render_many(["ok", None])  # type: ignore[list-item]


# =========================================================================
# Graceful degradation
# =========================================================================


class TestMalformedMarkup:
    """Malformed markup degrades to escaped text, never raises."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("*", "*"),
            ("**", "**"),
            ("a*b", "a*b"),
            (">>", '<span class="q">&gt;&gt;</span>'),
            (">>>", '<span class="q">&gt;&gt;&gt;</span>'),
            ("$$", '<span class="s"></span>'),
            ("\\", "\\"),
            ("http://", "http://"),
            ("https://.", "https://."),
            ("<<>>", "&lt;&lt;&gt;&gt;"),
        ],
    )
    def test_fragments(self, source: str, expected: str) -> None:
        assert render(source) == expected

    def test_whitespace_only(self) -> None:
        assert render("   ") == "   "
        assert render("\n\n\n") == "<br><br>"

    def test_empty(self) -> None:
        assert render("") == ""

    def test_deeply_repeated_markers(self) -> None:
        source = "*" * 1000 + ">" * 1000 + "$" * 1001
        result = render(source)
        assert isinstance(result, str)
        assert "\n" not in result
