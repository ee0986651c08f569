"""Core inline rendering for hivemark.

Renders one range of normalized, non-fenced text straight to HTML. The
range may hold spoilers; each is emitted whole as a spoiler span when the
cursor reaches its opening delimiter.

Every construct parser has the same shape: ``(pos, end) -> (html, new_pos)``
or None when nothing matches at pos. The dispatch order per trigger
character is fixed:

1. ``\\n``  linebreak run
2. ``\\``   backslash escape
3. ``>``   quote-link, then line-initial quote
4. ``*``   emphasis
5. first character of an autolink scheme (``h`` by default)

A trigger that no parser accepts is emitted as a single escaped character.

Thread Safety:
InlineRenderer instances are single-use per text. All state is
instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterable

from hivemark.charsets import ESCAPABLE, INLINE_SPECIAL
from hivemark.config import RenderConfig, get_render_config
from hivemark.inline.autolinks import AutolinkMixin
from hivemark.inline.emphasis import EmphasisMixin
from hivemark.inline.linebreaks import render_linebreaks
from hivemark.inline.quotes import QuoteMixin
from hivemark.inline.spoilers import SpoilerMixin
from hivemark.segments import Segment
from hivemark.stringbuilder import StringBuilder
from hivemark.utils.text import escape_html


class InlineRenderer(
    SpoilerMixin,
    QuoteMixin,
    EmphasisMixin,
    AutolinkMixin,
):
    """Inline renderer over absolute positions of one normalized text.

    Positions passed to render() index the whole post, so line-start and
    word-boundary checks see the real neighbouring characters even when
    the range is a spoiler or a quote body.

    Usage:
            >>> InlineRenderer(">>1 *hi*").render()
            '<a class="ql" href="#1">&gt;&gt;1</a> <em>hi</em>'

    """

    __slots__ = (
        "_text",
        "_max_linebreaks",
        "_escapes_enabled",
        "_autolinks_enabled",
        "_autolink_schemes",
        "_inline_in_spoilers",
        "_spoilers",
        "_spoiler_starts",
        "_triggers",
    )

    def __init__(
        self,
        text: str,
        config: RenderConfig | None = None,
        spoilers: Iterable[Segment] = (),
    ) -> None:
        """Initialize renderer.

        Args:
            text: Normalized post text
            config: Render config; defaults to the active RenderConfig
            spoilers: SPOILER segments found by the block scanner
        """
        if config is None:
            config = get_render_config()
        self._text = text
        self._max_linebreaks = config.max_linebreaks
        self._escapes_enabled = config.escapes_enabled
        self._autolinks_enabled = config.autolinks_enabled
        self._autolink_schemes = config.autolink_schemes
        self._inline_in_spoilers = config.inline_in_spoilers
        self._spoilers = {s.outer_start: s for s in spoilers}
        self._spoiler_starts = sorted(self._spoilers)
        self._triggers = INLINE_SPECIAL
        if config.autolinks_enabled:
            self._triggers = INLINE_SPECIAL | {s[0] for s in config.autolink_schemes}

    def render(self, start: int = 0, end: int | None = None) -> str:
        """Render ``text[start:end]`` to HTML."""
        if end is None:
            end = len(self._text)
        sb = StringBuilder()
        self._render_range(sb, start, end)
        return sb.build()

    def _render_range(self, sb: StringBuilder, start: int, end: int) -> None:
        """Render ``[start, end)`` into sb."""
        text = self._text
        triggers = self._triggers
        pos = start

        while pos < end:
            spoiler = self._spoilers.get(pos)
            if spoiler is not None:
                self._render_spoiler(sb, spoiler)
                pos = spoiler.outer_end
                continue

            # Plain run up to the next trigger character or spoiler
            limit = self._next_spoiler_start(pos, end)
            run_start = pos
            while pos < limit and text[pos] not in triggers:
                pos += 1
            if pos > run_start:
                sb.append_escaped(text[run_start:pos])
            if pos >= limit:
                continue

            result = self._dispatch(text[pos], pos, end)
            if result is not None:
                fragment, pos = result
                sb.append(fragment)
            else:
                sb.append_escaped(text[pos])
                pos += 1

    def _dispatch(self, char: str, pos: int, end: int) -> tuple[str, int] | None:
        if char == "\n":
            return render_linebreaks(self._text, pos, end, self._max_linebreaks)
        if char == "\\":
            return self._try_parse_escape(pos, end)
        if char == ">":
            return self._try_parse_quote_marker(pos, end)
        if char == "*":
            return self._try_parse_emphasis(pos, end)
        return self._try_parse_autolink(pos, end)

    def _try_parse_escape(self, pos: int, end: int) -> tuple[str, int] | None:
        """Backslash before a markup character renders that character."""
        if not self._escapes_enabled or pos + 1 >= end:
            return None
        char = self._text[pos + 1]
        if char not in ESCAPABLE:
            return None
        return escape_html(char), pos + 2
