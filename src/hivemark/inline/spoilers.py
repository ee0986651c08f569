"""Spoiler handling inside inline runs.

The block scanner decides where every ``$$ ... $$`` spoiler lies. Inline
rendering covers each run of plain text and spoilers as one range, so a
quote or an emphasis span can contain a spoiler. Spoilers are atomic: a
construct that contains one contains it whole, and a newline or ``*``
inside a spoiler never ends a construct that started outside it.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from bisect import bisect_left, bisect_right

from hivemark.charsets import ESCAPABLE
from hivemark.inline.linebreaks import render_literal
from hivemark.segments import Segment
from hivemark.stringbuilder import StringBuilder

SPOILER_OPEN = '<span class="s">'
SPOILER_CLOSE = "</span>"


class SpoilerMixin:
    """Mixin for spoilers embedded in inline text.

    Required Host Attributes:
        - _text: str
        - _max_linebreaks: int
        - _escapes_enabled: bool
        - _inline_in_spoilers: bool
        - _spoilers: dict[int, Segment] (keyed by outer_start)
        - _spoiler_starts: list[int] (sorted outer_start values)

    Required Host Methods:
        - _render_range(sb, start, end) -> None

    """

    _text: str
    _max_linebreaks: int
    _escapes_enabled: bool
    _inline_in_spoilers: bool
    _spoilers: dict[int, Segment]
    _spoiler_starts: list[int]

    def _render_range(self, sb: StringBuilder, start: int, end: int) -> None:
        """Render a sub-range inline. Implemented by InlineRenderer."""
        raise NotImplementedError

    def _next_spoiler_start(self, pos: int, end: int) -> int:
        """Position of the first spoiler opener in ``[pos, end)``, else end."""
        starts = self._spoiler_starts
        idx = bisect_left(starts, pos)
        if idx < len(starts) and starts[idx] < end:
            return starts[idx]
        return end

    def _spoiler_covering(self, pos: int, start: int) -> Segment | None:
        """Return the spoiler opened in ``[start, pos]`` that still covers pos.

        Spoilers opened before start are ignored, so a range rendered from
        inside a spoiler never sees its own enclosing spoiler.
        """
        starts = self._spoiler_starts
        idx = bisect_right(starts, pos) - 1
        if idx < 0 or starts[idx] < start:
            return None
        spoiler = self._spoilers[starts[idx]]
        return spoiler if pos < spoiler.outer_end else None

    def _find_line_end(self, pos: int, end: int) -> int:
        """Find the first newline in ``[pos, end)`` outside spoilers, else end."""
        text = self._text
        idx = text.find("\n", pos, end)
        while idx != -1:
            spoiler = self._spoiler_covering(idx, pos)
            if spoiler is None:
                return idx
            idx = text.find("\n", spoiler.outer_end, end)
        return end

    def _render_spoiler(self, sb: StringBuilder, spoiler: Segment) -> None:
        sb.append(SPOILER_OPEN)
        if self._inline_in_spoilers:
            self._render_range(sb, spoiler.start, spoiler.end)
        else:
            self._render_literal_range(sb, spoiler.start, spoiler.end)
        sb.append(SPOILER_CLOSE)

    def _render_literal_range(self, sb: StringBuilder, start: int, end: int) -> None:
        """Render ``[start, end)`` as literal text, honouring backslash escapes."""
        text = self._text
        limit = self._max_linebreaks
        if not self._escapes_enabled:
            sb.append(render_literal(text, start, end, limit))
            return

        pos = start
        while pos < end:
            idx = text.find("\\", pos, end - 1)
            if idx == -1:
                break
            if text[idx + 1] in ESCAPABLE:
                sb.append(render_literal(text, pos, idx, limit))
                sb.append_escaped(text[idx + 1])
                pos = idx + 2
            else:
                sb.append(render_literal(text, pos, idx + 1, limit))
                pos = idx + 1
        sb.append(render_literal(text, pos, end, limit))
