"""Quote-link and quote parsing for hivemark.

``>>123`` anywhere is a link to post 123. A ``>`` that starts a line and
is not a quote-link turns the rest of that line into a greentext quote.
Any other ``>`` is literal text.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from hivemark.charsets import DIGITS
from hivemark.stringbuilder import StringBuilder


class QuoteMixin:
    """Mixin for ``>`` handling.

    Required Host Attributes:
        - _text: str

    Required Host Methods:
        - _render_range(sb, start, end) -> None
        - _find_line_end(pos, end) -> int

    """

    _text: str

    def _render_range(self, sb: StringBuilder, start: int, end: int) -> None:
        """Render a sub-range inline. Implemented by InlineRenderer."""
        raise NotImplementedError

    def _find_line_end(self, pos: int, end: int) -> int:
        """Line end skipping spoilers. Implemented by SpoilerMixin."""
        raise NotImplementedError

    def _try_parse_quote_marker(self, pos: int, end: int) -> tuple[str, int] | None:
        """Dispatch a ``>``: quote-link first, then quote."""
        return self._try_parse_quote_link(pos, end) or self._try_parse_quote(pos, end)

    def _try_parse_quote_link(self, pos: int, end: int) -> tuple[str, int] | None:
        """Try to parse ``>>N`` at pos.

        Returns:
            (anchor HTML, position after the last digit) or None
        """
        text = self._text
        digits_start = pos + 2
        if digits_start >= end or text[pos + 1] != ">":
            return None

        digits_end = digits_start
        while digits_end < end and text[digits_end] in DIGITS:
            digits_end += 1
        if digits_end == digits_start:
            return None

        num = text[digits_start:digits_end]
        return f'<a class="ql" href="#{num}">&gt;&gt;{num}</a>', digits_end

    def _try_parse_quote(self, pos: int, end: int) -> tuple[str, int] | None:
        """Try to parse a line-initial quote at pos.

        The quote runs to the end of the line (or of the current range),
        enclosing any spoiler on the way; everything after the ``>`` is
        rendered inline.

        Returns:
            (quote span HTML, position of the terminating newline) or None
        """
        text = self._text
        if pos > 0 and text[pos - 1] != "\n":
            return None

        line_end = self._find_line_end(pos, end)

        sb = StringBuilder()
        sb.append('<span class="q">&gt;')
        self._render_range(sb, pos + 1, line_end)
        sb.append("</span>")
        return sb.build(), line_end
