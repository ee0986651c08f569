"""Emphasis parsing for hivemark.

Single-asterisk emphasis with word-boundary rules:
- the opening ``*`` must not follow a word character,
- the closer is the nearest later ``*`` on the same line, outside any
  spoiler (a spoiler between the delimiters is emphasised whole),
- the closer must not precede a word character,
- the content between them must be non-empty.

When any rule fails the opening ``*`` is ordinary text, so ``a*b*`` and
``*a*b`` stay literal while ``(*a*)`` is emphasised.

Thread Safety:
All methods use instance-local state only.

"""

from __future__ import annotations

from hivemark.charsets import WORD_CHARS
from hivemark.segments import Segment
from hivemark.stringbuilder import StringBuilder


class EmphasisMixin:
    """Mixin for ``*emphasis*``.

    Required Host Attributes:
        - _text: str
        - _escapes_enabled: bool

    Required Host Methods:
        - _render_range(sb, start, end) -> None
        - _find_line_end(pos, end) -> int
        - _spoiler_covering(pos, start) -> Segment | None

    """

    _text: str
    _escapes_enabled: bool

    def _render_range(self, sb: StringBuilder, start: int, end: int) -> None:
        """Render a sub-range inline. Implemented by InlineRenderer."""
        raise NotImplementedError

    def _find_line_end(self, pos: int, end: int) -> int:
        """Line end skipping spoilers. Implemented by SpoilerMixin."""
        raise NotImplementedError

    def _spoiler_covering(self, pos: int, start: int) -> Segment | None:
        """Spoiler around pos. Implemented by SpoilerMixin."""
        raise NotImplementedError

    def _find_emphasis_closer(self, start: int, end: int) -> int:
        """Find the nearest closing ``*`` on the current line, or -1."""
        text = self._text
        line_end = self._find_line_end(start, end)

        pos = text.find("*", start, line_end)
        while pos != -1:
            spoiler = self._spoiler_covering(pos, start)
            if spoiler is not None:
                pos = text.find("*", spoiler.outer_end, line_end)
            elif self._escapes_enabled and text[pos - 1] == "\\":
                pos = text.find("*", pos + 1, line_end)
            else:
                return pos
        return -1

    def _try_parse_emphasis(self, pos: int, end: int) -> tuple[str, int] | None:
        """Try to parse ``*content*`` starting at pos.

        Returns:
            (em HTML, position after the closer) or None
        """
        text = self._text
        if pos > 0 and text[pos - 1] in WORD_CHARS:
            return None

        closer = self._find_emphasis_closer(pos + 1, end)
        if closer == -1 or closer == pos + 1:
            return None

        after = closer + 1
        if after < len(text) and text[after] in WORD_CHARS:
            return None

        sb = StringBuilder()
        sb.append("<em>")
        self._render_range(sb, pos + 1, closer)
        sb.append("</em>")
        return sb.build(), after
