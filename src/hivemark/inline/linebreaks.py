"""Linebreak conversion and literal rendering.

Shared by the inline renderer and by fenced blocks: every newline in the
post is consumed here, so no raw newline ever reaches the output.
"""

from __future__ import annotations

from hivemark.utils.text import escape_html

LINEBREAK = "<br>"


def render_linebreaks(text: str, pos: int, end: int, limit: int = 2) -> tuple[str, int]:
    """Render the newline run starting at pos.

    Args:
        text: Normalized text
        pos: Position of the first newline of the run
        end: Exclusive bound of the run
        limit: Maximum number of <br> tokens for one run

    Returns:
        (``<br>`` repeated ``min(run, limit)`` times, position after the run)
    """
    run_end = pos
    while run_end < end and text[run_end] == "\n":
        run_end += 1
    return LINEBREAK * min(run_end - pos, limit), run_end


def render_literal(text: str, start: int, end: int, limit: int = 2) -> str:
    """Render ``text[start:end]`` as escaped text plus linebreaks only.

    Used for fenced content, where no inline syntax is recognised.

    Example:
        >>> render_literal("'a<\\n\\n\\nb", 0, 7)
        '&#39;a&lt;<br><br>b'
    """
    parts: list[str] = []
    pos = start
    while pos < end:
        newline = text.find("\n", pos, end)
        if newline == -1:
            parts.append(escape_html(text[pos:end]))
            break
        if newline > pos:
            parts.append(escape_html(text[pos:newline]))
        fragment, pos = render_linebreaks(text, newline, end, limit)
        parts.append(fragment)
    return "".join(parts)
