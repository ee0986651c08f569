"""StringBuilder for O(n) string accumulation.

Appends to a list, joins once at the end: O(n) total vs O(n²) for
repeated string concatenation. Every render() call and every recursive
inline pass owns its own builder.

Thread Safety:
StringBuilder instances are local to each render() call.
No shared mutable state.

"""

from __future__ import annotations

from hivemark.utils.text import escape_html


class StringBuilder:
    """Append-only output accumulator.

    Usage:
            >>> sb = StringBuilder()
            >>> sb.append('<span class="q">')
            >>> sb.append_escaped(">quote")
            >>> sb.append("</span>")
            >>> sb.build()
            '<span class="q">&gt;quote</span>'

    """

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def append(self, s: str) -> StringBuilder:
        """Append markup verbatim (empty strings are skipped).

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(s)
        return self

    def append_escaped(self, s: str) -> StringBuilder:
        """Append literal text after HTML-escaping it.

        Returns:
            self for method chaining
        """
        if s:
            self._parts.append(escape_html(s))
        return self

    def build(self) -> str:
        """Join all parts into final string."""
        return "".join(self._parts)

