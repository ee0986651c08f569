"""Text escaping utilities for hivemark.

Every span of literal post text passes through one of these functions
before it reaches the output.

Example:
    >>> from hivemark.utils.text import escape_html
    >>> escape_html("<b>'hi' & \\"bye\\"</b>")
    '&lt;b&gt;&#39;hi&#39; &amp; &quot;bye&quot;&lt;/b&gt;'
"""

from __future__ import annotations

# Single-pass translation tables: str.translate never re-scans its output,
# so an "&" produced by one substitution is never escaped again.
_HTML_ESCAPES: dict[int, str] = {
    ord("&"): "&amp;",
    ord("<"): "&lt;",
    ord(">"): "&gt;",
    ord("'"): "&#39;",
    ord('"'): "&quot;",
}

_URL_ESCAPES: dict[int, str] = {**_HTML_ESCAPES, ord("/"): "&#47;"}


def escape_html(text: str) -> str:
    """Escape HTML special characters.

    Converts special characters to HTML entities:
    - & becomes &amp;
    - < becomes &lt;
    - > becomes &gt;
    - ' becomes &#39;
    - " becomes &quot;

    Args:
        text: Literal text

    Returns:
        Text safe for element content and quoted attribute values
    """
    if not text:
        return ""
    return text.translate(_HTML_ESCAPES)


def escape_url(text: str) -> str:
    """Escape an autolink URL for both its href and its visible text.

    Same table as escape_html, plus ``/`` becomes ``&#47;``.

    Examples:
        >>> escape_url("http://a.b/c?d&e")
        'http:&#47;&#47;a.b&#47;c?d&amp;e'
    """
    if not text:
        return ""
    return text.translate(_URL_ESCAPES)
