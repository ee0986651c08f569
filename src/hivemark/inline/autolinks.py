"""Autolink parsing for hivemark.

Bare ``http://`` and ``https://`` URLs become anchors. The candidate token
is the maximal run of non-whitespace after the scheme, stopping at a
spoiler opener; trailing punctuation and unbalanced closing parentheses
are split off and re-emitted as text after the anchor, so
``(http://example.com)`` links only the URL.

Thread Safety:
All functions are pure. The mixin reads instance-local state only.

"""

from __future__ import annotations

from hivemark.charsets import AUTOLINK_TRAILING_PUNCTUATION, WHITESPACE
from hivemark.utils.text import escape_html, escape_url


def trim_autolink(token: str) -> tuple[str, str]:
    """Split a URL candidate into the URL and its trailing noise.

    1. Strip trailing ``: ; ! ? , . ' " &`` characters.
    2. Then strip trailing ``)`` while the token has no unmatched ``(``
       left to pair it with.

    Args:
        token: Maximal non-whitespace run starting at the scheme

    Returns:
        (url, trailing) where ``url + trailing == token``

    Examples:
        >>> trim_autolink("http://ab(c))))")
        ('http://ab(c)', ')))')
        >>> trim_autolink("http://abc.,")
        ('http://abc', '.,')
    """
    end = len(token)
    while end > 0 and token[end - 1] in AUTOLINK_TRAILING_PUNCTUATION:
        end -= 1

    opens = token.count("(", 0, end)
    closes = token.count(")", 0, end)
    while end > 0 and token[end - 1] == ")":
        # Parens before this one: opens vs. the other closes
        if opens - (closes - 1) > 0:
            break
        end -= 1
        closes -= 1

    return token[:end], token[end:]


class AutolinkMixin:
    """Mixin for bare URL autolinking.

    Required Host Attributes:
        - _text: str
        - _autolinks_enabled: bool
        - _autolink_schemes: tuple[str, ...]

    Required Host Methods:
        - _next_spoiler_start(pos, end) -> int

    """

    _text: str
    _autolinks_enabled: bool
    _autolink_schemes: tuple[str, ...]

    def _next_spoiler_start(self, pos: int, end: int) -> int:
        """First spoiler opener at or after pos. Implemented by SpoilerMixin."""
        raise NotImplementedError

    def _try_parse_autolink(self, pos: int, end: int) -> tuple[str, int] | None:
        """Try to parse a bare URL starting at pos.

        Returns:
            (anchor HTML followed by escaped trailing text, new position)
            or None if no scheme matches here.
        """
        if not self._autolinks_enabled:
            return None

        text = self._text
        end = self._next_spoiler_start(pos, end)
        for scheme in self._autolink_schemes:
            if pos + len(scheme) <= end and text.startswith(scheme, pos):
                break
        else:
            return None

        token_end = pos + len(scheme)
        while token_end < end and text[token_end] not in WHITESPACE:
            token_end += 1

        url, trailing = trim_autolink(text[pos:token_end])
        if len(url) <= len(scheme):
            return None

        escaped = escape_url(url)
        return f'<a href="{escaped}">{escaped}</a>{escape_html(trailing)}', token_end
