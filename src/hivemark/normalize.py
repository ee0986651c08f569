"""Input normalization.

Runs once over the whole post before scanning: tabs expand to spaces and
ASCII control characters are dropped. Newlines and every other character,
non-ASCII text included, pass through untouched.

Thread Safety:
Translation tables are built per call from immutable config.
No shared mutable state.

"""

from __future__ import annotations

from hivemark.charsets import CONTROL_CHARS
from hivemark.config import get_render_config

# Deletion entries are shared by every table; only the tab entry varies
_DELETIONS: dict[int, None] = {ord(c): None for c in CONTROL_CHARS}


def _build_table(tab_width: int) -> dict[int, str | None]:
    table: dict[int, str | None] = dict(_DELETIONS)
    table[ord("\t")] = " " * tab_width
    return table


_DEFAULT_TABLE = _build_table(2)


def normalize(text: str, *, tab_width: int | None = None) -> str:
    """Expand tabs and strip control characters.

    Args:
        text: Raw post body
        tab_width: Spaces per tab; defaults to the active RenderConfig

    Returns:
        Normalized text; ``""`` for ``""``

    Example:
        >>> normalize("\\tline\\x00\\x7f")
        '  line'
    """
    if not text:
        return ""
    if tab_width is None:
        tab_width = get_render_config().tab_width
    table = _DEFAULT_TABLE if tab_width == 2 else _build_table(tab_width)
    return text.translate(table)
