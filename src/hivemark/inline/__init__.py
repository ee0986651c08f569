"""Inline rendering for hivemark.

Quote-links, quotes, emphasis, autolinks, spoilers, backslash escapes
and linebreaks, rendered directly to HTML.

Architecture:
inline/
├── __init__.py          # Re-exports
├── core.py              # InlineRenderer (mixin composition + dispatch)
├── quotes.py            # >>N quote-links and >quotes
├── emphasis.py          # *emphasis*
├── autolinks.py         # bare URLs and trim_autolink
├── spoilers.py          # $$ spoilers embedded in inline runs
└── linebreaks.py        # newline runs and literal (fenced) text

"""

from hivemark.inline.autolinks import trim_autolink
from hivemark.inline.core import InlineRenderer
from hivemark.inline.linebreaks import render_linebreaks, render_literal

__all__ = [
    "InlineRenderer",
    "render_linebreaks",
    "render_literal",
    "trim_autolink",
]
