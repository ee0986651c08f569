"""Block scanner for hivemark.

Cuts a normalized post into fence-state segments.

Architecture:
scanner/
├── __init__.py          # Re-exports BlockScanner
├── core.py              # BlockScanner (mixin composition + line walk)
├── modes.py             # Delimiter constants
├── fence.py             # ~~~ / ``` whole-line fences
└── spoiler.py           # $$ spoilers

Usage:
    >>> from hivemark.scanner import BlockScanner
    >>> list(BlockScanner("$$text$$").scan())
    [Segment(SPOILER, 2:6)]

"""

from hivemark.scanner.core import BlockScanner

__all__ = ["BlockScanner"]
