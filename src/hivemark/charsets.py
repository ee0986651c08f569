"""Character sets for O(1) classification.

All sets are frozensets for:
- O(1) membership testing (vs O(n) for strings)
- Immutability (thread-safe)
- Module-level caching (no per-call allocation)

Word characters are ASCII-only on purpose: anything outside ASCII counts
as a boundary for emphasis.

Usage:
    from hivemark.charsets import WORD_CHARS

    if before in WORD_CHARS:
        ...
"""

import string

# Letters, digits and underscore; emphasis delimiters must not touch these
WORD_CHARS: frozenset[str] = frozenset(string.ascii_letters + string.digits + "_")

# Quote-link post numbers
DIGITS: frozenset[str] = frozenset(string.digits)

# Characters that terminate an autolink token. Tabs and other control
# characters never survive normalization, so space and newline suffice.
WHITESPACE: frozenset[str] = frozenset(" \n")

# Trailing punctuation stripped from an autolink candidate
AUTOLINK_TRAILING_PUNCTUATION: frozenset[str] = frozenset(":;!?,.'\"&")

# Characters a backslash can escape
ESCAPABLE: frozenset[str] = frozenset("*$~`")

# Control characters deleted by the normalizer (tab and newline excluded)
CONTROL_CHARS: frozenset[str] = frozenset(
    [chr(c) for c in range(0, 9)] + [chr(c) for c in range(11, 32)] + [chr(127)]
)

# Characters that may start an inline construct other than an autolink;
# the renderer adds the first character of each autolink scheme
INLINE_SPECIAL: frozenset[str] = frozenset("\n\\>*")
