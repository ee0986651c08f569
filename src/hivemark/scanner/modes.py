"""Fence delimiters recognised by the block scanner."""

from __future__ import annotations

from hivemark.segments import FenceState

# Whole-line fences: the line must equal the delimiter exactly
FENCE_DELIMITERS: dict[str, FenceState] = {
    "~~~": FenceState.AA,
    "```": FenceState.CODE,
}

# Spoilers open and close on this pair anywhere in a line
SPOILER_DELIMITER = "$$"

ESCAPE_CHAR = "\\"
