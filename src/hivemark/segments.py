"""Segment and FenceState definitions for the block scanner.

The block scanner cuts the normalized post into a flat sequence of
segments. Each segment names the fence state its characters live in and
a half-open range into the normalized text. Plain and spoiler segments
tile each inline run exactly through their outer extents.

Thread Safety:
Segment is frozen (immutable) and safe to share across threads.
FenceState is an enum (inherently immutable).

"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class FenceState(Enum):
    """Fence state a run of text is rendered in.

    At most one state is active at a time; fences never nest.

    """

    NONE = auto()  # Ordinary text, full inline parsing
    SPOILER = auto()  # $$ ... $$
    AA = auto()  # ~~~ fenced ASCII art
    CODE = auto()  # ``` fenced code


@dataclass(frozen=True, slots=True)
class Segment:
    """A half-open range ``[start, end)`` of normalized text.

    For fenced states the range covers only the content: delimiters and
    the newlines hugging them are excluded. ``outer_start`` and
    ``outer_end`` bound the whole construct including its delimiters and
    default to the content range. ``closed`` is False when the fence ran
    to end of input without a closing delimiter.
    """

    state: FenceState
    start: int
    end: int
    closed: bool = True
    outer_start: int = -1
    outer_end: int = -1

    def __post_init__(self) -> None:
        if self.outer_start < 0:
            object.__setattr__(self, "outer_start", self.start)
        if self.outer_end < 0:
            object.__setattr__(self, "outer_end", self.end)

    def __len__(self) -> int:
        return self.end - self.start

    def __repr__(self) -> str:
        return f"Segment({self.state.name}, {self.start}:{self.end})"
