"""Whole-line fence scanner mixin (``~~~`` and ``` ``` ```)."""

from __future__ import annotations

from hivemark.scanner.modes import FENCE_DELIMITERS
from hivemark.segments import FenceState, Segment
from hivemark.utils.logger import get_logger, log_unterminated

logger = get_logger(__name__)


class FenceScannerMixin:
    """Mixin providing AA and code fence recognition.

    A fence opens on a line that is exactly the delimiter and closes on the
    next line that is exactly the same delimiter. Nothing between the two is
    inspected for other fences.

    """

    # These will be set by the BlockScanner class
    _source: str
    _source_len: int

    def _find_line_end(self, pos: int) -> int:
        """Find end of line starting search at pos. Implemented by BlockScanner."""
        raise NotImplementedError

    def _classify_fence(self, line: str) -> FenceState | None:
        """Return the fence state a delimiter line opens, or None."""
        return FENCE_DELIMITERS.get(line)

    def _scan_fence(self, state: FenceState, delimiter: str, line_end: int) -> tuple[Segment, int]:
        """Scan a fenced block whose opening line ends at line_end.

        Args:
            state: Fence state opened by the delimiter line
            delimiter: The delimiter text, used to find the closing line
            line_end: Position of the newline (or EOF) ending the opening line

        Returns:
            (content segment, position after the closing line and its newline)
        """
        source = self._source
        source_len = self._source_len
        open_pos = line_end - len(delimiter)

        content_start = min(line_end + 1, source_len)
        while content_start < source_len and source[content_start] == "\n":
            content_start += 1

        line_start = content_start
        while line_start < source_len:
            end = self._find_line_end(line_start)
            if source[line_start:end] == delimiter:
                content_end = self._trim_trailing_newlines(content_start, line_start)
                next_pos = min(end + 1, source_len)
                segment = Segment(
                    state, content_start, content_end, outer_start=open_pos, outer_end=next_pos
                )
                return segment, next_pos
            line_start = end + 1

        log_unterminated(logger, f"{state.name} fence", open_pos)
        content_end = self._trim_trailing_newlines(content_start, source_len)
        segment = Segment(
            state,
            content_start,
            content_end,
            closed=False,
            outer_start=open_pos,
            outer_end=source_len,
        )
        return segment, source_len

    def _trim_trailing_newlines(self, start: int, end: int) -> int:
        source = self._source
        while end > start and source[end - 1] == "\n":
            end -= 1
        return end
