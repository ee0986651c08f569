"""Spoiler scanner mixin (``$$ ... $$``)."""

from __future__ import annotations

from hivemark.scanner.modes import ESCAPE_CHAR, SPOILER_DELIMITER
from hivemark.segments import FenceState, Segment
from hivemark.utils.logger import get_logger, log_unterminated

logger = get_logger(__name__)


class SpoilerScannerMixin:
    """Mixin providing spoiler recognition.

    Unlike whole-line fences, ``$$`` opens and closes anywhere. While a
    spoiler is open the scanner only looks for the closing ``$$``, so
    ``~~~`` and ``` ``` ``` lines inside it stay ordinary text.

    """

    # These will be set by the BlockScanner class
    _source: str
    _source_len: int
    _escapes_enabled: bool

    def _trim_trailing_newlines(self, start: int, end: int) -> int:
        """Back end off over newlines. Implemented by FenceScannerMixin."""
        raise NotImplementedError

    def _find_spoiler_delimiter(self, start: int, end: int) -> int:
        """Find the next unescaped ``$$`` in ``[start, end)``.

        Returns:
            Position of the delimiter, or -1 if there is none.
        """
        source = self._source
        pos = source.find(SPOILER_DELIMITER, start, end)
        while pos != -1:
            if not (self._escapes_enabled and pos > 0 and source[pos - 1] == ESCAPE_CHAR):
                return pos
            pos = source.find(SPOILER_DELIMITER, pos + 1, end)
        return -1

    def _scan_spoiler(self, open_pos: int) -> tuple[Segment, int]:
        """Scan a spoiler whose opening ``$$`` sits at open_pos.

        Returns:
            (content segment, position after the closing delimiter)
        """
        source = self._source
        source_len = self._source_len
        content_start = open_pos + len(SPOILER_DELIMITER)

        close_pos = self._find_spoiler_delimiter(content_start, source_len)
        if close_pos == -1:
            log_unterminated(logger, "spoiler", open_pos)
            content_end = source_len
            next_pos = source_len
            closed = False
        else:
            content_end = close_pos
            next_pos = close_pos + len(SPOILER_DELIMITER)
            closed = True

        while content_start < content_end and source[content_start] == "\n":
            content_start += 1
        content_end = self._trim_trailing_newlines(content_start, content_end)

        segment = Segment(
            FenceState.SPOILER,
            content_start,
            content_end,
            closed=closed,
            outer_start=open_pos,
            outer_end=next_pos,
        )
        return segment, next_pos
