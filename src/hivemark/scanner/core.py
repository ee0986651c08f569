"""Fence-state block scanner with O(n) guaranteed performance.

Walks the normalized post line by line, always moving forward, and cuts it
into segments: plain text, spoilers, AA fences and code fences. Plain text
between fences is merged into a single segment so newline runs are never
split across segment boundaries.

Thread Safety:
BlockScanner instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Iterator

from hivemark.config import get_render_config
from hivemark.scanner.fence import FenceScannerMixin
from hivemark.scanner.spoiler import SpoilerScannerMixin
from hivemark.segments import FenceState, Segment


class BlockScanner(
    FenceScannerMixin,
    SpoilerScannerMixin,
):
    """Splits normalized text into fence-state segments.

    Precedence at each position:
    1. At a line start, a line equal to ``~~~`` or ``` ``` ``` opens a fence.
    2. Otherwise the first unescaped ``$$`` on the line opens a spoiler.
    3. Everything else is plain text.

    Usage:
            >>> scanner = BlockScanner("a\\n~~~\\nart\\n~~~")
            >>> list(scanner.scan())
            [Segment(NONE, 0:2), Segment(AA, 6:9)]

    """

    __slots__ = (
        "_source",
        "_source_len",
        "_escapes_enabled",
    )

    def __init__(self, source: str, *, escapes_enabled: bool | None = None) -> None:
        """Initialize scanner with normalized source text.

        Args:
            source: Normalized post text
            escapes_enabled: Whether ``\\$$`` is literal; defaults to the
                active RenderConfig
        """
        self._source = source
        self._source_len = len(source)
        if escapes_enabled is None:
            escapes_enabled = get_render_config().escapes_enabled
        self._escapes_enabled = escapes_enabled

    def scan(self) -> Iterator[Segment]:
        """Scan source into a segment stream.

        Yields:
            Segment objects in document order; NONE segments are never empty.
        """
        source = self._source
        source_len = self._source_len
        pending = 0  # start of the plain-text run not yet yielded
        pos = 0

        while pos < source_len:
            line_end = self._find_line_end(pos)

            if pos == 0 or source[pos - 1] == "\n":
                line = source[pos:line_end]
                state = self._classify_fence(line)
                if state is not None:
                    if pending < pos:
                        yield Segment(FenceState.NONE, pending, pos)
                    segment, pos = self._scan_fence(state, line, line_end)
                    yield segment
                    pending = pos
                    continue

            spoiler_pos = self._find_spoiler_delimiter(pos, line_end)
            if spoiler_pos == -1:
                pos = min(line_end + 1, source_len)
                continue

            if pending < spoiler_pos:
                yield Segment(FenceState.NONE, pending, spoiler_pos)
            segment, pos = self._scan_spoiler(spoiler_pos)
            yield segment
            pending = pos

        if pending < source_len:
            yield Segment(FenceState.NONE, pending, source_len)

    def _find_line_end(self, pos: int) -> int:
        """Find the end of the line containing pos (position of \\n or EOF)."""
        idx = self._source.find("\n", pos)
        return idx if idx != -1 else self._source_len
