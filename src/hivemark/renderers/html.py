"""HTML renderer using StringBuilder pattern.

Drives one post through the whole pipeline:
normalize → BlockScanner segments → inline runs and fenced blocks →
one joined string.

Thread Safety:
All per-render state lives in locals of render(). Multiple threads can
safely share a single HtmlRenderer instance and call render() concurrently
without synchronization.
"""

from __future__ import annotations

import logging

from hivemark.config import RenderConfig, get_render_config
from hivemark.inline.core import InlineRenderer
from hivemark.inline.linebreaks import render_literal
from hivemark.normalize import normalize
from hivemark.scanner.core import BlockScanner
from hivemark.segments import FenceState, Segment
from hivemark.stringbuilder import StringBuilder

logger = logging.getLogger(__name__)

# (open tag, close tag) per whole-line fence state
FENCE_TAGS: dict[FenceState, tuple[str, str]] = {
    FenceState.AA: ('<pre class="aa">', "</pre>"),
    FenceState.CODE: ('<pre class="code"><code class="prettyprint">', "</code></pre>"),
}


class HtmlRenderer:
    """Render post markup to an HTML fragment.

    Consecutive plain-text and spoiler segments form one inline run, so a
    quote or emphasis span can enclose a spoiler. AA and code fences end
    the run and are rendered as literal blocks.

    Usage:
            >>> HtmlRenderer().render(">>1")
            '<a class="ql" href="#1">&gt;&gt;1</a>'

    """

    __slots__ = ("_config",)

    def __init__(self, config: RenderConfig | None = None) -> None:
        """Initialize renderer.

        Args:
            config: Render config; when None, the config active at each
                render() call is used
        """
        self._config = config

    def render(self, source: str) -> str:
        """Render a raw post body to HTML.

        Never fails for any ``str``: malformed markup degrades to escaped
        literal text and unterminated fences close at end of input.
        """
        if not isinstance(source, str):
            raise TypeError(f"render() expects str, got {type(source).__name__}")

        config = self._config if self._config is not None else get_render_config()
        text = normalize(source, tab_width=config.tab_width)
        if not text:
            return ""

        segments = list(BlockScanner(text, escapes_enabled=config.escapes_enabled).scan())
        spoilers = [s for s in segments if s.state is FenceState.SPOILER]
        inline = InlineRenderer(text, config, spoilers)

        sb = StringBuilder()
        run_start = run_end = -1
        for segment in segments:
            tags = FENCE_TAGS.get(segment.state)
            if tags is None:
                if run_start < 0:
                    run_start = segment.outer_start
                run_end = segment.outer_end
                continue

            if run_start >= 0:
                sb.append(inline.render(run_start, run_end))
                run_start = -1
            self._render_fence(sb, text, segment, tags, config.max_linebreaks)

        if run_start >= 0:
            sb.append(inline.render(run_start, run_end))

        logger.debug(
            "Rendered %d segments (%d spoilers) from %d characters",
            len(segments),
            len(spoilers),
            len(text),
        )
        return sb.build()

    def _render_fence(
        self,
        sb: StringBuilder,
        text: str,
        segment: Segment,
        tags: tuple[str, str],
        max_linebreaks: int,
    ) -> None:
        open_tag, close_tag = tags
        sb.append(open_tag)
        sb.append(render_literal(text, segment.start, segment.end, max_linebreaks))
        sb.append(close_tag)
