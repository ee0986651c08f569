"""
hivemark: imageboard post markup to HTML

Renders the markup of a single post body into an HTML fragment that is
safe to embed verbatim: every literal character is entity-escaped.

Quick Start:
    >>> from hivemark import render
    >>> render(">>1")
    '<a class="ql" href="#1">&gt;&gt;1</a>'
    >>> render(">be me\\n*so* bored")
    '<span class="q">&gt;be me</span><br><em>so</em> bored'

    >>> # Or keep a configured processor around
    >>> from hivemark import Markup, RenderConfig
    >>> markup = Markup(config=RenderConfig(tab_width=4))
    >>> markup("\\tx")
    '    x'

Syntax:
- ``>>123``                  quote-link to post 123
- ``>text`` at line start    quote
- ``*text*``                 emphasis
- ``$$text$$``               spoiler (may span lines)
- ``~~~`` lines              ASCII-art block
- triple-backtick lines       code block
- ``http://…`` ``https://…`` autolinks
- backslash before * $ ~ or a backtick   literal markup character
"""

from collections.abc import Iterable

from hivemark.config import (
    RenderConfig,
    get_render_config,
    render_config_context,
    reset_render_config,
    set_render_config,
)
from hivemark.errors import ConfigError, HivemarkError
from hivemark.inline import InlineRenderer, trim_autolink
from hivemark.normalize import normalize
from hivemark.renderers.html import HtmlRenderer
from hivemark.scanner import BlockScanner
from hivemark.segments import FenceState, Segment
from hivemark.utils.text import escape_html, escape_url

__version__ = "0.1.0"

# Shared renderer; reads the active RenderConfig on every call
_RENDERER = HtmlRenderer()


def render(text: str) -> str:
    """Render a post body to an HTML fragment.

    Uses the RenderConfig active in the current context.

    Args:
        text: Raw post body

    Returns:
        HTML string; ``""`` for empty input

    Example:
        >>> render("text >notquote")
        'text &gt;notquote'
    """
    return _RENDERER.render(text)


def render_many(texts: Iterable[str]) -> list[str]:
    """Render several post bodies with the current config.

    Example:
        >>> render_many(["*a*", ">b"])
        ['<em>a</em>', '<span class="q">&gt;b</span>']
    """
    renderer = HtmlRenderer(get_render_config())
    return [renderer.render(text) for text in texts]


class Markup:
    """Reusable post renderer bound to one RenderConfig.

    Usage:
        >>> markup = Markup()
        >>> markup("$$spoiler$$")
        '<span class="s">spoiler</span>'

        >>> from hivemark import RenderConfig
        >>> plain = Markup(config=RenderConfig(autolinks_enabled=False))
        >>> plain("http://example.com")
        'http://example.com'

    Thread Safety:
        The config is immutable and set via ContextVar for the duration of
        each call. Safe to share one instance across threads.

    """

    __slots__ = ("_config", "_renderer")

    def __init__(self, *, config: RenderConfig | None = None) -> None:
        """Initialize processor.

        Args:
            config: Render configuration (defaults to RenderConfig())
        """
        self._config = config if config is not None else RenderConfig()
        self._renderer = HtmlRenderer(self._config)

    @property
    def config(self) -> RenderConfig:
        return self._config

    def __call__(self, text: str) -> str:
        """Render one post body."""
        with render_config_context(self._config):
            return self._renderer.render(text)

    def render_many(self, texts: Iterable[str]) -> list[str]:
        """Render several post bodies.

        Sets config once, renders all, restores once.
        """
        with render_config_context(self._config):
            return [self._renderer.render(text) for text in texts]


__all__ = [  # noqa: RUF022 - grouped by category for maintainability
    # Version
    "__version__",
    # Core API
    "render",
    "render_many",
    "Markup",
    # Pipeline components
    "normalize",
    "escape_html",
    "escape_url",
    "trim_autolink",
    "BlockScanner",
    "Segment",
    "FenceState",
    "InlineRenderer",
    "HtmlRenderer",
    # Configuration (ContextVar-based)
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
    # Errors
    "HivemarkError",
    "ConfigError",
]
