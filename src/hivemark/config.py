"""ContextVar-based render configuration for hivemark.

Provides thread-local configuration using Python's ContextVars (PEP 567).
Config is set once per Markup instance (or per render() call), read by the
normalizer, block scanner and inline renderer in the same context.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # In Markup class
    markup = Markup(config=RenderConfig(tab_width=4))
    html = markup("\\tindented")  # Sets config internally via ContextVar

    # Or use the context manager
    with render_config_context(RenderConfig(autolinks_enabled=False)):
        html = render("http://example.com")

"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass

from hivemark.errors import ConfigError


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable render configuration.

    Frozen dataclass ensures thread-safety (immutable after creation).

    Attributes:
        tab_width: Spaces substituted for each tab character
        max_linebreaks: Upper bound of <br> tokens emitted per newline run
        escapes_enabled: Honour backslash escapes of ``* $ ~ ` ``
        inline_in_spoilers: Parse quotes, emphasis and links inside spoilers
        autolinks_enabled: Turn bare URLs into anchors
        autolink_schemes: URL prefixes recognised by the autolinker

    """

    tab_width: int = 2
    max_linebreaks: int = 2
    escapes_enabled: bool = True
    inline_in_spoilers: bool = True
    autolinks_enabled: bool = True
    autolink_schemes: tuple[str, ...] = ("http://", "https://")

    def __post_init__(self) -> None:
        if self.tab_width < 0:
            raise ConfigError("tab_width", f"must be >= 0, got {self.tab_width}")
        if self.max_linebreaks < 1:
            raise ConfigError(
                "max_linebreaks", f"must be >= 1, got {self.max_linebreaks}"
            )
        if isinstance(self.autolink_schemes, str):
            raise ConfigError("autolink_schemes", "must be a tuple of strings, not a string")
        for scheme in self.autolink_schemes:
            if not scheme or any(c.isspace() for c in scheme):
                raise ConfigError("autolink_schemes", f"invalid scheme {scheme!r}")

    @classmethod
    def from_dict(cls, config_dict: dict) -> RenderConfig:
        """Create RenderConfig from dictionary.

        Useful for framework integration where config comes from external
        sources (settings modules, YAML files, etc.). Unknown keys are
        silently ignored; list values for ``autolink_schemes`` are
        converted to tuples.

        Example:
            >>> config = RenderConfig.from_dict({
            ...     "tab_width": 4,
            ...     "unknown_key": "ignored",
            ... })
            >>> config.tab_width
            4

        """
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in config_dict.items() if k in valid_fields}
        if "autolink_schemes" in filtered and isinstance(filtered["autolink_schemes"], list):
            filtered["autolink_schemes"] = tuple(filtered["autolink_schemes"])
        return cls(**filtered)


# Module-level default config (reused, never recreated)
_DEFAULT_CONFIG: RenderConfig = RenderConfig()

_render_config: ContextVar[RenderConfig] = ContextVar(
    "render_config",
    default=_DEFAULT_CONFIG,
)


def get_render_config() -> RenderConfig:
    """Get current render configuration (thread-local)."""
    return _render_config.get()


def set_render_config(config: RenderConfig) -> None:
    """Set render configuration for current context.

    Only affects the current thread's context. Other threads are unaffected.
    """
    _render_config.set(config)


def reset_render_config() -> None:
    """Reset to the module-level default configuration."""
    _render_config.set(_DEFAULT_CONFIG)


@contextmanager
def render_config_context(config: RenderConfig) -> Iterator[None]:
    """Context manager for temporary config changes.

    Restores the previous config even if an exception is raised.

    Example:
        >>> with render_config_context(RenderConfig(max_linebreaks=1)):
        ...     render("a\\n\\n\\nb")
        'a<br>b'

    """
    previous = _render_config.get()
    _render_config.set(config)
    try:
        yield
    finally:
        _render_config.set(previous)


__all__ = [
    "RenderConfig",
    "get_render_config",
    "set_render_config",
    "reset_render_config",
    "render_config_context",
]
