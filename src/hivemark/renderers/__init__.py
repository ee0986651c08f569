"""Renderers for hivemark."""

from hivemark.renderers.html import HtmlRenderer

__all__ = ["HtmlRenderer"]
