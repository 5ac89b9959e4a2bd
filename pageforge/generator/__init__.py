"""Utilities for rendering, composing, and generating pageforge pages."""

from pageforge.markdown_parser import Node, NodeKind
from .navigation import render_nav_elements, resolve_href
from .page_generator import (
    BuildError,
    BuildReport,
    SiteBuilder,
    format_html,
    render_page,
)
from .renderer import render_node
from .template import ThemeNotFoundError, compose_page, load_theme

__all__ = [
    "BuildError",
    "BuildReport",
    "Node",
    "NodeKind",
    "SiteBuilder",
    "ThemeNotFoundError",
    "compose_page",
    "format_html",
    "load_theme",
    "render_nav_elements",
    "render_node",
    "render_page",
    "resolve_href",
]
