"""Typed dataclasses describing pageforge site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from pageforge._constants import OUTPUT_DIRNAME, PAGES_DIRNAME, THEMES_DIRNAME


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True, frozen=True)
class NavElementConfig:
    """Navigation menu entry pointing at another generated page.

    Attributes
    ----------
    title : str
        Label rendered inside the navigation link.
    href : str
        Path of the target page relative to the output root (for example,
        ``"blog/index.html"``); never a URL.
    """

    title: str
    href: str


@dc.dataclass(slots=True)
class SiteConfig:
    """Site-wide settings read from ``site.json``.

    Attributes
    ----------
    name : str
        Site name substituted into ``{{SITE-TITLE}}``.
    theme : str
        Theme identifier; empty or ``"default"`` selects the built-in theme.
    nav_elements : list[NavElementConfig]
        Navigation entries in configured order.
    root : Path
        Project directory containing ``site.json``, ``pages/`` and ``out/``.
    """

    name: str
    theme: str = ""
    nav_elements: list[NavElementConfig] = dc.field(default_factory=list)
    root: Path = dc.field(default_factory=Path)

    @property
    def pages_dir(self) -> Path:
        """Return the directory holding the Markdown sources."""
        return self.root / PAGES_DIRNAME

    @property
    def output_dir(self) -> Path:
        """Return the directory the generated HTML tree is written to."""
        return self.root / OUTPUT_DIRNAME

    @property
    def themes_dir(self) -> Path:
        """Return the directory searched for non-default themes."""
        return self.root / THEMES_DIRNAME
