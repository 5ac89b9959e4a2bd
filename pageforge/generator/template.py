"""Theme lookup and placeholder substitution for generated pages.

Themes are plain HTML files containing a fixed set of placeholder tokens.
Substitution happens in a single pass, so values inserted for one placeholder
are never scanned for another; a page body that mentions ``{{SITE-TITLE}}``
keeps it verbatim.
"""

from __future__ import annotations

import re
import typing as typ
from pathlib import Path

from pageforge._constants import (
    CONTENT_PLACEHOLDER,
    DEFAULT_THEME,
    NAV_ELEMENTS_PLACEHOLDER,
    PAGE_SUBTITLE_PLACEHOLDER,
    PAGE_TITLE_PLACEHOLDER,
    SITE_TITLE_PLACEHOLDER,
)

from .navigation import render_nav_elements

if typ.TYPE_CHECKING:
    from collections.abc import Iterable

    from pageforge.config import NavElementConfig, SiteConfig

BUILTIN_THEMES_DIR = Path(__file__).resolve().parents[1] / "themes"
DEFAULT_THEME_FILE = BUILTIN_THEMES_DIR / "default.html"

PLACEHOLDER_PATTERN = re.compile(
    "|".join(
        re.escape(token)
        for token in (
            PAGE_TITLE_PLACEHOLDER,
            PAGE_SUBTITLE_PLACEHOLDER,
            CONTENT_PLACEHOLDER,
            SITE_TITLE_PLACEHOLDER,
            NAV_ELEMENTS_PLACEHOLDER,
        )
    )
)


class ThemeNotFoundError(FileNotFoundError):
    """Raised when the configured theme template cannot be located."""


def theme_path(site: SiteConfig) -> Path:
    """Return the template file selected by the site's theme identifier."""
    if site.theme in ("", DEFAULT_THEME):
        return DEFAULT_THEME_FILE
    return site.themes_dir / site.theme


def load_theme(site: SiteConfig) -> str:
    """Read the theme template configured for ``site``.

    Raises
    ------
    ThemeNotFoundError
        If the template file does not exist.
    """
    path = theme_path(site)
    if not path.is_file():
        msg = f"Theme template '{path}' not found."
        raise ThemeNotFoundError(msg)
    return path.read_text(encoding="utf-8")


def compose_page(  # noqa: PLR0913
    template: str,
    *,
    title: str,
    subtitle: str,
    site_name: str,
    nav_elements: Iterable[NavElementConfig],
    current_path: str,
    content: str,
) -> str:
    """Substitute page data into every placeholder occurrence in ``template``.

    Parameters
    ----------
    template : str
        Theme template text.
    title : str
        Replaces ``{{PAGE-TITLE}}``.
    subtitle : str
        Replaces ``{{PAGE-SUBTITLE}}``.
    site_name : str
        Replaces ``{{SITE-TITLE}}``.
    nav_elements : Iterable[NavElementConfig]
        Navigation entries rendered into ``{{NAV-ELEMENTS}}`` in order.
    current_path : str
        Output path of this page relative to the output root; used to make
        navigation links relative.
    content : str
        Rendered body HTML; replaces ``{{CONTENT}}``.

    Returns
    -------
    str
        The composed HTML document.
    """
    values = {
        PAGE_TITLE_PLACEHOLDER: title,
        PAGE_SUBTITLE_PLACEHOLDER: subtitle,
        CONTENT_PLACEHOLDER: content,
        SITE_TITLE_PLACEHOLDER: site_name,
        NAV_ELEMENTS_PLACEHOLDER: render_nav_elements(nav_elements, current_path),
    }
    return PLACEHOLDER_PATTERN.sub(lambda match: values[match.group(0)], template)


__all__ = [
    "DEFAULT_THEME_FILE",
    "ThemeNotFoundError",
    "compose_page",
    "load_theme",
    "theme_path",
]
