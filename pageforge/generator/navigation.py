"""Resolve configured navigation targets into page-relative links."""

from __future__ import annotations

import posixpath
import typing as typ

from pageforge._constants import NAV_ACTIVE_CLASS

if typ.TYPE_CHECKING:
    from collections.abc import Iterable

    from pageforge.config import NavElementConfig


def resolve_href(current_path: str, target: str) -> str:
    """Return the link from the page at ``current_path`` to ``target``.

    Both paths are relative to the output root (for example
    ``"blog/post.html"`` and ``"index.html"``). The relative path is computed
    from the current *file*, which yields one ``..`` segment too many, so a
    single leading ``../`` is removed. A single trailing ``.`` is also removed,
    which turns a link to the current page into the empty string. A leading
    ``/`` on either path is ignored, since both are rooted at the output
    directory rather than the filesystem.

    Parameters
    ----------
    current_path : str
        Output path of the page being rendered.
    target : str
        Output path of the navigation target.

    Returns
    -------
    str
        Relative link; never starts with ``/``.

    Examples
    --------
    >>> resolve_href("blog/post.html", "index.html")
    '../index.html'
    >>> resolve_href("index.html", "index.html")
    ''
    """
    target = target.lstrip("/") or "."
    current_path = current_path.lstrip("/") or "."
    relative = posixpath.relpath(target, current_path)
    return relative.removeprefix("../").removesuffix(".")


def render_nav_elements(
    nav_elements: Iterable[NavElementConfig], current_path: str
) -> str:
    """Render the ``<li>`` items for every navigation entry in configured order.

    The entry whose resolved link is empty refers to the current page and
    receives the ``nav-active`` class.
    """
    items: list[str] = []
    for element in nav_elements:
        href = resolve_href(current_path, element.href)
        css_class = NAV_ACTIVE_CLASS if href == "" else ""
        items.append(
            f'<li><a href="{href}" class="{css_class}">{element.title}</a></li>'
        )
    return "".join(items)


__all__ = ["render_nav_elements", "resolve_href"]
