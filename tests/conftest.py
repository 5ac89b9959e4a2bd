"""Shared fixtures for building throwaway pageforge projects."""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

import pytest

ProjectFactory = typ.Callable[..., Path]

DEFAULT_NAV = [
    {"title": "Home", "href": "index.html"},
    {"title": "Blog", "href": "blog/post.html"},
]


def write_project(
    root: Path,
    pages: typ.Mapping[str, str],
    *,
    name: str = "Test Site",
    theme: str = "",
    nav_elements: list[dict[str, str]] | None = None,
) -> Path:
    """Write ``site.json`` and the given ``pages/`` files beneath ``root``."""
    root.mkdir(parents=True, exist_ok=True)
    config = {
        "name": name,
        "theme": theme,
        "nav-elements": DEFAULT_NAV if nav_elements is None else nav_elements,
    }
    (root / "site.json").write_text(json.dumps(config, indent=2), encoding="utf-8")
    pages_dir = root / "pages"
    pages_dir.mkdir(exist_ok=True)
    for relative, text in pages.items():
        path = pages_dir / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    return root


@pytest.fixture
def make_project(tmp_path: Path) -> ProjectFactory:
    """Return a factory that writes a project under a fresh temp directory."""

    def _make(pages: typ.Mapping[str, str], **kwargs: typ.Any) -> Path:  # noqa: ANN401
        return write_project(tmp_path / "site", pages, **kwargs)

    return _make
