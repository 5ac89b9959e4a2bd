"""Tests for theme lookup and placeholder substitution."""

from __future__ import annotations

from pathlib import Path

import pytest

from pageforge.config import NavElementConfig, SiteConfig
from pageforge.generator import ThemeNotFoundError, compose_page, load_theme
from pageforge.generator.template import DEFAULT_THEME_FILE, theme_path


def _compose(template: str, **overrides: object) -> str:
    values: dict[str, object] = {
        "title": "Install",
        "subtitle": "From source",
        "site_name": "Forge",
        "nav_elements": [],
        "current_path": "index.html",
        "content": "<p>Body</p>",
    }
    values.update(overrides)
    return compose_page(template, **values)  # type: ignore[arg-type]


def test_every_occurrence_is_replaced() -> None:
    result = _compose("<title>{{SITE-TITLE}}</title><h1>{{SITE-TITLE}}</h1>")
    assert result == "<title>Forge</title><h1>Forge</h1>"


def test_all_placeholders_are_substituted() -> None:
    template = (
        "{{PAGE-TITLE}}|{{PAGE-SUBTITLE}}|{{CONTENT}}|{{SITE-TITLE}}|{{NAV-ELEMENTS}}"
    )
    nav = [NavElementConfig(title="Home", href="index.html")]
    result = _compose(template, nav_elements=nav)
    assert result == (
        'Install|From source|<p>Body</p>|Forge|'
        '<li><a href="" class="nav-active">Home</a></li>'
    )


def test_substituted_values_are_not_rescanned() -> None:
    result = _compose("{{CONTENT}} / {{SITE-TITLE}}", content="literal {{SITE-TITLE}}")
    assert result == "literal {{SITE-TITLE}} / Forge"


def test_placeholders_are_case_sensitive() -> None:
    assert _compose("{{site-title}}") == "{{site-title}}"


def test_nav_links_are_relative_to_current_page() -> None:
    nav = [NavElementConfig(title="Home", href="index.html")]
    result = _compose("{{NAV-ELEMENTS}}", nav_elements=nav, current_path="blog/post.html")
    assert result == '<li><a href="../index.html" class="">Home</a></li>'


@pytest.mark.parametrize("theme", ["", "default"])
def test_default_theme_is_builtin(tmp_path: Path, theme: str) -> None:
    site = SiteConfig(name="Forge", theme=theme, root=tmp_path)
    assert theme_path(site) == DEFAULT_THEME_FILE
    template = load_theme(site)
    for token in ("{{PAGE-TITLE}}", "{{CONTENT}}", "{{SITE-TITLE}}", "{{NAV-ELEMENTS}}"):
        assert token in template


def test_named_theme_is_read_from_project_themes(tmp_path: Path) -> None:
    themes = tmp_path / "themes"
    themes.mkdir()
    (themes / "plain.html").write_text("<main>{{CONTENT}}</main>", encoding="utf-8")
    site = SiteConfig(name="Forge", theme="plain.html", root=tmp_path)
    assert load_theme(site) == "<main>{{CONTENT}}</main>"


def test_missing_theme_raises(tmp_path: Path) -> None:
    site = SiteConfig(name="Forge", theme="missing.html", root=tmp_path)
    with pytest.raises(ThemeNotFoundError, match="missing.html"):
        load_theme(site)
