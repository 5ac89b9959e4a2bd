"""Load ``site.json`` into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import NAV_ELEMENTS_KEY, _build_nav_elements, _optional_str, _require_str
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the site configuration describing name, theme, and navigation.

    ``site.json`` is parsed with a YAML 1.2 loader, which accepts JSON as-is.

    Parameters
    ----------
    path : Path
        Filesystem path to the configuration file (normally
        ``<project>/site.json``).

    Returns
    -------
    SiteConfig
        Parsed configuration whose ``root`` is the directory holding ``path``.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    SiteConfigError
        If the top-level structure is not a mapping or a required field is
        missing or malformed.
    YAMLError
        If the content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from pageforge.config import load_site_config
    >>> config = load_site_config(Path("site.json"))  # doctest: +SKIP
    >>> [nav.title for nav in config.nav_elements]  # doctest: +SKIP
    ['Home', 'Blog']
    """
    if not path.is_file():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle)
    if not isinstance(loaded, dict):
        msg = "Top-level site configuration must be a mapping."
        raise SiteConfigError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    name = _require_str(raw, "name", "Site configuration")
    theme = raw.get("theme")
    if theme is not None and not isinstance(theme, str):
        msg = "Site configuration 'theme' must be a string."
        raise SiteConfigError(msg)

    return SiteConfig(
        name=name,
        theme=_optional_str(theme) or "",
        nav_elements=_build_nav_elements(raw.get(NAV_ELEMENTS_KEY)),
        root=path.parent,
    )


__all__ = ["load_site_config"]
