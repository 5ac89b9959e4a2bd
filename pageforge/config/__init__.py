"""Load and validate the ``site.json`` configuration for pageforge builds.

This subpackage parses the project's ``site.json`` file and produces typed
dataclasses (:class:`SiteConfig`, :class:`NavElementConfig`) that the page
generator consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from pageforge.config import load_site_config
>>> site = load_site_config(Path("site.json"))  # doctest: +SKIP
>>> site.output_dir  # doctest: +SKIP
PosixPath('out')
"""

from .loader import load_site_config
from .models import NavElementConfig, SiteConfig, SiteConfigError

__all__ = [
    "NavElementConfig",
    "SiteConfig",
    "SiteConfigError",
    "load_site_config",
]
