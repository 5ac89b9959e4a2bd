"""High-level orchestration for turning ``pages/`` into ``out/``.

:func:`render_page` runs the per-page pipeline (front matter, Markdown tree,
theme composition, HTML formatting) and :class:`SiteBuilder` walks the
project's pages tree, mirroring it into the output directory one file at a
time. Failures are file-local: a page that cannot be read, has malformed
front matter, or references a missing theme is reported and skipped while
the walk continues.

Example
-------
>>> from pathlib import Path
>>> from pageforge.config import load_site_config
>>> from pageforge.generator import SiteBuilder
>>> site = load_site_config(Path("site.json"))  # doctest: +SKIP
>>> report = SiteBuilder(site).run()  # doctest: +SKIP
>>> report.written  # doctest: +SKIP
[PosixPath('out/index.html'), ...]
"""

from __future__ import annotations

import dataclasses as dc
import shutil
import typing as typ

from bs4 import BeautifulSoup

from pageforge._constants import HTML_SUFFIX, MARKDOWN_SUFFIX
from pageforge.frontmatter import FrontMatterError, extract_front_matter, metadata_value
from pageforge.markdown_parser import parse_document

from .renderer import render_node
from .template import compose_page, load_theme

if typ.TYPE_CHECKING:
    from pathlib import Path

    from pageforge.config import SiteConfig

PAGE_ERRORS = (FrontMatterError, OSError, UnicodeDecodeError)


class BuildError(RuntimeError):
    """Raised when the pages tree cannot be enumerated."""


@dc.dataclass(slots=True)
class BuildReport:
    """Outcome of a site build.

    Attributes
    ----------
    written : list[Path]
        Generated HTML files in walk order.
    failures : list[tuple[Path, str]]
        Source files that were skipped and the reason for each.
    """

    written: list[Path] = dc.field(default_factory=list)
    failures: list[tuple[Path, str]] = dc.field(default_factory=list)

    @property
    def ok(self) -> bool:
        """Return True when every page was generated."""
        return not self.failures


def format_html(html: str) -> str:
    """Return ``html`` re-indented one element per line."""
    return BeautifulSoup(html, "html.parser").prettify()


def render_page(
    source_text: str, source_path: Path, output_path: Path, site: SiteConfig
) -> str:
    """Render one Markdown page into a complete themed HTML document.

    Parameters
    ----------
    source_text : str
        Page source, optionally opening with a front-matter block.
    source_path : Path
        Location of the source; its stem is the fallback page title.
    output_path : Path
        Destination of the generated file; navigation links are made relative
        to it.
    site : SiteConfig
        Site name, theme, and navigation entries.

    Returns
    -------
    str
        The formatted HTML document.

    Raises
    ------
    FrontMatterError
        If the front-matter block is malformed.
    ThemeNotFoundError
        If the configured theme template does not exist.
    """
    body, metadata = extract_front_matter(source_text)
    content = render_node(parse_document(body))
    title = metadata_value(metadata, "title", source_path.stem) or ""
    subtitle = metadata_value(metadata, "subtitle", "") or ""

    html = compose_page(
        load_theme(site),
        title=title,
        subtitle=subtitle,
        site_name=site.name,
        nav_elements=site.nav_elements,
        current_path=_site_relative(output_path, site.output_dir),
        content=content,
    )
    return format_html(html)


def _site_relative(output_path: Path, output_dir: Path) -> str:
    """Return ``output_path`` relative to the output root in POSIX form."""
    try:
        return output_path.relative_to(output_dir).as_posix()
    except ValueError:
        return output_path.as_posix()


class SiteBuilder:
    """Mirror a project's ``pages/`` tree into themed HTML under ``out/``."""

    def __init__(self, site: SiteConfig) -> None:
        """Initialize the builder for ``site``.

        Parameters
        ----------
        site : SiteConfig
            Loaded configuration; its ``root`` locates ``pages/`` and ``out/``.
        """
        self.site = site
        self.pages_dir = site.pages_dir
        self.output_dir = site.output_dir

    def run(self) -> BuildReport:
        """Clear the output directory and regenerate every page.

        Returns
        -------
        BuildReport
            Written files and per-page failures.

        Raises
        ------
        BuildError
            If the output directory cannot be cleared or the pages directory
            cannot be walked.
        """
        self._reset_output_dir()
        report = BuildReport()
        try:
            for directory, dirnames, filenames in self.pages_dir.walk(
                on_error=_raise_walk_error
            ):
                dirnames.sort()
                target_dir = self.output_dir / directory.relative_to(self.pages_dir)
                target_dir.mkdir(parents=True, exist_ok=True)
                for filename in sorted(filenames):
                    source = directory / filename
                    if source.suffix != MARKDOWN_SUFFIX:
                        continue
                    self._convert(source, target_dir / filename, report)
        except OSError as exc:
            msg = f"Failed to walk pages directory '{self.pages_dir}': {exc}"
            raise BuildError(msg) from exc
        return report

    def _reset_output_dir(self) -> None:
        try:
            if self.output_dir.exists():
                shutil.rmtree(self.output_dir)
            self.output_dir.mkdir(parents=True)
        except OSError as exc:
            msg = f"Failed to clear output directory '{self.output_dir}': {exc}"
            raise BuildError(msg) from exc

    def _convert(self, source: Path, target: Path, report: BuildReport) -> None:
        """Render ``source`` to ``target`` (with an HTML suffix), recording failures."""
        output_path = target.with_suffix(HTML_SUFFIX)
        try:
            html = render_page(
                source.read_text(encoding="utf-8"), source, output_path, self.site
            )
            output_path.write_text(html, encoding="utf-8")
        except PAGE_ERRORS as exc:
            report.failures.append((source, str(exc)))
            return
        report.written.append(output_path)


def _raise_walk_error(error: OSError) -> None:
    raise error


__all__ = [
    "BuildError",
    "BuildReport",
    "PAGE_ERRORS",
    "SiteBuilder",
    "format_html",
    "render_page",
]
