"""Cyclopts CLI entrypoint for scaffolding, checking, and building sites.

The ``pageforge`` console script defined here creates new projects, validates
an existing project layout, and renders every Markdown file under ``pages/``
into themed HTML under ``out/``. Every option may also be supplied through a
``PAGEFORGE_``-prefixed environment variable (for example ``PAGEFORGE_ROOT``).

Examples
--------
Build the project in the current directory:

>>> from pageforge.cli import main
>>> main(["build"])  # doctest: +SKIP

Scaffold a project into a custom directory:

>>> from pageforge.cli import app
>>> app(["init", "My Site", "--directory", "my-site"])  # doctest: +SKIP
"""

from __future__ import annotations

import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml.error import YAMLError

from ._constants import SITE_CONFIG_FILENAME
from .config import SiteConfig, SiteConfigError, load_site_config
from .generator import BuildError, SiteBuilder
from .project import init_project, validate_project

DEFAULT_ROOT = Path()

app = App(name="pageforge", config=cyclopts.config.Env("PAGEFORGE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _report_errors(messages: typ.Iterable[str]) -> None:
    for message in messages:
        print(f"error: {message}", file=sys.stderr)


def _load_project(root: Path) -> tuple[SiteConfig | None, list[str]]:
    """Validate the layout under ``root`` and load its site configuration.

    Returns the configuration (``None`` when it could not be loaded) and every
    problem found.
    """
    problems = validate_project(root)
    config_path = root / SITE_CONFIG_FILENAME
    if not config_path.is_file():
        return None, problems
    try:
        site = load_site_config(config_path)
    except (SiteConfigError, YAMLError) as exc:
        problems.append(f"{SITE_CONFIG_FILENAME} is invalid: {exc}")
        return None, problems
    return site, problems


@app.command(help="Create a new project with a starter page and site.json.")
def init(
    name: typ.Annotated[str, Parameter(help="Site name")],
    *,
    directory: typ.Annotated[
        Path | None,
        Parameter(help="Directory to create; defaults to the site name"),
    ] = None,
) -> None:
    """Scaffold a new project.

    Parameters
    ----------
    name : str
        Site name written into ``site.json`` and the starter page.
    directory : Path or None, optional
        Target directory; when ``None`` (default) a directory named after the
        site is created in the working directory.

    Raises
    ------
    SystemExit
        With status 1 when the target directory already exists.
    """
    target = directory or Path(name)
    try:
        written = init_project(target, name)
    except FileExistsError as exc:
        _report_errors([str(exc)])
        raise SystemExit(1) from exc
    for path in written:
        print(f"wrote {_format_path(path)}")


@app.command(help="Validate the project layout and site configuration.")
def check(
    *,
    root: typ.Annotated[Path, Parameter(help="Project directory")] = DEFAULT_ROOT,
) -> None:
    """Report every problem that would prevent a build.

    Parameters
    ----------
    root : Path, optional
        Project directory containing ``site.json`` and ``pages/``.

    Raises
    ------
    SystemExit
        With status 1 when any problem is found.
    """
    _site, problems = _load_project(root)
    if problems:
        _report_errors(problems)
        raise SystemExit(1)
    print("Project is valid")


@app.command(help="Render every page under pages/ into out/.")
def build(
    *,
    root: typ.Annotated[Path, Parameter(help="Project directory")] = DEFAULT_ROOT,
) -> None:
    """Build the site, continuing past pages that fail to render.

    Parameters
    ----------
    root : Path, optional
        Project directory containing ``site.json`` and ``pages/``.

    Raises
    ------
    SystemExit
        With status 1 when the project is invalid, the pages tree cannot be
        walked, or any page failed to render.
    """
    site, problems = _load_project(root)
    if site is None or problems:
        _report_errors(problems)
        raise SystemExit(1)

    print("Building project...")
    try:
        report = SiteBuilder(site).run()
    except BuildError as exc:
        _report_errors([str(exc)])
        raise SystemExit(1) from exc

    for path in report.written:
        print(f"wrote {_format_path(path)}")
    _report_errors(
        f"{_format_path(source)}: {message}" for source, message in report.failures
    )
    if not report.ok:
        print(
            f"Built {len(report.written)} pages; "
            f"{len(report.failures)} failed, see errors above"
        )
        raise SystemExit(1)
    print(f"Project successfully built, see {_format_path(site.output_dir)}/")


def main(tokens: list[str] | None = None) -> None:
    """Invoke the Cyclopts application that powers the ``pageforge`` command.

    Parameters
    ----------
    tokens : list[str] or None, optional
        Arguments to parse instead of ``sys.argv[1:]``.

    Examples
    --------
    >>> main(["check"])  # doctest: +SKIP
    """
    app(tokens)


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
