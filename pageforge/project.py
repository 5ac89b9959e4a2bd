"""Validate and scaffold pageforge project directories.

A project is a directory holding ``site.json``, a ``pages/`` tree with an
``index.md`` at its top, and optionally a ``themes/`` directory. The build
writes into ``out/`` next to them.

Example
-------
>>> from pathlib import Path
>>> from pageforge.project import init_project, validate_project
>>> init_project(Path("my-site"), "My Site")  # doctest: +SKIP
[PosixPath('my-site/site.json'), PosixPath('my-site/pages/index.md')]
>>> validate_project(Path("my-site"))  # doctest: +SKIP
[]
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from ._constants import (
    DEFAULT_THEME,
    INDEX_PAGE,
    PAGES_DIRNAME,
    SITE_CONFIG_FILENAME,
    THEMES_DIRNAME,
)

SCAFFOLD_TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
SCAFFOLD_FILES = {
    SITE_CONFIG_FILENAME: "site.json.jinja",
    f"{PAGES_DIRNAME}/{INDEX_PAGE}": "index.md.jinja",
}


def validate_project(root: Path) -> list[str]:
    """Return a diagnostic for every structural problem found under ``root``.

    An empty list means the project can be built.
    """
    problems: list[str] = []
    config_path = root / SITE_CONFIG_FILENAME
    if not config_path.is_file():
        problems.append(f"{SITE_CONFIG_FILENAME} does not exist")

    pages_dir = root / PAGES_DIRNAME
    if not pages_dir.is_dir():
        problems.append(f"Directory {PAGES_DIRNAME} not found")
    elif not (pages_dir / INDEX_PAGE).is_file():
        problems.append(f"No {INDEX_PAGE} in {PAGES_DIRNAME} directory")
    return problems


def init_project(
    target: Path, name: str, *, templates_dir: Path | None = None
) -> list[Path]:
    """Create a new project skeleton at ``target``.

    Parameters
    ----------
    target : Path
        Directory to create; must not exist yet.
    name : str
        Site name written into ``site.json`` and the starter page.
    templates_dir : Path, optional
        Directory containing the scaffold Jinja templates; defaults to the
        templates shipped with the package.

    Returns
    -------
    list[Path]
        Files written, in creation order.

    Raises
    ------
    FileExistsError
        If ``target`` already exists.
    """
    if target.exists():
        msg = f"Cannot initialize project: '{target}' already exists."
        raise FileExistsError(msg)

    env = Environment(
        loader=FileSystemLoader(str(templates_dir or SCAFFOLD_TEMPLATES_DIR)),
        autoescape=False,  # noqa: S701 - renders JSON and Markdown, not HTML
        keep_trailing_newline=True,
    )
    context = {"name": name, "theme": DEFAULT_THEME}

    (target / PAGES_DIRNAME).mkdir(parents=True)
    (target / THEMES_DIRNAME).mkdir()
    written: list[Path] = []
    for relative, template_name in SCAFFOLD_FILES.items():
        path = target / relative
        rendered = env.get_template(template_name).render(**context)
        path.write_text(rendered, encoding="utf-8")
        written.append(path)
    return written


__all__ = ["SCAFFOLD_TEMPLATES_DIR", "init_project", "validate_project"]
