"""Build a static HTML site from a folder tree of Markdown pages.

This package exposes the CLI entry points used by the ``pageforge`` console
script to scaffold, validate, and build a site.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from pageforge import main
>>> main(["build"])  # doctest: +SKIP
>>> from pageforge import app
>>> callable(app)
True
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
