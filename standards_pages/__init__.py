"""Utilities for generating the coding standards documentation site.

This package compiles TOML rulesets and guideline Markdown into a Jekyll
site. It exposes the CLI entry points used by ``standards generate``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from standards_pages import main
>>> main()  # doctest: +SKIP
>>> from standards_pages import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
