"""Cyclopts CLI entrypoint for generating the standards documentation site.

The ``standards`` console script defined here loads TOML rulesets and
guideline Markdown, renders them, and writes both the plain ruleset exports
and the Jekyll site. Typical usage involves running ``standards generate``
locally or in CI whenever a ruleset or guideline changes.

Examples
--------
Generate the site for the default configuration:

>>> from standards_pages.cli import main
>>> main()  # doctest: +SKIP

Regenerate into a custom directory:

>>> from standards_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import SiteConfig, load_site_config
from .guidelines import Guideline, load_guidelines
from .results import LoadResult, failed, successful
from .rulesets import Ruleset, load_rulesets
from .site_builder import RulesetExportBuilder, SiteBuilder

DEFAULT_CONFIG = Path("config/standards.yaml")

app = App(name="standards", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _resolve_config(config: Path, output_dir: Path | None) -> SiteConfig:
    site_config = load_site_config(config)
    if output_dir is not None:
        site_config = site_config.with_output_dir(output_dir)
    return site_config


def _report_failures(results: typ.Sequence[LoadResult[typ.Any]]) -> None:
    for result in failed(results):
        print(f"skipped {_format_path(result.source)}: {result.error}")


def _load_rulesets(site_config: SiteConfig) -> list[Ruleset]:
    results = load_rulesets(site_config.paths.rulesets_dir)
    _report_failures(results)
    return successful(results)


def _load_guidelines(site_config: SiteConfig) -> list[Guideline]:
    results = load_guidelines(site_config.paths.guidelines_dir)
    _report_failures(results)
    return successful(results)


@app.command(help="Generate the standards site and plain ruleset exports.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render every ruleset and guideline into the output directory.

    Parameters
    ----------
    config : Path, optional
        Path to the ``standards.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the output directory; the site is written to its ``site``
        subfolder.

    Returns
    -------
    None
        Writes rendered artifacts and prints one line per written file and
        per skipped source file.
    """
    site_config = _resolve_config(config, output_dir)
    rulesets = _load_rulesets(site_config)
    guidelines = _load_guidelines(site_config)
    for path in SiteBuilder(site_config).run(rulesets, guidelines):
        print(f"wrote {_format_path(path)}")


@app.command(help="Generate only the plain ruleset Markdown exports.")
def rulesets(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
) -> None:
    """Render each ruleset to ``<output_dir>/rulesets/<id>.md``."""
    site_config = _resolve_config(config, output_dir)
    loaded = _load_rulesets(site_config)
    if not loaded:
        print(f"no rulesets found in {_format_path(site_config.paths.rulesets_dir)}")
        return
    for path in RulesetExportBuilder(site_config).run(loaded):
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``standards`` command.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
