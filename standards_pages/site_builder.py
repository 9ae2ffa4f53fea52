"""Write the standards site and plain ruleset exports to disk.

The builders take already loaded rulesets and guidelines, render every page
through :class:`~standards_pages.pages.PageRenderer`, and write UTF-8 files.
Every run rewrites the full output; nothing is regenerated incrementally.

Typical usage pairs the loaders with a site config:

>>> from pathlib import Path
>>> from standards_pages.config import load_site_config
>>> from standards_pages.guidelines import load_guidelines
>>> from standards_pages.results import successful
>>> from standards_pages.rulesets import load_rulesets
>>> config = load_site_config(Path("config/standards.yaml"))  # doctest: +SKIP
>>> rulesets = successful(load_rulesets(config.paths.rulesets_dir))  # doctest: +SKIP
>>> guidelines = successful(load_guidelines(config.paths.guidelines_dir))  # doctest: +SKIP
>>> SiteBuilder(config).run(rulesets, guidelines)  # doctest: +SKIP
[PosixPath('generated/rulesets/python-production.md'), ...]
"""

from __future__ import annotations

import typing as typ

from .pages import PageRenderer
from .site_index import build_site_index

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .config import SiteConfig
    from .guidelines import Guideline
    from .rulesets import Ruleset
    from .site_index import SiteIndex


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


class RulesetExportBuilder:
    """Write plain Markdown renderings of each ruleset for programmatic use."""

    def __init__(
        self, site_config: SiteConfig, *, renderer: PageRenderer | None = None
    ) -> None:
        self.site_config = site_config
        self.renderer = renderer or PageRenderer(site_config)

    def run(self, rulesets: cabc.Iterable[Ruleset]) -> list[Path]:
        """Write ``<output_dir>/rulesets/<id>.md`` for every ruleset."""
        out_dir = self.site_config.paths.rulesets_output_dir
        return [
            _write(out_dir / f"{ruleset.id}.md", self.renderer.ruleset_page(ruleset))
            for ruleset in rulesets
        ]


class SiteBuilder:
    """Render the full Jekyll site and the plain ruleset exports."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the builder.

        Parameters
        ----------
        site_config : SiteConfig
            Resolved configuration providing output locations, site copy, and
            ruleset listing options.
        templates_dir : Path, optional
            Directory containing the Jinja templates; defaults to the package
            templates.
        """
        self.site_config = site_config
        self.renderer = PageRenderer(site_config, templates_dir=templates_dir)
        self.exports = RulesetExportBuilder(site_config, renderer=self.renderer)

    def build_index(
        self,
        rulesets: cabc.Sequence[Ruleset],
        guidelines: cabc.Sequence[Guideline],
    ) -> SiteIndex:
        """Aggregate the navigation structures for this build."""
        options = self.site_config.rulesets
        return build_site_index(
            guidelines,
            [ruleset.id for ruleset in rulesets],
            primary_prefix=options.primary.prefix,
            secondary_prefix=options.secondary.prefix,
            separator=options.separator,
        )

    def run(
        self,
        rulesets: cabc.Sequence[Ruleset],
        guidelines: cabc.Sequence[Guideline],
    ) -> list[Path]:
        """Write every output file and return their paths in write order.

        Parameters
        ----------
        rulesets : Sequence[Ruleset]
            Successfully loaded rulesets, in discovery order.
        guidelines : Sequence[Guideline]
            Successfully loaded guidelines, in discovery order.

        Returns
        -------
        list[Path]
            Plain ruleset exports first, then guideline pages, ruleset pages,
            index pages, and the theme payloads.

        Notes
        -----
        Empty inputs are valid and still produce the index pages and theme
        files. Filesystem errors propagate to the caller.
        """
        index = self.build_index(rulesets, guidelines)
        site_dir = self.site_config.paths.site_dir
        written = self.exports.run(rulesets)

        for guideline in index.by_priority:
            written.append(
                _write(
                    site_dir / "guidelines" / f"{guideline.id}.md",
                    self.renderer.guideline_page(guideline),
                )
            )
        for ruleset in rulesets:
            written.append(
                _write(
                    site_dir / "rulesets" / f"{ruleset.id}.md",
                    self.renderer.ruleset_page(ruleset, for_site=True),
                )
            )

        pages: list[tuple[Path, str]] = [
            (site_dir / "index.md", self.renderer.home_page(index)),
            (site_dir / "guidelines" / "index.md", self.renderer.guidelines_index(index)),
            (site_dir / "rulesets" / "index.md", self.renderer.rulesets_index(index)),
            (site_dir / "_config.yml", self.renderer.jekyll_config()),
            (site_dir / "_includes" / "head_custom.html", self.renderer.head_custom()),
        ]
        written.extend(_write(path, text) for path, text in pages)
        return written


__all__ = ["RulesetExportBuilder", "SiteBuilder"]
