"""Render site pages from rulesets, guidelines, and the site index.

:class:`PageRenderer` owns the Jinja environment and turns already loaded
data into page text. It performs no filesystem writes, which keeps every
page a pure function of its inputs: no timestamps are embedded, so two runs
over the same sources produce identical text.

Example
-------
>>> from standards_pages.config import SiteConfig
>>> from standards_pages.rulesets import load_config_tree, Ruleset
>>> tree = load_config_tree("python-production", {"lint": {"select": ["E", "F"]}})
>>> ruleset = Ruleset(id="python-production", filename="python-production.toml", tree=tree)
>>> text = PageRenderer(SiteConfig()).ruleset_page(ruleset)
>>> "# Python Production" in text
True
"""

from __future__ import annotations

import json
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from ._constants import GENERATED_BANNER, REGENERATE_BANNER, RULESET_BANNER
from .naming import title_case
from .rendering import render, to_markdown
from .site_index import split_identifier

if typ.TYPE_CHECKING:
    from .config import SiteConfig
    from .guidelines import Guideline
    from .rulesets import Ruleset
    from .site_index import SiteIndex


class PageRenderer:
    """Render the Markdown and YAML payloads of the standards site."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the renderer and its Jinja environment.

        Parameters
        ----------
        site_config : SiteConfig
            Resolved configuration providing site copy and ruleset listing
            options.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``standards_pages/templates`` directory when ``None``.
        """
        self.site_config = site_config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.env.filters["yaml_quote"] = _yaml_quote
        self.env.filters["cell"] = _table_cell
        self.env.filters["identifier_title"] = self.identifier_title
        self.env.globals["language_label"] = self.language_label
        self.env.globals["tier_label"] = self.tier_label

    def identifier_title(self, identifier: str) -> str:
        """Return the display title for a ruleset id or category."""
        separators = "-" + self.site_config.rulesets.separator
        return title_case(identifier, separators="".join(dict.fromkeys(separators)))

    def language_label(self, ruleset_id: str) -> str:
        """Return the language column for ``ruleset_id``.

        Configured languages use their label; other prefixes are title-cased.
        """
        rulesets = self.site_config.rulesets
        prefix, _tier = split_identifier(ruleset_id, rulesets.separator)
        for language in (rulesets.primary, rulesets.secondary):
            if prefix == language.prefix:
                return language.label
        return title_case(prefix)

    def tier_label(self, ruleset_id: str) -> str:
        """Return the tier column for ``ruleset_id``, empty without a separator."""
        _prefix, tier = split_identifier(ruleset_id, self.site_config.rulesets.separator)
        return self.identifier_title(tier) if tier else ""

    def ruleset_page(self, ruleset: Ruleset, *, for_site: bool = False) -> str:
        """Render a ruleset as Markdown.

        Parameters
        ----------
        ruleset : Ruleset
            Loaded ruleset whose tree is classified and rendered.
        for_site : bool, optional
            Prepend Jekyll front matter placing the page under ``Rulesets``.
        """
        body = to_markdown(render(ruleset.id, ruleset.tree)).rstrip("\n")
        context = {
            "for_site": for_site,
            "title": self.identifier_title(ruleset.id),
            "banners": {
                "generated": GENERATED_BANNER,
                "ruleset": RULESET_BANNER.format(filename=ruleset.filename),
                "regenerate": REGENERATE_BANNER.format(
                    command=self.site_config.site.regenerate_command
                ),
            },
            "body": body,
        }
        return self._render("ruleset_page.md.jinja", context)

    def guideline_page(self, guideline: Guideline) -> str:
        """Render a guideline page: front matter followed by the untouched body."""
        template = self.env.get_template("guideline_page.md.jinja")
        return template.render(guideline=guideline)

    def home_page(self, index: SiteIndex) -> str:
        """Render the site landing page with guideline and ruleset overviews."""
        return self._render(
            "home_page.md.jinja", {"site": self.site_config.site, "index": index}
        )

    def guidelines_index(self, index: SiteIndex) -> str:
        """Render the guidelines index grouped by category."""
        return self._render(
            "guidelines_index.md.jinja", {"site": self.site_config.site, "index": index}
        )

    def rulesets_index(self, index: SiteIndex) -> str:
        """Render the rulesets index with tier notes and language listings."""
        rulesets = self.site_config.rulesets
        context = {
            "tiers": rulesets.tiers,
            "listings": [
                (rulesets.primary, index.primary),
                (rulesets.secondary, index.secondary),
            ],
        }
        return self._render("rulesets_index.md.jinja", context)

    def jekyll_config(self) -> str:
        """Render the Jekyll ``_config.yml`` payload."""
        return self._render("jekyll_config.yml.jinja", {"site": self.site_config.site})

    def head_custom(self) -> str:
        """Render the ``_includes/head_custom.html`` theme payload."""
        return self._render("head_custom.html.jinja", {})

    def _render(self, template_name: str, context: dict[str, typ.Any]) -> str:
        text = self.env.get_template(template_name).render(**context)
        if not text.endswith("\n"):
            text += "\n"
        return text


def _yaml_quote(value: object) -> str:
    """Quote ``value`` as a double-quoted YAML scalar."""
    return json.dumps(str(value), ensure_ascii=False)


def _table_cell(value: object) -> str:
    """Escape pipes and newlines in a Markdown table cell."""
    return str(value).replace("|", "\\|").replace("\n", " ")


__all__ = ["PageRenderer"]
