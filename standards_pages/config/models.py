"""Typed dataclasses describing the standards site configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class SiteSettings:
    """Site-wide copy and theme options written into pages and ``_config.yml``."""

    title: str = "Palindrom Standards"
    organization: str = "Palindrom"
    description: str = "Composable coding standards and guidelines"
    tagline: str = "Composable coding standards and guidelines for Palindrom projects."
    repo_url: str | None = "https://github.com/palindrom-ai/standards"
    footer: str = "Palindrom Standards"
    color_scheme: str = "dark"
    regenerate_command: str = "standards generate"


@dc.dataclass(slots=True)
class PathsConfig:
    """Input and output locations."""

    rulesets_dir: Path = Path("rulesets")
    guidelines_dir: Path = Path("guidelines")
    output_dir: Path = Path("generated")
    site_dir: Path = Path("generated/site")

    @property
    def rulesets_output_dir(self) -> Path:
        """Folder receiving the plain ruleset exports."""
        return self.output_dir / "rulesets"


@dc.dataclass(slots=True)
class LanguageConfig:
    """A language listing on the rulesets index."""

    prefix: str
    label: str


@dc.dataclass(slots=True)
class RulesetsConfig:
    """How ruleset identifiers are split and listed."""

    separator: str = "-"
    primary: LanguageConfig = dc.field(
        default_factory=lambda: LanguageConfig(prefix="typescript", label="TypeScript")
    )
    secondary: LanguageConfig = dc.field(
        default_factory=lambda: LanguageConfig(prefix="python", label="Python")
    )
    tiers: dict[str, str] = dc.field(
        default_factory=lambda: {
            "production": "Strictest settings for production code",
            "internal": "Moderate settings for internal tools",
            "prototype": "Relaxed settings for rapid prototyping",
        }
    )


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved configuration for one site build."""

    site: SiteSettings = dc.field(default_factory=SiteSettings)
    paths: PathsConfig = dc.field(default_factory=PathsConfig)
    rulesets: RulesetsConfig = dc.field(default_factory=RulesetsConfig)

    def with_output_dir(self, output_dir: Path) -> SiteConfig:
        """Return a copy writing to ``output_dir`` (site folder nested inside)."""
        paths = dc.replace(
            self.paths, output_dir=output_dir, site_dir=output_dir / "site"
        )
        return dc.replace(self, paths=paths)


__all__ = [
    "LanguageConfig",
    "PathsConfig",
    "RulesetsConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
]
