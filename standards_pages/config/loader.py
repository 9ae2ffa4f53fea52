"""Load the site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ

from ruamel.yaml import YAML

from .helpers import (
    _build_language,
    _build_tiers,
    _optional_str,
    _path,
    _section,
    _string,
)
from .models import (
    PathsConfig,
    RulesetsConfig,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing inputs, outputs, and site copy.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/standards.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration; every option that is absent takes its default.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section or option has the wrong shape.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from standards_pages.config import load_site_config
    >>> config = load_site_config(Path("config/standards.yaml"))  # doctest: +SKIP
    >>> config.rulesets.primary.prefix  # doctest: +SKIP
    'typescript'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)
    return build_site_config(raw)


def build_site_config(raw: cabc.Mapping[str, typ.Any]) -> SiteConfig:
    """Build a :class:`SiteConfig` from an already parsed mapping."""
    return SiteConfig(
        site=_build_site_settings(_section(raw, "site")),
        paths=_build_paths(_section(raw, "paths")),
        rulesets=_build_rulesets(_section(raw, "rulesets")),
    )


def _build_site_settings(payload: cabc.Mapping[str, typ.Any]) -> SiteSettings:
    base = SiteSettings()
    repo_url = (
        _optional_str(payload["repo_url"]) if "repo_url" in payload else base.repo_url
    )
    return SiteSettings(
        title=_string(payload, "title", base.title, section="site"),
        organization=_string(
            payload, "organization", base.organization, section="site"
        ),
        description=_string(payload, "description", base.description, section="site"),
        tagline=_string(payload, "tagline", base.tagline, section="site"),
        repo_url=repo_url,
        footer=_string(payload, "footer", base.footer, section="site"),
        color_scheme=_string(payload, "color_scheme", base.color_scheme, section="site"),
        regenerate_command=_string(
            payload, "regenerate_command", base.regenerate_command, section="site"
        ),
    )


def _build_paths(payload: cabc.Mapping[str, typ.Any]) -> PathsConfig:
    base = PathsConfig()
    output_dir = _path(payload, "output_dir", base.output_dir)
    return PathsConfig(
        rulesets_dir=_path(payload, "rulesets_dir", base.rulesets_dir),
        guidelines_dir=_path(payload, "guidelines_dir", base.guidelines_dir),
        output_dir=output_dir,
        site_dir=_path(payload, "site_dir", output_dir / "site"),
    )


def _build_rulesets(payload: cabc.Mapping[str, typ.Any]) -> RulesetsConfig:
    base = RulesetsConfig()
    separator = payload.get("separator", base.separator)
    if not isinstance(separator, str) or not separator:
        msg = "Option 'rulesets.separator' must be a non-empty string."
        raise SiteConfigError(msg)
    return RulesetsConfig(
        separator=separator,
        primary=_build_language(payload.get("primary"), base.primary, name="primary"),
        secondary=_build_language(
            payload.get("secondary"), base.secondary, name="secondary"
        ),
        tiers=_build_tiers(payload.get("tiers"), base.tiers),
    )


__all__ = ["build_site_config", "load_site_config"]
