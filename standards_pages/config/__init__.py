"""Load and validate the standards site configuration YAML.

This subpackage parses the project's ``standards.yaml`` file, applies
defaults for every missing option, and produces typed dataclasses
(:class:`SiteConfig`, :class:`PathsConfig`, etc.) that the site builder
consumes. The primary entry point is :func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from standards_pages.config import load_site_config
>>> site = load_site_config(Path("config/standards.yaml"))  # doctest: +SKIP
>>> site.paths.site_dir  # doctest: +SKIP
PosixPath('generated/site')
"""

from .loader import build_site_config, load_site_config
from .models import (
    LanguageConfig,
    PathsConfig,
    RulesetsConfig,
    SiteConfig,
    SiteConfigError,
    SiteSettings,
)

__all__ = [
    "LanguageConfig",
    "PathsConfig",
    "RulesetsConfig",
    "SiteConfig",
    "SiteConfigError",
    "SiteSettings",
    "build_site_config",
    "load_site_config",
]
