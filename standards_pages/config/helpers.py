"""Utility helpers shared by the site configuration loader."""

from __future__ import annotations

import collections.abc as cabc
import typing as typ
from pathlib import Path

from .models import LanguageConfig, SiteConfigError


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _section(raw: cabc.Mapping[str, typ.Any], name: str) -> cabc.Mapping[str, typ.Any]:
    """Return the mapping stored under ``name``, treating absence as empty."""
    value = raw.get(name)
    if value is None:
        return {}
    if not isinstance(value, cabc.Mapping):
        msg = f"Configuration section '{name}' must be a mapping."
        raise SiteConfigError(msg)
    return value


def _string(
    payload: cabc.Mapping[str, typ.Any], key: str, default: str, *, section: str
) -> str:
    """Return a non-empty string option, falling back to ``default``."""
    if key not in payload:
        return default
    text = _optional_str(payload[key])
    if text is None:
        msg = f"Option '{section}.{key}' must not be empty."
        raise SiteConfigError(msg)
    return text


def _path(payload: cabc.Mapping[str, typ.Any], key: str, default: Path) -> Path:
    """Return a path option, falling back to ``default``."""
    text = _optional_str(payload.get(key))
    return Path(text) if text else default


def _build_language(
    payload: object, default: LanguageConfig, *, name: str
) -> LanguageConfig:
    """Build a LanguageConfig from a mapping or a bare prefix string."""
    match payload:
        case None:
            return default
        case str() as prefix if prefix.strip():
            return LanguageConfig(prefix=prefix.strip(), label=prefix.strip().title())
        case cabc.Mapping():
            prefix = _optional_str(payload.get("prefix")) or default.prefix
            label = _optional_str(payload.get("label")) or prefix.title()
            return LanguageConfig(prefix=prefix, label=label)
    msg = f"Option 'rulesets.{name}' must be a mapping or a prefix string."
    raise SiteConfigError(msg)


def _build_tiers(payload: object, default: dict[str, str]) -> dict[str, str]:
    """Return tier descriptions keyed by tier name, keeping file order."""
    if payload is None:
        return dict(default)
    if not isinstance(payload, cabc.Mapping):
        msg = "Option 'rulesets.tiers' must be a mapping of tier to description."
        raise SiteConfigError(msg)
    return {str(tier): str(description or "").strip() for tier, description in payload.items()}


__all__ = [
    "_build_language",
    "_build_tiers",
    "_optional_str",
    "_path",
    "_section",
    "_string",
]
