"""Format-neutral output blocks produced by the tree renderer."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

RULES_TABLE_HEADERS = ("Rule", "Config")
OPTIONS_TABLE_HEADERS = ("Option", "Value")


@dc.dataclass(frozen=True, slots=True)
class Heading:
    """Section heading at ``level`` (1 is the page title)."""

    level: int
    text: str


@dc.dataclass(frozen=True, slots=True)
class Table:
    """Two-column table of ``(name, formatted value)`` rows.

    Attributes
    ----------
    headers : tuple[str, str]
        Column titles, e.g. ``("Rule", "Config")``.
    rows : tuple[tuple[str, str], ...]
        Rows in source order. The first cell is the raw child key, the second
        is already formatted by :func:`format_value`.
    """

    headers: tuple[str, str]
    rows: tuple[tuple[str, str], ...] = ()


@dc.dataclass(frozen=True, slots=True)
class DefinitionList:
    """Label/value entries rendered as a bullet list."""

    entries: tuple[tuple[str, str], ...] = ()


@dc.dataclass(frozen=True, slots=True)
class RawLine:
    """Text emitted verbatim."""

    text: str


RenderBlock: typ.TypeAlias = Heading | Table | DefinitionList | RawLine


__all__ = [
    "OPTIONS_TABLE_HEADERS",
    "RULES_TABLE_HEADERS",
    "DefinitionList",
    "Heading",
    "RawLine",
    "RenderBlock",
    "Table",
]
