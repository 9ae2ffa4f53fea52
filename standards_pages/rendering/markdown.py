"""Serialize render blocks as Markdown."""

from __future__ import annotations

import typing as typ

from .blocks import DefinitionList, Heading, RawLine, RenderBlock, Table


def to_markdown(blocks: typ.Iterable[RenderBlock]) -> str:
    """Return Markdown for ``blocks``, each followed by a blank line.

    Examples
    --------
    >>> from standards_pages.rendering.blocks import Heading, Table
    >>> print(to_markdown([Heading(2, "Rules"), Table(("Rule", "Config"), (("a", "`b`"),))]))
    ## Rules
    <BLANKLINE>
    | Rule | Config |
    |------|--------|
    | `a` | `b` |
    <BLANKLINE>
    """
    lines: list[str] = []
    for block in blocks:
        lines.extend(block_lines(block))
        lines.append("")
    return "\n".join(lines)


def block_lines(block: RenderBlock) -> list[str]:
    """Return the Markdown lines for a single block."""
    match block:
        case Heading(level=level, text=text):
            return [f"{'#' * level} {text}"]
        case Table(headers=headers, rows=rows):
            lines = [
                _table_row(headers),
                "|" + "|".join("-" * (len(header) + 2) for header in headers) + "|",
            ]
            lines.extend(_table_row((f"`{name}`", value)) for name, value in rows)
            return lines
        case DefinitionList(entries=entries):
            return [f"- **{label}**: {value}" for label, value in entries]
        case RawLine(text=text):
            return [text]
        case _:  # pragma: no cover - exhaustive over RenderBlock
            msg = f"Unsupported render block: {block!r}"
            raise TypeError(msg)


def _table_row(cells: typ.Iterable[str]) -> str:
    return "| " + " | ".join(_escape_cell(cell) for cell in cells) + " |"


def _escape_cell(text: str) -> str:
    """Escape pipes and flatten newlines so a value stays inside its cell."""
    return text.replace("|", "\\|").replace("\n", " ")


__all__ = ["block_lines", "to_markdown"]
