"""Walk a configuration tree and emit render blocks.

The renderer is a pure function of its input: it never mutates the tree and
returns a fresh tuple of frozen blocks, so rendering the same tree twice
yields equal results. Mapping insertion order is kept at every level.

Heading levels grow by one per nested subsection and stop at
:data:`~standards_pages._constants.MAX_HEADING_LEVEL`; deeper sections keep
nesting but reuse that level.

Example
-------
>>> blocks = render("eslint", {"rules": {"no-console": "error"}})
>>> blocks[0]
Heading(level=2, text='Rules')
>>> blocks[1].rows
(('no-console', '`error`'),)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from standards_pages._constants import MAX_HEADING_LEVEL, SECTION_START_DEPTH
from standards_pages.naming import section_title
from standards_pages.rulesets.tree import ConfigNode

from .blocks import (
    OPTIONS_TABLE_HEADERS,
    RULES_TABLE_HEADERS,
    DefinitionList,
    Heading,
    RenderBlock,
    Table,
)
from .classifier import RenderStrategy, classify_node, format_value


@dc.dataclass(frozen=True, slots=True)
class _RenderState:
    """Accumulator threaded through the recursive walk."""

    depth: int

    @property
    def heading_level(self) -> int:
        return heading_level(self.depth)

    def descend(self) -> _RenderState:
        return _RenderState(depth=self.depth + 1)


def heading_level(depth: int) -> int:
    """Return the heading level used at ``depth``, capped at the maximum."""
    return min(depth, MAX_HEADING_LEVEL)


def render(
    root_key: str,
    root_node: cabc.Mapping[str, typ.Any] | ConfigNode,
    initial_depth: int = SECTION_START_DEPTH,
) -> tuple[RenderBlock, ...]:
    """Render the body of a configuration unit.

    Parameters
    ----------
    root_key : str
        Name of the configuration unit; used only to identify the root node.
    root_node : Mapping or ConfigNode
        Parsed configuration mapping, or a node already wrapping it.
    initial_depth : int, optional
        Depth of the root's direct children. Defaults to ``2`` so the page
        title can use level one.

    Returns
    -------
    tuple[RenderBlock, ...]
        Blocks in document order. The root itself produces no heading.
    """
    node = (
        root_node
        if isinstance(root_node, ConfigNode)
        else ConfigNode.root(root_key, root_node)
    )
    return tuple(_render_children(node, _RenderState(depth=initial_depth)))


def render_section(node: ConfigNode, depth: int) -> list[RenderBlock]:
    """Render a single mapping node, heading included, at ``depth``."""
    return _render_section(node, _RenderState(depth=depth))


def _render_children(
    node: ConfigNode, state: _RenderState
) -> cabc.Iterator[RenderBlock]:
    """Yield blocks for each child, batching consecutive scalars into lists.

    A run of scalars that follows a nested section is headed with the owning
    section's title at the sibling level, so it does not read as part of the
    section above it.
    """
    pending: list[tuple[str, str]] = []
    after_section = False

    def flush() -> cabc.Iterator[RenderBlock]:
        if after_section:
            yield Heading(level=state.heading_level, text=section_title(node.key))
        yield DefinitionList(entries=tuple(pending))

    for child in node.children():
        if not child.is_mapping:
            pending.append((child.key, format_value(child.value)))
            continue
        if pending:
            yield from flush()
            pending = []
        yield from _render_section(child, state)
        after_section = True
    if pending:
        yield from flush()


def _render_section(node: ConfigNode, state: _RenderState) -> list[RenderBlock]:
    blocks: list[RenderBlock] = [
        Heading(level=state.heading_level, text=section_title(node.key))
    ]
    match classify_node(node):
        case RenderStrategy.RULES_TABLE:
            blocks.append(_table(node, RULES_TABLE_HEADERS))
        case RenderStrategy.OPTIONS_TABLE:
            blocks.append(_table(node, OPTIONS_TABLE_HEADERS))
        case RenderStrategy.FLAT_LIST:
            blocks.append(
                DefinitionList(
                    entries=tuple(
                        (child.key, format_value(child.value))
                        for child in node.children()
                    )
                )
            )
        case RenderStrategy.SUBSECTION:
            blocks.extend(_render_children(node, state.descend()))
    return blocks


def _table(node: ConfigNode, headers: tuple[str, str]) -> Table:
    rows = tuple((child.key, format_value(child.value)) for child in node.children())
    return Table(headers=headers, rows=rows)


__all__ = ["heading_level", "render", "render_section"]
