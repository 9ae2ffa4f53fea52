"""Classify configuration sections and render them into output blocks."""

from .blocks import DefinitionList, Heading, RawLine, RenderBlock, Table
from .classifier import RenderStrategy, classify, classify_node, format_value
from .markdown import to_markdown
from .tree import heading_level, render, render_section

__all__ = [
    "DefinitionList",
    "Heading",
    "RawLine",
    "RenderBlock",
    "RenderStrategy",
    "Table",
    "classify",
    "classify_node",
    "format_value",
    "heading_level",
    "render",
    "render_section",
    "to_markdown",
]
