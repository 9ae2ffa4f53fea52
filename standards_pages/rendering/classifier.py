"""Decide how each configuration section is rendered.

Classification is an ordered list of ``(predicate, strategy)`` pairs; the
first predicate that accepts a node decides its strategy and
:attr:`RenderStrategy.SUBSECTION` is the fallback. The order matters because
a single node can satisfy several predicates: a ``lint.rules`` table whose
children are all scalars is still a rules table, not a flat list.

Examples
--------
>>> classify("lint.rules", {"no-console": "error"})
<RenderStrategy.RULES_TABLE: 'rules_table'>
>>> classify("compilerOptions", {"strict": True})
<RenderStrategy.FLAT_LIST: 'flat_list'>
>>> format_value({"severity": "warn", "max": 500})
'{ severity: warn, max: 500 }'
"""

from __future__ import annotations

import collections.abc as cabc
import enum
import typing as typ

from standards_pages.rulesets.tree import ConfigNode, is_array, is_mapping


class RenderStrategy(enum.StrEnum):
    """How a mapping node is laid out."""

    RULES_TABLE = "rules_table"
    OPTIONS_TABLE = "options_table"
    FLAT_LIST = "flat_list"
    SUBSECTION = "subsection"


Predicate: typ.TypeAlias = cabc.Callable[[ConfigNode], bool]


def is_rules_section(node: ConfigNode) -> bool:
    """Return ``True`` for rule tables such as ``rules`` or ``lint.rules``."""
    return "rules" in node.key or node.key.endswith(".rules")


def is_require_section(node: ConfigNode) -> bool:
    """Return ``True`` for required-option tables such as ``tsc.require``."""
    return "require" in node.key or node.key.endswith(".require")


def is_flat_section(node: ConfigNode) -> bool:
    """Return ``True`` when every non-null child is a scalar or an array.

    An empty section is not flat; it renders as a bare subsection heading.
    """
    children = node.children()
    return bool(children) and not any(child.is_mapping for child in children)


CLASSIFICATION_ORDER: tuple[tuple[Predicate, RenderStrategy], ...] = (
    (is_rules_section, RenderStrategy.RULES_TABLE),
    (is_require_section, RenderStrategy.OPTIONS_TABLE),
    (is_flat_section, RenderStrategy.FLAT_LIST),
)


def classify_node(node: ConfigNode) -> RenderStrategy:
    """Return the render strategy for a mapping node."""
    for predicate, strategy in CLASSIFICATION_ORDER:
        if predicate(node):
            return strategy
    return RenderStrategy.SUBSECTION


def classify(key: str, value: cabc.Mapping[str, typ.Any]) -> RenderStrategy:
    """Return the render strategy for the mapping ``value`` stored under ``key``."""
    return classify_node(ConfigNode(key=key, value=value, path=(key,)))


def format_value(value: object) -> str:
    """Format a config value for a table cell or list entry.

    Scalars and array items are rendered as inline code. A mapping used as a
    value is summarized inline as ``{ key: value, ... }`` without walking any
    deeper; nested mappings inside that summary collapse to ``{...}``.
    Unexpected types fall back to ``str(value)``.
    """
    match value:
        case bool() | str() | int() | float():
            return f"`{_inline_text(value)}`"
        case _ if is_array(value):
            items = typ.cast("cabc.Sequence[object]", value)
            return ", ".join(f"`{_inline_text(item)}`" for item in items)
        case _ if is_mapping(value):
            return _summarize_mapping(typ.cast("cabc.Mapping[object, object]", value))
        case _:
            return str(value)


def _summarize_mapping(mapping: cabc.Mapping[object, object]) -> str:
    entries = ", ".join(
        f"{key}: {_inline_text(item)}"
        for key, item in mapping.items()
        if item is not None
    )
    return f"{{ {entries} }}" if entries else "{}"


def _inline_text(value: object) -> str:
    """Return the plain text of a value nested inside another value."""
    match value:
        case None:
            return "null"
        case bool():
            return "true" if value else "false"
        case str():
            return value
        case _ if is_array(value):
            items = typ.cast("cabc.Sequence[object]", value)
            return "[" + ", ".join(_inline_text(item) for item in items) + "]"
        case _ if is_mapping(value):
            return "{...}"
        case _:
            return str(value)


__all__ = [
    "CLASSIFICATION_ORDER",
    "RenderStrategy",
    "classify",
    "classify_node",
    "format_value",
    "is_flat_section",
    "is_require_section",
    "is_rules_section",
]
