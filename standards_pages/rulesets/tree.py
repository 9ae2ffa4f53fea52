"""Typed view over a parsed configuration tree.

The TOML parser hands back plain dictionaries. :class:`ConfigNode` wraps one
entry of that mapping together with its key path so the classifier and
renderer can reason about shape without re-sniffing raw values everywhere.
Wrapping never copies or mutates the underlying data.

Example
-------
>>> node = ConfigNode.root("eslint", {"rules": {"no-console": "error"}, "x": None})
>>> [child.key for child in node.children()]
['rules']
>>> node.children()[0].path
('rules',)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ


def is_mapping(value: object) -> bool:
    """Return ``True`` when ``value`` is a walkable mapping node."""
    return isinstance(value, cabc.Mapping)


def is_array(value: object) -> bool:
    """Return ``True`` for list-like values (strings and bytes excluded)."""
    return isinstance(value, cabc.Sequence) and not isinstance(
        value, (str, bytes, bytearray)
    )


@dc.dataclass(frozen=True, slots=True)
class ConfigNode:
    """One node of a configuration tree.

    Attributes
    ----------
    key : str
        Key of this node within its parent mapping.
    value : object
        Raw value: a scalar, an array, a nested mapping, or (for malformed
        input) anything else.
    path : tuple[str, ...]
        Keys from the document root down to and including ``key``. The root
        node has an empty path.
    """

    key: str
    value: object
    path: tuple[str, ...] = ()

    @classmethod
    def root(cls, name: str, value: object) -> ConfigNode:
        """Return the root node for the configuration unit called ``name``."""
        return cls(key=name, value=value, path=())

    @property
    def is_mapping(self) -> bool:
        """Return ``True`` when this node holds a nested mapping."""
        return is_mapping(self.value)

    def children(self) -> list[ConfigNode]:
        """Return the non-null children in insertion order.

        Non-mapping nodes have no children.
        """
        if not isinstance(self.value, cabc.Mapping):
            return []
        mapping = typ.cast("cabc.Mapping[object, object]", self.value)
        return [
            ConfigNode(key=str(key), value=value, path=(*self.path, str(key)))
            for key, value in mapping.items()
            if value is not None
        ]

    def dotted_path(self) -> str:
        """Return the node path joined with dots, for diagnostics."""
        return ".".join(self.path) or self.key


__all__ = [
    "ConfigNode",
    "is_array",
    "is_mapping",
]
