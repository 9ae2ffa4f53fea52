"""Load TOML rulesets into typed configuration trees."""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import tomllib
import typing as typ

from standards_pages._constants import RULESET_SUFFIX
from standards_pages.results import LoadResult

from .tree import ConfigNode

if typ.TYPE_CHECKING:
    from pathlib import Path


@dc.dataclass(frozen=True, slots=True)
class Ruleset:
    """A parsed ruleset file.

    Attributes
    ----------
    id : str
        Identifier derived from the file name (``python-production``).
    filename : str
        Source file name, including the ``.toml`` suffix.
    tree : ConfigNode
        Root node wrapping the parsed mapping.
    """

    id: str
    filename: str
    tree: ConfigNode


def load_config_tree(name: str, mapping: cabc.Mapping[str, typ.Any]) -> ConfigNode:
    """Wrap an already parsed mapping as the root of a configuration tree.

    Raises
    ------
    TypeError
        If ``mapping`` is not a mapping.
    """
    if not isinstance(mapping, cabc.Mapping):
        msg = f"Configuration '{name}' must be a mapping, got {type(mapping).__name__}."
        raise TypeError(msg)
    return ConfigNode.root(name, mapping)


def load_ruleset(path: Path) -> Ruleset:
    """Parse the TOML file at ``path`` into a :class:`Ruleset`.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    tomllib.TOMLDecodeError
        If the file is not valid TOML.
    """
    with path.open("rb") as handle:
        payload = tomllib.load(handle)
    ruleset_id = path.name.removesuffix(RULESET_SUFFIX)
    return Ruleset(
        id=ruleset_id,
        filename=path.name,
        tree=load_config_tree(ruleset_id, payload),
    )


def load_rulesets(directory: Path) -> list[LoadResult[Ruleset]]:
    """Load every ``*.toml`` file in ``directory`` in file-name order.

    A missing directory yields an empty list. Files that fail to parse are
    reported in their own :class:`LoadResult` without stopping the batch.
    """
    if not directory.is_dir():
        return []
    results: list[LoadResult[Ruleset]] = []
    for path in sorted(directory.glob(f"*{RULESET_SUFFIX}")):
        try:
            ruleset = load_ruleset(path)
        except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as exc:
            results.append(LoadResult(source=path, error=str(exc)))
            continue
        results.append(LoadResult(source=path, value=ruleset))
    return results


__all__ = ["Ruleset", "load_config_tree", "load_ruleset", "load_rulesets"]
