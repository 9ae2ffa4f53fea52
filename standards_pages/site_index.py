"""Aggregate guidelines and ruleset identifiers into navigation indices.

:func:`build_site_index` is computed once per run from the full set of loaded
guidelines and ruleset identifiers. The result is read-only and only used to
render the home page and the two section index pages.

Example
-------
>>> index = build_site_index(
...     [], ["python-production", "typescript-internal", "shared"],
...     primary_prefix="typescript", secondary_prefix="python",
... )
>>> index.primary, index.secondary
(('typescript-internal',), ('python-production',))
>>> index.by_prefix["shared"]
('shared',)
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from .guidelines import Guideline

DEFAULT_SEPARATOR = "-"


@dc.dataclass(frozen=True, slots=True)
class SiteIndex:
    """Navigation structures derived from every guideline and ruleset.

    Attributes
    ----------
    by_priority : tuple[Guideline, ...]
        Guidelines sorted by ascending priority; ties keep discovery order.
    by_category : Mapping[str, tuple[Guideline, ...]]
        Guidelines grouped by category, categories in first-seen order over
        ``by_priority``.
    ruleset_ids : tuple[str, ...]
        All ruleset identifiers, sorted.
    by_prefix : Mapping[str, tuple[str, ...]]
        Sorted identifiers grouped by the text before the first separator.
    primary : tuple[str, ...]
        Sorted identifiers starting with the primary language prefix.
    secondary : tuple[str, ...]
        Sorted identifiers starting with the secondary language prefix.
    """

    by_priority: tuple[Guideline, ...] = ()
    by_category: cabc.Mapping[str, tuple[Guideline, ...]] = dc.field(
        default_factory=dict
    )
    ruleset_ids: tuple[str, ...] = ()
    by_prefix: cabc.Mapping[str, tuple[str, ...]] = dc.field(default_factory=dict)
    primary: tuple[str, ...] = ()
    secondary: tuple[str, ...] = ()


def sort_by_priority(guidelines: cabc.Iterable[Guideline]) -> tuple[Guideline, ...]:
    """Return guidelines in ascending priority; equal priorities keep their order."""
    return tuple(sorted(guidelines, key=lambda guideline: guideline.priority))


def group_by_category(
    guidelines: cabc.Iterable[Guideline],
) -> dict[str, tuple[Guideline, ...]]:
    """Group guidelines by exact category, keeping first-seen category order."""
    groups: dict[str, list[Guideline]] = {}
    for guideline in guidelines:
        groups.setdefault(guideline.category, []).append(guideline)
    return {category: tuple(items) for category, items in groups.items()}


def split_identifier(
    identifier: str, separator: str = DEFAULT_SEPARATOR
) -> tuple[str, str | None]:
    """Split ``identifier`` at the first separator into ``(prefix, suffix)``.

    Examples
    --------
    >>> split_identifier("typescript-production")
    ('typescript', 'production')
    >>> split_identifier("shared")
    ('shared', None)
    """
    prefix, found, suffix = identifier.partition(separator)
    if not found:
        return identifier, None
    return prefix, suffix


def group_by_prefix(
    identifiers: cabc.Iterable[str], separator: str = DEFAULT_SEPARATOR
) -> dict[str, tuple[str, ...]]:
    """Group sorted identifiers by the prefix before their first separator."""
    groups: dict[str, list[str]] = {}
    for identifier in sorted(identifiers):
        prefix, _suffix = split_identifier(identifier, separator)
        groups.setdefault(prefix, []).append(identifier)
    return {prefix: tuple(items) for prefix, items in groups.items()}


def partition_by_prefix(identifiers: cabc.Iterable[str], prefix: str) -> tuple[str, ...]:
    """Return the sorted identifiers that start with ``prefix``."""
    return tuple(sorted(item for item in identifiers if item.startswith(prefix)))


def build_site_index(
    guidelines: cabc.Iterable[Guideline],
    ruleset_ids: cabc.Iterable[str],
    *,
    primary_prefix: str,
    secondary_prefix: str,
    separator: str = DEFAULT_SEPARATOR,
) -> SiteIndex:
    """Compute every navigation structure for one site build.

    Parameters
    ----------
    guidelines : Iterable[Guideline]
        Successfully loaded guidelines in discovery order.
    ruleset_ids : Iterable[str]
        Identifiers of the loaded rulesets.
    primary_prefix, secondary_prefix : str
        Prefixes selecting the two language listings on the rulesets index.
        Identifiers matching neither are only listed on the home page.
    separator : str, optional
        Character splitting an identifier into prefix and tier.

    Returns
    -------
    SiteIndex
        Read-only aggregation; empty inputs produce empty groupings.
    """
    by_priority = sort_by_priority(guidelines)
    ids = tuple(sorted(ruleset_ids))
    return SiteIndex(
        by_priority=by_priority,
        by_category=group_by_category(by_priority),
        ruleset_ids=ids,
        by_prefix=group_by_prefix(ids, separator),
        primary=partition_by_prefix(ids, primary_prefix),
        secondary=partition_by_prefix(ids, secondary_prefix),
    )


__all__ = [
    "DEFAULT_SEPARATOR",
    "SiteIndex",
    "build_site_index",
    "group_by_category",
    "group_by_prefix",
    "partition_by_prefix",
    "sort_by_priority",
    "split_identifier",
]
