"""Typed dataclasses describing guideline documents."""

from __future__ import annotations

import dataclasses as dc


class GuidelineMetadataError(ValueError):
    """Raised when a guideline lacks usable front matter metadata."""


@dc.dataclass(frozen=True, slots=True)
class GuidelineMetadata:
    """Normalized front matter fields.

    Attributes
    ----------
    id : str
        Identifier used for the page file name.
    title : str
        Display title.
    category : str
        Category used to group guidelines on the index page.
    priority : int
        Sort key; lower values are listed first.
    tags : tuple[str, ...]
        Trimmed tags in the order they were written.
    """

    id: str
    title: str
    category: str
    priority: int
    tags: tuple[str, ...] = ()


@dc.dataclass(frozen=True, slots=True)
class Guideline:
    """A guideline document: metadata plus the untouched Markdown body."""

    metadata: GuidelineMetadata
    body: str
    filename: str

    @property
    def id(self) -> str:
        return self.metadata.id

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def category(self) -> str:
        return self.metadata.category

    @property
    def priority(self) -> int:
        return self.metadata.priority

    @property
    def tags(self) -> tuple[str, ...]:
        return self.metadata.tags


__all__ = ["Guideline", "GuidelineMetadata", "GuidelineMetadataError"]
