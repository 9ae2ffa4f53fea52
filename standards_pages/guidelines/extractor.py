"""Normalize guideline front matter into :class:`GuidelineMetadata`."""

from __future__ import annotations

import collections.abc as cabc
import re
import typing as typ

from .models import GuidelineMetadata, GuidelineMetadataError

REQUIRED_FIELDS = ("id", "title", "category", "priority")
PRIORITY_PATTERN = re.compile(r"^[+-]?\d+$")
ID_PATTERN = re.compile(r"^(?!\.)[A-Za-z0-9._-]+$")


def extract_metadata(
    fields: cabc.Mapping[str, typ.Any], *, source: str | None = None
) -> GuidelineMetadata:
    """Build normalized metadata from parsed front matter fields.

    Parameters
    ----------
    fields : Mapping[str, Any]
        Parsed front matter. ``id``, ``title``, ``category`` and ``priority``
        are required; ``tags`` is optional.
    source : str, optional
        Document name used in error messages.

    Returns
    -------
    GuidelineMetadata
        Metadata with trimmed strings, an integer priority, and tags split
        into an ordered tuple.

    Raises
    ------
    GuidelineMetadataError
        If a required field is missing or blank, ``id`` is not a plain file
        name, or ``priority`` is not an integer.
    """
    label = f"Guideline '{source}'" if source else "Guideline"
    missing = [name for name in REQUIRED_FIELDS if _is_blank(fields.get(name))]
    if missing:
        msg = f"{label} is missing required metadata: {', '.join(missing)}."
        raise GuidelineMetadataError(msg)

    doc_id = str(fields["id"]).strip()
    if not ID_PATTERN.match(doc_id):
        msg = (
            f"{label} has an invalid id {doc_id!r}: "
            "use letters, digits, '-', '_' or '.'."
        )
        raise GuidelineMetadataError(msg)

    return GuidelineMetadata(
        id=doc_id,
        title=str(fields["title"]).strip(),
        category=str(fields["category"]).strip(),
        priority=_parse_priority(fields["priority"], label),
        tags=normalize_tags(fields.get("tags")),
    )


def normalize_tags(value: object) -> tuple[str, ...]:
    """Return trimmed, non-empty tags from a list or comma-separated string.

    Examples
    --------
    >>> normalize_tags("[api,  errors , ]")
    ('api', 'errors')
    >>> normalize_tags(["security", " auth "])
    ('security', 'auth')
    """
    match value:
        case None:
            return ()
        case str():
            text = value.strip()
            if text.startswith("[") and text.endswith("]"):
                text = text[1:-1]
            items: cabc.Iterable[object] = text.split(",")
        case cabc.Sequence():
            items = value
        case _:
            items = [value]
    tags = (str(item).strip() for item in items if item is not None)
    return tuple(tag for tag in tags if tag)


def _is_blank(value: object) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_priority(value: object, label: str) -> int:
    match value:
        case bool():
            pass
        case int():
            return value
        case str() if PRIORITY_PATTERN.match(value.strip()):
            return int(value.strip())
    msg = f"{label} has a non-integer priority: {value!r}."
    raise GuidelineMetadataError(msg)


__all__ = ["REQUIRED_FIELDS", "extract_metadata", "normalize_tags"]
