r"""Split guideline Markdown into YAML front matter and body.

Example
-------
>>> fields, body = split_front_matter("---\nid: errors\npriority: 1\n---\n# Errors\n")
>>> fields["priority"], body
(1, '# Errors\n')
"""

from __future__ import annotations

import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import GuidelineMetadataError

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z", re.DOTALL
)


def split_front_matter(
    text: str, *, source: str | None = None
) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body.

    The body is returned exactly as written after the closing ``---`` line.

    Raises
    ------
    GuidelineMetadataError
        If the document has no front matter block, the block is not valid
        YAML, or it does not contain a mapping.
    """
    label = f"Guideline '{source}'" if source else "Guideline"
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        msg = f"{label} has no front matter block."
        raise GuidelineMetadataError(msg)

    header, body = match.groups()
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(header)
    except YAMLError as exc:
        msg = f"{label} has invalid front matter: {exc}"
        raise GuidelineMetadataError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = f"{label} front matter must be a mapping."
        raise GuidelineMetadataError(msg)
    return {str(key): value for key, value in loaded.items()}, body


__all__ = ["FRONT_MATTER_PATTERN", "split_front_matter"]
