"""Load guideline documents from disk, one result per file."""

from __future__ import annotations

import typing as typ

from standards_pages._constants import GUIDELINE_SUFFIX
from standards_pages.results import LoadResult

from .extractor import extract_metadata
from .frontmatter import split_front_matter
from .models import Guideline, GuidelineMetadataError

if typ.TYPE_CHECKING:
    from pathlib import Path


def parse_guideline(text: str, *, filename: str) -> Guideline:
    """Parse guideline ``text`` into a :class:`Guideline`.

    Raises
    ------
    GuidelineMetadataError
        If the front matter is missing or incomplete.
    """
    fields, body = split_front_matter(text, source=filename)
    metadata = extract_metadata(fields, source=filename)
    return Guideline(metadata=metadata, body=body, filename=filename)


def load_guideline(path: Path) -> Guideline:
    """Read and parse the guideline stored at ``path``."""
    text = path.read_text(encoding="utf-8")
    return parse_guideline(text, filename=path.name)


def load_guidelines(directory: Path) -> list[LoadResult[Guideline]]:
    """Load every ``*.md`` file in ``directory`` in file-name order.

    Parameters
    ----------
    directory : Path
        Folder containing guideline Markdown files. A missing folder is
        treated as empty.

    Returns
    -------
    list[LoadResult[Guideline]]
        One result per file. Documents with missing or invalid metadata are
        reported as failed results and do not stop the others from loading.
    """
    if not directory.is_dir():
        return []
    results: list[LoadResult[Guideline]] = []
    for path in sorted(directory.glob(f"*{GUIDELINE_SUFFIX}")):
        try:
            guideline = load_guideline(path)
        except (OSError, UnicodeDecodeError, GuidelineMetadataError) as exc:
            results.append(LoadResult(source=path, error=str(exc)))
            continue
        results.append(LoadResult(source=path, value=guideline))
    return results


__all__ = ["load_guideline", "load_guidelines", "parse_guideline"]
