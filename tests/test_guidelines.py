"""Unit tests for guideline front matter parsing and metadata extraction.

These tests cover tag normalization, required-field validation, priority
parsing, and the per-document failure reporting of the directory loader.

Usage
-----
Run ``pytest tests/test_guidelines.py -v``. Filesystem tests use pytest's
built-in ``tmp_path`` fixture.
"""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import pytest

from standards_pages.guidelines import (
    GuidelineMetadataError,
    extract_metadata,
    load_guidelines,
    normalize_tags,
    parse_guideline,
    split_front_matter,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

VALID_DOCUMENT = dedent(
    """\
    ---
    id: x
    title: X Guide
    category: style
    priority: 3
    tags: [a, b]
    ---
    # X Guide

    Body text stays | untouched.
    """
)


def test_parse_guideline_extracts_metadata_and_body() -> None:
    """Front matter fields are normalized and the body is passed through."""
    guideline = parse_guideline(VALID_DOCUMENT, filename="x.md")
    metadata = guideline.metadata
    assert (metadata.id, metadata.title, metadata.category) == ("x", "X Guide", "style")
    assert metadata.priority == 3, f"expected priority 3, got {metadata.priority!r}"
    assert metadata.tags == ("a", "b"), f"expected tags ('a', 'b'), got {metadata.tags!r}"
    assert guideline.body == "# X Guide\n\nBody text stays | untouched.\n", (
        f"expected the body to be untouched, got {guideline.body!r}"
    )
    assert guideline.filename == "x.md"


def test_split_front_matter_requires_block() -> None:
    """Documents without a front matter block are rejected."""
    with pytest.raises(GuidelineMetadataError, match="no front matter"):
        split_front_matter("# Just a heading\n", source="plain.md")


def test_split_front_matter_rejects_non_mapping() -> None:
    """A YAML list header is not valid metadata."""
    with pytest.raises(GuidelineMetadataError, match="must be a mapping"):
        split_front_matter("---\n- a\n- b\n---\nbody\n")


def test_split_front_matter_allows_empty_body() -> None:
    """The closing delimiter may end the file."""
    fields, body = split_front_matter("---\nid: a\n---")
    assert fields == {"id": "a"}, f"unexpected fields {fields!r}"
    assert body == "", f"expected an empty body, got {body!r}"


def test_missing_required_fields_are_listed() -> None:
    """Every missing required field is named in the error."""
    with pytest.raises(GuidelineMetadataError) as excinfo:
        extract_metadata({"id": "x", "title": "  "}, source="x.md")
    message = str(excinfo.value)
    assert "title" in message, message
    assert "category" in message, message
    assert "priority" in message, message
    assert "x.md" in message, message


@pytest.mark.parametrize("priority", ["high", 1.5, True])
def test_non_integer_priority_is_rejected(priority: object) -> None:
    """Priority must be an integer or a string of digits."""
    fields = {"id": "x", "title": "X", "category": "c", "priority": priority}
    with pytest.raises(GuidelineMetadataError, match="non-integer priority"):
        extract_metadata(fields)


def test_string_priority_is_parsed() -> None:
    """Digit strings are accepted as priorities."""
    metadata = extract_metadata({"id": "x", "title": "X", "category": "c", "priority": " 7 "})
    assert metadata.priority == 7, f"expected 7, got {metadata.priority!r}"
    assert metadata.tags == (), f"expected no tags, got {metadata.tags!r}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, ()),
        ("api, errors", ("api", "errors")),
        ("[api,  errors , ]", ("api", "errors")),
        (["security", " auth ", ""], ("security", "auth")),
        ("solo", ("solo",)),
    ],
)
def test_normalize_tags(value: object, expected: tuple[str, ...]) -> None:
    """Tags are split, trimmed, and stripped of empty entries in order."""
    assert normalize_tags(value) == expected, f"unexpected tags for {value!r}"


def test_load_guidelines_reports_invalid_documents(tmp_path: Path) -> None:
    """A document lacking metadata is reported while others still load."""
    (tmp_path / "b-valid.md").write_text(VALID_DOCUMENT, encoding="utf-8")
    (tmp_path / "a-missing.md").write_text(
        "---\ntitle: Missing id\n---\nbody\n", encoding="utf-8"
    )
    (tmp_path / "notes.txt").write_text("ignored", encoding="utf-8")

    results = load_guidelines(tmp_path)

    assert [result.source.name for result in results] == ["a-missing.md", "b-valid.md"]
    assert not results[0].ok, "expected the incomplete document to be rejected"
    assert results[0].error is not None and "id" in results[0].error, results[0].error
    assert results[1].ok, "expected the valid document to load"


def test_load_guidelines_missing_directory_is_empty(tmp_path: Path) -> None:
    """A missing guidelines folder is empty input."""
    assert load_guidelines(tmp_path / "absent") == [], "expected no results"


@pytest.mark.parametrize("doc_id", ["../escape", "nested/id", "back\\slash", ".hidden"])
def test_ids_that_are_not_plain_file_names_are_rejected(doc_id: str) -> None:
    """Ids become output file names, so path-like ids are refused."""
    fields = {"id": doc_id, "title": "X", "category": "c", "priority": 1}
    with pytest.raises(GuidelineMetadataError, match="invalid id"):
        extract_metadata(fields, source="x.md")


def test_load_guidelines_skips_path_like_ids(tmp_path: Path) -> None:
    """A guideline whose id points outside the site is reported and skipped."""
    (tmp_path / "escape.md").write_text(
        "---\nid: ../escape\ntitle: X\ncategory: c\npriority: 1\n---\nbody\n",
        encoding="utf-8",
    )
    results = load_guidelines(tmp_path)
    assert [result.ok for result in results] == [False], f"unexpected {results!r}"
    assert results[0].error is not None and "invalid id" in results[0].error
