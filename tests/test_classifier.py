"""Unit tests for section classification and value formatting.

These tests pin the ordered classification rules (rules tables before
options tables before flat lists before subsections) and the inline value
formatting used in table cells and list entries.

Usage
-----
Run ``pytest tests/test_classifier.py -v``. No fixtures are required.
"""

from __future__ import annotations

import datetime as dt

import pytest

from standards_pages.rendering.classifier import (
    RenderStrategy,
    classify,
    format_value,
    is_flat_section,
    is_require_section,
    is_rules_section,
)
from standards_pages.rulesets.tree import ConfigNode


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("rules", True),
        ("lint.rules", True),
        ("eslint-rules", True),
        ("Rules", False),
        ("rule", False),
    ],
)
def test_rules_predicate_is_case_sensitive_substring(key: str, expected: bool) -> None:  # noqa: FBT001
    """Only keys containing the lowercase substring ``rules`` are rule tables."""
    node = ConfigNode(key=key, value={"a": 1})
    assert is_rules_section(node) is expected, (
        f"expected is_rules_section({key!r}) to be {expected}"
    )


def test_require_predicate_matches_substring() -> None:
    """Keys containing ``require`` are option tables."""
    assert is_require_section(ConfigNode(key="tsc.require", value={})), (
        "expected 'tsc.require' to be a require section"
    )
    assert not is_require_section(ConfigNode(key="tsc", value={})), (
        "expected 'tsc' not to be a require section"
    )


def test_rules_table_wins_over_flat_list() -> None:
    """A rules key with only scalar children is still a rules table."""
    strategy = classify("lint.rules", {"no-console": "error", "eqeqeq": "warn"})
    assert strategy is RenderStrategy.RULES_TABLE, (
        f"expected RULES_TABLE for 'lint.rules', got {strategy!r}"
    )


def test_rules_table_wins_over_options_table() -> None:
    """A key matching both heuristics takes the first one in order."""
    strategy = classify("required-rules", {"a": 1})
    assert strategy is RenderStrategy.RULES_TABLE, (
        f"expected RULES_TABLE for 'required-rules', got {strategy!r}"
    )


def test_options_table_for_require_key() -> None:
    """Require sections render as option tables."""
    strategy = classify("require", {"strict": True})
    assert strategy is RenderStrategy.OPTIONS_TABLE, (
        f"expected OPTIONS_TABLE, got {strategy!r}"
    )


def test_flat_list_when_children_are_scalars_or_arrays() -> None:
    """Scalar and array children make a flat list."""
    strategy = classify("prettier", {"semi": False, "plugins": ["a", "b"]})
    assert strategy is RenderStrategy.FLAT_LIST, f"expected FLAT_LIST, got {strategy!r}"


def test_subsection_when_any_child_is_a_mapping() -> None:
    """A nested mapping child forces a subsection."""
    strategy = classify("ruff", {"line-length": 100, "lint": {"select": ["E"]}})
    assert strategy is RenderStrategy.SUBSECTION, f"expected SUBSECTION, got {strategy!r}"


def test_null_children_are_ignored_when_classifying() -> None:
    """A null child does not count as a mapping child."""
    strategy = classify("section", {"x": None, "y": 1})
    assert strategy is RenderStrategy.FLAT_LIST, f"expected FLAT_LIST, got {strategy!r}"


def test_empty_mapping_is_a_subsection() -> None:
    """An empty mapping falls through to a bare subsection."""
    node = ConfigNode(key="empty", value={"gone": None})
    assert not is_flat_section(node), "expected empty section not to be flat"
    assert classify("empty", {}) is RenderStrategy.SUBSECTION, (
        "expected SUBSECTION for an empty mapping"
    )


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("error", "`error`"),
        (500, "`500`"),
        (0.5, "`0.5`"),
        (True, "`true`"),
        (False, "`false`"),
        (["E", "F"], "`E`, `F`"),
        ([], ""),
        ({"severity": "warn", "max": 500}, "{ severity: warn, max: 500 }"),
        ({"enabled": True, "paths": ["a", "b"]}, "{ enabled: true, paths: [a, b] }"),
        ({"outer": {"inner": 1}}, "{ outer: {...} }"),
        ({}, "{}"),
    ],
)
def test_format_value(value: object, expected: str) -> None:
    """Values render as inline code, comma lists, or inline summaries."""
    actual = format_value(value)
    assert actual == expected, f"expected {expected!r} for {value!r}, got {actual!r}"


def test_format_value_falls_back_to_str_for_unexpected_types() -> None:
    """Values outside the supported set never raise."""
    when = dt.date(2024, 1, 2)
    assert format_value(when) == "2024-01-02", "expected str() fallback for dates"
    assert format_value(None) == "None", "expected str() fallback for None"
