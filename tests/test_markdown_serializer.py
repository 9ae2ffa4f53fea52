"""Unit tests for the Markdown serializer of render blocks."""

from __future__ import annotations

from standards_pages.rendering import DefinitionList, Heading, RawLine, Table, to_markdown


def test_serializes_each_block_followed_by_blank_line() -> None:
    """Blocks are separated by blank lines in source order."""
    markdown = to_markdown(
        [
            Heading(level=3, text="Prettier"),
            DefinitionList(entries=(("semi", "`false`"), ("printWidth", "`100`"))),
            RawLine(text="<!-- note -->"),
        ]
    )
    assert markdown == (
        "### Prettier\n"
        "\n"
        "- **semi**: `false`\n"
        "- **printWidth**: `100`\n"
        "\n"
        "<!-- note -->\n"
    ), f"unexpected markdown {markdown!r}"


def test_table_separator_matches_header_widths() -> None:
    """Option/Value tables get dash runs sized to each header."""
    markdown = to_markdown([Table(headers=("Option", "Value"), rows=())])
    assert markdown.splitlines() == ["| Option | Value |", "|--------|-------|"], (
        f"unexpected table markdown {markdown!r}"
    )


def test_table_cells_escape_pipes() -> None:
    """Pipes inside values do not break the table layout."""
    markdown = to_markdown(
        [Table(headers=("Rule", "Config"), rows=(("pattern", "`a|b`"),))]
    )
    assert "| `pattern` | `a\\|b` |" in markdown, f"expected escaped pipe in {markdown!r}"


def test_empty_block_sequence_is_empty_text() -> None:
    """No blocks serialize to an empty string."""
    assert to_markdown([]) == "", "expected empty markdown for no blocks"
