"""Helpers for turning identifiers and config keys into display titles."""

from __future__ import annotations

import re


def title_case(text: str, *, separators: str = "-") -> str:
    """Upper-case the first letter of every separator-delimited word.

    Unlike :meth:`str.title`, the remainder of each word is left untouched so
    acronyms such as ``TSC`` survive.

    Examples
    --------
    >>> title_case("typescript-production")
    'Typescript Production'
    >>> title_case("max_lines", separators="-_")
    'Max Lines'
    """
    words = re.split(f"[{re.escape(separators)}]", text)
    return " ".join(word[:1].upper() + word[1:] for word in words)


def section_title(key: str) -> str:
    """Return the heading text for a config section key.

    Only the last dotted segment is used, so ``tool.ruff.lint`` becomes
    ``Lint``.
    """
    segment = key.rsplit(".", 1)[-1] or key
    return title_case(segment, separators="-_")


__all__ = ["section_title", "title_case"]
