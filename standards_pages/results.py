"""Per-unit load outcomes shared by the ruleset and guideline loaders."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path

T = typ.TypeVar("T")


@dc.dataclass(frozen=True, slots=True)
class LoadResult(typ.Generic[T]):
    """Outcome of loading one source file.

    Attributes
    ----------
    source : Path
        File the unit was read from.
    value : T or None
        Loaded unit, or ``None`` when the file was rejected.
    error : str or None
        Human-readable reason for the rejection, or ``None`` on success.
    """

    source: Path
    value: T | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the unit loaded successfully."""
        return self.error is None and self.value is not None


def successful(results: typ.Iterable[LoadResult[T]]) -> list[T]:
    """Return the loaded values of every successful result, in order."""
    return [result.value for result in results if result.ok and result.value is not None]


def failed(results: typ.Iterable[LoadResult[T]]) -> list[LoadResult[T]]:
    """Return the rejected results, in order."""
    return [result for result in results if not result.ok]


__all__ = ["LoadResult", "failed", "successful"]
