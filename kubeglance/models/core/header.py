"""Table header models."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class HeaderColumn:
    """One table column and its display hints."""

    name: str
    align_right: bool = False
    metrics: bool = False  # only meaningful when a metrics snapshot exists
    wide: bool = False  # only shown in wide mode
    time: bool = False  # holds a resource age


class Header(tuple[HeaderColumn, ...]):
    """Ordered collection of header columns."""

    def names(self) -> list[str]:
        """Return the column names in order."""
        return [column.name for column in self]

    def index_of(self, name: str, wide: bool = True) -> int | None:
        """Return the position of a column, or None when it is absent.

        With ``wide=False`` the position is counted among non-wide columns
        only, and wide columns are reported as absent.
        """
        index = 0
        for column in self:
            if column.wide and not wide:
                continue
            if column.name == name:
                return index
            index += 1
        return None

    def visible(self, wide: bool) -> Header:
        """Return the columns shown in the given display mode."""
        if wide:
            return self
        return Header(column for column in self if not column.wide)
